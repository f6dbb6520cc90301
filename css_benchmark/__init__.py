"""css_benchmark

Contracts shared by the build tools and the measurement pipeline: the output
directory layout and the filesystem writers that produce it.
"""
