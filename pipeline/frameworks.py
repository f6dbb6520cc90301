"""pipeline.frameworks

Central registry of pre-built CSS frameworks benchmarked alongside the builds.

Each entry names an npm package file (``<package>/<path inside package>``) for
the full and the minified stylesheet. Files are located the way Node's
``require.resolve`` does it: look for ``node_modules/<file>`` in the starting
directory, then in each parent directory. An explicit ``node_modules``
directory can be configured instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class FrameworkSpec:
    """Static metadata describing one pre-built framework."""

    name: str
    css: str
    minified: str


FRAMEWORKS: List[FrameworkSpec] = [
    FrameworkSpec("semantic-ui", "semantic-ui/dist/semantic.css", "semantic-ui/dist/semantic.min.css"),
    FrameworkSpec("tachyons", "tachyons/css/tachyons.css", "tachyons/css/tachyons.min.css"),
    FrameworkSpec("bulma", "bulma/css/bulma.css", "bulma/css/bulma.min.css"),
    FrameworkSpec("bootstrap", "bootstrap/dist/css/bootstrap.css", "bootstrap/dist/css/bootstrap.min.css"),
    FrameworkSpec(
        "foundation",
        "foundation-sites/dist/css/foundation.css",
        "foundation-sites/dist/css/foundation.min.css",
    ),
    FrameworkSpec(
        "materialize",
        "materialize-css/dist/css/materialize.css",
        "materialize-css/dist/css/materialize.min.css",
    ),
]

FRAMEWORKS_BY_NAME: Dict[str, FrameworkSpec] = {f.name: f for f in FRAMEWORKS}
FRAMEWORK_NAMES: List[str] = [f.name for f in FRAMEWORKS]


def select_frameworks(names: Optional[Sequence[str]]) -> List[FrameworkSpec]:
    """Registry entries for *names* (all of them when ``None``), registry order kept."""
    if names is None:
        return list(FRAMEWORKS)
    unknown = [n for n in names if n not in FRAMEWORKS_BY_NAME]
    if unknown:
        raise ValueError(
            f"Unknown framework(s): {', '.join(unknown)}. "
            f"Valid options: {', '.join(FRAMEWORK_NAMES)}"
        )
    wanted = set(names)
    return [f for f in FRAMEWORKS if f.name in wanted]


def resolve_package_file(
    relpath: str,
    *,
    search_from: Optional[Path] = None,
    node_modules: Optional[Path] = None,
) -> Path:
    """Locate an installed package file.

    With *node_modules* set, only that directory is consulted. Otherwise the
    lookup walks up from *search_from* (default: current directory).
    """
    if node_modules is not None:
        candidates = [Path(node_modules) / relpath]
    else:
        start = Path(search_from or Path.cwd()).resolve()
        candidates = [d / "node_modules" / relpath for d in (start, *start.parents)]

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise FileNotFoundError(
        f"Cannot find package file '{relpath}'. "
        f"Install it with npm or point --node-modules at an install. "
        f"Tried: {', '.join(str(c) for c in candidates[:3])}{' ...' if len(candidates) > 3 else ''}"
    )
