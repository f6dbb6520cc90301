"""tools/builder.py

Invoke the external CSS build tool for one configuration.

The build command is an argv template. ``{config}``, ``{output}`` and ``{css}``
are substituted per item; everything else is passed through verbatim. The
default runs Tailwind through ``npx``::

  npx tailwind build <css> -c <config> -o <output>
"""

from __future__ import annotations

import re
import shlex
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .core_cmd import CmdResult, run_cmd, which_or_raise

DEFAULT_BUILD_COMMAND: tuple[str, ...] = (
    "npx",
    "tailwind",
    "build",
    "{css}",
    "-c",
    "{config}",
    "-o",
    "{output}",
)

NPX_FALLBACKS = ["/opt/homebrew/bin/npx", "/usr/local/bin/npx"]

_STDERR_TAIL_CHARS = 2000

_PLACEHOLDER_RE = re.compile(r"\{(config|output|css)\}")


class BuildError(RuntimeError):
    """The build tool exited non-zero (or was killed after a timeout)."""

    def __init__(self, command_str: str, exit_code: int, stderr: str = "", *, timed_out: bool = False) -> None:
        self.command_str = command_str
        self.exit_code = exit_code
        self.stderr = stderr
        self.timed_out = timed_out
        if timed_out:
            msg = f"build timed out: {command_str}"
        else:
            msg = f"build failed with exit code {exit_code}: {command_str}"
        tail = stderr.strip()[-_STDERR_TAIL_CHARS:]
        if tail:
            msg += f"\n{tail}"
        super().__init__(msg)


def parse_build_command(raw: Union[str, Sequence[str], None]) -> List[str]:
    """Accept a shell-style string or an argv list; ``None`` gives the default."""
    if raw is None:
        return list(DEFAULT_BUILD_COMMAND)
    if isinstance(raw, str):
        argv = shlex.split(raw)
    else:
        argv = [str(a) for a in raw]
    if not argv:
        raise ValueError("build command must not be empty")
    return argv


def render_build_command(
    template: Sequence[str],
    *,
    config_path: Path,
    output_path: Path,
    css_path: Path,
) -> List[str]:
    """Substitute the three placeholders; any other braces (globs, JSON) pass through."""
    values = {"config": str(config_path), "output": str(output_path), "css": str(css_path)}
    return [_PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], part) for part in template]


async def build(
    config_path: Path,
    output_path: Path,
    css_path: Path,
    *,
    command: Optional[Sequence[str]] = None,
    timeout_seconds: float = 0,
) -> CmdResult:
    """Build *css_path* with *config_path* into *output_path*.

    Raises :class:`FileNotFoundError` when the executable cannot be located and
    :class:`BuildError` when it exits non-zero.
    """
    argv = render_build_command(
        command or DEFAULT_BUILD_COMMAND,
        config_path=config_path,
        output_path=output_path,
        css_path=css_path,
    )
    fallbacks = NPX_FALLBACKS if argv[0] == "npx" else None
    argv[0] = which_or_raise(argv[0], fallbacks)

    res = await run_cmd(argv, timeout_seconds=timeout_seconds)
    if res.timed_out or res.exit_code != 0:
        raise BuildError(res.command_str, res.exit_code, res.stderr, timed_out=res.timed_out)
    return res
