"""tools/core_cmd.py

Command-execution helpers shared by the build tools.

This module deliberately avoids tool-specific knowledge. It provides:

* :func:`which_or_raise` - resolve executables reliably across environments.
* :func:`run_cmd` - run a subprocess on the event loop (no shell) and capture stderr.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stderr: str
    timed_out: bool = False


def which_or_raise(bin_name: str, fallbacks: Optional[List[str]] = None) -> str:
    """Locate an executable and return its absolute path.

    Why this exists:
    - turns "No such file or directory" from deep inside asyncio into a clear error
    - avoids PATH surprises across nvm/volta/brew installs of node
    """
    found = shutil.which(bin_name)
    if found:
        return found

    for candidate in fallbacks or []:
        p = Path(candidate)
        if p.exists() and os.access(str(p), os.X_OK):
            return str(p)

    raise FileNotFoundError(
        f"Executable '{bin_name}' not found on PATH.\n"
        f"Install it and ensure it's available to this Python process.\n"
        f"Tried fallbacks: {fallbacks or []}"
    )


async def run_cmd(cmd: List[str], *, timeout_seconds: float = 0) -> CmdResult:
    """Run a subprocess and capture stderr (no shell); stdout is discarded.

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found). A positive *timeout_seconds* kills the process
    and reports ``timed_out=True``; ``0`` waits forever.
    """
    t0 = time.time()

    command_str = " ".join(cmd)
    logger.debug("exec: %s", command_str)

    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.PIPE,
    )

    timed_out = False
    try:
        if timeout_seconds and timeout_seconds > 0:
            _, err = await asyncio.wait_for(proc.communicate(), timeout=timeout_seconds)
        else:
            _, err = await proc.communicate()
    except asyncio.TimeoutError:
        timed_out = True
        proc.kill()
        await proc.wait()
        err = b""

    elapsed = time.time() - t0

    return CmdResult(
        exit_code=proc.returncode if proc.returncode is not None else -1,
        elapsed_seconds=elapsed,
        command_str=command_str,
        stderr=(err or b"").decode("utf-8", errors="replace"),
        timed_out=timed_out,
    )
