"""
Commit hash lookup using the git CLI.

Both variants run `git rev-parse HEAD` in the given directory. Failures
are not masked: a missing git binary raises FileNotFoundError and a
directory outside a repository raises subprocess.CalledProcessError.
"""

import asyncio
import subprocess
from pathlib import Path
from typing import Union


def _rev_parse_command(short: bool) -> list[str]:
    if short:
        return ["git", "rev-parse", "--short", "HEAD"]
    return ["git", "rev-parse", "HEAD"]


def git_sha_sync(cwd: Union[str, Path], short: bool = False) -> str:
    """Return the current commit hash of the repository at cwd."""
    result = subprocess.run(
        _rev_parse_command(short),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


async def git_sha(cwd: Union[str, Path], short: bool = False) -> str:
    """Async variant of git_sha_sync; git runs in a worker thread."""
    result = await asyncio.to_thread(
        subprocess.run,
        _rev_parse_command(short),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()
