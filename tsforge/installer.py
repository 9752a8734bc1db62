"""Dependency installation for freshly generated packages."""

from __future__ import annotations

from pathlib import Path

from .errors import InstallError
from .utils import run_command

DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "i")


async def install_dependencies(
    root: str | Path,
    command: list[str] | None = None,
) -> None:
    """Run the package manager inside *root* and wait for it to exit.

    The child inherits this process's standard streams; nothing is captured
    and no timeout applies.

    Raises:
        InstallError: If the command cannot be started or exits non-zero.
    """
    cmd = list(command or DEFAULT_INSTALL_COMMAND)
    try:
        returncode, _, _ = await run_command(cmd, cwd=root, capture=False)
    except OSError as exc:
        raise InstallError(cmd, None, path=root, cause=exc) from exc
    if returncode != 0:
        raise InstallError(cmd, returncode, path=root)
