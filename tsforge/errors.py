"""Exception types raised while scaffolding a package.

Every failure the tool can report is one of the variants below.  Each carries
the offending ``path`` (when there is one) and the underlying ``cause`` so the
CLI can print a single, meaningful line before exiting with status 1.
"""

from __future__ import annotations

from pathlib import Path


class TsforgeError(Exception):
    """Base class for all scaffolding failures."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)


class ValidationError(TsforgeError):
    """A required option is missing or the target path is unusable.

    Raised before anything is written to disk.
    """


class NotFoundError(TsforgeError):
    """A bundled template asset is missing (broken installation)."""

    def __init__(self, path: str | Path, *, cause: BaseException | None = None) -> None:
        super().__init__(f"Template file not found: {path}", path=path, cause=cause)


class ReadError(TsforgeError):
    """A template asset exists but could not be read or decoded."""

    def __init__(self, path: str | Path, *, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to read template {path}{detail}", path=path, cause=cause)


class WriteError(TsforgeError):
    """Writing a directory or file of the new package failed."""

    def __init__(self, path: str | Path, *, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to write {path}{detail}", path=path, cause=cause)


class DirectoryExistsError(WriteError):
    """A declared template directory already exists as a non-directory."""

    def __init__(self, path: str | Path, *, cause: BaseException | None = None) -> None:
        TsforgeError.__init__(
            self,
            f"Path exists and is not a directory: {path}",
            path=path,
            cause=cause,
        )


class InstallError(TsforgeError):
    """The dependency installer exited non-zero or could not be started."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None,
        *,
        path: str | Path | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        joined = " ".join(self.command)
        if returncode is None:
            message = f"Could not run `{joined}`: {cause}"
        else:
            message = f"`{joined}` exited with code {returncode}"
        super().__init__(message, path=path, cause=cause)


__all__ = [
    "DirectoryExistsError",
    "InstallError",
    "NotFoundError",
    "ReadError",
    "TsforgeError",
    "ValidationError",
    "WriteError",
]
