"""Fixed template manifest bundled with tsforge.

The skeleton of every generated package is declared here: the directories to
create and the template files to render, both relative to the new package
root.  Template sources live in the ``template/`` directory shipped next to
this module and are read-only at runtime.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..errors import NotFoundError, ReadError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"

TEMPLATE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "test",
)

TEMPLATE_FILES: tuple[str, ...] = (
    "src/index.ts",
    "test/index.js",
    "CHANGELOG.md",
    "LICENSE",
    "README.md",
    "tsconfig.json",
)


class TemplateStore:
    """Read-only provider of the package skeleton."""

    def __init__(
        self,
        template_dir: str | Path | None = None,
        encoding: str = "utf-8",
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.encoding = encoding

    def list_directories(self) -> list[str]:
        """Directories to create, in declared order."""
        return list(TEMPLATE_DIRECTORIES)

    def list_files(self) -> list[tuple[Path, str]]:
        """Return ``(source, destination)`` pairs for every template file.

        ``source`` is the bundled template path; ``destination`` is relative to
        the new package root and equals the template-relative path.
        """
        return [(self.template_dir / rel, rel) for rel in TEMPLATE_FILES]

    async def read_template(self, path: str | Path) -> str:
        """Read the raw text of a bundled template.

        Args:
            path: Template path, absolute or relative to :attr:`template_dir`.

        Raises:
            NotFoundError: If the template is missing from the bundle.
            ReadError: If the template cannot be read or decoded.
        """
        source = Path(path)
        if not source.is_absolute():
            source = self.template_dir / source
        try:
            return await asyncio.to_thread(source.read_text, self.encoding)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            raise NotFoundError(source, cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(source, cause=exc) from exc

    def verify(self) -> None:
        """Check that every declared template exists on disk."""
        for source, _ in self.list_files():
            if not source.is_file():
                raise NotFoundError(source)
