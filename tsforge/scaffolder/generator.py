"""Main scaffolding orchestrator.

Takes a ``TemplateData`` record and materialises a new TypeScript package:
the declared directories, the rendered template files and the generated
``package.json``.  The package root is always passed explicitly; the process
working directory is never changed.
"""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Awaitable, Iterable
from pathlib import Path
from typing import TypeVar

from ..config import Config
from ..errors import DirectoryExistsError, TsforgeError, ValidationError, WriteError
from .manifest import synthesize, write_manifest
from .models import PackageManifest, TemplateData
from .store import TemplateStore
from .templates import TemplateRenderer

T = TypeVar("T")


class ProjectGenerator:
    """Creates a package skeleton from a :class:`TemplateData` snapshot.

    Directory creation and file rendering each fan out concurrently; every
    directory is created before the first file is written.  The first failure
    is propagated once every sibling write has finished, and nothing is
    rolled back unless ``config.rollback_on_failure`` is set.
    """

    def __init__(self, data: TemplateData, config: Config | None = None) -> None:
        self.data = data
        self.config = config or Config()
        self.store = TemplateStore(self.config.template_dir, self.config.encoding)
        self.renderer = TemplateRenderer(self.store)

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        output_dir: str | Path | None = None,
        *,
        repository: str | None = None,
        keywords: Iterable[str] | None = None,
    ) -> Path:
        """Generate the complete package.

        Args:
            output_dir: Parent directory where the package folder is created.
                Defaults to ``config.output_dir``.
            repository: Repository field of ``package.json``; defaults to
                ``<author>/<name>``.
            keywords: Keywords field of ``package.json``.

        Returns:
            Path to the generated package root.

        Raises:
            ValidationError: If the package path already exists.
        """
        parent = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = parent / self.data.name
        if project_root.exists() or project_root.is_symlink():
            raise ValidationError(
                f'Path "{project_root}" already exists', path=project_root
            )

        try:
            await asyncio.to_thread(project_root.mkdir)
        except OSError as exc:
            raise WriteError(project_root, cause=exc) from exc

        try:
            await self.create_skeleton(project_root)
            manifest = self.build_manifest(repository=repository, keywords=keywords)
            await write_manifest(project_root, manifest)
        except TsforgeError:
            if self.config.rollback_on_failure:
                await asyncio.to_thread(shutil.rmtree, project_root, True)
            raise

        return project_root

    async def create_skeleton(self, root: str | Path) -> list[Path]:
        """Create directories and render every template file under *root*.

        *root* must already exist.

        Returns:
            The written file paths, in declared order.
        """
        root = Path(root)
        await self._create_directory_structure(root)
        return await self._render_files(root)

    def build_manifest(
        self,
        *,
        repository: str | None = None,
        keywords: Iterable[str] | None = None,
    ) -> PackageManifest:
        """Synthesise ``package.json`` for this package."""
        return synthesize(
            self.data,
            repository=repository,
            keywords=keywords,
            defaults=self.config.manifest,
        )

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the declared directories concurrently."""

        async def _mkdir(d: str) -> None:
            p = root / d
            try:
                await asyncio.to_thread(p.mkdir, parents=True, exist_ok=True)
            except (FileExistsError, NotADirectoryError) as exc:
                raise DirectoryExistsError(p, cause=exc) from exc
            except OSError as exc:
                raise WriteError(p, cause=exc) from exc

        await _gather_settled([_mkdir(d) for d in self.store.list_directories()])

    # -- File rendering ----------------------------------------------------

    async def _render_files(self, root: Path) -> list[Path]:
        """Render every declared template file concurrently."""
        record = self.data.as_record()
        return await _gather_settled(
            [
                self.renderer.render_to_file(source, root / dest, record)
                for source, dest in self.store.list_files()
            ]
        )


async def _gather_settled(aws: list[Awaitable[T]]) -> list[T]:
    """Run *aws* concurrently and wait for every one of them to finish.

    The first failure in declared order is raised only after every awaitable
    has settled.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
