"""``package.json`` synthesis for generated packages."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..config import ManifestDefaults
from ..errors import WriteError
from ..utils import save_json
from .models import PackageManifest, TemplateData

MANIFEST_FILENAME = "package.json"


def default_repository(data: TemplateData) -> str:
    """Repository used when none is given: ``<author>/<name>``."""
    return f"{data.author}/{data.name}"


def synthesize(
    data: TemplateData,
    *,
    repository: str | None = None,
    keywords: Iterable[str] | None = None,
    defaults: ManifestDefaults | None = None,
) -> PackageManifest:
    """Build the package manifest from *data* and the tool defaults.

    Pure function: nothing is read from or written to disk.
    """
    defaults = defaults or ManifestDefaults()
    return PackageManifest(
        name=data.name,
        version=defaults.version,
        description=data.desc,
        main=defaults.main_template.format(name=data.name),
        types=defaults.types,
        author=data.author,
        license=defaults.license,
        scripts=dict(defaults.scripts),
        repository=repository or default_repository(data),
        keywords=list(keywords or []),
        files=list(defaults.files),
        dev_dependencies=dict(defaults.dev_dependencies),
    )


async def write_manifest(root: str | Path, manifest: PackageManifest) -> Path:
    """Write *manifest* as ``package.json`` at the package *root*.

    Raises:
        WriteError: If the file cannot be written.
    """
    target = Path(root) / MANIFEST_FILENAME
    try:
        return await save_json(manifest.to_dict(), target)
    except OSError as exc:
        raise WriteError(target, cause=exc) from exc
