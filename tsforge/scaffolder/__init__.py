"""tsforge scaffolder -- renders the fixed package skeleton.

Quick usage::

    from tsforge.scaffolder import ProjectGenerator, TemplateData

    data = TemplateData(name="my-lib", author="bob")
    generator = ProjectGenerator(data)
    package_root = await generator.generate("/tmp/output")
"""

from tsforge.scaffolder.generator import ProjectGenerator
from tsforge.scaffolder.manifest import synthesize, write_manifest
from tsforge.scaffolder.models import PackageManifest, TemplateData
from tsforge.scaffolder.store import TEMPLATE_DIRECTORIES, TEMPLATE_FILES, TemplateStore
from tsforge.scaffolder.templates import TemplateRenderer, substitute

__all__ = [
    "PackageManifest",
    "ProjectGenerator",
    "TEMPLATE_DIRECTORIES",
    "TEMPLATE_FILES",
    "TemplateData",
    "TemplateRenderer",
    "TemplateStore",
    "substitute",
    "synthesize",
    "write_manifest",
]
