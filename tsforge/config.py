"""tsforge configuration.

Typed settings for the scaffolder.  All settings use Pydantic v2 models so they
are validated at construction time and can be round-tripped through JSON or
built from environment variables.
"""

from __future__ import annotations

import codecs
import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class ManifestDefaults(BaseModel):
    """Tool-fixed values merged into every generated ``package.json``."""

    version: str = Field(default="0.1.0", min_length=1)
    license: str = Field(default="MIT", min_length=1)
    types: str = Field(default="./types/index.d.ts")
    main_template: str = Field(
        default="./js/{name}.js",
        description="Entry point path; ``{name}`` is replaced by the package name",
    )
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "build": "tsc",
            "docs": "dts2md -i ./types -o ./docs -l -- * !index.d.ts",
        }
    )
    files: list[str] = Field(default_factory=lambda: ["dist", "types", "index.d.ts"])
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: {
            "dts2md": "^0.1.0",
            "typescript": "^3.8.0",
            "@types/node": "^13.7.0",
        }
    )


class Config(BaseModel):
    """Global tsforge configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed down to the generator and installer.
    """

    output_dir: Path = Field(default=Path("."))
    template_dir: Path | None = Field(
        default=None,
        description="Override for the bundled template directory",
    )
    encoding: str = Field(default="utf-8")
    install_command: list[str] = Field(default_factory=lambda: ["npm", "i"])
    rollback_on_failure: bool = Field(
        default=False,
        description="Remove the partially created package when rendering fails",
    )
    manifest: ManifestDefaults = Field(default_factory=ManifestDefaults)

    @field_validator("install_command")
    @classmethod
    def _command_not_empty(cls, value: list[str]) -> list[str]:
        if not value or not value[0]:
            raise ValueError("install_command must name an executable")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TSFORGE_OUTPUT_DIR, TSFORGE_TEMPLATE_DIR, TSFORGE_ENCODING,
            TSFORGE_INSTALL_COMMAND, TSFORGE_ROLLBACK, TSFORGE_LICENSE,
            TSFORGE_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TSFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["TSFORGE_OUTPUT_DIR"])
        if os.environ.get("TSFORGE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["TSFORGE_TEMPLATE_DIR"])
        if os.environ.get("TSFORGE_ENCODING"):
            kwargs["encoding"] = os.environ["TSFORGE_ENCODING"]
        if os.environ.get("TSFORGE_INSTALL_COMMAND"):
            kwargs["install_command"] = shlex.split(os.environ["TSFORGE_INSTALL_COMMAND"])
        if os.environ.get("TSFORGE_ROLLBACK"):
            kwargs["rollback_on_failure"] = os.environ["TSFORGE_ROLLBACK"].strip().lower() in {
                "1",
                "true",
                "yes",
                "on",
            }

        manifest_kwargs: dict[str, Any] = {}
        if os.environ.get("TSFORGE_LICENSE"):
            manifest_kwargs["license"] = os.environ["TSFORGE_LICENSE"]
        if os.environ.get("TSFORGE_VERSION"):
            manifest_kwargs["version"] = os.environ["TSFORGE_VERSION"]

        return cls(manifest=ManifestDefaults(**manifest_kwargs), **kwargs)
