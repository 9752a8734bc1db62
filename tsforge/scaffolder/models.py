"""Pydantic v2 models for the scaffolder.

``TemplateData`` is the flat substitution record driving placeholder
replacement; ``PackageManifest`` is the generated ``package.json``.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _current_year() -> str:
    return str(date.today().year)


# ---------------------------------------------------------------------------
# Template data
# ---------------------------------------------------------------------------

class TemplateData(BaseModel):
    """Values substituted into ``__key__`` tokens.

    The model is frozen: the generator receives an immutable snapshot and
    every field becomes a token of the same name.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Package name")
    desc: str = Field(default="", description="One-line package description")
    author: str = Field(..., min_length=1, description="Package author")
    year: str = Field(
        default_factory=_current_year,
        pattern=r"^\d{4}$",
        description="Current calendar year, four digits",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("desc") and data.get("name"):
            data = {**data, "desc": f"This is {data['name']}."}
        return data

    def as_record(self) -> dict[str, str]:
        """Return the flat ``{key: value}`` substitution record."""
        return dict(self.model_dump())


# ---------------------------------------------------------------------------
# Package manifest
# ---------------------------------------------------------------------------

class PackageManifest(BaseModel):
    """The generated ``package.json`` record.

    Field order is the on-disk key order.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str
    description: str
    main: str
    types: str
    author: str
    license: str
    scripts: dict[str, str] = Field(default_factory=dict)
    repository: str
    keywords: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    @field_validator("keywords")
    @classmethod
    def _drop_blank_keywords(cls, value: list[str]) -> list[str]:
        return [word for word in value if word.strip()]

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest keyed the way ``package.json`` expects."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialise to JSON text with a 2-space indent."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"
