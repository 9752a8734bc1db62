"""Placeholder substitution for package templates.

Templates contain flat ``__key__`` tokens.  Every token whose key is present in
the data record is replaced by the record's value in a single pass: values are
inserted verbatim and never scanned again, so a value that looks like another
token stays literal.  There are no conditionals, loops, filters or includes.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import WriteError
from .store import TemplateStore


TOKEN_PREFIX = "__"
TOKEN_SUFFIX = "__"


def token_for(key: str) -> str:
    """Return the placeholder token for *key*, e.g. ``name`` -> ``__name__``."""
    return f"{TOKEN_PREFIX}{key}{TOKEN_SUFFIX}"


def substitute(text: str, record: Mapping[str, Any]) -> str:
    """Replace every ``__key__`` token in *text* with ``str(record[key])``.

    The result does not depend on the iteration order of *record*.  When two
    tokens overlap in the text the longer token wins.
    """
    if not record or not text:
        return text

    tokens = {token_for(key): str(value) for key, value in record.items()}
    alternatives = sorted(tokens, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(tok) for tok in alternatives))
    return pattern.sub(lambda match: tokens[match.group(0)], text)


class TemplateRenderer:
    """Renders bundled templates with a flat data record."""

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store or TemplateStore()

    # -- In-memory rendering ------------------------------------------------

    def render_string(self, template_string: str, record: Mapping[str, Any]) -> str:
        """Substitute *record* into an inline template string."""
        return substitute(template_string, record)

    async def render(self, template_path: str | Path, record: Mapping[str, Any]) -> str:
        """Read a bundled template and substitute *record* into it."""
        raw = await self.store.read_template(template_path)
        return substitute(raw, record)

    # -- File-based rendering -----------------------------------------------

    async def render_to_file(
        self,
        template_path: str | Path,
        output_path: str | Path,
        record: Mapping[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The destination directory must already exist.

        Raises:
            NotFoundError: If the template is missing from the bundle.
            WriteError: If the output cannot be written.
        """
        content = await self.render(template_path, record)
        out = Path(output_path)
        try:
            await asyncio.to_thread(_write_file, out, content, self.store.encoding)
        except OSError as exc:
            raise WriteError(out, cause=exc) from exc
        return out

    def list_templates(self) -> list[str]:
        """Return the destination paths of every declared template."""
        return [dest for _, dest in self.store.list_files()]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str, encoding: str) -> None:
    # newline="" keeps the template's own line endings.
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
