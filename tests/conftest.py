"""Shared pytest fixtures for the tsforge test suite.

Provides reusable fixtures for:
- A clean ``TSFORGE_*`` environment
- Sample template data
- A throwaway template directory with controllable contents
- Mock subprocess helpers
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from tsforge.config import Config
from tsforge.scaffolder.models import TemplateData
from tsforge.scaffolder.store import TEMPLATE_FILES


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_tsforge_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``TSFORGE_*`` settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("TSFORGE_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Template data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_data() -> TemplateData:
    """The canonical ``foo`` by ``bob`` record."""
    return TemplateData(name="foo", desc="This is foo.", author="bob", year="2024")


@pytest.fixture
def sample_record(sample_data: TemplateData) -> dict[str, str]:
    return sample_data.as_record()


# ---------------------------------------------------------------------------
# Template directories
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_template_dir(tmp_path: Path) -> Path:
    """A template directory holding every declared file.

    Each file contains ``<relative path>: __name__ by __author__ (__year__)``
    so tests can tell the rendered outputs apart.
    """
    template_dir = tmp_path / "templates"
    for rel in TEMPLATE_FILES:
        source = template_dir / rel
        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_text(f"{rel}: __name__ by __author__ (__year__)\n", encoding="utf-8")
    return template_dir


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated packages are written into."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def fake_config(fake_template_dir: Path, output_dir: Path) -> Config:
    """A ``Config`` pointing at the fake templates and the output directory."""
    return Config(output_dir=output_dir, template_dir=fake_template_dir)


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
