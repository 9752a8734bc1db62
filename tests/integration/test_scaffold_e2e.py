"""End-to-end tests: command line in, package directory out.

These run the real CLI against the bundled templates.  No package manager is
required; the install step is either skipped or pointed at the Python
interpreter.
"""

from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from tsforge.cli import main
from tsforge.scaffolder.store import TEMPLATE_DIRECTORIES, TEMPLATE_FILES


@pytest.mark.integration
class TestScaffoldEndToEnd:
    def test_no_install_run(self, output_dir: Path):
        with patch("asyncio.create_subprocess_exec") as spawn:
            main(["--name", "foo", "--author", "bob", "--no-install", "-o", str(output_dir)])

        spawn.assert_not_called()
        root = output_dir / "foo"
        for d in TEMPLATE_DIRECTORIES:
            assert (root / d).is_dir()
        for rel in TEMPLATE_FILES:
            assert (root / rel).is_file(), f"expected {rel} to exist"

        manifest = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert manifest["repository"] == "bob/foo"
        assert manifest["name"] == "foo"
        assert manifest["keywords"] == []

        year = str(date.today().year)
        assert f"Copyright (c) {year} bob" in (root / "LICENSE").read_text(encoding="utf-8")

    def test_generated_tree_is_exactly_the_skeleton(self, output_dir: Path):
        main(["-n", "foo", "-a", "bob", "--no-install", "-o", str(output_dir)])

        root = output_dir / "foo"
        produced = sorted(
            str(p.relative_to(root)).replace("\\", "/")
            for p in root.rglob("*")
            if p.is_file()
        )
        assert produced == sorted([*TEMPLATE_FILES, "package.json"])

    def test_install_step_runs_in_package_root(
        self, output_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        marker = "installed.txt"
        script = f"open({marker!r}, 'w').write('ok')"
        monkeypatch.setenv(
            "TSFORGE_INSTALL_COMMAND", f'"{sys.executable}" -c "{script}"'
        )

        main(["-n", "foo", "-a", "bob", "-o", str(output_dir)])

        assert (output_dir / "foo" / marker).read_text(encoding="utf-8") == "ok"

    def test_failing_installer_exits_one(
        self, output_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv(
            "TSFORGE_INSTALL_COMMAND", f'"{sys.executable}" -c "import sys; sys.exit(2)"'
        )

        with pytest.raises(SystemExit) as exc_info:
            main(["-n", "foo", "-a", "bob", "-o", str(output_dir)])

        assert exc_info.value.code == 1
        assert (output_dir / "foo" / "package.json").is_file()
