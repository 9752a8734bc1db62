"""Unit tests for the error taxonomy (tsforge.errors)."""

from __future__ import annotations

from pathlib import Path

import pytest

from tsforge.errors import (
    DirectoryExistsError,
    InstallError,
    NotFoundError,
    ReadError,
    TsforgeError,
    ValidationError,
    WriteError,
)

pytestmark = pytest.mark.unit


def test_all_errors_share_base():
    for cls in (
        ValidationError, NotFoundError, ReadError, WriteError, DirectoryExistsError, InstallError
    ):
        assert issubclass(cls, TsforgeError)


def test_directory_exists_is_a_write_error():
    assert issubclass(DirectoryExistsError, WriteError)


def test_validation_error_message_and_path():
    err = ValidationError('Path "foo" already exists', path="foo")
    assert str(err) == 'Path "foo" already exists'
    assert err.message == str(err)
    assert err.path == Path("foo")
    assert err.cause is None


def test_not_found_error_carries_path_and_cause():
    cause = FileNotFoundError("gone")
    err = NotFoundError("/tool/template/LICENSE", cause=cause)
    assert err.path == Path("/tool/template/LICENSE")
    assert err.cause is cause
    assert "LICENSE" in str(err)


def test_read_error_includes_cause():
    cause = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    err = ReadError("/tool/template/LICENSE", cause=cause)
    assert err.path == Path("/tool/template/LICENSE")
    assert err.cause is cause
    assert str(err).startswith("Failed to read template")
    assert "invalid start byte" in str(err)


def test_write_error_includes_cause():
    err = WriteError("pkg/README.md", cause=PermissionError("denied"))
    assert "pkg/README.md" in str(err)
    assert "denied" in str(err)


def test_write_error_without_cause():
    assert str(WriteError("pkg/README.md")) == "Failed to write pkg/README.md"


def test_directory_exists_error_message():
    err = DirectoryExistsError("pkg/src")
    assert "not a directory" in str(err)
    assert err.path == Path("pkg/src")


def test_install_error_nonzero_exit():
    err = InstallError(["npm", "i"], 2, path="pkg")
    assert err.returncode == 2
    assert err.command == ["npm", "i"]
    assert str(err) == "`npm i` exited with code 2"


def test_install_error_not_started():
    err = InstallError(["npm", "i"], None, cause=FileNotFoundError("npm"))
    assert err.returncode is None
    assert str(err).startswith("Could not run `npm i`")
