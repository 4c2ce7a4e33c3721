"""
tests/conftest.py
Shared fixtures for localenv tests.
Isolates the working directory, loader settings and applied variables.
"""

import json
import pytest

import localenv

LOADER_SETTINGS = ("LOCALENV_FILES", "LOCALENV_SEPARATOR", "LOCALENV_ENCODING")


@pytest.fixture(autouse=True)
def isolated_loader(monkeypatch):
    """Drop loader settings from the environment and undo every apply."""
    for name in LOADER_SETTINGS:
        monkeypatch.delenv(name, raising=False)
    yield
    localenv.clear()


@pytest.fixture
def tmp_workdir(tmp_path, monkeypatch):
    """Run the test inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_json(tmp_workdir):
    """Write a JSON environment file (env.json by default)."""

    def _write(data, name="env.json"):
        path = tmp_workdir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_kv(tmp_workdir):
    """Write a KEY=VALUE environment file (.env by default)."""

    def _write(pairs, name=".env"):
        path = tmp_workdir / name
        path.write_text("".join(f"{k}={v}\n" for k, v in pairs.items()), encoding="utf-8")
        return path

    return _write
