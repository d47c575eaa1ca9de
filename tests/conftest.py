"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional
from unittest.mock import patch

import pytest

from tests.helpers.fakes import FakeLocalFs
from toolpath.runtime.probes import LocalProber


@pytest.fixture
def fake_home(tmp_path, monkeypatch) -> Path:
    """Point HOME at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return home


@pytest.fixture
def local_fs():
    """Patch LocalProber filesystem checks with a FakeLocalFs.

    Usage: ``fs = local_fs(files=[...], dirs={...})``
    """
    patchers = []

    def install(files: Iterable[str] = (), dirs: Optional[Dict[str, List[str]]] = None) -> FakeLocalFs:
        fs = FakeLocalFs(files, dirs)
        for name in ("is_file", "is_dir", "list_dirs"):
            p = patch.object(LocalProber, name, autospec=True, side_effect=getattr(fs, name))
            p.start()
            patchers.append(p)
        return fs

    yield install

    for p in patchers:
        p.stop()


@pytest.fixture
def no_which():
    """Make shutil.which find nothing."""
    with patch("shutil.which", return_value=None) as mock_which:
        yield mock_which


