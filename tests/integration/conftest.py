"""Integration test fixtures.

Provides an environment for running ``python -m applaunch`` in a subprocess
with the application directory and launcher.conf inside tmp_path.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"

FIREFOX_ENTRY = """\
[Desktop Entry]
Name=Firefox
GenericName=Web Browser
Comment=Browse the World Wide Web
Keywords=internet www
Exec=firefox %u
"""

FILES_ENTRY = """\
[Desktop Entry]
Name=Files
GenericName=File Manager
Comment=Access and organize files
Exec=nautilus --new-window %U
"""


@pytest.fixture()
def app_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "applications"
    directory.mkdir()
    (directory / "firefox.desktop").write_text(FIREFOX_ENTRY)
    (directory / "files.desktop").write_text(FILES_ENTRY)
    return directory


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "launcher.conf"


@pytest.fixture()
def subprocess_env(app_dir: Path, config_path: Path) -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["APPLAUNCH__LOADER__APP_DIRS"] = f'["{app_dir}"]'
    env["APPLAUNCH__STORE__CONFIG_PATH"] = str(config_path)
    return env
