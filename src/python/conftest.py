import os

import pytest

import log

# Headless test machines have no display for pynput to listen on.
os.environ.setdefault("PYNPUT_BACKEND", "dummy")


@pytest.fixture(autouse=True, scope="session")
def _log_to_tmp_directory(tmp_path_factory: pytest.TempPathFactory) -> None:
    log.set_log_directory(tmp_path_factory.mktemp("logs"))
