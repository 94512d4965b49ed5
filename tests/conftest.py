from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the real user settings and INISTORE_* variables out of tests."""
    for name in ("INISTORE_ENCODING", "INISTORE_STRICT", "INISTORE_ATOMIC", "INISTORE_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("INISTORE_CONFIG_DIR", str(tmp_path / "_config"))
    yield
    logger = logging.getLogger("inistore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
