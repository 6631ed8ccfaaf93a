import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_callwrap_home(tmp_path, monkeypatch):
    # Never read the developer's own ~/.config/callwrap
    home = tmp_path / "callwrap_home"
    monkeypatch.setenv("CALLWRAP_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_callwrap_logger():
    yield
    logger = logging.getLogger("callwrap")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
