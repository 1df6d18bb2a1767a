import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """The CLI installs a console handler bound to the runner's stderr; drop it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
