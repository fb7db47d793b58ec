"""
Fixtures for CLI tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the logging.basicConfig(force=True) done by CLI.run."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
