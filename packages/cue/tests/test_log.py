"""Tests for front-end logging setup."""

import logging

import pytest

from cue import setup_logging
from cue.log import CORE_LOGGERS


@pytest.fixture
def bare_root():
    """Root logger with no handlers; levels restored afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_core = {name: logging.getLogger(name).level for name in CORE_LOGGERS}
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_core.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    """Test handler installation and level routing."""

    def test_installs_one_handler(self, bare_root):
        """A bare root gets a single stream handler, even when called twice."""
        setup_logging()
        setup_logging()
        assert len(bare_root.handlers) == 1
        assert isinstance(bare_root.handlers[0], logging.StreamHandler)
        assert bare_root.level == logging.INFO

    def test_core_level_defaults_to_level(self, bare_root):
        """Without core_level the presentation packages follow level."""
        setup_logging("warning")
        for name in CORE_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_core_level_is_separate(self, bare_root):
        """core_level turns on beat debugging without the root."""
        setup_logging("WARNING", core_level=logging.DEBUG)
        assert bare_root.level == logging.WARNING
        assert logging.getLogger("cue.timeline").isEnabledFor(logging.DEBUG)

    def test_existing_handlers_kept(self, bare_root):
        """A root that is already configured keeps its handlers."""
        handler = logging.NullHandler()
        bare_root.addHandler(handler)
        setup_logging()
        assert bare_root.handlers == [handler]
