"""Tests for logging helpers."""
import logging

import pytest

import cidshell.core.browse.navigator  # noqa: F401  registers its module logger
from cidshell import setup_logging
from cidshell.core.logging import NAMESPACE, get_logger, namespace_loggers


@pytest.fixture
def restore_levels():
    """Put cidshell logger levels back after the test."""
    names = [n for n in logging.root.manager.loggerDict if n.startswith("cidshell")]
    levels = {n: logging.getLogger(n).level for n in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestLogging:
    """Test suite for cidshell logging."""
    
    def test_get_logger_propagates(self):
        logger = get_logger("cidshell.test")
        
        assert logger.name == "cidshell.test"
        assert logger.propagate is True
    
    def test_setup_logging_reaches_module_loggers(self, restore_levels):
        """Test --verbose style setup applies to already created loggers."""
        setup_logging(logging.DEBUG)
        
        assert logging.getLogger("cidshell").level == logging.DEBUG
        assert logging.getLogger("cidshell.browse.navigator").level == logging.DEBUG
    
    def test_setup_logging_ignores_other_loggers(self, restore_levels):
        other = logging.getLogger("cidshellfoo")
        other.setLevel(logging.ERROR)
        
        setup_logging(logging.INFO)
        
        assert other.level == logging.ERROR
    
    def test_namespace_loggers(self):
        """Test only loggers under the namespace are collected, top level first."""
        get_logger("cidshell.test.child")
        logging.getLogger("cidshellfoo")
        
        names = [logger.name for logger in namespace_loggers()]
        
        assert names[0] == NAMESPACE
        assert "cidshell.test.child" in names
        assert "cidshell.browse.navigator" in names
        assert "cidshellfoo" not in names
