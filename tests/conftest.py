"""
Pytest configuration and fixtures for all tests.
"""

import logging
import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'INFO')


@pytest.fixture
def package_logger():
    """Package logger with handlers and level restored after the test."""
    logger = logging.getLogger('email_syntax')
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
