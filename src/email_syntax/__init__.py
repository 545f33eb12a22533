"""
Email address syntax validation.

This package contains:
- Scan state and grammar limits (models)
- Character classification helpers (charclass)
- The single-pass address validator (validator)
- Logging setup from the environment (config)
"""

import logging

from .config import configure_logging
from .validator import EmailAddressValidator, is_valid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['EmailAddressValidator', 'configure_logging', 'is_valid']
