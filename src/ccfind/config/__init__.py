"""
Configuration management package for ccfind.

This package provides configuration discovery and parsing for both
command-line tools.
"""

from ..errors import ConfigurationError
from .parser import (
    ConfigParser,
    load_config,
)

__all__ = [
    'ConfigParser',
    'ConfigurationError',
    'load_config',
]
