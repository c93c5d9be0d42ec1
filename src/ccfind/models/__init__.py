"""
Data models for ccfind.

This module contains the data structures shared by both command-line tools.
"""

from .workspace import FileMatch
from .config import WorkspaceConfig, RemoteConfig, BrowserConfig, SearchConfig

__all__ = ['FileMatch', 'WorkspaceConfig', 'RemoteConfig', 'BrowserConfig', 'SearchConfig']
