"""
ccfind - Curbcut workspace navigation tools

Command-line helpers for locating files and text across the repositories of
a local multi-repository workspace, and for opening located files on GitHub.
"""

__version__ = "0.1.0"
