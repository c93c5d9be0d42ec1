"""
Exception hierarchy for ccfind.

Library code raises these; the command-line layer turns them into an error
message on stderr and exit status 1.
"""


class CcfindError(Exception):
    """Base class for all ccfind failures."""
    pass


class ConfigurationError(CcfindError):
    """Raised when configuration parsing or validation fails."""
    pass


class FolderNotFoundError(CcfindError):
    """Raised when no workspace subfolder matches a folder substring."""

    def __init__(self, substring: str, base_dir: str):
        self.substring = substring
        self.base_dir = base_dir
        super().__init__(f"No subfolder matching '{substring}' found in {base_dir}")


class NoMatchesError(CcfindError):
    """Raised when no file matches the requested name fragment."""

    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(f"No files matching '{fragment}' found")


class InvalidChoiceError(CcfindError):
    """Raised when an interactive selection is malformed or out of range."""
    pass
