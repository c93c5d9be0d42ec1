"""
Configuration data models for ccfind.

This module defines the settings shared by both tools: the workspace root,
directories excluded from file discovery, the remote repository convention used
to build GitHub links, the browser command, and the text search command.
"""

import os
from typing import Dict, List
from pydantic import BaseModel, Field, field_validator


DEFAULT_WORKSPACE_SUFFIX = os.path.join("Curbcut", "cc_app")

DEFAULT_REPO_MAP = {
    "cc.v3": "cc.v3",
    "curbcut-api": "curbcut-api",
    "npm-map": "npm-map",
    "npm-ui": "npm-ui",
    "npm-types": "npm-types",
    "cc.pipe": "cc.pipe",
    "cho": "cho",
    "queries": "queries",
}


class RemoteConfig(BaseModel):
    """Remote code host convention used to build file links."""

    host: str = Field("github.com", description="Code hosting domain")
    organization: str = Field("Curbcut", description="Owning organization")
    default_branch: str = Field("main", description="Branch used in file links")
    repo_map: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_REPO_MAP),
        description="Local folder name to remote repository name"
    )

    @field_validator('host', 'organization', 'default_branch')
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """Remove surrounding slashes so URL parts join cleanly."""
        v = v.strip().strip('/')
        if not v:
            raise ValueError("Value cannot be empty")
        return v


class BrowserConfig(BaseModel):
    """Browser used to open file links."""

    command: str = Field("firefox", min_length=1, description="Browser executable")
    args: List[str] = Field(default_factory=lambda: ["--new-window"], description="Arguments before the URL")


class SearchConfig(BaseModel):
    """Recursive text search settings for ccgrep."""

    command: str = Field("grep", min_length=1, description="grep-compatible executable")
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules", "dist", ".git", "coverage"],
        description="Directory names skipped by the search"
    )
    exclude_files: List[str] = Field(default_factory=lambda: ["*.tsbuildinfo"], description="File globs skipped")
    color: bool = Field(True, description="Force colored output")
    fixed_strings: bool = Field(True, description="Match the query literally instead of as a regex")


class WorkspaceConfig(BaseModel):
    """
    Main configuration for ccfind.

    Every immediate subdirectory of root is a repository. Paths with a
    component listed in exclude_dirs are never reported by file discovery.
    """

    root: str = Field(..., description="Workspace root directory")
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules", "dist", ".git"],
        description="Path components skipped by file discovery"
    )
    sort_results: bool = Field(False, description="Sort folders and matches lexicographically")
    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Expand and normalize the workspace root to an absolute path."""
        if not v.strip():
            raise ValueError("Workspace root cannot be empty")
        return os.path.abspath(os.path.expanduser(v.strip()))

    @field_validator('exclude_dirs')
    @classmethod
    def validate_exclude_dirs(cls, v: List[str]) -> List[str]:
        names = [name.strip().strip('/') for name in v]
        for name in names:
            if '/' in name:
                raise ValueError(f"Excluded directory must be a single name: {name}")
        return [name for name in names if name]

    @classmethod
    def default_root(cls, home: str) -> str:
        """Workspace root relative to a home directory."""
        return os.path.join(home, DEFAULT_WORKSPACE_SUFFIX)
