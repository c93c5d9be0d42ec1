"""
Workspace data models for ccfind.

A workspace is a single directory whose immediate subdirectories are
repositories. Files located inside it are described by FileMatch objects that
remember which repository they belong to.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class FileMatch(BaseModel):
    """A single file located inside the workspace."""
    
    repo_name: str = Field(..., min_length=1, description="Repository folder name")
    relative_path: str = Field(..., min_length=1, description="Path relative to the repository root")
    full_path: str = Field(..., min_length=1, description="Absolute path of the file")
    
    model_config = {'frozen': True}
    
    @field_validator('repo_name')
    @classmethod
    def validate_repo_name(cls, v: str) -> str:
        """A repository name is a single path component."""
        if '/' in v:
            raise ValueError(f"Repository name must not contain '/': {v}")
        return v
    
    @model_validator(mode='after')
    def validate_full_path(self):
        """Ensure the full path ends with '<repo_name>/<relative_path>'."""
        suffix = f"/{self.repo_name}/{self.relative_path}"
        if not self.full_path.endswith(suffix):
            raise ValueError(f"Full path {self.full_path} does not end with {suffix}")
        return self
    
    def label(self) -> str:
        """Short 'repo: path' form used in listings."""
        return f"{self.repo_name}: {self.relative_path}"
    
    @classmethod
    def from_path(cls, workspace_root: str, path: str) -> Optional['FileMatch']:
        """Split a path under the workspace root; None when it is not inside a repository."""
        prefix = workspace_root.rstrip('/') + '/'
        if not path.startswith(prefix):
            return None
        
        repo_name, sep, relative_path = path[len(prefix):].partition('/')
        if not sep or not repo_name or not relative_path:
            return None
        
        return cls(repo_name=repo_name, relative_path=relative_path, full_path=path)
    