"""
Link building for files located in the workspace.

Links point at the configured default branch and are never checked against
the remote; a file missing upstream simply yields a broken link.
"""

from urllib.parse import quote

from ..models.config import RemoteConfig
from ..models.workspace import FileMatch


def remote_repo_name(repo_name: str, remote: RemoteConfig) -> str:
    """Map a local repository folder to its remote name, passing unknown names through."""
    return remote.repo_map.get(repo_name, repo_name)


def build_file_url(repo_name: str, relative_path: str, remote: RemoteConfig) -> str:
    """Browsable URL: https://<host>/<organization>/<repo>/blob/<branch>/<relative_path>."""
    repo = quote(remote_repo_name(repo_name, remote), safe='')
    path = quote(relative_path.lstrip('/'), safe='/')
    return f"https://{remote.host}/{remote.organization}/{repo}/blob/{remote.default_branch}/{path}"


def url_for_match(match: FileMatch, remote: RemoteConfig) -> str:
    """Build the URL of a located file."""
    return build_file_url(match.repo_name, match.relative_path, remote)
