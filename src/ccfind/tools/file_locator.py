"""File discovery for ccgho: walk the workspace and match files by name fragment."""

import os
import logging
from typing import Dict, List, Iterator

from ..models.config import WorkspaceConfig
from ..models.workspace import FileMatch


logger = logging.getLogger(__name__)


def strip_extension(filename: str) -> str:
    """
    Remove one trailing extension from a file name.

    Everything from the last '.' on is dropped, so '.env' becomes '' and
    'archive.tar.gz' becomes 'archive.tar'. Names without a dot are unchanged.
    """
    stem, dot, _ = filename.rpartition('.')
    return stem if dot else filename


def name_matches(filename: str, fragment: str) -> bool:
    """Case-insensitive 'equals or contains' test on the extension-stripped name."""
    stem = strip_extension(filename).lower()
    fragment = fragment.lower()
    return stem == fragment or fragment in stem


class FileLocator:
    """
    Directory walker that finds workspace files by name fragment.

    Symbolic links are neither followed nor reported. A file is skipped when
    any component of its path below the workspace root is an excluded name,
    including the repository folder and the file name itself.
    """

    def __init__(self, config: WorkspaceConfig):
        self.config = config
        self._excluded = frozenset(config.exclude_dirs)
        self.reset_stats()

    def locate(self, search_root: str, fragment: str) -> List[FileMatch]:
        """
        Collect every file under search_root whose name matches fragment.

        Args:
            search_root: Directory to walk (the workspace root or one repository)
            fragment: Non-empty name fragment

        Returns:
            FileMatch objects in traversal order, or sorted by path when
            sort_results is configured. Empty when nothing matches.
        """
        if not fragment:
            raise ValueError("File name fragment cannot be empty")

        search_root = os.path.abspath(search_root)
        logger.debug(f"Walking directory tree: {search_root}")
        matches = []
        for path in self._walk_files(search_root):
            self._stats['files_scanned'] += 1
            if not name_matches(os.path.basename(path), fragment):
                continue

            match = FileMatch.from_path(self.config.root, path)
            if match is None:
                logger.debug(f"Skipping file outside a workspace repository: {path}")
                continue
            if self._is_excluded(match):
                continue

            self._stats['files_matched'] += 1
            matches.append(match)

        if self.config.sort_results:
            matches.sort(key=lambda m: m.full_path)
        return matches

    def _walk_files(self, search_root: str) -> Iterator[str]:
        """Yield regular files under search_root, pruning excluded directories."""
        for current_dir, subdirs, files in os.walk(search_root, onerror=self._on_walk_error):
            self._stats['directories_traversed'] += 1

            kept = [d for d in subdirs if not self._should_ignore(d)]
            self._stats['directories_ignored'] += len(subdirs) - len(kept)
            subdirs[:] = sorted(kept) if self.config.sort_results else kept

            for filename in files:
                path = os.path.join(current_dir, filename)
                if os.path.islink(path):
                    continue
                yield path

    def _should_ignore(self, dirname: str) -> bool:
        """Check a directory name against the exclusions."""
        return dirname in self._excluded

    def _is_excluded(self, match: FileMatch) -> bool:
        """Check every component of repo_name/relative_path against the exclusions."""
        components = [match.repo_name, *match.relative_path.split('/')]
        return any(self._should_ignore(part) for part in components)

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")
        self._stats['errors'] += 1

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about the last walk."""
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = {
            'files_scanned': 0,
            'files_matched': 0,
            'directories_traversed': 0,
            'directories_ignored': 0,
            'errors': 0
        }
