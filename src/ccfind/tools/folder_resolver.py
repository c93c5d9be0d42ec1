"""
Folder resolution for the -f option.

Maps a case-insensitive substring to one immediate subdirectory of the
workspace root.
"""

import os
import logging
from typing import List, Optional


logger = logging.getLogger(__name__)


def list_subfolders(base_dir: str, sort: bool = False) -> List[str]:
    """Names of the immediate subdirectories of base_dir, optionally sorted."""
    with os.scandir(base_dir) as entries:
        names = [entry.name for entry in entries if entry.is_dir()]
    return sorted(names) if sort else names


def resolve_subfolder(base_dir: str, substring: str, sort: bool = False) -> Optional[str]:
    """
    Path of the first subdirectory whose name contains substring, ignoring case.
    
    Without sorting, "first" follows the order the filesystem returns entries.
    None when nothing matches or base_dir cannot be read.
    """
    if not substring:
        raise ValueError("Folder substring cannot be empty")
    
    try:
        names = list_subfolders(base_dir, sort=sort)
    except OSError as e:
        logger.error(f"Error searching directories in {base_dir}: {e}")
        return None
    
    needle = substring.lower()
    for name in names:
        if needle in name.lower():
            path = os.path.join(base_dir, name)
            logger.debug(f"Folder hint '{substring}' resolved to {path}")
            return path
    
    logger.debug(f"No subfolder of {base_dir} matches '{substring}'")
    return None
