"""
Recursive text search for ccgrep.

The search itself is delegated to grep. Its output goes straight to the
terminal and its exit status becomes the status of ccgrep.
"""

import logging
import subprocess
from typing import List

from ..models.config import SearchConfig


logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


def build_search_command(root: str, query: str, search: SearchConfig) -> List[str]:
    """Build the grep argv for a recursive search of root."""
    command = [search.command, '-r']
    if search.color:
        command.append('--color=always')
    command.extend(f'--exclude-dir={name}' for name in search.exclude_dirs)
    command.extend(f'--exclude={pattern}' for pattern in search.exclude_files)
    if search.fixed_strings:
        command.append('-F')
    # -e keeps queries starting with '-' from being read as options
    command.extend(['-e', query, root])
    return command


def decode_returncode(returncode: int) -> int:
    """
    Turn a subprocess return code into a shell-style exit status.
    
    Negative codes mean the child was killed by a signal and map to 128 + signal.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_search(root: str, query: str, search: SearchConfig) -> int:
    """
    Run the search and wait for it to finish.
    
    Returns:
        grep's exit status: 0 when lines matched, 1 when none did, 2 or more on
        errors. 127 when the search command cannot be started.
    """
    command = build_search_command(root, query, search)
    logger.debug(f"Running search: {command}")
    try:
        completed = subprocess.run(command, check=False)
    except OSError as e:
        logger.error(f"Could not run search command '{search.command}': {e}")
        return COMMAND_NOT_FOUND
    
    status = decode_returncode(completed.returncode)
    if completed.returncode < 0:
        logger.warning(f"Search killed by signal {-completed.returncode}")
    return status
