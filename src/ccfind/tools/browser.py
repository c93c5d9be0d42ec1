"""
Detached browser launcher.
"""

import logging
import subprocess
from typing import List

from ..models.config import BrowserConfig


logger = logging.getLogger(__name__)


def build_browser_command(url: str, browser: BrowserConfig) -> List[str]:
    """Browser argv for opening url."""
    return [browser.command, *browser.args, url]


def open_url(url: str, browser: BrowserConfig) -> None:
    """
    Open url in a new browser window without waiting for the browser.
    
    The browser runs in its own session with its output discarded. Its exit
    status is never observed; a browser that cannot be started is only logged.
    """
    command = build_browser_command(url, browser)
    logger.debug(f"Launching browser: {command}")
    try:
        subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.warning(f"Could not launch browser '{browser.command}': {e}")
