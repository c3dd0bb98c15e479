"""Clipboard support for converted paths"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard, False if no clipboard is available"""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Could not copy to clipboard: {e}")
        return False
    logger.debug(f"Copied {len(text)} chars to clipboard")
    return True
