#!/usr/bin/env python3
"""
Clipboard Access - Reads and writes the system clipboard
Text goes through pyperclip, PNG images through an external helper process
"""
import logging
import subprocess
from typing import Dict, List, Optional

import pyperclip

from clipmate.errors import ClipboardAccessError, ImageHelperError

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"

# Helper command lines per tool: (read command, write command)
HELPER_COMMANDS: Dict[str, tuple] = {
    "xclip": (
        ["xclip", "-selection", "clipboard", "-t", PNG_MIME, "-o"],
        ["xclip", "-selection", "clipboard", "-t", PNG_MIME],
    ),
    "wl-clipboard": (
        ["wl-paste", "--type", PNG_MIME],
        ["wl-copy", "--type", PNG_MIME],
    ),
}


class SystemClipboard:
    """Clipboard port backed by the desktop clipboard"""

    def __init__(self, helper: str = "xclip", timeout: Optional[float] = None):
        """
        Initialize system clipboard access

        Args:
            helper: Image helper tool, one of HELPER_COMMANDS
            timeout: Seconds to wait for the helper process, None waits forever
        """
        if helper not in HELPER_COMMANDS:
            raise ValueError(f"Unknown image helper: {helper}")
        self.helper = helper
        self.timeout = timeout

    @property
    def read_command(self) -> List[str]:
        return list(HELPER_COMMANDS[self.helper][0])

    @property
    def write_command(self) -> List[str]:
        return list(HELPER_COMMANDS[self.helper][1])

    def get_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardAccessError(f"Failed to read clipboard text: {e}") from e

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardAccessError(f"Failed to write clipboard text: {e}") from e

    def get_image_bytes(self) -> bytes:
        """
        Read PNG data from the clipboard

        The helper exits non-zero when the clipboard holds no PNG; that is not
        an error and yields whatever it wrote to stdout (normally nothing).

        Returns:
            Raw PNG bytes, possibly empty

        Raises:
            ImageHelperError: The helper could not be run at all
        """
        command = self.read_command
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ImageHelperError(f"Failed to run {command[0]}: {e}") from e

        if result.returncode != 0:
            logger.debug(f"{command[0]} exited with {result.returncode}, no image on clipboard")
        return result.stdout

    def set_image_bytes(self, data: bytes) -> None:
        """Push PNG data onto the clipboard"""
        command = self.write_command
        # xclip and wl-copy fork to keep serving the selection, so no output
        # pipes may stay open or run() would wait on the forked child
        try:
            subprocess.run(
                command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            raise ImageHelperError(f"Failed to set clipboard image with {command[0]}: {e}") from e
