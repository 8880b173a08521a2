#!/usr/bin/env python3
"""
clipmate Main Entry Point
Wires the services together and runs the daemon or a one-shot command
"""
import argparse
import logging
import sys
import threading
import time
from pathlib import Path
from typing import List, Optional

from clipmate import __version__
from clipmate.core.protocols import ClipboardPort
from clipmate.errors import ClipmateError, HistoryLoadError
from clipmate.services.clipboard_access import SystemClipboard
from clipmate.services.clipboard_manager import ClipboardManager
from clipmate.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
KEEPALIVE_INTERVAL = 1.0


class ClipmateApp:
    """Main application with dependency injection"""

    def __init__(
        self,
        settings_service: Optional[SettingsService] = None,
        history_file: Optional[Path] = None,
        clipboard: Optional[ClipboardPort] = None,
    ):
        """
        Initialize the application and load history

        Args:
            settings_service: Settings, defaults to ./settings.yml
            history_file: Overrides the configured history file
            clipboard: Clipboard port, defaults to the system clipboard
        """
        self.settings_service = settings_service or SettingsService()
        if clipboard is None:
            clipboard = SystemClipboard(
                helper=self.settings_service.image_helper,
                timeout=self.settings_service.helper_timeout,
            )
        self.manager = ClipboardManager(
            history_file or self.settings_service.history_path,
            clipboard=clipboard,
            image_dir=self.settings_service.image_dir,
        )
        self._failed = threading.Event()

    def show_history(self) -> None:
        for i, item in enumerate(self.manager.list(), start=1):
            print(f"{i}: {item.data} {item.item_type.value}")

    def restore(self, item_number: int) -> bool:
        return self.manager.restore(item_number)

    def _sampling_loop(self) -> None:
        """Sample the clipboard forever; any escaping error is fatal"""
        interval = self.settings_service.poll_interval
        try:
            while True:
                self.manager.poll_once()
                time.sleep(interval)
        except Exception:
            logger.exception("Clipboard sampling failed, stopping daemon")
            self._failed.set()

    def run_daemon(self) -> int:
        """Start the sampling thread and keep the process alive"""
        logger.info(
            f"Starting clipboard daemon (history: {self.manager.store_path}, "
            f"interval: {self.settings_service.poll_interval}s)"
        )
        sampler = threading.Thread(target=self._sampling_loop, name="sampler", daemon=True)
        sampler.start()

        while not self._failed.wait(KEEPALIVE_INTERVAL):
            pass
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clipmate",
        description="Manages clipboard history",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="'daemon' to start the clipboard daemon, 'history' to display "
             "clipboard history, or an item number to set to current clipboard",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to settings.yml")
    parser.add_argument("--history-file", type=Path, default=None, help="Path to the history file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    if args.command is None:
        parser.print_help()
        return 0

    item_number = None
    if args.command not in ("daemon", "history"):
        try:
            item_number = int(args.command)
        except ValueError:
            parser.error(f"Please provide a valid item number, got {args.command!r}")

    try:
        app = ClipmateApp(SettingsService(args.config), history_file=args.history_file)
    except HistoryLoadError as e:
        logger.error(str(e))
        return 1

    if args.command == "daemon":
        try:
            return app.run_daemon()
        except KeyboardInterrupt:
            logger.info("Interrupted, exiting")
            return 0

    if args.command == "history":
        app.show_history()
        return 0

    try:
        app.restore(item_number)
    except ClipmateError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
