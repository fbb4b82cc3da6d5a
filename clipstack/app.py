"""Entry point for the clipboard history manager."""

import argparse
import asyncio
import logging
import os
from typing import List, Optional

from .core.clipboard import ClipboardPort, PyperclipClipboard
from .core.config import DEFAULT_POLL_INTERVAL, MonitorConfig
from .core.history import DEFAULT_CAPACITY, HistoryStore
from .core.monitor import Monitor
from .core.scheduler import AsyncioScheduler

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


def get_parser() -> argparse.ArgumentParser:
    """Get argument parser"""
    parser = argparse.ArgumentParser(
        prog="clipstack",
        description="Clipboard history manager",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--capacity', type=int, default=DEFAULT_CAPACITY,
                        help='Maximum number of history entries')
    parser.add_argument('--interval-ms', type=int, default=int(DEFAULT_POLL_INTERVAL * 1000),
                        help='Clipboard poll interval in milliseconds')
    parser.add_argument('--paused', action='store_true',
                        help='Start with monitoring disabled')
    parser.add_argument('--no-gui', action='store_true',
                        help='Run headless, logging captured entries')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file',
                        help='Also write log records to this file')
    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = get_parser()
    parsed_args = parser.parse_args(args)

    # Validate arguments
    if parsed_args.capacity < 1:
        parser.error(f"--capacity must be positive, got {parsed_args.capacity}")

    if parsed_args.interval_ms < 1:
        parser.error(f"--interval-ms must be positive, got {parsed_args.interval_ms}")

    if parsed_args.log_file:
        log_dir = os.path.dirname(os.path.abspath(parsed_args.log_file))
        if not os.path.isdir(log_dir):
            parser.error(f"Log directory not found: {log_dir}")

    return parsed_args


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure root logging for the application"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
    )


async def monitor_headless(monitor: Monitor, duration: Optional[float] = None) -> None:
    """Run the monitor on the current event loop.

    Args:
        monitor: Monitor to drive
        duration: Seconds to run for. None runs until cancelled.
    """
    monitor.prime()
    monitor.start(AsyncioScheduler())
    try:
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
    finally:
        monitor.stop()


def run_headless(config: MonitorConfig, clipboard: Optional[ClipboardPort] = None,
                 duration: Optional[float] = None) -> HistoryStore:
    """Monitor the clipboard without a window until interrupted"""
    store = HistoryStore(config.capacity)
    monitor = Monitor(
        store,
        clipboard or PyperclipClipboard(),
        poll_interval=config.poll_interval,
        enabled=config.start_enabled,
    )
    logger.info("Monitoring clipboard every %d ms (Ctrl+C to stop)", config.poll_interval_ms)
    try:
        asyncio.run(monitor_headless(monitor, duration))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting with %d entries in history", len(store))
    return store


def run_gui(config: MonitorConfig) -> None:
    """Open the history window and run the Tk main loop"""
    import tkinter as tk

    from .gui.window import ClipboardHistoryGUI

    root = tk.Tk()
    root.geometry("600x700")
    root.minsize(400, 300)
    app = ClipboardHistoryGUI(root, config)
    app.setup_gui()
    app.start()
    root.mainloop()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_arguments(argv)
    configure_logging(args.verbose, args.log_file)
    config = MonitorConfig.from_args(args)

    if args.no_gui:
        run_headless(config)
    else:
        run_gui(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
