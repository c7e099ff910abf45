"""
Application entry point for TextPlay.

Usage::

    textplay
    textplay --theme dark
    textplay --log-level DEBUG
    python -m textplay --version
"""

import argparse
import logging
import sys

from textplay import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textplay",
        description="Type text, click the canvas to place it, then change its font and size.",
    )
    parser.add_argument(
        "--theme",
        choices=["light", "dark"],
        default=None,
        help="Start with this theme instead of the one saved last session",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"TextPlay {__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the Qt event loop."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    from textplay.GUI.main_window import MainWindow
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv[:1])
    app.setApplicationName("TextPlay")
    app.setApplicationVersion(__version__)

    window = MainWindow(theme=args.theme)
    window.show()
    logger.info("TextPlay %s started", __version__)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
