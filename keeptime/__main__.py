"""Allow running KeepTime as a module: python -m keeptime."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .storage.db import init_db
from .settings import load_settings
from .app import KeepTimeApp


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="keeptime",
        description="Stopwatches that keep counting while the app is closed.",
    )
    parser.add_argument(
        "--id", dest="timer_ids", action="append", metavar="ID",
        help="stopwatch identifier (repeatable); defaults to the settings file",
    )
    parser.add_argument(
        "--initial", type=int, default=None, metavar="SECONDS",
        help="value a stopwatch starts from and resets to",
    )
    parser.add_argument(
        "--no-persist", action="store_true",
        help="keep stopwatches in memory only",
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = load_settings()
    if args.timer_ids:
        settings.timer_ids = list(dict.fromkeys(args.timer_ids))
    if args.initial is not None:
        settings.initial_value = max(0, args.initial)
    if args.no_persist:
        settings.persist = False

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.persist:
        init_db()

    app = QApplication(sys.argv[:1])
    app.setApplicationName("KeepTime")
    app.setOrganizationName("KeepTime")

    window = KeepTimeApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
