#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import tkinter as tk

from setbreaker.config import DB_FILE
from setbreaker.core.content_gate import ContentGate
from setbreaker.core.scheduler import TkScheduler
from setbreaker.core.scroll_monitor import ScrollMonitor
from setbreaker.domain.models import Platform
from setbreaker.logging_setup import setup_logger
from setbreaker.services.feedback import TkFeedback
from setbreaker.services.preferences_service import PreferencesService
from setbreaker.services.timer_service import TimerService
from setbreaker.storage.db import Database
from setbreaker.storage.repos import AppStateRepo
from setbreaker.ui.main_window import MainWindow


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="setbreaker",
        description="Rest-period timer that blocks your feed when the next set is due.",
    )
    parser.add_argument("--db", default=DB_FILE, help="preferences database path")
    parser.add_argument(
        "--platform",
        choices=[p.name.lower() for p in Platform],
        help="switch the feed platform (saved to preferences)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logger = setup_logger(getattr(logging, args.log_level))
    logger.info("App start")

    db = Database(db_path=args.db)
    db.init_schema()

    prefs = PreferencesService(AppStateRepo(db))
    if args.platform:
        prefs.update(platform=Platform.parse(args.platform))

    root = tk.Tk()
    feedback = TkFeedback(root)
    timer_service = TimerService(
        prefs,
        scheduler=TkScheduler(root),
        feedback=feedback,
        gate=ContentGate(),
    )
    scroll_monitor = ScrollMonitor()

    app = MainWindow(root, timer_service, prefs, scroll_monitor, feedback)
    try:
        app.run()
    finally:
        db.close()
        logger.info("App exit")


if __name__ == "__main__":
    main()
