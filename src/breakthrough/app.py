"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from breakthrough.config import AppConfig
from breakthrough.ui.i18n import set_language


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="breakthrough", description="Play Breakthrough.")
    parser.add_argument(
        "--console",
        action="store_true",
        help="play in the terminal instead of opening a window",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Launch the Breakthrough application."""
    args = _parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    set_language(config.language)

    if args.console:
        from breakthrough.console.menu import ConsoleMenu

        ConsoleMenu(config).run()
        return

    from PyQt6.QtWidgets import QApplication

    from breakthrough.ui.main_window import MainWindow
    from breakthrough.ui.styles.theme import APP_STYLE

    app = QApplication(sys.argv)
    app.setApplicationName("Breakthrough")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
