"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chesstrainer.i18n import LANGUAGES


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chesstrainer",
        description="Review the mistakes collected in a multi-game analysis report.",
    )
    parser.add_argument(
        "report",
        nargs="?",
        type=Path,
        help="analysis report (JSON) to open on start",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default="English",
        help="interface language (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the trainer."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chesstrainer.ui.bootstrap import run_application
    from chesstrainer.ui.dialogs.settings_dialog import AppSettings

    settings = AppSettings(language=args.language)
    sys.exit(run_application(sys.argv[:1], settings=settings, report_path=args.report))


if __name__ == "__main__":
    main()
