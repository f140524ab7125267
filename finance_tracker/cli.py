"""Console interface for the finance tracker."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from tracker_core.budget import BudgetManager
from tracker_core.ledger import Ledger
from tracker_core.parser import Parser
from tracker_core.ui import ConsoleUI

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def run(
    lines: Iterable[str],
    ui: ConsoleUI,
    ledger: Optional[Ledger] = None,
    budget_manager: Optional[BudgetManager] = None,
) -> Ledger:
    """Parse and execute each line until an exit command or the input runs out."""
    ledger = ledger if ledger is not None else Ledger()
    budget_manager = budget_manager if budget_manager is not None else BudgetManager()
    parser = Parser()

    for line in lines:
        command = parser.parse_command(line)
        logger.debug("Executing %s", type(command).__name__)
        command.execute(ledger, ui, budget_manager)
        if command.is_exit:
            break
    else:
        logger.info("Input closed without an exit command")
    return ledger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Finance Tracker CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Diagnostics written to stderr (default: WARNING)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Skip the welcome banner",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    ui = ConsoleUI()
    if not args.no_banner:
        ui.print_welcome()
    try:
        run(sys.stdin, ui)
    except KeyboardInterrupt:
        ui.print_goodbye()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
