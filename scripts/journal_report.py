#!/usr/bin/env python3
"""
Journal Report

Prints performance statistics, the strategy breakdown and the equity curve
of a JSON trade journal. Optionally imports a CSV export into the journal
first.
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from zentrade.core.config import setup_logging
from zentrade.core.constants import DEFAULT_JOURNAL_PATH
from zentrade.core.exceptions.journal import JournalException
from zentrade.core.types.financial import round_percentage, round_price
from zentrade.infrastructure.storage import CSVTradeImporter, JsonTradeStore
from zentrade.journal import TradeJournal


def import_csv(journal: TradeJournal, csv_path: Path) -> int:
    """Add every trade of a CSV export to the journal."""
    trades = CSVTradeImporter().load(csv_path)
    for trade in trades:
        journal.add(trade)
    return len(trades)


def format_report(journal: TradeJournal) -> str:
    """Render the journal's analytics as plain text."""
    summary = journal.summary()
    stats = summary.stats

    lines = [
        f"Trades logged:     {len(journal)}",
        f"Realized trades:   {stats.total_trades}",
        f"Net P/L:           {round_price(stats.net_pnl):,.2f}",
        f"Win rate:          {round_percentage(stats.win_rate):.1f}% "
        f"({summary.win_count} wins / {summary.loss_count} losses)",
        f"Profit factor:     {stats.profit_factor:.2f}",
        f"Avg win / loss:    {round_price(stats.avg_win):,.2f} / {round_price(stats.avg_loss):,.2f}",
        f"Avg trade:         {round_price(summary.average_trade):,.2f}",
        f"Max drawdown:      {round_price(stats.max_drawdown):,.2f}",
        "",
        "Performance by strategy:",
    ]
    for strategy, pnl in summary.strategy_breakdown.items():
        lines.append(f"  {strategy or '(none)':<24} {pnl:+,.2f}")

    lines += ["", "Equity curve:"]
    for point in summary.equity_curve:
        lines.append(f"  {point.date:<12} {point.equity:>14,.2f} {point.pnl:>+12,.2f}")

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Print performance analytics for a trade journal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python journal_report.py --journal data/zentrade_trades.json
  python journal_report.py --journal data/zentrade_trades.json --csv exports/trades.csv
        """,
    )

    parser.add_argument(
        "--journal",
        type=str,
        default=DEFAULT_JOURNAL_PATH,
        help=f"JSON journal file (default: {DEFAULT_JOURNAL_PATH})",
    )

    parser.add_argument(
        "--csv", type=str, help="CSV export to import into the journal before reporting"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    setup_logging(args.debug)

    try:
        journal = TradeJournal.load(JsonTradeStore(args.journal))

        if args.csv:
            csv_path = Path(args.csv)
            if not csv_path.exists():
                logger.error(f"File not found: {csv_path}")
                return 1
            imported = import_csv(journal, csv_path)
            logger.success(f"Imported {imported} trades from {csv_path.name}")

        print(format_report(journal))
        return 0

    except JournalException as e:
        logger.error(f"Report failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
