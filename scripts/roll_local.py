#!/usr/bin/env python3
"""
Local roll harness (no HTTP).

Usage:
  python3 scripts/roll_local.py chat.log --staff Mira --service sketch --slots 2 --pick min
  cat chat.log | python3 scripts/roll_local.py --pick max --save

What it does:
- Parses the pasted chat log with the same parser the API uses
- Prints every recognized roll and the result message
- With --save, appends the round to the configured record store
"""

from __future__ import annotations

import argparse
import sys

from rollshop.application.use_cases.result_message import render_roll_result_message
from rollshop.application.use_cases.run_roll import RunRollUseCase
from rollshop.application.use_cases.transaction import create_transaction_record
from rollshop.application.utils.roll_parser import parse_customer_rolls
from rollshop.core.config import settings
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.wiring.dependencies import get_record_store


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pick raffle winners from a pasted chat log.")
    parser.add_argument("log_file", nargs="?", help="chat log file (defaults to stdin)")
    parser.add_argument("--staff", default="", help="operator id")
    parser.add_argument("--service", default="", help="service name")
    parser.add_argument("--slots", type=int, default=1, help="number of winners")
    parser.add_argument("--money", type=int, default=0, help="transaction value")
    parser.add_argument(
        "--pick",
        choices=[s.value for s in PickStrategy],
        default=settings.DEFAULT_PICK_STRATEGY,
        help="which extremity wins",
    )
    parser.add_argument("--language", choices=["en", "zh"], default=settings.DEFAULT_LANGUAGE)
    parser.add_argument("--save", action="store_true", help="append the round to the record store")
    return parser.parse_args(argv)


def _read_text(path: str | None) -> str:
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    text = _read_text(args.log_file)

    rolls = parse_customer_rolls(text)
    print(f"Recognized {len(rolls)} roll(s):")
    for roll in rolls:
        print(f"  {roll.display()}")
    print("-" * 60)

    if args.save:
        try:
            outcome = RunRollUseCase(store=get_record_store()).execute(
                text=text,
                staff_id=args.staff,
                service_name=args.service,
                slots=args.slots,
                pick_strategy=PickStrategy(args.pick),
                money=args.money,
                language=args.language,
            )
        except ValueError as e:
            print(f"❌ {e}")
            return 1
        print(outcome.message)
        print(f"\nSaved as {outcome.record.id}")
        return 0

    record = create_transaction_record(
        rolls,
        staff_id=args.staff,
        service_name=args.service,
        amount=args.slots,
        money=args.money,
        pick_strategy=PickStrategy(args.pick),
        winner_count=args.slots,
    )
    print(render_roll_result_message(record, args.language))
    return 0


if __name__ == "__main__":
    sys.exit(main())
