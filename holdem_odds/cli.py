from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .helpers.cards import parse_cards
from .helpers.equity import DEFAULT_ITERATIONS, simulate
from .helpers.errors import OddsError

log = logging.getLogger("holdem_odds.cli")

EXIT_BAD_INPUT = 2


def _jwrite(obj: Dict[str, Any], stream=None) -> None:
    stream = stream or sys.stdout
    stream.write(json.dumps(obj, ensure_ascii=False) + "\n")
    stream.flush()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="holdem-odds",
        description="Monte Carlo win/tie/lose odds for a Texas Hold'em hand.",
    )
    ap.add_argument("--hero", nargs=2, required=True, metavar="CARD", help="two hole cards, e.g. AS AH")
    ap.add_argument("--board", nargs="*", default=[], metavar="CARD", help="0 to 5 community cards")
    ap.add_argument("--opponents", type=int, default=1)
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--pretty", action="store_true", help="show cards with suit symbols")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        res = simulate(
            args.hero,
            args.board,
            opponents=args.opponents,
            iterations=args.iterations,
            seed=args.seed,
            workers=args.workers,
        )
    except OddsError as e:
        log.debug("rejected input: %s", e)
        _jwrite({"error": type(e).__name__, "message": str(e)}, sys.stderr)
        return EXIT_BAD_INPUT

    fmt = (lambda c: c.pretty()) if args.pretty else str
    _jwrite({
        "hero": [fmt(c) for c in parse_cards(args.hero)],
        "board": [fmt(c) for c in parse_cards(args.board)],
        "opponents": args.opponents,
        "iterations": res.iterations,
        "win": round(res.win, 1),
        "tie": round(res.tie, 1),
        "lose": round(res.lose, 1),
    })
    return 0


if __name__ == "__main__":
    sys.exit(main())
