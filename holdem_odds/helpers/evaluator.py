from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .cards import Card, parse_cards

CATEGORY = {
    "high_card": 0,
    "pair": 1,
    "two_pair": 2,
    "trips": 3,
    "straight": 4,
    "flush": 5,
    "full_house": 6,
    "quads": 7,
    "straight_flush": 8,
}
CATEGORY_NAMES = {v: k for k, v in CATEGORY.items()}

WHEEL = (14, 5, 4, 3, 2)


@total_ordering
@dataclass(frozen=True, eq=False)
class HandRank:
    """
    Coarse category (0 = high card .. 8 = straight flush) plus the ranks
    that break ties inside it, compared lexicographically.
    """
    category: int
    tiebreaker: Tuple[int, ...]

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: "HandRank") -> bool:
        if not isinstance(other, HandRank):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        # trailing zeros compare equal to missing elements
        tb = list(self.tiebreaker)
        while tb and tb[-1] == 0:
            tb.pop()
        return hash((self.category, tuple(tb)))


def compare(a: HandRank, b: HandRank) -> int:
    if a.category != b.category:
        return a.category - b.category
    ta, tb = a.tiebreaker, b.tiebreaker
    for i in range(max(len(ta), len(tb))):
        diff = (ta[i] if i < len(ta) else 0) - (tb[i] if i < len(tb) else 0)
        if diff != 0:
            return diff
    return 0


def _rank_counts(cards: Sequence[Card]) -> Dict[int, int]:
    d: Dict[int, int] = {}
    for c in cards:
        d[c.rank] = d.get(c.rank, 0) + 1
    return d


def straight_high(ranks_desc: Sequence[int]) -> Optional[int]:
    uniq = sorted(set(ranks_desc), reverse=True)
    if len(uniq) != 5:
        return None
    if uniq[0] - uniq[4] == 4:
        return uniq[0]
    if tuple(uniq) == WHEEL:
        return 5
    return None


def evaluate_five(cards5: Sequence[Union[str, Card]]) -> HandRank:
    cards = parse_cards(cards5)
    if len(cards) != 5:
        raise ValueError("evaluate_five expects exactly 5 cards")

    vals = sorted([c.rank for c in cards], reverse=True)
    is_flush = len({c.suit for c in cards}) == 1

    counts = _rank_counts(cards)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    singles = [r for r, n in groups if n == 1]

    sh = straight_high(vals)

    if sh is not None and is_flush:
        return HandRank(CATEGORY["straight_flush"], (sh,))
    if groups[0][1] == 4:
        return HandRank(CATEGORY["quads"], (groups[0][0], singles[0]))
    if groups[0][1] == 3 and groups[1][1] == 2:
        return HandRank(CATEGORY["full_house"], (groups[0][0], groups[1][0]))
    if is_flush:
        return HandRank(CATEGORY["flush"], tuple(vals))
    if sh is not None:
        return HandRank(CATEGORY["straight"], (sh,))
    if groups[0][1] == 3:
        return HandRank(CATEGORY["trips"], (groups[0][0], *singles))
    if groups[0][1] == 2 and groups[1][1] == 2:
        # groups are already (count, rank) descending
        return HandRank(CATEGORY["two_pair"], (groups[0][0], groups[1][0], singles[0]))
    if groups[0][1] == 2:
        return HandRank(CATEGORY["pair"], (groups[0][0], *singles))
    return HandRank(CATEGORY["high_card"], tuple(vals))


def best_hand(cards: Iterable[Union[str, Card]]) -> Tuple[HandRank, List[Card]]:
    cs = parse_cards(cards)
    if not (5 <= len(cs) <= 7):
        raise ValueError("best_hand expects 5 to 7 cards")

    best: Optional[HandRank] = None
    best5: List[Card] = []
    for combo in combinations(cs, 5):
        rank = evaluate_five(combo)
        if best is None or compare(rank, best) > 0:
            best = rank
            best5 = list(combo)

    assert best is not None
    return best, sorted(best5, key=lambda c: c.rank, reverse=True)


def best_of(cards: Iterable[Union[str, Card]]) -> HandRank:
    return best_hand(cards)[0]


def compare_hands(hand1, hand2, board) -> int:
    b = parse_cards(board)
    r1 = best_of(parse_cards(hand1) + b)
    r2 = best_of(parse_cards(hand2) + b)
    diff = compare(r1, r2)
    return 1 if diff > 0 else (-1 if diff < 0 else 0)


def winners(hands, board) -> List[int]:
    b = parse_cards(board)
    ranks = [best_of(parse_cards(h) + b) for h in hands]
    top = max(ranks)
    return [i for i, r in enumerate(ranks) if compare(r, top) == 0]
