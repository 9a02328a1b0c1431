from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from .errors import InvalidCardCode

RANKS = "23456789TJQKA"
SUITS = "SHDC"
RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}


class Suit(str, Enum):
    SPADE = "S"
    HEART = "H"
    DIAMOND = "D"
    CLUB = "C"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    @property
    def code(self) -> str:
        return f"{VAL_TO_RANK[self.rank]}{self.suit.value}"

    def __str__(self) -> str:
        return self.code

    def pretty(self) -> str:
        return f"{VAL_TO_RANK[self.rank]}{self.suit.symbol}"

    @staticmethod
    def from_str(s: str) -> "Card":
        if not isinstance(s, str) or len(s) != 2:
            raise InvalidCardCode(s)
        r, su = s[0], s[1]
        if r not in RANK_TO_VAL or su not in SUITS:
            raise InvalidCardCode(s)
        return Card(RANK_TO_VAL[r], Suit(su))


def parse_card(code: Union[str, Card]) -> Card:
    return code if isinstance(code, Card) else Card.from_str(code)


def parse_cards(cards: Iterable[Union[str, Card]]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        out.append(parse_card(x))
    return out


def full_deck() -> List[Card]:
    # suit-major, rank-minor
    return [Card(RANK_TO_VAL[r], Suit(s)) for s in SUITS for r in RANKS]


def remaining(deck: Iterable[Card], used: Iterable[Union[str, Card]]) -> List[Card]:
    dead = set(parse_cards(used))
    return [c for c in deck if c not in dead]
