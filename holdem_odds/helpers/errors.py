from __future__ import annotations
from typing import Iterable, List


class OddsError(ValueError):
    """Base class for every input error raised before a simulation runs."""


class InvalidCardCode(OddsError):
    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Bad card code: {code!r}")


class DuplicateCardError(OddsError):
    def __init__(self, cards: Iterable[str]):
        self.cards: List[str] = list(cards)
        super().__init__(f"Duplicate cards detected: {', '.join(self.cards)}")


class IncompleteHandError(OddsError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Hero hand must be exactly 2 cards, got {count}")


class InvalidBoardError(OddsError):
    pass


class InvalidParameterError(OddsError):
    pass


class DeckExhaustionError(OddsError):
    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(
            f"Need {needed} cards to deal but only {available} remain in the deck"
        )
