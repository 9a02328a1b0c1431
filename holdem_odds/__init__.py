from .helpers import (
    Card,
    EquityResult,
    HandRank,
    best_of,
    compare,
    evaluate_five,
    full_deck,
    remaining,
    simulate,
)
from .helpers.errors import (
    OddsError,
    InvalidCardCode,
    DuplicateCardError,
    IncompleteHandError,
    InvalidBoardError,
    InvalidParameterError,
    DeckExhaustionError,
)
from .engine import OddsCalculator

__version__ = "0.1.0"
