# cards
from .cards import Card, Suit, parse_card, parse_cards, full_deck, remaining

# errors
from .errors import (
    OddsError,
    InvalidCardCode,
    DuplicateCardError,
    IncompleteHandError,
    InvalidBoardError,
    InvalidParameterError,
    DeckExhaustionError,
)

# evaluation
from .evaluator import (
    HandRank,
    evaluate_five,
    best_of,
    best_hand,
    compare,
    compare_hands,
    winners,
    CATEGORY,
)

# equity
from .equity import EquityResult, prepare, run_trial, simulate

__all__ = [
    # cards
    "Card", "Suit", "parse_card", "parse_cards", "full_deck", "remaining",

    # errors
    "OddsError", "InvalidCardCode", "DuplicateCardError", "IncompleteHandError",
    "InvalidBoardError", "InvalidParameterError", "DeckExhaustionError",

    # evaluation
    "HandRank", "evaluate_five", "best_of", "best_hand",
    "compare", "compare_hands", "winners", "CATEGORY",

    # equity
    "EquityResult", "prepare", "run_trial", "simulate",
]
