from .calculator import OddsCalculator

__all__ = [
    "OddsCalculator",
]
