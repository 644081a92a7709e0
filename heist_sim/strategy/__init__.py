"""Move decision strategies."""

from .base import ExchangeSource, Strategy
from .random_strategy import RandomStrategy

__all__ = ["ExchangeSource", "Strategy", "RandomStrategy"]
