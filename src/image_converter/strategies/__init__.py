"""Output-format strategies and their registry."""

from .base import ConverterStrategy
from .registry import StrategyRegistry, create_default_registry

__all__ = ["ConverterStrategy", "StrategyRegistry", "create_default_registry"]
