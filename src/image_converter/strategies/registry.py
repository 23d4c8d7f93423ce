"""Strategy registry and plugin discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from image_converter.errors import StrategyError, UnsupportedFormatError
from image_converter.strategies.base import ConverterStrategy
from image_converter.strategies.builtins import BUILTIN_STRATEGIES


class StrategyRegistry:
    """Case-insensitive lookup table from format identifier to strategy."""

    def __init__(self) -> None:
        self._strategies: dict[str, ConverterStrategy] = {}
        self._aliases: dict[str, str] = {}

    def register(self, strategy: ConverterStrategy) -> None:
        """Register strategy under its name and aliases.

        Parameters
        ----------
        strategy : ConverterStrategy
            Strategy instance to register. A later registration with the same
            name replaces the earlier one.

        Raises
        ------
        StrategyError
            If the strategy does not provide a valid name or extension.
        """
        name = _text_attribute(strategy, "name").lower()
        if not name:
            raise StrategyError("Strategy must define a non-empty 'name'.")
        if not _text_attribute(strategy, "extension"):
            raise StrategyError(
                f"Strategy '{name}' must define a non-empty 'extension'."
            )
        aliases = getattr(strategy, "aliases", ())
        if not isinstance(aliases, (tuple, list)) or not all(
            isinstance(alias, str) for alias in aliases
        ):
            raise StrategyError(
                f"Strategy '{name}' aliases must be a sequence of strings."
            )
        self._strategies[name] = strategy
        for alias in aliases:
            self._aliases[alias.strip().lower()] = name

    def names(self) -> list[str]:
        """Return registered format names.

        Returns
        -------
        list[str]
            Sorted list of canonical format names (aliases excluded).
        """
        return sorted(self._strategies.keys())

    def select(self, output_format: str) -> ConverterStrategy | None:
        """Look up the strategy for ``output_format``.

        Parameters
        ----------
        output_format : str
            Format identifier or alias, matched case-insensitively.

        Returns
        -------
        ConverterStrategy | None
            Registered strategy, or ``None`` for unknown formats.
        """
        key = output_format.strip().lower()
        key = self._aliases.get(key, key)
        return self._strategies.get(key)

    def require(self, output_format: str) -> ConverterStrategy:
        """Look up the strategy for ``output_format`` or fail.

        Raises
        ------
        UnsupportedFormatError
            If no strategy is registered for the format.
        """
        strategy = self.select(output_format)
        if strategy is None:
            raise UnsupportedFormatError(
                f"Unsupported output format '{output_format}'. "
                f"Available formats: {', '.join(self.names())}"
            )
        return strategy

    def load_module(self, module_or_path: str) -> None:
        """Load strategy providers from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            plugins from trusted sources.

        Parameters
        ----------
        module_or_path : str
            Python import path or filesystem path to a plugin module.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _text_attribute(strategy: object, attribute: str) -> str:
    """Return a stripped string attribute, or "" when missing or not a string."""
    value = getattr(strategy, attribute, "")
    return value.strip() if isinstance(value, str) else ""


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    StrategyError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise StrategyError(f"Unable to load plugin module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise StrategyError(
                f"Unable to load plugin module from {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise StrategyError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: StrategyRegistry) -> None:
    """Register strategy definitions found in module.

    Modules expose ``register_strategies(registry)``, a ``STRATEGIES``
    iterable, or a single ``STRATEGY``, checked in that order.
    """
    if hasattr(module, "register_strategies"):
        module.register_strategies(registry)
        return

    strategies_obj = getattr(module, "STRATEGIES", None)
    if strategies_obj is not None:
        for strategy in strategies_obj:
            registry.register(strategy)
        return

    strategy_obj = getattr(module, "STRATEGY", None)
    if strategy_obj is not None:
        registry.register(strategy_obj)
        return

    raise StrategyError(
        "Plugin module must expose register_strategies(registry), "
        "STRATEGIES, or STRATEGY."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> StrategyRegistry:
    """Create registry with the built-in PNG and JPEG strategies.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional plugin modules to load.

    Returns
    -------
    StrategyRegistry
        Registry with built-in and external strategies.
    """
    registry = StrategyRegistry()
    for strategy in BUILTIN_STRATEGIES:
        registry.register(strategy)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
