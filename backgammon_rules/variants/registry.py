# =========================================================
# --- variants_registry.py ---
# =========================================================

import logging
from typing import Any, Dict, List, Type

from ..core.variant import RuleVariant
from .bg_casual import BgCasualRule

# =========================================================

"""
Registry of the available rule variants.

Variants are looked up by their stable `name`. A registry is an ordinary
object: callers build one (usually with `default_registry()`) and pass it
to whatever needs to pick a variant.
"""

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Maps variant names to RuleVariant classes.

    Usage:
        registry = default_registry()
        rule = registry.create('bg_casual')
        rule.reset_state(state)
    """

    def __init__(self) -> None:
        self._registry: Dict[str, Type[RuleVariant]] = {}

    def register(self, variant_class: Type[RuleVariant]) -> None:
        """
        Register a variant class under its `name`.

        Re-registering a name replaces the previous class.

        Raises:
            ValueError: If the class has no name.
        """
        if not variant_class.name:
            raise ValueError(f"{variant_class.__name__} has no variant name")
        self._registry[variant_class.name] = variant_class
        logger.info("Registered rule variant %s", variant_class.name)

    def unregister(self, name: str) -> bool:
        """
        Remove a variant.

        Returns:
            True if unregistered, False if not found.
        """
        if name in self._registry:
            del self._registry[name]
            return True
        return False

    def get(self, name: str) -> Type[RuleVariant]:
        """
        Get a variant class by name.

        Raises:
            KeyError: If no variant is registered under that name.
        """
        try:
            return self._registry[name]
        except KeyError:
            raise KeyError(f"Unknown rule variant: {name!r}") from None

    def create(self, name: str, **kwargs: Any) -> RuleVariant:
        """Return a fresh instance of the named variant."""
        return self.get(name)(**kwargs)

    def is_registered(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> List[str]:
        return sorted(self._registry)

    def available(self) -> List[Dict[str, str]]:
        """
        List the registered variants for display.

        Returns:
            One dictionary per variant with name, title, description,
            country and country_code.
        """
        return [
            {
                'name': variant.name,
                'title': variant.title,
                'description': variant.description,
                'country': variant.country,
                'country_code': variant.country_code,
            }
            for _, variant in sorted(self._registry.items())
        ]

    def __contains__(self, name: str) -> bool:
        return self.is_registered(name)

    def __len__(self) -> int:
        return len(self._registry)


def default_registry() -> RuleRegistry:
    """Return a new registry holding the built-in variants."""
    registry = RuleRegistry()
    registry.register(BgCasualRule)
    return registry
