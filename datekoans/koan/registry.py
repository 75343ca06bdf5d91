"""Registry of koan suites."""

from __future__ import annotations

import logging
from typing import Iterator

from datekoans.errors import KoanLookupError

logger = logging.getLogger(__name__)


class SuiteRegistry:
    """Suites by name, in registration order.

    Examples:
        >>> registry = SuiteRegistry()
        >>> class AboutNothing:
        ...     pass
        >>> registry.register(AboutNothing)
        >>> registry.names()
        ['AboutNothing']
    """

    def __init__(self) -> None:
        self._suites: dict[str, type] = {}

    def register(self, cls: type, name: str | None = None) -> None:
        """Add a suite class.

        Raises:
            ValueError: If a different class is registered under the name.
        """
        key = name or cls.__name__
        existing = self._suites.get(key)
        if existing is not None and existing is not cls:
            raise ValueError(f"a suite named {key!r} is already registered")
        self._suites[key] = cls
        logger.debug("Registered koan suite %s", key)

    def get(self, name: str) -> type:
        """Return the suite registered under name.

        Raises:
            KoanLookupError: If there is no such suite.
        """
        try:
            return self._suites[name]
        except KeyError:
            raise KoanLookupError(
                f"no koan suite named {name!r}; known suites: {', '.join(self._suites) or 'none'}"
            ) from None

    def names(self) -> list[str]:
        return list(self._suites)

    def items(self) -> Iterator[tuple[str, type]]:
        return iter(self._suites.items())

    def __contains__(self, name: object) -> bool:
        return name in self._suites

    def __len__(self) -> int:
        return len(self._suites)


default_registry = SuiteRegistry()


__all__ = ["SuiteRegistry", "default_registry"]
