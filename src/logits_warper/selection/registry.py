"""Registry for selection backend implementations.

Uses a decorator pattern for registration, enabling both built-in and
third-party backends to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from logits_warper.selection.base import SelectionBackend


class SelectionBackendRegistry:
    """Registry mapping string names to SelectionBackend classes.

    Built-in backends register via the ``@SelectionBackendRegistry.register()``
    decorator. The ``build()`` class method instantiates the backend named by
    the config's ``selection_backend`` field.
    """

    _registry: ClassVar[dict[str, type[SelectionBackend]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SelectionBackend]], type[SelectionBackend]]:
        """Decorator that registers a SelectionBackend class under *name*.

        Args:
            name: Identifier used in config ``selection_backend``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[SelectionBackend]) -> type[SelectionBackend]:
            if name in cls._registry:
                raise ValueError(f"Selection backend '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SelectionBackend]:
        """Return the backend class registered under *name*.

        Args:
            name: Identifier to look up.

        Returns:
            The registered SelectionBackend subclass.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selection backend '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, name: str) -> SelectionBackend:
        """Instantiate the backend registered under *name*."""
        return cls.get(name)()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered backend names."""
        return sorted(cls._registry)
