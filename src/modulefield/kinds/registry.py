"""Registry mapping field kind names to their capabilities and validators."""

from __future__ import annotations

import logging
import re
import threading
from typing import TYPE_CHECKING, Any, Callable

from modulefield.errors import (
    FieldKindNotFoundError,
    FieldKindRegistrationError,
    InvalidInputError,
)
from modulefield.kinds.builtin import BUILTIN_KINDS
from modulefield.kinds.loader import parse_kinds
from modulefield.kinds.types import BASE_CAPABILITIES, Capabilities, FieldKind

if TYPE_CHECKING:
    from modulefield.config import Config

logger = logging.getLogger(__name__)

__all__ = ["FieldKindRegistry", "KIND_NAME_PATTERN", "registry"]

KIND_NAME_PATTERN = re.compile(r"^\w+$", re.ASCII)


class FieldKindRegistry:
    """Lookup table from kind name to FieldKind.

    Thread safety:
        Internally synchronized. All public methods are safe to call
        concurrently.
    """

    def __init__(self, config: Config | None = None, builtin: bool = True) -> None:
        """Initialize the registry.

        Args:
            config: Optional Config; kinds listed under its ``kinds`` key are
                registered after the built-in ones and may replace them.
            builtin: Whether to register the built-in kinds.

        Raises:
            ConfigError: If the configured kinds are invalid.
        """
        self._kinds: dict[str, FieldKind] = {}
        self._callbacks: dict[str, list[Callable[..., Any]]] = {
            "register": [],
            "unregister": [],
        }
        self._write_lock = threading.RLock()

        if builtin:
            for kind in BUILTIN_KINDS:
                self.register(kind)

        if config is not None:
            self.configure(config)

    # ----- Registration -----

    def configure(self, config: Config) -> int:
        """Register the kinds listed under the ``kinds`` key of ``config``.

        Configured kinds replace registered kinds of the same name. Use on the
        shared ``registry`` to make them apply to every ModuleField.

        Returns:
            Number of kinds registered.

        Raises:
            ConfigError: If the configured kinds are invalid.
        """
        raw = config.get("kinds")
        if raw is None:
            return 0
        kinds = parse_kinds(raw, source="config")
        for kind in kinds:
            self.register(kind, replace=True)
        return len(kinds)

    def register(self, kind: FieldKind, replace: bool = False) -> None:
        """Register a field kind.

        Raises:
            FieldKindRegistrationError: If the name is invalid, or already
                registered and ``replace`` is False.
        """
        if not isinstance(kind.name, str) or not KIND_NAME_PATTERN.fullmatch(kind.name):
            raise FieldKindRegistrationError(kind.name, "name must match ^\\w+$")

        with self._write_lock:
            if kind.name in self._kinds and not replace:
                raise FieldKindRegistrationError(kind.name, "already registered")
            self._kinds[kind.name] = kind

        logger.debug("Registered field kind '%s'", kind.name)
        self._trigger_event("register", kind.name, kind)

    def unregister(self, name: str) -> bool:
        """Remove a field kind. Returns False if it was not registered."""
        with self._write_lock:
            if name not in self._kinds:
                return False
            kind = self._kinds.pop(name)

        logger.debug("Unregistered field kind '%s'", name)
        self._trigger_event("unregister", name, kind)
        return True

    # ----- Query Methods -----

    def get(self, name: str) -> FieldKind:
        """Return the registered kind.

        Raises:
            FieldKindNotFoundError: If no kind with that name is registered.
        """
        kind = self.find(name)
        if kind is None:
            raise FieldKindNotFoundError(name)
        return kind

    def find(self, name: str) -> FieldKind | None:
        with self._write_lock:
            return self._kinds.get(name)

    def capabilities(self, name: str) -> Capabilities:
        """Capabilities of the named kind; unknown kinds get the base set."""
        kind = self.find(name)
        return kind.capabilities if kind is not None else BASE_CAPABILITIES

    def has(self, name: str) -> bool:
        with self._write_lock:
            return name in self._kinds

    def list(self) -> list[str]:
        """Sorted names of all registered kinds."""
        with self._write_lock:
            return sorted(self._kinds)

    def __contains__(self, name: object) -> bool:
        with self._write_lock:
            return name in self._kinds

    def __len__(self) -> int:
        with self._write_lock:
            return len(self._kinds)

    # ----- Events -----

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Register an event callback.

        Args:
            event: Event name ('register' or 'unregister').
            callback: Callable(name, kind) to invoke on the event.

        Raises:
            InvalidInputError: If event name is invalid.
        """
        with self._write_lock:
            if event not in self._callbacks:
                raise InvalidInputError(message=f"Invalid event: {event}. Must be 'register' or 'unregister'")
            self._callbacks[event].append(callback)

    def _trigger_event(self, event: str, name: str, kind: FieldKind) -> None:
        """Trigger all callbacks for an event. Errors are logged and swallowed."""
        with self._write_lock:
            callbacks = list(self._callbacks.get(event, []))
        for cb in callbacks:
            try:
                cb(name, kind)
            except Exception as e:
                logger.error(
                    "Callback error for event '%s' on field kind '%s': %s",
                    event,
                    name,
                    e,
                )


registry = FieldKindRegistry()
