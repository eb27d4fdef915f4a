#!/usr/bin/env python3
"""Application-wide store of the constants visible from the views."""
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator


class ConstantStoreError(Exception):
    """Raised when the store is modified after its initialization."""

    pass


class ConstantMapping(Mapping):
    """Read-only field names and values of a single class.

    Fields can also be read as attributes, e.g. ``constants.RED``.
    """

    __slots__ = ("_constants",)

    def __init__(self, constants: Mapping[str, Any]) -> None:
        self._constants = dict(constants)

    def __getitem__(self, name: str) -> Any:
        return self._constants[name]

    def __getattr__(self, name: str) -> Any:
        if name == "_constants":
            raise AttributeError(name)
        try:
            return self._constants[name]
        except KeyError:
            raise AttributeError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._constants)

    def __len__(self) -> int:
        return len(self._constants)

    def __repr__(self) -> str:
        return f"ConstantMapping({self._constants!r})"


class ConstantStore(Mapping):
    """Map the short name of a class to its constants.

    The store is filled once while the application starts, then frozen.
    Afterwards it is read-only and can be shared between requests.
    """

    def __init__(self) -> None:
        """Create an empty, uninitialized store."""
        self._constants: Dict[str, ConstantMapping] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """Return True once the store has been frozen."""
        return self._initialized

    def register(self, name: str, constants: Mapping[str, Any]) -> None:
        """Register a constant mapping under the given name.

        A mapping already registered under the same name is replaced.

        Args:
            name (str): Name used by the views, usually a class short name
            constants (Mapping[str, Any]): Field names and their values

        Raises:
            ConstantStoreError: The store is already initialized

        """
        if self._initialized:
            raise ConstantStoreError(
                f"Cannot register [{name}]: the constant store is initialized"
            )

        if name in self._constants:
            logging.warning(
                f"Constants [{name}] registered twice. The previous ones are overwritten"
            )

        self._constants[name] = ConstantMapping(constants)

    def freeze(self) -> None:
        """Mark the store as initialized, forbidding any further registration."""
        self._initialized = True

    def as_dict(self) -> Dict[str, ConstantMapping]:
        """Return a snapshot of the store, e.g. to be used as template globals."""
        return dict(self._constants)

    def __getitem__(self, name: str) -> ConstantMapping:
        return self._constants[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._constants)

    def __len__(self) -> int:
        return len(self._constants)

    def __repr__(self) -> str:
        state = "initialized" if self._initialized else "uninitialized"
        return f"<ConstantStore {state} {list(self._constants)}>"
