#!/usr/bin/env python3
"""Publish the constants of classes and modules to the views.

The names to publish are read once, when the application starts, e.g.::

    [context]
    constantClassName = \"\"\"
        com.blah.blah.Constant1,
        com.blah.Constant2
    \"\"\"

Each class is registered under its short name, so that a template can use
``{{ Constant1.FOO }}`` or ``{{ session[Constant1.FOO].username }}``.
"""
import __future__
import importlib
import inspect
import logging
import re
from enum import Enum
from types import ModuleType
from typing import Any, Dict, List, Mapping

from .config import ContextConfig
from .store import ConstantStore

ConstantSource = type | ModuleType


class ConstantResolutionError(Exception):
    """Raised when a configured name does not match any class or module."""

    pass


def extract_class_names(class_names: str) -> List[str]:
    """Split a comma separated list of class names.

    Whitespace characters are removed first; the names are not validated.

    Args:
        class_names (str): The raw configuration value

    Returns:
        List[str]: The class names, in configuration order

    """
    return re.sub(r"\s", "", class_names).split(",")


def resolve_type(name: str) -> ConstantSource:
    """Find the class or module matching a fully qualified name.

    The longest importable prefix of the name is imported, then the remaining
    components are looked up as attributes.

    Raises:
        ConstantResolutionError: Nothing matches the name

    """
    if not name:
        raise ConstantResolutionError("Empty class name")

    parts = name.split(".")
    for index in range(len(parts), 0, -1):
        try:
            target: Any = importlib.import_module(".".join(parts[:index]))
        except (ImportError, TypeError, ValueError):
            continue
        break
    else:
        raise ConstantResolutionError(f"No module found for {name}")

    for attribute in parts[index:]:
        try:
            target = getattr(target, attribute)
        except AttributeError as e:
            raise ConstantResolutionError(f"{name} cannot be found") from e

    if not isinstance(target, (type, ModuleType)):
        raise ConstantResolutionError(f"{name} is neither a class nor a module")

    return target


def short_name(source: ConstantSource, configured_name: str) -> str:
    """Return the unqualified name of a class, or the configured name of a module.

    A module may be reached through an alias (``os.path`` is ``posixpath``),
    so its last configured component is used instead of its own name.
    """
    if isinstance(source, ModuleType):
        return configured_name.rpartition(".")[2]
    return source.__name__


def _qualified_name(source: ConstantSource) -> str:
    if isinstance(source, ModuleType):
        return source.__name__
    return f"{source.__module__}.{source.__qualname__}"


_FEATURE = type(__future__.annotations)

_BOOKKEEPING = {"_abc_impl", "_is_protocol"}


def _is_class_definition(source: ConstantSource, name: str, value: type) -> bool:
    """Tell whether a class is defined (or imported) in a namespace, not assigned."""
    if isinstance(source, ModuleType):
        return value.__name__ == name
    return value.__qualname__.startswith(f"{source.__qualname__}.")


def _is_field(source: ConstantSource, name: str, value: Any) -> bool:
    """Tell whether a namespace entry holds a constant rather than code."""
    if (name.startswith("__") and name.endswith("__")) or name in _BOOKKEEPING:
        return False
    if isinstance(value, type):
        return not _is_class_definition(source, name, value)
    if isinstance(value, (ModuleType, _FEATURE, property)):
        return False
    if inspect.isbuiltin(value):
        return False
    if inspect.ismemberdescriptor(value) or inspect.isgetsetdescriptor(value):
        return False  # Instance attributes

    # Functions, methods and cached properties are non-data descriptors
    value_type = type(value)
    is_descriptor = hasattr(value_type, "__get__")
    is_data_descriptor = hasattr(value_type, "__set__") or hasattr(value_type, "__delete__")
    return not is_descriptor or is_data_descriptor


def fields_to_map(source: ConstantSource) -> Dict[str, Any]:
    """Extract the fields declared by a class or module, private ones included.

    Inherited fields are not extracted. Members of an ``Enum`` are mapped to
    their values. A field that cannot be read is logged and ignored.

    Args:
        source (ConstantSource): The class or module to extract the fields of

    Returns:
        Dict[str, Any]: Field names and their values

    """
    if isinstance(source, type) and issubclass(source, Enum):
        return {name: member.value for name, member in source.__members__.items()}

    field_map: Dict[str, Any] = {}
    for name, value in vars(source).items():
        if not _is_field(source, name, value):
            continue
        try:
            field_map[name] = getattr(source, name)
        except AttributeError:
            logging.error(
                f"Illegal access of field:[{_qualified_name(source)}->{name}]."
                " And this field will be ignore"
            )
    return field_map


def register_constants(
    store: ConstantStore,
    constant_class_name: str | None,
    constant_tables: Mapping[str, Mapping[str, Any]] | None = None,
) -> None:
    """Register the constants of the named classes, then initialize the store.

    Classes are registered under their short name; when two classes share a
    short name, the last one wins. Unknown classes are logged and skipped.

    Args:
        store (ConstantStore): The store to fill
        constant_class_name (str | None): Comma separated class names
        constant_tables (Mapping | None): Explicit tables, registered as-is

    """
    if constant_class_name:
        for class_name in extract_class_names(constant_class_name):
            try:
                source = resolve_type(class_name)
            except ConstantResolutionError:
                logging.error(
                    f"ClassNotFound:[{class_name}]. And this class will be ignore"
                )
                continue

            store.register(short_name(source, class_name), fields_to_map(source))
            logging.debug(f"Constants of {_qualified_name(source)} registered")

    for name, table in (constant_tables or {}).items():
        store.register(name, table)

    store.freeze()


def build_constant_store(config: ContextConfig) -> ConstantStore:
    """Create and initialize the constant store described by the configuration."""
    store = ConstantStore()
    register_constants(store, config.constant_class_name, config.constants)
    return store
