#!/usr/bin/env python3
"""Expose class constants to server-rendered views."""

__all__ = [
    "ConstantStore",
    "ViewConstantsConfig",
    "generate_server_app",
    "load_config",
    "register_constants",
]

from .config import ViewConstantsConfig, load_config
from .registrar import register_constants
from .server import generate_server_app
from .store import ConstantStore
