#!/usr/bin/env python3
"""Configuration data."""
from pathlib import Path
from typing import Any, Dict

import tomli
from pydantic import BaseModel, ConfigDict, DirectoryPath, Field

_ASSETS = Path(__file__).parent / "assets"


class ServerConfig(BaseModel):
    """Store server-related parameters."""

    host: str = Field(default="127.0.0.1", pattern=r"^\d+\.\d+\.\d+\.\d+$")
    port: int = Field(default=8000, ge=1, le=0xFFFF)

    session_secret: str = Field(min_length=1)  # Signs the session cookie

    static_dir: DirectoryPath | None = None  # Mounted under /static when set


class ViewConfig(BaseModel):
    """Store parameters related to the view templates."""

    templates_dir: DirectoryPath = _ASSETS / "templates"
    constant_listener_view: str = "test_constant_listener.html"


class ContextConfig(BaseModel):
    """Store the constants published in the application context."""

    model_config = ConfigDict(populate_by_name=True)

    # Comma separated, fully qualified class or module names
    constant_class_name: str | None = Field(default=None, alias="constantClassName")

    # Explicit constant tables, registered after the named classes
    constants: Dict[str, Dict[str, Any]] = {}


class ViewConstantsConfig(BaseModel):
    """Configuration of the entire view constants server."""

    server: ServerConfig
    context: ContextConfig = ContextConfig()
    view: ViewConfig = ViewConfig()


def load_config(file: Path) -> ViewConstantsConfig:
    """Load a ViewConstantsConfig from a TOML file.

    Args:
        file (Path): The configuration file

    Returns:
        ViewConstantsConfig: The loaded configuration

    """
    with file.open("rb") as f:
        config_data = tomli.load(f)

    return ViewConstantsConfig(**config_data)
