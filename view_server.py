#!/usr/bin/env python3
"""View Constants Server launcher."""

import logging
from pathlib import Path
from typing import Annotated

import typer
import uvicorn
from rich.logging import RichHandler

from view_constants import generate_server_app, load_config

app = typer.Typer()

FORMAT = "%(message)s"
logging.basicConfig(
    level="INFO", format=FORMAT, datefmt="[%X]", handlers=[RichHandler()]
)


@app.command()
def main(
    config_filename: Annotated[
        Path, typer.Option(help="Configuration file of the server")
    ] = Path("server_config.toml"),
    debug: Annotated[bool, typer.Option(help="Show debug messages")] = False,
) -> None:
    """Launch the View Constants Server."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    logging.info(f'Starting View Constants Server with configuration "{config_filename}"')

    config = load_config(config_filename)

    server_app = generate_server_app(config=config)
    uvicorn.run(
        server_app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    app()
