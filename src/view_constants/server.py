#!/usr/bin/env python3
"""HTTP Interface exposing the registered constants to the views."""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

import jinja2
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .config import ViewConstantsConfig
from .definitions import ConstantDefinition
from .registrar import build_constant_store
from .store import ConstantStore
from .views import ConstantEnvironment, forward

router = APIRouter()

CONSTANT_LISTENER_VALUE = "test constant in view(jsp)"


@dataclass
class _AppContext:
    """Store the context shared by every request of the server."""

    config: ViewConstantsConfig
    constants: ConstantStore
    templates: jinja2.Environment


def get_context(request: Request) -> _AppContext:
    """Return the context of the application handling the request."""
    return request.app.state.context


AppContext = Annotated[_AppContext, Depends(get_context)]


@router.get("/")
async def root(context: AppContext) -> HTMLResponse:
    """Return the list of the registered constants."""
    template = context.templates.get_template("index.html")
    return HTMLResponse(
        template.render(
            {
                "constants": context.constants,
            }
        )
    )


@router.post("/test-constant-listener")
async def test_constant_listener(request: Request, context: AppContext) -> HTMLResponse:
    """Store a value in the session, then forward to the view displaying it."""
    request.session[ConstantDefinition.FOO] = CONSTANT_LISTENER_VALUE
    return forward(request, context.templates, context.config.view.constant_listener_view)


@router.get("/test-constant-listener")
async def test_constant_listener_get(
    request: Request, context: AppContext
) -> HTMLResponse:
    """Handle a GET request exactly like a POST one."""
    return await test_constant_listener(request, context)


def generate_server_app(config: ViewConstantsConfig) -> FastAPI:
    """Generate the main FastAPI server."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan handler of the server App."""
        constants = build_constant_store(config.context)

        templates = ConstantEnvironment(
            loader=jinja2.FileSystemLoader(config.view.templates_dir),
            autoescape=jinja2.select_autoescape(),
        )
        templates.globals.update(constants.as_dict())

        app.state.context = _AppContext(
            config=config,
            constants=constants,
            templates=templates,
        )
        logging.info(f"Constants registered: {', '.join(constants) or 'none'}")

        yield

        del app.state.context

    app = FastAPI(lifespan=lifespan)
    app.include_router(router)
    app.add_middleware(SessionMiddleware, secret_key=config.server.session_secret)

    if config.server.static_dir is not None:
        app.mount(
            "/static",
            StaticFiles(directory=config.server.static_dir),
            name="static",
        )

    return app
