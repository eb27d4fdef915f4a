#!/usr/bin/env python3
"""Hand a request over to a view template."""
from typing import Any

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse

from .store import ConstantMapping


class ConstantEnvironment(jinja2.Environment):
    """Template environment resolving `Name.FIELD` to the field of a constant.

    Jinja looks attributes up before items, so a field named like a mapping
    method (`keys`, `items`, ...) would otherwise render as that method.
    """

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, ConstantMapping) and attribute in obj:
            return obj[attribute]
        return super().getattr(obj, attribute)


def forward(request: Request, templates: jinja2.Environment, view: str) -> HTMLResponse:
    """Render a view for the current request.

    The view receives the request and its session; the registered constants
    are available as template globals. Rendering errors are not handled here.

    Args:
        request (Request): The request being handled
        templates (jinja2.Environment): The environment holding the views
        view (str): Name of the view template

    Returns:
        HTMLResponse: The rendered view

    """
    template = templates.get_template(view)
    return HTMLResponse(
        template.render(
            {
                "request": request,
                "session": request.session,
            }
        )
    )
