#!/usr/bin/env python3
"""Keys shared between the request handlers and the views."""


class ConstantDefinition:
    """Session attribute keys."""

    FOO = "foo"
