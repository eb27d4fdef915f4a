"""Older constants, sharing class names with the acme namespace."""


class Colors:
    BLUE = "b"
