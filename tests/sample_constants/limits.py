"""Module-level constants."""
import os
from collections import OrderedDict

MAX_ITEMS = 50
DEFAULT_NAME = "limits"
DEFAULT_ERROR = ValueError
_INTERNAL = 3


class Window:
    SIZE = 10


def helper():
    return os.sep, OrderedDict
