"""Internet media type parsing and formatting.

This package models media type strings such as
``application/vnd.example.widget+json; version=1``. It provides a
parser with precise syntax errors, a canonical serializer and value
equality over the parsed form.

:var __version__: Current package version
:type __version__: str
"""

from .config import Settings, get_settings
from .exceptions import (
    InvalidArgumentError,
    MediaTypeError,
    MediaTypeSyntaxError,
    NullArgumentError,
)
from .media_type import MediaType, parse_media_type
from .models import MediaTypeModel
from .registration_tree import RegistrationTree
from .utils import setup_logging

__version__ = "0.1.0"

__all__ = [
    "MediaType",
    "RegistrationTree",
    "parse_media_type",
    "MediaTypeError",
    "MediaTypeSyntaxError",
    "InvalidArgumentError",
    "NullArgumentError",
    "MediaTypeModel",
    "Settings",
    "get_settings",
    "setup_logging",
]
