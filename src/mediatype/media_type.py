"""Media type values, parsing and serialization.

This module provides the :class:`MediaType` value together with the
parser that builds one from a string and the serializer that turns it
back into one. The accepted grammar is::

    type "/" [tree "."] subtype ["+" suffix] *(";" parameter)

Type, subtype, suffix and parameter names compare case-insensitively.
Parameter values keep their original casing and compare exactly.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic_core import core_schema

from .exceptions import InvalidArgumentError, MediaTypeSyntaxError, NullArgumentError
from .models import MediaTypeModel
from .registration_tree import RegistrationTree
from .utils.text import trim

logger = logging.getLogger(__name__)

def _fold(text: Optional[str]) -> Optional[str]:
    return text.lower() if text is not None else None

def _split_tree(sub_type: str) -> Optional[Tuple[RegistrationTree, str]]:
    """Split a recognized registration tree prefix off a subtype.

    :param sub_type: Subtype that may begin with ``segment.``
    :type sub_type: str
    :return: Tuple of (tree, remainder) or None when no known prefix leads
    :rtype: Optional[Tuple[RegistrationTree, str]]
    """
    pieces = sub_type.split(".", 1)
    if len(pieces) != 2:
        return None
    tree = RegistrationTree.lookup(pieces[0] + ".")
    if tree is None:
        return None
    return tree, pieces[1]

def _syntax_error(text: str, reason: str, index: int = -1) -> MediaTypeSyntaxError:
    logger.debug("Rejected media type %r: %s", text, reason)
    return MediaTypeSyntaxError(text, reason, index)

def _escape(value: str) -> str:
    # Only a trailing quote is written; readers strip quotes on both ends.
    return value.replace("\\", "\\\\").replace('"', '\\"') + '"'

class MediaType:
    """A parsed or programmatically built media type.

    Build one from components, or from a string with :meth:`parse`.
    When ``registration_tree`` is omitted the subtype is inspected for a
    known tree prefix (``vnd.``, ``prs.``, ``x.``), which is moved into
    :attr:`registration_tree`. When a tree is given explicitly all
    components are stored exactly as passed.

    :param type: Top-level type, e.g. ``application``
    :type type: str
    :param sub_type: Subtype, possibly carrying a tree prefix
    :type sub_type: str
    :param suffix: Optional structured syntax suffix, e.g. ``json``
    :type suffix: Optional[str]
    :param registration_tree: Tree the subtype belongs to, or None to detect it
    :type registration_tree: Optional[RegistrationTree]
    :raises NullArgumentError: If type or sub_type is None
    :raises InvalidArgumentError: If registration_tree is not a RegistrationTree
    """

    def __init__(
        self,
        type: str,
        sub_type: str,
        suffix: Optional[str] = None,
        registration_tree: Optional[RegistrationTree] = None,
    ):
        if type is None:
            raise NullArgumentError("type")
        if sub_type is None:
            raise NullArgumentError("sub_type")

        if registration_tree is None:
            registration_tree = RegistrationTree.STANDARDS
            split = _split_tree(sub_type)
            if split is not None:
                registration_tree, sub_type = split
                logger.debug(
                    "Detected %s registration tree in subtype", registration_tree.name
                )
        elif not isinstance(registration_tree, RegistrationTree):
            raise InvalidArgumentError(
                "registration_tree must be a RegistrationTree",
                argument="registration_tree",
            )

        self._type = type
        self._registration_tree = registration_tree
        self._sub_type = sub_type
        self._suffix = suffix
        self._parameters: Dict[str, str] = {}

    @classmethod
    def parse(cls, text: str) -> "MediaType":
        """Parse a media type string.

        Type, subtype, suffix and parameter names are trimmed and
        lowercased. Parameter values are trimmed and a single pair of
        enclosing double quotes is removed; escapes inside the quotes
        are left untouched. Later parameters overwrite earlier ones with
        the same name.

        :param text: Media type string, e.g. ``text/plain; charset=utf-8``
        :type text: str
        :return: Parsed media type
        :rtype: MediaType
        :raises MediaTypeSyntaxError: If text does not follow the grammar
        :raises NullArgumentError: If text is None
        :raises InvalidArgumentError: If text is not a string
        """
        if text is None:
            raise NullArgumentError("text")
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Expected a string, got {text.__class__.__name__}", argument="text"
            )

        segments = text.split(";")

        parts = segments[0].split("/", 1)
        if len(parts) < 2:
            raise _syntax_error(text, "Invalid Syntax", 0)

        type_ = trim(parts[0]).lower()
        if not type_:
            raise _syntax_error(text, "No top-level type information provided", 0)

        pieces = trim(parts[1]).lower().split("+")
        if len(pieces) > 2:
            raise _syntax_error(text, "Too many suffixes provided")

        suffix = None
        sub_type = pieces[0]
        if len(pieces) == 2:
            sub_type = trim(pieces[0])
            suffix = trim(pieces[1])

        tree = RegistrationTree.STANDARDS
        split = _split_tree(sub_type)
        if split is not None:
            tree, sub_type = split

        if not sub_type:
            raise _syntax_error(text, "No subtype information provided")

        media_type = cls(type_, sub_type, suffix, registration_tree=tree)

        for segment in segments[1:]:
            pair = segment.split("=", 1)
            if len(pair) < 2:
                raise _syntax_error(text, "Invalid parameter value")

            name = trim(pair[0]).lower()
            if not name:
                raise _syntax_error(text, "Invalid parameter name")

            value = trim(pair[1])
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = value[1:-1]
            media_type._parameters[name] = value

        logger.debug("Parsed media type %r", text)
        return media_type

    @property
    def type(self) -> str:
        """Top-level type."""
        return self._type

    @property
    def registration_tree(self) -> RegistrationTree:
        """Registration tree the subtype belongs to."""
        return self._registration_tree

    @property
    def sub_type(self) -> str:
        """Subtype with any registration tree prefix removed."""
        return self._sub_type

    @property
    def suffix(self) -> Optional[str]:
        """Structured syntax suffix, or None when absent."""
        return self._suffix

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the parameters, keyed by lowercase name."""
        return MappingProxyType(self._parameters)

    def put_parameter(self, name: str, value: str) -> None:
        """Set a parameter, replacing any existing value for the name.

        :param name: Parameter name, stored trimmed and lowercased
        :type name: str
        :param value: Parameter value, stored as given
        :type value: str
        :raises NullArgumentError: If name or value is None
        :raises InvalidArgumentError: If name is blank
        """
        if name is None:
            raise NullArgumentError("name")
        if value is None:
            raise NullArgumentError("value")

        key = trim(name).lower()
        if not key:
            raise InvalidArgumentError(
                "Parameter name cannot be blank", argument="name"
            )
        self._parameters[key] = value

    def get_parameter(self, name: str) -> Optional[str]:
        """Look up a parameter value by case-insensitive name.

        :param name: Parameter name
        :type name: str
        :return: Parameter value or None if not set
        :rtype: Optional[str]
        :raises NullArgumentError: If name is None
        """
        if name is None:
            raise NullArgumentError("name")
        return self._parameters.get(trim(name).lower())

    def to_string(self) -> str:
        """Serialize to ``type/[tree.]subtype[+suffix]; name=value...``.

        A value containing a double quote has its backslashes and quotes
        escaped and a closing quote appended.

        :return: Serialized media type
        :rtype: str
        """
        parts = [self._type, "/", self._registration_tree.prefix, self._sub_type]

        if self._suffix:
            parts.append("+")
            parts.append(self._suffix)

        for name, value in self._parameters.items():
            parts.append(f"; {name}=")
            parts.append(_escape(value) if '"' in value else value)

        return "".join(parts)

    def copy(self) -> "MediaType":
        """Return an independent copy with its own parameter mapping."""
        duplicate = MediaType(
            self._type,
            self._sub_type,
            self._suffix,
            registration_tree=self._registration_tree,
        )
        duplicate._parameters = dict(self._parameters)
        return duplicate

    def to_model(self) -> MediaTypeModel:
        """Export the components as a :class:`MediaTypeModel`."""
        return MediaTypeModel(
            type=self._type,
            registration_tree=self._registration_tree,
            sub_type=self._sub_type,
            suffix=self._suffix,
            parameters=dict(self._parameters),
        )

    @classmethod
    def from_model(cls, model: MediaTypeModel) -> "MediaType":
        """Rebuild a media type from a :class:`MediaTypeModel`.

        The model's tree is applied explicitly, so the subtype is not
        inspected for a tree prefix.
        """
        media_type = cls(
            model.type,
            model.sub_type,
            model.suffix,
            registration_tree=model.registration_tree,
        )
        for name, value in model.parameters.items():
            media_type.put_parameter(name, value)
        return media_type

    def to_dict(self) -> Dict[str, Any]:
        """Export the components as JSON-compatible data."""
        return self.to_model().model_dump(mode="json")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> "MediaType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(
            f"Expected a media type string, got {value.__class__.__name__}"
        )

    def _key(self) -> Tuple[str, RegistrationTree, str, Optional[str]]:
        # An empty suffix is never serialized, so it compares as absent.
        return (
            self._type.lower(),
            self._registration_tree,
            self._sub_type.lower(),
            _fold(self._suffix) or None,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                other = MediaType.parse(other)
            except MediaTypeSyntaxError:
                return False
        if not isinstance(other, MediaType):
            return NotImplemented
        return self._key() == other._key() and self._parameters == other._parameters

    def __hash__(self) -> int:
        # Parameters are mutable, so they stay out of the hash.
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"

def parse_media_type(text: str) -> MediaType:
    """Parse a media type string.

    Convenience wrapper around :meth:`MediaType.parse`.

    :param text: Media type string
    :type text: str
    :return: Parsed media type
    :rtype: MediaType
    :raises MediaTypeSyntaxError: If text does not follow the grammar
    """
    return MediaType.parse(text)

__all__ = ["MediaType", "parse_media_type"]
