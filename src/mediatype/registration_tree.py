"""Registration trees for media type subtypes.

A subtype may be registered in one of a fixed set of namespaces, each
identified by a textual prefix on the subtype (``vnd.``, ``prs.``,
``x.``) or by the absence of one for the standards tree.
"""

import logging
from enum import Enum
from typing import Optional

from .exceptions import NullArgumentError
from .utils.text import trim

logger = logging.getLogger(__name__)

def normalize_prefix(prefix: str) -> str:
    """Normalize a tree prefix for comparison.

    Trims surrounding whitespace, lowercases, and appends a trailing
    ``.`` to non-empty prefixes lacking one.

    :param prefix: Raw prefix text
    :type prefix: str
    :return: Normalized prefix, empty or ending in ``.``
    :rtype: str
    """
    normalized = trim(prefix).lower()
    if normalized and not normalized.endswith("."):
        normalized += "."
    return normalized

class RegistrationTree(str, Enum):
    """Namespaces a media subtype can be registered under.

    Each member's value is its prefix exactly as it appears in front of
    the subtype in a serialized media type.
    """

    STANDARDS = ""
    VENDOR = "vnd."
    PERSONAL = "prs."
    UNREGISTERED = "x."

    @property
    def prefix(self) -> str:
        """Return the subtype prefix for this tree.

        :return: Empty string or lowercase text ending in ``.``
        :rtype: str
        """
        return self.value

    @classmethod
    def lookup(cls, prefix: str) -> Optional["RegistrationTree"]:
        """Find the tree identified by a prefix.

        The prefix is normalized first, so ``"VND"``, ``" vnd. "`` and
        ``"vnd."`` all resolve to :attr:`VENDOR`. An empty prefix always
        resolves to :attr:`STANDARDS`.

        :param prefix: Prefix text to resolve
        :type prefix: str
        :return: Matching tree or None if the prefix is not recognized
        :rtype: Optional[RegistrationTree]
        :raises NullArgumentError: If prefix is None
        """
        if prefix is None:
            raise NullArgumentError("prefix")

        normalized = normalize_prefix(prefix)
        if not normalized:
            return cls.STANDARDS

        for tree in cls:
            if normalized == tree.prefix.lower():
                return tree

        logger.debug("No registration tree for prefix %r", prefix)
        return None

    def __str__(self) -> str:
        return self.prefix

__all__ = ["RegistrationTree", "normalize_prefix"]
