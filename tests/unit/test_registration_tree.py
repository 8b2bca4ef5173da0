"""Unit tests for registration tree lookup.

This module tests prefix normalization and resolution of subtype
registration trees.
"""

import pytest

from mediatype import NullArgumentError, RegistrationTree
from mediatype.registration_tree import normalize_prefix
from mediatype.utils.text import trim


@pytest.mark.unit
def test_prefixes():
    assert RegistrationTree.STANDARDS.prefix == ""
    assert RegistrationTree.VENDOR.prefix == "vnd."
    assert RegistrationTree.PERSONAL.prefix == "prs."
    assert RegistrationTree.UNREGISTERED.prefix == "x."
    assert str(RegistrationTree.VENDOR) == "vnd."


@pytest.mark.unit
def test_normalize_prefix():
    assert normalize_prefix("  VND ") == "vnd."
    assert normalize_prefix("prs.") == "prs."
    assert normalize_prefix(" \t") == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("", RegistrationTree.STANDARDS),
        ("   ", RegistrationTree.STANDARDS),
        ("vnd.", RegistrationTree.VENDOR),
        ("VND", RegistrationTree.VENDOR),
        (" prs. ", RegistrationTree.PERSONAL),
        ("X.", RegistrationTree.UNREGISTERED),
        ("x", RegistrationTree.UNREGISTERED),
    ],
)
def test_lookup_known(text, expected):
    assert RegistrationTree.lookup(text) is expected


@pytest.mark.unit
@pytest.mark.parametrize("text", ["com.", "vendor", ".", "vnd.x."])
def test_lookup_unknown(text):
    assert RegistrationTree.lookup(text) is None


@pytest.mark.unit
def test_lookup_none_is_contract_violation():
    with pytest.raises(NullArgumentError):
        RegistrationTree.lookup(None)


@pytest.mark.unit
def test_trim_strips_ascii_whitespace_only():
    assert trim(" \t\r\n\x00vnd.\x0b ") == "vnd."
    assert trim("\u00a0vnd.\u00a0") == "\u00a0vnd.\u00a0"
