"""Unit tests for the exception hierarchy."""

import copy
import json
import pickle

import pytest

from mediatype import (
    InvalidArgumentError,
    MediaTypeError,
    MediaTypeSyntaxError,
    NullArgumentError,
)


class TestMediaTypeSyntaxError:
    """Test syntax error construction and reporting."""

    def test_defaults_to_unknown_index(self):
        err = MediaTypeSyntaxError("a/b+c+d", "Too many suffixes provided")
        assert err.input == "a/b+c+d"
        assert err.reason == "Too many suffixes provided"
        assert err.index == -1
        assert str(err) == "Too many suffixes provided: a/b+c+d"

    def test_with_index(self):
        err = MediaTypeSyntaxError("application", "Invalid Syntax", 0)
        assert err.index == 0
        assert str(err) == "Invalid Syntax at index 0: application"

    def test_index_may_equal_input_length(self):
        err = MediaTypeSyntaxError("abc", "reason", 3)
        assert err.index == 3

    @pytest.mark.parametrize("index", [-2, 4])
    def test_index_out_of_range(self, index):
        with pytest.raises(InvalidArgumentError) as exc_info:
            MediaTypeSyntaxError("abc", "reason", index)
        assert not isinstance(exc_info.value, MediaTypeSyntaxError)

    def test_null_input_or_reason(self):
        with pytest.raises(NullArgumentError):
            MediaTypeSyntaxError(None, "reason")
        with pytest.raises(NullArgumentError):
            MediaTypeSyntaxError("abc", None)

    def test_is_value_error(self):
        err = MediaTypeSyntaxError("x", "Invalid Syntax", 0)
        assert isinstance(err, ValueError)
        assert isinstance(err, MediaTypeError)

    def test_to_dict_and_json(self):
        err = MediaTypeSyntaxError("application", "Invalid Syntax", 0)
        data = err.to_dict()
        assert data == {
            "error": "SYNTAX_ERROR",
            "message": "Invalid Syntax",
            "details": {"input": "application", "index": 0},
        }
        assert json.loads(err.to_json()) == data


def test_contract_violation_codes():
    assert NullArgumentError("name").code == "NULL_ARGUMENT"
    assert NullArgumentError("name").message == "name cannot be None"
    assert isinstance(NullArgumentError("name"), TypeError)
    err = InvalidArgumentError("blank", argument="name")
    assert err.code == "INVALID_ARGUMENT"
    assert err.details == {"argument": "name"}


class TestPickling:
    """Test errors survive pickling and copying."""

    def test_syntax_error(self):
        err = MediaTypeSyntaxError("a/b+c+d", "Too many suffixes provided")
        restored = pickle.loads(pickle.dumps(err))
        assert isinstance(restored, MediaTypeSyntaxError)
        assert restored.input == "a/b+c+d"
        assert restored.reason == "Too many suffixes provided"
        assert restored.index == -1
        assert str(restored) == str(err)

    def test_syntax_error_with_index(self):
        restored = copy.copy(MediaTypeSyntaxError("application", "Invalid Syntax", 0))
        assert restored.index == 0
        assert restored.to_dict()["details"] == {"input": "application", "index": 0}

    def test_contract_violations(self):
        restored = pickle.loads(pickle.dumps(NullArgumentError("name")))
        assert restored.argument == "name"
        assert restored.code == "NULL_ARGUMENT"
        restored = pickle.loads(
            pickle.dumps(InvalidArgumentError("blank", argument="name"))
        )
        assert restored.message == "blank"
        assert restored.argument == "name"

    def test_base_error_keeps_code_and_details(self):
        err = MediaTypeError("boom", code="CUSTOM", details={"k": "v"})
        restored = pickle.loads(pickle.dumps(err))
        assert restored.to_dict() == err.to_dict()
