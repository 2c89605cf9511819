"""Tests for wren.errors — exception hierarchy and error messages."""

from wren.errors import InvalidArgument, ModificationError, WrenError
from wren.preprocess.modifications import Remove, RemoveValue


class TestHierarchy:
    def test_invalid_argument_is_wren_error(self) -> None:
        assert issubclass(InvalidArgument, WrenError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgument, ValueError)

    def test_modification_error_is_wren_error(self) -> None:
        assert issubclass(ModificationError, WrenError)


class TestModificationError:
    def test_carries_modification(self) -> None:
        err = ModificationError(Remove("a"), "no entry named 'a'")
        assert err.modification == Remove("a")
        assert err.detail == "no entry named 'a'"

    def test_str(self) -> None:
        err = ModificationError(RemoveValue("a", "x"), "missing")
        assert str(err) == "remove 'a'='x': missing"
