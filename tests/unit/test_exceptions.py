"""Unit tests for domain exceptions."""

import pytest

from permstore.domain.exceptions import (
    NestedAccessDenied,
    PathNotFound,
    PermissionDenied,
    StoreError,
    TypeMismatch,
)


@pytest.mark.parametrize("error_type", [PermissionDenied, PathNotFound, TypeMismatch, NestedAccessDenied])
def test_errors_inherit_store_error(error_type: type) -> None:
    """Every store failure is catchable as StoreError."""
    assert issubclass(error_type, StoreError)


def test_permission_denied_carries_key_and_operation() -> None:
    exc = PermissionDenied("secret", "read")
    assert exc.key == "secret"
    assert exc.operation == "read"
    assert "secret" in str(exc)


def test_path_not_found_names_segment() -> None:
    """PathNotFound message names the missing segment."""
    with pytest.raises(StoreError, match="'city' does not exist"):
        raise PathNotFound("city")


def test_type_mismatch_names_key() -> None:
    assert TypeMismatch("count").key == "count"


def test_nested_access_denied_carries_path() -> None:
    exc = NestedAccessDenied("name:first", "write")
    assert exc.path == "name:first"
    assert "write nested keys" in str(exc)
