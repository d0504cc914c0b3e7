"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success

from page_renderer.core import (
    DescriptorError,
    ValidationError,
    check_descriptor,
    validate_descriptor,
)


@pytest.mark.unit
@pytest.mark.parametrize("descriptor", [None, {}, {"components": []}, [], [{"type": "text"}]])
def test_check_descriptor_accepts(descriptor):
    """None, objects and lists are accepted."""
    check_descriptor(descriptor)


@pytest.mark.unit
def test_descriptor_error_is_validation_error():
    """DescriptorError can be caught as ValidationError."""
    with pytest.raises(ValidationError):
        check_descriptor("page")


@pytest.mark.unit
def test_validate_descriptor_success():
    """Result variant returns Success for valid shapes."""
    assert validate_descriptor({"components": []}) == Success(None)


@pytest.mark.unit
def test_validate_descriptor_failure():
    """Result variant returns Failure with details."""
    result = validate_descriptor(12)

    assert isinstance(result, Failure)
    error = result.failure()
    assert error.field == "descriptor"
    assert error.value == "int"
    assert "int" in error.message


@given(st.one_of(st.integers(), st.floats(allow_nan=False), st.text(), st.booleans()))
def test_scalars_rejected_property(value):
    """Property test: any scalar descriptor is rejected."""
    with pytest.raises(DescriptorError):
        check_descriptor(value)
