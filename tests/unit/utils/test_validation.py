from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from clientstate.utils import first_error_location, format_validation_error


class _Nested(BaseModel):
    size: int


class _Outer(BaseModel):
    nested: _Nested


def _validation_error(data: object) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        _Outer.model_validate(data)
    return exc_info.value


def test_format_validation_error_uses_first_message() -> None:
    error = _validation_error({"nested": {"size": "big"}})

    message = format_validation_error("yaml", error)

    assert message.startswith("Invalid yaml: ")
    assert "integer" in message


def test_first_error_location_joins_nested_path() -> None:
    error = _validation_error({"nested": {"size": "big"}})

    assert first_error_location(error) == "nested.size"


def test_first_error_location_for_root_error() -> None:
    error = _validation_error(["not", "a", "mapping"])

    assert first_error_location(error) is None
