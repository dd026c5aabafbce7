"""Encoding and decoding of section files."""

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok, Result, is_err

from clientstate.utils.validation import first_error_location, format_validation_error


class SectionFormat(str, Enum):
    """On-disk formats a section can be stored in."""

    YAML = "yaml"
    JSON = "json"


class CodecFailure(BaseModel):
    """Why a payload could not be decoded or encoded."""

    model_config = ConfigDict(extra="forbid")

    message: str
    line: int | None = None
    column: int | None = None
    field: str | None = None


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _is_model(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, BaseModel)


def decode(fmt: SectionFormat, raw: bytes, target: Any) -> Result[Any, CodecFailure]:
    """Decode ``raw`` into a fresh value of ``target``."""
    match fmt:
        case SectionFormat.YAML:
            parsed = _parse_yaml(raw)
        case SectionFormat.JSON:
            parsed = _parse_json(raw)
        case _:
            raise ValueError(f"Unexpected format: {fmt}")

    if is_err(parsed):
        return parsed

    data = parsed.ok_value
    # An empty document means "all defaults" for keyed sections
    if data is None and _is_model(target):
        data = {}

    try:
        return Ok(_adapter(target).validate_python(data))
    except ValidationError as exc:
        return Err(
            CodecFailure(
                message=format_validation_error(fmt.value, exc),
                field=first_error_location(exc),
            )
        )


def encode(fmt: SectionFormat, value: object, target: Any) -> Result[bytes, CodecFailure]:
    """Serialize ``value`` (an instance of ``target``) to bytes."""
    try:
        data = _adapter(target).dump_python(value, mode="json", by_alias=True)
        match fmt:
            case SectionFormat.YAML:
                text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
            case SectionFormat.JSON:
                text = json.dumps(data, indent=2)
            case _:
                raise ValueError(f"Unexpected format: {fmt}")
    except (PydanticSerializationError, yaml.YAMLError, TypeError) as exc:
        return Err(CodecFailure(message=str(exc)))

    return Ok(text.encode("utf-8"))


def _parse_yaml(raw: bytes) -> Result[object, CodecFailure]:
    try:
        return Ok(yaml.safe_load(raw.decode("utf-8")))
    except UnicodeDecodeError as exc:
        return Err(CodecFailure(message=f"Invalid UTF-8: {exc}"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            CodecFailure(
                message=str(exc),
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
            )
        )


def _parse_json(raw: bytes) -> Result[object, CodecFailure]:
    try:
        return Ok(json.loads(raw))
    except json.JSONDecodeError as exc:
        return Err(CodecFailure(message=exc.msg, line=exc.lineno, column=exc.colno))
    except UnicodeDecodeError as exc:
        return Err(CodecFailure(message=f"Invalid UTF-8: {exc}"))
