"""
Declarative request validation.

Every operation describes its parameters with a ``RequestSchema``
subclass: ``required_params`` and ``missing_message`` drive the
presence check, and per-field ``mode="before"`` validators apply the
type, range and format rules in declaration order.  ``parse_params``
runs a schema over raw query or body parameters and reports only the
first violated rule, before any database access happens.
"""

import re
from typing import Any, ClassVar, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError, model_validator
from pydantic_core import PydanticCustomError

from .errors import InvalidParameterError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# SQLite stores INTEGER as a signed 64-bit value.
MAX_SQL_INTEGER = 2**63 - 1

SchemaT = TypeVar("SchemaT", bound="RequestSchema")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def to_int(value: Any) -> Optional[int]:
    """Interpret a query string or JSON value as an integer.

    Returns ``None`` for anything that is not a whole number.  Booleans
    are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)
    return None


def positive_int(value: Any, param: str) -> int:
    number = to_int(value)
    if number is None or not 0 < number <= MAX_SQL_INTEGER:
        raise PydanticCustomError(
            "positive_int",
            "The {param} parameter must be a positive integer",
            {"param": param},
        )
    return number


def int_in_range(value: Any, param: str, low: int, high: int) -> int:
    number = to_int(value)
    if number is None or not low <= number <= high:
        raise PydanticCustomError(
            "int_range",
            "The {param} parameter must be an integer between {low} and {high}",
            {"param": param, "low": low, "high": high},
        )
    return number


class RequestSchema(BaseModel):
    """Base class for operation parameter schemas."""

    # Each entry is a parameter name or a tuple of accepted spellings.
    required_params: ClassVar[Tuple[Union[str, Tuple[str, ...]], ...]] = ()
    missing_message: ClassVar[str] = "Missing required parameters"

    @model_validator(mode="before")
    @classmethod
    def check_presence(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise PydanticCustomError("invalid_params", "Parameters must be a JSON object")
        for names in cls.required_params:
            if isinstance(names, str):
                names = (names,)
            if all(is_blank(data.get(name)) for name in names):
                raise PydanticCustomError("missing_params", cls.missing_message)
        return data


def parse_params(schema: Type[SchemaT], raw: Optional[Mapping[str, Any]]) -> SchemaT:
    """Validate ``raw`` against ``schema`` and return the parsed model.

    Raises ``InvalidParameterError`` carrying the message of the first
    violated rule.
    """
    try:
        return schema.model_validate(dict(raw) if raw is not None else {})
    except ValidationError as exc:
        first = exc.errors()[0]
        raise InvalidParameterError(first["msg"]) from None
