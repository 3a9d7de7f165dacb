"""Domain helpers for the person record and its integer keys."""
from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from people_api.domain.errors import DecodeError, InvalidKey

KEY_PATTERN = re.compile(r"[+-]?[0-9]+")
KEY_MIN = -(2**63)
KEY_MAX = 2**63 - 1


class Person(BaseModel):
    """A stored person. JSON names are camelCase; missing fields take zero values.

    Python code may build it by field name; external JSON is read by alias only.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    first_name: str = Field("", alias="firstName")
    second_name: str = Field("", alias="secondName")
    age: int = 0

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def parse_key(value: str | None) -> int:
    """Parse a decimal integer key ("+7", "-3" and "007" are accepted)."""
    if value is None or not KEY_PATTERN.fullmatch(value):
        raise InvalidKey(f"invalid key {value!r}")
    key = int(value)
    if key < KEY_MIN or key > KEY_MAX:
        raise InvalidKey(f"key {value!r} out of range")
    return key


def person_from_json(raw: bytes | str) -> Person:
    """Decode a request body into a Person."""
    try:
        return Person.model_validate_json(raw, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise DecodeError(f"invalid person body: {exc.error_count()} error(s)") from exc


def person_from_dict(data: object) -> Person:
    """Decode a persisted record into a Person."""
    if not isinstance(data, dict):
        raise DecodeError("person record must be a JSON object")
    try:
        return Person.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise DecodeError(f"invalid person record: {exc.error_count()} error(s)") from exc
