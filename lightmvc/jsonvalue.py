"""A small mutable JSON value type and a matching text parser."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any

__all__ = ["JsonError", "JsonType", "Json", "JsonParser", "loads"]

_WHITESPACE = " \r\n\t"


class JsonError(ValueError):
    """Raised on type mismatches, bad indexes and malformed JSON text."""


class JsonType(enum.IntEnum):
    NULL = 0
    BOOL = 1
    INT = 2
    DOUBLE = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


def _default_for(kind: JsonType) -> Any:
    return {
        JsonType.NULL: None,
        JsonType.BOOL: False,
        JsonType.INT: 0,
        JsonType.DOUBLE: 0.0,
        JsonType.STRING: "",
        JsonType.ARRAY: [],
        JsonType.OBJECT: {},
    }[kind]


class Json:
    """A JSON value of one of the kinds in :class:`JsonType`.

    Copies made from another ``Json`` share its array or object container,
    and two arrays or objects compare equal only when they share one.
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = None) -> None:
        self._type = JsonType.NULL
        self._value: Any = None
        if isinstance(value, Json):
            self._assign(value)
        elif isinstance(value, JsonType):
            self._type, self._value = value, _default_for(value)
        elif value is None:
            pass
        elif isinstance(value, bool):
            self._type, self._value = JsonType.BOOL, value
        elif isinstance(value, int):
            self._type, self._value = JsonType.INT, value
        elif isinstance(value, float):
            self._type, self._value = JsonType.DOUBLE, value
        elif isinstance(value, str):
            self._type, self._value = JsonType.STRING, value
        elif isinstance(value, (list, tuple)):
            self._type, self._value = JsonType.ARRAY, [Json(item) for item in value]
        elif isinstance(value, dict):
            converted = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"object keys must be str, not {type(key).__name__}")
                converted[key] = Json(item)
            self._type, self._value = JsonType.OBJECT, converted
        else:
            raise TypeError(f"cannot build a Json value from {type(value).__name__}")

    def _assign(self, other: Json) -> None:
        self._type = other._type
        self._value = other._value

    @property
    def type(self) -> JsonType:
        return self._type

    def is_null(self) -> bool:
        return self._type is JsonType.NULL

    def is_bool(self) -> bool:
        return self._type is JsonType.BOOL

    def is_int(self) -> bool:
        return self._type is JsonType.INT

    def is_double(self) -> bool:
        return self._type is JsonType.DOUBLE

    def is_string(self) -> bool:
        return self._type is JsonType.STRING

    def is_array(self) -> bool:
        return self._type is JsonType.ARRAY

    def is_object(self) -> bool:
        return self._type is JsonType.OBJECT

    def _expect(self, kind: JsonType, name: str) -> Any:
        if self._type is not kind:
            raise JsonError(f"Json.{name}: value type error")
        return self._value

    def as_bool(self) -> bool:
        return self._expect(JsonType.BOOL, "as_bool")

    def as_int(self) -> int:
        return self._expect(JsonType.INT, "as_int")

    def as_double(self) -> float:
        return self._expect(JsonType.DOUBLE, "as_double")

    def as_string(self) -> str:
        return self._expect(JsonType.STRING, "as_string")

    def __len__(self) -> int:
        if self._type in (JsonType.ARRAY, JsonType.OBJECT):
            return len(self._value)
        raise JsonError("Json size: value type error")

    def __bool__(self) -> bool:
        return not self.empty()

    def empty(self) -> bool:
        """True for null and for an empty array or object."""
        if self._type is JsonType.NULL:
            return True
        if self._type in (JsonType.ARRAY, JsonType.OBJECT):
            return not self._value
        return False

    def clear(self) -> None:
        self._type = JsonType.NULL
        self._value = None

    def has(self, key: int | str) -> bool:
        if isinstance(key, int):
            return self._type is JsonType.ARRAY and 0 <= key < len(self._value)
        if isinstance(key, str):
            return self._type is JsonType.OBJECT and key in self._value
        raise TypeError(f"key must be int or str, not {type(key).__name__}")

    def get(self, key: int | str) -> Json:
        """Return a copy of the member at ``key``, or null when absent."""
        if not self.has(key):
            return Json()
        return Json(self._value[key])

    def remove(self, key: int | str) -> None:
        if self.has(key):
            del self._value[key]

    def append(self, value: Any) -> None:
        """Append to the array, turning a non-array value into an empty array first."""
        if self._type is not JsonType.ARRAY:
            self._type, self._value = JsonType.ARRAY, []
        self._value.append(Json(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Json):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type in (JsonType.ARRAY, JsonType.OBJECT):
            return self._value is other._value
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: int | str) -> Json:
        if isinstance(key, int):
            if key < 0:
                raise JsonError("index less than 0")
            if self._type is not JsonType.ARRAY:
                raise JsonError("not an array")
            if key >= len(self._value):
                raise JsonError("index out of range")
            return self._value[key]
        if isinstance(key, str):
            if self._type is not JsonType.OBJECT:
                self._type, self._value = JsonType.OBJECT, {}
            return self._value.setdefault(key, Json())
        raise TypeError(f"key must be int or str, not {type(key).__name__}")

    def __setitem__(self, key: int | str, value: Any) -> None:
        self[key]._assign(Json(value))

    def __iter__(self) -> Iterator[Json]:
        if self._type is not JsonType.ARRAY:
            raise JsonError("not an array")
        return iter(self._value)

    def parse(self, text: str) -> None:
        """Replace this value with the one parsed from ``text``."""
        self._assign(JsonParser(text).parse())

    def __str__(self) -> str:
        kind = self._type
        if kind is JsonType.NULL:
            return "null"
        if kind is JsonType.BOOL:
            return "true" if self._value else "false"
        if kind is JsonType.INT:
            return str(self._value)
        if kind is JsonType.DOUBLE:
            return format(self._value, "g")
        if kind is JsonType.STRING:
            return f'"{self._value}"'
        if kind is JsonType.ARRAY:
            return "[" + ",".join(str(item) for item in self._value) + "]"
        members = (f'"{key}":{self._value[key]}' for key in sorted(self._value))
        return "{" + ",".join(members) + "}"

    def __repr__(self) -> str:
        return f"Json({self})"


class JsonParser:
    """Recursive-descent parser producing :class:`Json` values.

    String contents are kept as written, escapes included; numbers have no
    exponent part, and text after the first complete value is ignored.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._idx = 0

    def _peek(self) -> str:
        return self._text[self._idx] if self._idx < len(self._text) else ""

    def _skip_whitespace(self) -> None:
        while self._idx < len(self._text) and self._text[self._idx] in _WHITESPACE:
            self._idx += 1

    def _next_token(self) -> str:
        self._skip_whitespace()
        if self._idx >= len(self._text):
            raise JsonError("unexpected end of input")
        ch = self._text[self._idx]
        self._idx += 1
        return ch

    def parse(self) -> Json:
        ch = self._next_token()
        if ch == "n":
            self._idx -= 1
            return self._parse_literal("null", Json(), "parse null error")
        if ch in "tf":
            self._idx -= 1
            if self._text.startswith("true", self._idx):
                return self._parse_literal("true", Json(True), "parse bool error")
            return self._parse_literal("false", Json(False), "parse bool error")
        if ch == "-" or "0" <= ch <= "9":
            self._idx -= 1
            return self._parse_number()
        if ch == '"':
            return Json(self._parse_string())
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_object()
        raise JsonError("unexpected character in parse json")

    def _parse_literal(self, word: str, result: Json, message: str) -> Json:
        if not self._text.startswith(word, self._idx):
            raise JsonError(message)
        self._idx += len(word)
        return result

    def _skip_digits(self) -> None:
        while "0" <= self._peek() <= "9":
            self._idx += 1

    def _parse_number(self) -> Json:
        start = self._idx
        if self._peek() == "-":
            self._idx += 1
        ch = self._peek()
        if ch == "0":
            self._idx += 1
        elif "1" <= ch <= "9":
            self._skip_digits()
        else:
            raise JsonError("invalid character in number")

        if self._peek() != ".":
            return Json(int(self._text[start:self._idx]))

        self._idx += 1
        if not "0" <= self._peek() <= "9":
            raise JsonError("at least one digit required in fractional part")
        self._skip_digits()
        return Json(float(self._text[start:self._idx]))

    def _parse_string(self) -> str:
        start = self._idx
        while True:
            if self._idx >= len(self._text):
                raise JsonError("unexpected end of input in string")
            ch = self._text[self._idx]
            self._idx += 1
            if ch == '"':
                break
            if ch == "\\":
                if self._idx >= len(self._text):
                    raise JsonError("unexpected end of input in string")
                escaped = self._text[self._idx]
                self._idx += 1
                if escaped == "u":
                    self._idx += 4
        return self._text[start:self._idx - 1]

    def _parse_array(self) -> Json:
        array = Json(JsonType.ARRAY)
        if self._next_token() == "]":
            return array
        self._idx -= 1
        while True:
            array.append(self.parse())
            ch = self._next_token()
            if ch == "]":
                return array
            if ch != ",":
                raise JsonError("expected ',' in array")

    def _parse_object(self) -> Json:
        obj = Json(JsonType.OBJECT)
        if self._next_token() == "}":
            return obj
        self._idx -= 1
        while True:
            if self._next_token() != '"':
                raise JsonError("expected '\"' in object")
            key = self._parse_string()
            if self._next_token() != ":":
                raise JsonError("expected ':' in object")
            obj[key] = self.parse()
            ch = self._next_token()
            if ch == "}":
                return obj
            if ch != ",":
                raise JsonError("expected ',' in object")


def loads(text: str) -> Json:
    """Parse ``text`` into a :class:`Json` value."""
    return JsonParser(text).parse()