"""INI files made of ``[section]`` headers and ``key = value`` lines."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator

from lightmvc import strutil

__all__ = ["Value", "IniFile"]

_TRIM = " \r\n"


class Value:
    """A configuration value kept as text and converted on demand."""

    __slots__ = ("_text",)

    def __init__(self, value: object = "") -> None:
        if isinstance(value, Value):
            text = value._text
        elif isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, int):
            text = str(value)
        elif isinstance(value, float):
            text = format(value, "g")
        elif isinstance(value, str):
            text = value
        else:
            raise TypeError(f"unsupported value type: {type(value).__name__}")
        self._text = text

    def __bool__(self) -> bool:
        return self._text == "true"

    def __int__(self) -> int:
        return strutil.to_int(self._text)

    def __float__(self) -> float:
        return strutil.to_double(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Value({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)


def _new_section() -> defaultdict[str, Value]:
    return defaultdict(Value)


class IniFile:
    """Sections of keyed :class:`Value` objects, written out in sorted order."""

    def __init__(self, filename: str | None = None) -> None:
        self.filename = ""
        self._sections: dict[str, defaultdict[str, Value]] = {}
        if filename is not None:
            self.load(filename)

    def load(self, filename: str) -> None:
        """Replace the contents with those of ``filename``.

        Raises ``OSError`` when the file cannot be read and ``ValueError`` when
        a key appears before any section; keys read before the error are kept.
        """
        self.filename = filename
        self._sections.clear()
        name = ""
        with open(filename, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.strip(_TRIM)
                if line.startswith("["):
                    end = line.find("]")
                    if end != -1:
                        name = line[1:end].strip(_TRIM)
                        self._sections.setdefault(name, _new_section())
                elif line.startswith("#"):
                    continue
                else:
                    pos = line.find("=")
                    if pos > 0:
                        key = line[:pos].strip(_TRIM)
                        value = line[pos + 1:].strip(_TRIM)
                        if name not in self._sections:
                            raise ValueError(f"parsing error: section={name} key={key}")
                        self._sections[name][key] = Value(value)

    def _lines(self) -> Iterator[str]:
        for name in sorted(self._sections):
            yield f"[{name}]"
            section = self._sections[name]
            for key in sorted(section):
                yield f"{key} = {section[key]}"
            yield ""

    def save(self, filename: str) -> None:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in self._lines())

    def show(self) -> None:
        for line in self._lines():
            print(line)

    def clear(self) -> None:
        self._sections.clear()

    def get(self, section: str, key: str) -> Value:
        """Return the value, creating an empty one when it is missing."""
        return self[section][key]

    def set(self, section: str, key: str, value: object) -> None:
        self[section][key] = Value(value)

    def has(self, section: str, key: str | None = None) -> bool:
        entries = self._sections.get(section)
        if entries is None:
            return False
        return key is None or key in entries

    def remove(self, section: str, key: str | None = None) -> None:
        if key is None:
            self._sections.pop(section, None)
        elif section in self._sections:
            self._sections[section].pop(key, None)

    def __getitem__(self, section: str) -> defaultdict[str, Value]:
        """Return the section, creating it when missing; missing keys read as empty values."""
        return self._sections.setdefault(section, _new_section())