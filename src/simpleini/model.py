# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically flat INI structure: a document of named sections,
each section a dict of `str: str` pairs.

No nesting, no inheritance, no multi-valued keys.
"""

from collections.abc import Callable, Iterator, Mapping, MutableMapping
from re import compile as regex
from typing import Any, TypeVar

from .exceptions import ConversionFailed, KeyNotFound, SectionNotFound

T = TypeVar('T')

_INT = regex(r'[+-]?\d+')
_FLOAT = regex(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


def _to_int(value: str) -> int:
    if _INT.fullmatch(value) is None:
        raise ConversionFailed(value, int)
    return int(value)


def _to_float(value: str) -> float:
    if _FLOAT.fullmatch(value) is None:
        raise ConversionFailed(value, float)
    return float(value)


def _to_bool(value: str) -> bool:
    if (low := value.lower()) in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ConversionFailed(value, bool)


# the whole (space trimmed) value must match, otherwise it fails.
CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
}


def convert(value: str, target: type[T]) -> T:
    """Parse a raw INI value as `target` (one of `CONVERTERS`)."""
    try:
        conv = CONVERTERS[target]
    except KeyError:
        raise TypeError(
            f'Unsupported target type: {target!r}, '
            f'expecting one of {[t.__name__ for t in CONVERTERS]}') from None
    return conv(value.strip(' '))


def _str_pairs(pairs: Mapping[str, str]) -> dict[str, str]:
    # runtime won't stop `{'n': 3}`, store what would be written anyway.
    return {str(k): str(v) for k, v in pairs.items()}


class IniSection(MutableMapping[str, str]):
    """INI 小节字典, i.e. pairs under a `[name]` header.

    Missing keys raise `KeyNotFound` (a `KeyError`), naming both the key
    and this section.
    """

    def __init__(
        self, name: str, pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self._data: dict[str, str] = _str_pairs(pairs) if pairs else {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def empty(self) -> bool:
        """`True` if the section holds no pair at all."""
        return not self._data

    def __getitem__(self, key: str) -> str:
        if key not in self._data:
            raise KeyNotFound(self._name, key)
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[str(key)] = str(value)

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise KeyNotFound(self._name, key)
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def get_as(self, key: str, target: type[T] = str) -> T:
        """Get the value of `key` as `target`.

        Raises:
            KeyNotFound: no such key.
            ConversionFailed: value is not a *whole* `int`/`float`/`bool`.
            TypeError: `target` not supported.
        """
        return convert(self[key], target)

    def getint(self, key: str) -> int:
        return self.get_as(key, int)

    def getfloat(self, key: str) -> float:
        return self.get_as(key, float)

    def getbool(self, key: str) -> bool:
        return self.get_as(key, bool)

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。A group of sections, looked up by name.

    Sections handed out are *copies*; to change one, put it back:

        ```python
        sect = doc['abc']
        sect['val'] = '1'
        doc['abc'] = sect  # or doc.add_section('abc', sect)
        ```
    """

    def __init__(self) -> None:
        self.__raw: dict[str, dict[str, str]] = {}

    def __getitem__(self, section: str) -> IniSection:
        if section not in self.__raw:
            raise SectionNotFound(section)
        return IniSection(section, self.__raw[section])

    def __setitem__(
        self, section: str, pairs: IniSection | Mapping[str, str]
    ) -> None:
        if not section:
            raise ValueError('Section name should not be empty.')
        # shouldn't keep ptr to external dict.
        self.__raw[section] = _str_pairs(pairs)

    def __delitem__(self, section: str) -> None:
        if section not in self.__raw:
            raise SectionNotFound(section)
        del self.__raw[section]

    def __contains__(self, section: object) -> bool:
        return section in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} sections={list(self.__raw)}>'

    def add_section(
        self, section: str, pairs: IniSection | Mapping[str, str]
    ) -> None:
        """Insert `section`, replacing (not merging) an existing one."""
        self[section] = pairs

    def get_as(self, section: str, key: str, target: type[T] = str) -> T:
        return self[section].get_as(key, target)

    def replace(self, sections: Mapping[str, Mapping[str, str]]) -> None:
        """Drop all sections, then take `sections` instead."""
        self.__raw.clear()
        for name, pairs in sections.items():
            self[name] = pairs

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.copy() for k, v in self.__raw.items()}
