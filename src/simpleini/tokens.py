# -*- encoding: utf-8 -*-
# @File   : tokens.py
# @Time   : 2024/10/12 21:33:08
# @Author : Kariko Lin

"""Line level grammar of an INI text.

```ini
; comment       <- not meaningful
# comment       <- not meaningful
[section] # ... <- header, anything after `]` is ignored
key = value     <- pair, split at the FIRST `=`
```

Only plain spaces (U+0020) count as padding here.
Tabs are kept as is, so `key\\t= 1` gives the key `'key\\t'`.
"""

COMMENT_MARKS = (';', '#')
SECTION_OPEN = '['
SECTION_CLOSE = ']'
PAIRING = '='


def trim(token: str) -> str:
    """Strip leading and trailing spaces, never tabs."""
    return token.strip(' ')


def is_meaningful(line: str) -> bool:
    """Blank, space-only and commented lines are not."""
    if not line or line.startswith(COMMENT_MARKS):
        return False
    return bool(trim(line))


def is_section_header(line: str) -> bool:
    return line.startswith(SECTION_OPEN)


def is_pair(line: str) -> bool:
    return PAIRING in line


def extract_section_name(line: str) -> str:
    """`'[abc] # hello'` -> `'abc'`.

    Caller should make sure the line starts with `[`.
    Raises `ValueError` if there's no closing `]`.
    """
    end = line.index(SECTION_CLOSE, 1)
    return line[1:end]


def split_key_value(line: str) -> tuple[str, str]:
    """`' with space =    123 '` -> `('with space', '123')`."""
    key, _, value = line.partition(PAIRING)
    return trim(key), trim(value)
