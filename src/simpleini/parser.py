# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Reading and writing of flat INI texts.

A single forward pass over the lines, keeping track of the section
currently open:

    ```ini
    dropped = value  ; pairs before the first header go nowhere
    [abc]
    val1 = hello     ; goes into [abc]
    [abc]            ; a second [abc] replaces the first one
    whatever         ; neither header nor pair -> MalformedDocument
    ```
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from io import StringIO
from os import PathLike
from os.path import isfile
from warnings import warn

import chardet

from .abstract import FileHandler
from .exceptions import (
    DestinationUnavailable,
    MalformedDocument,
    SourceUnavailable,
)
from .model import IniDocument
from .tokens import (
    COMMENT_MARKS,
    PAIRING,
    SECTION_CLOSE,
    SECTION_OPEN,
    extract_section_name,
    is_meaningful,
    is_pair,
    is_section_header,
    split_key_value,
    trim,
)

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ' = '


def parse_lines(lines: Iterable[str]) -> dict[str, dict[str, str]]:
    """Fold raw lines into `{section: {key: value}}`.

    Line endings are tolerated. Raises `MalformedDocument` on the first
    line which is neither a header nor a pair; nothing is returned then.
    """
    sections: dict[str, dict[str, str]] = {}
    # (name, pairs) of the open section, None before the first header.
    current: tuple[str, dict[str, str]] | None = None

    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip('\r\n')
        if not is_meaningful(line):
            continue
        if is_section_header(line):
            if current is not None:
                sections[current[0]] = current[1]
            try:
                name = extract_section_name(line)
            except ValueError:
                raise MalformedDocument(
                    line, lineno, f'missing "{SECTION_CLOSE}"') from None
            if not name:
                raise MalformedDocument(line, lineno, 'empty section name')
            current = name, {}
        elif is_pair(line):
            key, value = split_key_value(line)
            if current is None:
                warn(f'Pair "{key}" (line {lineno}) '
                     'does not belong to any section, dropped.')
                continue
            current[1][key] = value
        else:
            raise MalformedDocument(line, lineno)

    if current is not None:
        sections[current[0]] = current[1]
    return sections


def _lossy_token(token: str) -> bool:
    return token != token.strip(' ')


def format_lines(
    sections: Mapping[str, Mapping[str, str]], *,
    delimiter: str = DEFAULT_DELIMITER,
    blank_lines: int = 1
) -> Iterator[str]:
    """Yield INI lines (no line ending) for `sections`, in their order.

    Warns about tokens which won't read back the same. A `delimiter`
    other than `=` padded with spaces raises `ValueError`.
    """
    if trim(delimiter) != PAIRING:
        raise ValueError(
            f'Delimiter {delimiter!r} would not read back, '
            f'expecting "{PAIRING}" with optional spaces.')
    first = True
    for name, pairs in sections.items():
        if not first:
            yield from [''] * blank_lines
        first = False
        if SECTION_CLOSE in name or '\n' in name:
            warn(f'Section name {name!r} contains "{SECTION_CLOSE}" '
                 'or a line break, it would be cut when read back.')
        yield f'{SECTION_OPEN}{name}{SECTION_CLOSE}'
        for key, value in pairs.items():
            if (PAIRING in key or '\n' in key + value
                    or _lossy_token(key) or _lossy_token(value)
                    or key.startswith((SECTION_OPEN, *COMMENT_MARKS))):
                warn(f'[{name}] "{key}" = "{value}" '
                     'may not be read back the same.')
            yield f'{key}{delimiter}{value}'


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, rootfile: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(rootfile)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def readstream(
        buf: Iterable[str], ins: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流, e.g. an opened text file or `StringIO`.

        With `ins` given, its sections are replaced *only if* parsing
        succeeds.
        """
        sections = parse_lines(buf)
        if ins is None:
            ins = IniDocument()
        ins.replace(sections)
        logger.debug('Parsed %d section(s).', len(sections))
        return ins

    @staticmethod
    def loads(text: str) -> IniDocument:
        return IniParser.readstream(StringIO(text))

    def _decode_file(self) -> StringIO:
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise SourceUnavailable(self._fn, e.strerror or str(e)) from e

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logger.debug('Decoding "%s" as %s.', self._fn, codec['encoding'])

        try:
            return StringIO(raw.decode(codec['encoding']))
        except (UnicodeDecodeError, LookupError) as e:
            raise SourceUnavailable(self._fn, f'undecodable, {e}') from e

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        `ins`, if given, is filled (see `readstream()`) instead of a new one.

        Raises:
            SourceUnavailable: file missing, unreadable or undecodable.
            MalformedDocument: see `parse_lines()`.
        """
        if not isfile(self._fn):
            raise SourceUnavailable(self._fn)
        try:
            # same codec as `write()`, utf-8 when not given.
            # and when encoding got wrong, fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
                return self.readstream(fp, ins)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(), ins)
        except OSError as e:
            raise SourceUnavailable(self._fn, e.strerror or str(e)) from e

    @staticmethod
    def dumps(
        instance: Mapping[str, Mapping[str, str]], *,
        delimiter: str = DEFAULT_DELIMITER,
        blank_lines: int = 1
    ) -> str:
        return ''.join(
            f'{i}\n' for i in format_lines(
                instance, delimiter=delimiter, blank_lines=blank_lines))

    def write(
        self, instance: Mapping[str, Mapping[str, str]], *,
        delimiter: str = DEFAULT_DELIMITER,
        blank_lines: int = 1
    ) -> None:
        """保存到 INI 文件, creating or truncating it.

        Comments of the original file are NOT kept.
        """
        text = self.dumps(
            instance, delimiter=delimiter, blank_lines=blank_lines)
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                fp.write(text)
        except OSError as e:
            raise DestinationUnavailable(self._fn, e.strerror or str(e)) from e
        logger.debug('Wrote %d section(s) to "%s".', len(instance), self._fn)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'
