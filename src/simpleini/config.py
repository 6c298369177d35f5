# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/10/13 15:02:27
# @Author : Kariko Lin

"""A configuration file bound to its path.

    ```python
    ini = SimpleIni('./test.ini')
    ini['abc']['val1']          # -> str, or KeyNotFound
    ini.get_as('abc', 'val2', int)
    ini.add_section('test', {'abc': '123'})
    ini.write()
    ```

Not thread safe. Don't rebind or write while others are reading.
"""

import logging
from os import PathLike, fspath

from .exceptions import DestinationUnavailable
from .model import IniDocument
from .parser import DEFAULT_DELIMITER, IniParser

logger = logging.getLogger(__name__)


class SimpleIni(IniDocument):
    def __init__(
        self, path: str | PathLike[str] | None = None, *,
        encoding: str | None = None
    ) -> None:
        """Read `path` at once if given, otherwise stay empty and unbound.

        Raises `SourceUnavailable` or `MalformedDocument` on reading.
        """
        super().__init__()
        self._path: str | None = None
        self._codec = encoding
        if path is not None:
            self.set_config_file(path)

    @property
    def config_path(self) -> str | None:
        return self._path

    @property
    def encoding(self) -> str | None:
        return self._codec

    def set_config_file(
        self, path: str | PathLike[str], read: bool = True
    ) -> None:
        """Bind to `path`, replacing all sections with its content.

        With `read=False`, only remember the path (e.g. to `write()` a new
        file). On failure both sections and path are left untouched.
        """
        path = fspath(path)
        if read:
            # sections stay as they are if reading fails.
            IniParser(path, self._codec).read(self)
        self._path = path
        logger.debug('Bound to "%s" (read=%s).', path, read)

    def write(
        self, *,
        delimiter: str = DEFAULT_DELIMITER,
        blank_lines: int = 1
    ) -> None:
        """Save all sections to the bound path."""
        if self._path is None:
            raise DestinationUnavailable(None, 'no file bound')
        IniParser(self._path, self._codec).write(
            self, delimiter=delimiter, blank_lines=blank_lines)

    def __str__(self) -> str:
        return f'{self._path or "<unbound>"}: {len(self)} section(s)'
