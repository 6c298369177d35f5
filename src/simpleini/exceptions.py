# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2024/10/12 21:50:41
# @Author : Kariko Lin

"""Everything raised by this package derives from `IniError`.

`fatal` tells whether the INI itself (or the file behind it) is broken.
Missing names and bad conversions are not; catch them as you like.
"""


class IniError(Exception):
    fatal = False


class SourceUnavailable(IniError, OSError):
    """The file to read is missing or not readable."""
    fatal = True

    def __init__(self, path: str, reason: str = 'not found') -> None:
        super().__init__(f'Cannot read INI file "{path}": {reason}')
        self.path = path


class DestinationUnavailable(IniError, OSError):
    fatal = True

    def __init__(self, path: str | None, reason: str = 'not writable') -> None:
        super().__init__(f'Cannot write INI file "{path}": {reason}')
        self.path = path


class MalformedDocument(IniError, ValueError):
    """A meaningful line being neither `[section]` nor `key = value`."""
    fatal = True

    def __init__(
        self, line: str, lineno: int | None = None, reason: str | None = None
    ) -> None:
        msg = f'Failure when parsing line {line!r}'
        if lineno is not None:
            msg += f' (line {lineno})'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)
        self.line = line
        self.lineno = lineno


class NotFound(IniError, KeyError):
    # KeyError would repr() a single arg, keep the message readable.
    def __str__(self) -> str:
        return str(self.args[0])


class SectionNotFound(NotFound):
    def __init__(self, section: str) -> None:
        super().__init__(f"No section '{section}'")
        self.section = section


class KeyNotFound(NotFound):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f"No key '{key}' in section '{section}'")
        self.section = section
        self.key = key


class ConversionFailed(IniError, ValueError):
    def __init__(self, value: str, target: type) -> None:
        super().__init__(
            f"Conversion failed from value '{value}' to {target.__name__}")
        self.value = value
        self.target = target
