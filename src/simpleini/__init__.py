# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

import logging

from .config import SimpleIni
from .exceptions import (
    ConversionFailed,
    DestinationUnavailable,
    IniError,
    KeyNotFound,
    MalformedDocument,
    NotFound,
    SectionNotFound,
    SourceUnavailable,
)
from .model import IniDocument, IniSection
from .parser import IniParser, format_lines, parse_lines

__all__ = [
    'SimpleIni', 'IniDocument', 'IniSection', 'IniParser',
    'parse_lines', 'format_lines',
    'IniError', 'SourceUnavailable', 'DestinationUnavailable',
    'MalformedDocument', 'NotFound', 'SectionNotFound', 'KeyNotFound',
    'ConversionFailed',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
