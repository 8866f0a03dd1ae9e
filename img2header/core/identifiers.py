"""Identifier basis, header guard and output file name derivation."""

import os
import re

_EXTENSION = re.compile(r'\.[^/.]+$')
_NOT_IDENT = re.compile(r'[^A-Za-z0-9_]')


def strip_extension(file_name: str) -> str:
    """'My Sprite!.png' -> 'My Sprite!'. Only the last extension goes."""
    return _EXTENSION.sub('', file_name)


def sanitize_symbol(text: str) -> str:
    """Replace every character outside [A-Za-z0-9_] with '_'."""
    return _NOT_IDENT.sub('_', text)


def identifier_basis(file_name: str) -> str:
    """Symbol stem for a source file: extension stripped, then sanitized.

    May be empty (e.g. '.png'); callers accept that.
    """
    return sanitize_symbol(strip_extension(os.path.basename(file_name)))


def header_guard(basis: str) -> str:
    return f'{basis.upper()}_H'


def output_stem(file_name: str) -> str:
    """Base of the output file name: the source name minus its extension."""
    return strip_extension(os.path.basename(file_name))
