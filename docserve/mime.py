#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
MIME Type Table
---------------
Maps file extensions to MIME types. The table is built once at import
time and exposed read-only, so handler threads share it without locking.
"""

from types import MappingProxyType

MIME_TYPES = MappingProxyType({
    'js': 'text/javascript',
    'html': 'text/html',
    'wasm': 'application/wasm',
})


def lookup(extension):
    """
    Get the MIME type for an extension (without the leading dot).

    Unregistered extensions fall back to ``text/<extension>``.

    Args:
        extension: File extension, e.g. ``'html'``

    Returns:
        str: MIME type
    """
    mime_type = MIME_TYPES.get(extension)
    if mime_type is None:
        return f"text/{extension}"
    return mime_type


def get_extension(path):
    """Return the text after the last '.' in path, or '' if there is none."""
    _, dot, extension = path.rpartition('.')
    return extension if dot else ''


def resolve(path):
    """
    Get the MIME type for a request or file path.

    Args:
        path: Path whose extension decides the type

    Returns:
        str: MIME type
    """
    return lookup(get_extension(path))
