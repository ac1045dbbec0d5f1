#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Exception Types for docserve
----------------------------
Document errors are raised by the file loader and mapped to HTTP status
lines by the router. Request errors are raised while reading a request
off a connection and end that connection without a response.
"""


class DocserveError(Exception):
    """Base class for all docserve errors."""


class DocumentError(DocserveError):
    """
    A requested document could not be loaded.

    Attributes:
        path: Filesystem path that was being read
    """

    def __init__(self, path, message=None):
        self.path = path
        super().__init__(message or path)


class DocumentNotFound(DocumentError):
    """The document does not exist."""


class DocumentReadError(DocumentError):
    """The document exists (or may exist) but could not be read."""


class RequestError(DocserveError):
    """The request could not be read or parsed."""


class IncompleteRequest(RequestError):
    """The peer closed the connection before the header block ended."""


class MalformedRequest(RequestError):
    """The request line does not carry a path."""
