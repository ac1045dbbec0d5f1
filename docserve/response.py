#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
HTTP Response Serialization
---------------------------
Builds raw HTTP/1.1 responses. Only Content-Type and Content-Length
headers are ever emitted.
"""

from collections import namedtuple

CRLF = '\r\n'
HTTP_VERSION = 'HTTP/1.1'

# HTTP status codes with descriptions
HTTP_STATUS = {
    200: 'OK',
    404: 'Not Found',
    500: 'Internal Server Error',
}


def status_line(code):
    """
    Format the status part of a response line, e.g. ``'404 Not Found'``.

    Args:
        code: HTTP status code present in HTTP_STATUS

    Returns:
        str: Status code followed by its reason phrase
    """
    return f"{code} {HTTP_STATUS[code]}"


def build_response(status, mime_type, body):
    """
    Serialize a response.

    Args:
        status: Status code and reason phrase, e.g. ``'200 OK'``
        mime_type: Value of the Content-Type header
        body: Response body as bytes

    Returns:
        bytes: Raw HTTP response
    """
    head = (
        f"{HTTP_VERSION} {status}{CRLF}"
        f"Content-Type: {mime_type}{CRLF}"
        f"Content-Length: {len(body)}{CRLF}"
        f"{CRLF}"
    )
    return head.encode('utf-8', 'surrogateescape') + body


class Response(namedtuple('Response', ['status_line', 'mime_type', 'body'])):
    """A status line, MIME type and body ready to be serialized."""

    __slots__ = ()

    def to_bytes(self):
        return build_response(self.status_line, self.mime_type, self.body)


NOT_FOUND = Response(status_line(404), 'text/plain', b'Not Found')
INTERNAL_SERVER_ERROR = Response(status_line(500), 'text/plain', b'')
