#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
File Router
-----------
Maps request paths to files under the document root and turns load
failures into 404 / 500 responses.
"""

import errno
import logging

from . import mime
from .errors import DocumentNotFound, DocumentReadError
from .response import Response, status_line, NOT_FOUND, INTERNAL_SERVER_ERROR

HOME_PAGE = '/index.html'

# errno values that mean "there is nothing at this path"
NOT_FOUND_ERRNOS = (errno.ENOENT, errno.ENOTDIR)


def load_file(file_path):
    """
    Read a whole file into memory.

    Args:
        file_path: Path to the file

    Returns:
        bytes: File content

    Raises:
        DocumentNotFound: Nothing exists at file_path
        DocumentReadError: Any other failure to open or read the path
    """
    try:
        with open(file_path, 'rb') as f:
            return f.read()
    except FileNotFoundError as e:
        raise DocumentNotFound(file_path, str(e)) from e
    except OSError as e:
        if e.errno in NOT_FOUND_ERRNOS:
            raise DocumentNotFound(file_path, str(e)) from e
        raise DocumentReadError(file_path, str(e)) from e
    except ValueError as e:
        # open() rejects paths with an embedded NUL byte
        raise DocumentReadError(file_path, str(e)) from e


class FileRouter:
    """
    Serves files from a document root.

    The request path is appended to the document root as-is; it is not
    normalized, so '..' segments are passed through to the filesystem.
    """

    def __init__(self, document_root='docs', loader=load_file):
        """
        Initialize the router.

        Args:
            document_root: Directory prefix for every routed path
            loader: Callable reading a path into bytes, raising DocumentError
        """
        self.document_root = document_root
        self.loader = loader
        self.logger = logging.getLogger('FileRouter')

    def route(self, path):
        """
        Build the response for a request path.

        Args:
            path: Request path, e.g. ``'/app.js'``

        Returns:
            Response: 200 with the file, 404 or 500
        """
        if path == '/':
            path = HOME_PAGE

        file_path = self.document_root + path

        try:
            body = self.loader(file_path)
        except DocumentNotFound:
            self.logger.info(f"Not found: {file_path}")
            return NOT_FOUND
        except DocumentReadError as e:
            self.logger.error(f"Error reading file {file_path}: {e}")
            return INTERNAL_SERVER_ERROR

        return Response(status_line(200), mime.resolve(path), body)
