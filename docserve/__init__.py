#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
docserve
--------
A minimal concurrent static-file HTTP/1.1 server built on Python's socket
library. Each connection carries one GET-style request; the path is
mapped under a document root and the file is returned with a MIME type
inferred from its extension.
"""

__version__ = '1.0.0'

from .server import WebServer
from .config import ServerConfig
from .handler import ConnectionHandler
from .router import FileRouter
from .response import Response, build_response
from .utils import setup_logging

__all__ = ['WebServer', 'ServerConfig', 'ConnectionHandler', 'FileRouter',
           'Response', 'build_response', 'setup_logging']
