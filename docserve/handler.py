#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Connection Handler
------------------
Reads one request from a client socket, routes it and writes the
response back. Exactly one request is served per connection.
"""

import logging
import socket
import traceback

from .errors import IncompleteRequest, MalformedRequest, RequestError

HEADER_DELIMITER = b'\r\n\r\n'


def read_header_block(client_socket, recv_size=1024):
    """
    Read from the socket until the blank line ending the headers.

    Args:
        client_socket: Connected client socket
        recv_size: Maximum bytes per recv call

    Returns:
        bytes: Everything before the first CRLFCRLF

    Raises:
        IncompleteRequest: The peer closed before sending the delimiter
    """
    buffer = b''
    # Only the tail of the previous buffer can hold a split delimiter
    search_from = 0
    while True:
        chunk = client_socket.recv(recv_size)
        if not chunk:
            raise IncompleteRequest(f"connection closed after {len(buffer)} bytes")
        buffer += chunk
        header_end = buffer.find(HEADER_DELIMITER, search_from)
        if header_end != -1:
            return buffer[:header_end]
        search_from = max(0, len(buffer) - len(HEADER_DELIMITER) + 1)


def parse_request_path(header_block):
    """
    Extract the request path from a header block.

    Args:
        header_block: Raw request bytes before the blank line

    Returns:
        str: Second whitespace-separated token of the request

    Raises:
        MalformedRequest: The request has fewer than two tokens
    """
    tokens = header_block.split()
    if len(tokens) < 2:
        raise MalformedRequest(f"no path in request {header_block[:80]!r}")
    return tokens[1].decode('utf-8', 'surrogateescape')


class ConnectionHandler:
    """
    Handles a single client connection end to end.
    """

    def __init__(self, router, recv_size=1024, request_timeout=None):
        """
        Initialize the handler.

        Args:
            router: FileRouter used to answer requests
            recv_size: Maximum bytes per recv call
            request_timeout: Socket timeout in seconds, None to block forever
        """
        self.router = router
        self.recv_size = recv_size
        self.request_timeout = request_timeout
        self.logger = logging.getLogger('ConnectionHandler')

    def handle(self, client_socket, client_address):
        """
        Serve one request and close the connection.

        Args:
            client_socket: Client socket object
            client_address: Client address tuple (ip, port)
        """
        peer = f"{client_address[0]}:{client_address[1]}" if client_address else "unknown peer"
        try:
            client_socket.settimeout(self.request_timeout)

            header_block = read_header_block(client_socket, self.recv_size)
            self.logger.debug(f"Request from {peer}: {header_block!r}")

            path = parse_request_path(header_block)
            request_line = header_block.split(b'\r\n', 1)[0].decode('utf-8', 'replace')
            self.logger.info(f"{peer} - {request_line}")

            response = self.router.route(path)
            payload = response.to_bytes()
            self.logger.info(f"{peer} - {response.status_line} ({len(payload)} bytes)")

            client_socket.sendall(payload)

        except RequestError as e:
            self.logger.warning(f"Dropping request from {peer}: {e}")
        except socket.timeout:
            self.logger.warning(f"Request from {peer} timed out")
        except OSError as e:
            self.logger.warning(f"Connection error with {peer}: {e}")
        except Exception as e:
            self.logger.error(f"Error handling request from {peer}: {e}")
            self.logger.debug(traceback.format_exc())
        finally:
            try:
                client_socket.close()
            except OSError as e:
                self.logger.debug(f"Error closing connection with {peer}: {e}")
