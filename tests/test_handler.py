import socket
import logging

import pytest

from docserve.errors import IncompleteRequest, MalformedRequest
from docserve.handler import ConnectionHandler, read_header_block, parse_request_path
from docserve.router import FileRouter


class ChunkedSocket:
    """Fake socket returning preset chunks from recv()."""

    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.sent = b""
        self.closed = False
        self.timeout = "unset"

    def recv(self, size):
        return self.chunks.pop(0) if self.chunks else b""

    def sendall(self, data):
        self.sent += data

    def settimeout(self, value):
        self.timeout = value

    def close(self):
        self.closed = True


def test_read_header_block_accumulates_partial_reads():
    sock = ChunkedSocket([b"GET /a.js HT", b"TP/1.1\r\nHost: x\r", b"\n\r", b"\nignored body"])
    assert read_header_block(sock) == b"GET /a.js HTTP/1.1\r\nHost: x"


def test_read_header_block_raises_when_peer_closes_early():
    sock = ChunkedSocket([b"GET / HTTP/1.1\r\n"])
    with pytest.raises(IncompleteRequest):
        read_header_block(sock)


def test_parse_request_path():
    assert parse_request_path(b"GET /index.html HTTP/1.1\r\nHost: x") == "/index.html"
    assert parse_request_path(b"POST   /form\tHTTP/1.0") == "/form"


def test_parse_request_path_requires_second_token():
    with pytest.raises(MalformedRequest):
        parse_request_path(b"GET")


@pytest.fixture
def handler(docs):
    return ConnectionHandler(FileRouter(str(docs)))


def test_handle_serves_home_page(handler):
    sock = ChunkedSocket([b"GET / HTTP/1.1\r\n\r\n"])
    handler.handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nContent-Length: 5\r\n\r\nhello"
    assert sock.closed
    assert sock.timeout is None


def test_handle_missing_file(handler):
    sock = ChunkedSocket([b"GET /missing.png HTTP/1.1\r\n\r\n"])
    handler.handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == (
        b"HTTP/1.1 404 Not Found\r\nContent-Type: text/plain\r\nContent-Length: 9\r\n\r\nNot Found"
    )
    assert sock.closed


def test_handle_incomplete_request_closes_without_response(handler, caplog):
    sock = ChunkedSocket([b"GET / HTTP/1.1\r\n"])
    with caplog.at_level(logging.WARNING, logger="ConnectionHandler"):
        handler.handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == b""
    assert sock.closed
    assert "Dropping request" in caplog.text


def test_handle_malformed_request_closes_without_response(handler):
    sock = ChunkedSocket([b"GET\r\n\r\n"])
    handler.handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == b""
    assert sock.closed


def test_handle_contains_unexpected_errors(docs):
    class BrokenRouter:
        def route(self, path):
            raise RuntimeError("boom")

    sock = ChunkedSocket([b"GET / HTTP/1.1\r\n\r\n"])
    ConnectionHandler(BrokenRouter()).handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == b""
    assert sock.closed


def test_handle_over_real_socket_pair(handler):
    client, server_side = socket.socketpair()
    try:
        client.sendall(b"GET /app.js HTTP/1.1\r\nHost: localhost\r\n\r\n")
        handler.handle(server_side, ("local", 0))
        response = b""
        while True:
            chunk = client.recv(4096)
            if not chunk:
                break
            response += chunk
    finally:
        client.close()
    assert response.startswith(b"HTTP/1.1 200 OK\r\nContent-Type: text/javascript\r\n")
    assert response.endswith(b"\r\n\r\nconsole.log(1);")


def test_request_timeout_drops_stalled_client(docs):
    handler = ConnectionHandler(FileRouter(str(docs)), request_timeout=0.2)
    client, server_side = socket.socketpair()
    try:
        client.sendall(b"GET / HTTP/1.1\r\n")
        handler.handle(server_side, ("local", 0))
        assert client.recv(4096) == b""
    finally:
        client.close()


def test_handle_nul_byte_path_gets_500(handler):
    sock = ChunkedSocket([b"GET /a\x00b.html HTTP/1.1\r\n\r\n"])
    handler.handle(sock, ("127.0.0.1", 5000))
    assert sock.sent == (
        b"HTTP/1.1 500 Internal Server Error\r\nContent-Type: text/plain\r\nContent-Length: 0\r\n\r\n"
    )
    assert sock.closed
