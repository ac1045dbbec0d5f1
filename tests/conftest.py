import socket

import pytest

from docserve.server import WebServer


@pytest.fixture
def docs(tmp_path):
    """A document root holding index.html, app.js and a stylesheet."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "index.html").write_bytes(b"hello")
    (root / "app.js").write_bytes(b"console.log(1);")
    (root / "style.css").write_bytes(b"body {}")
    return root


@pytest.fixture
def server(docs):
    srv = WebServer(host="127.0.0.1", port=0, document_root=str(docs))
    assert srv.start()
    yield srv
    srv.shutdown()


def fetch(address, raw_request, timeout=5):
    """Send a raw request and read the response until the server closes."""
    with socket.create_connection(address, timeout=timeout) as sock:
        sock.sendall(raw_request)
        chunks = []
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)
