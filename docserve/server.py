#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
docserve Server Module
----------------------
Binds the listening socket and runs the accept loop. Every accepted
connection is handed to its own daemon thread; the loop never waits for
a handler to finish.
"""

import socket
import threading
import time
import logging

from .config import ServerConfig
from .handler import ConnectionHandler
from .router import FileRouter

# Seconds between checks of the running flag while blocked in accept()
ACCEPT_POLL_INTERVAL = 0.5


class WebServer:
    """
    Accepts connections and dispatches each one to a ConnectionHandler.
    """

    def __init__(self, config_file=None, **kwargs):
        """
        Initialize the web server.

        Args:
            config_file: Path to a JSON configuration file
            **kwargs: Configuration values that override the config file
        """
        self.config = ServerConfig(config_file, **kwargs)
        self.logger = logging.getLogger('WebServer')

        self.router = FileRouter(self.config.document_root)
        self.connection_handler = ConnectionHandler(
            self.router,
            recv_size=self.config.recv_size,
            request_timeout=self.config.request_timeout
        )

        self.server_socket = None
        self.is_running = False
        self._accept_thread = None

    @property
    def server_address(self):
        """The (host, port) the listener is bound to, or None before bind()."""
        if self.server_socket is None:
            return None
        return self.server_socket.getsockname()[:2]

    def bind(self):
        """
        Create, bind and start listening on the server socket.

        Raises:
            OSError: The address could not be bound
        """
        server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.config.host, self.config.port))
            server_socket.listen(self.config.connection_queue)
            server_socket.settimeout(ACCEPT_POLL_INTERVAL)
        except OSError:
            server_socket.close()
            raise

        self.server_socket = server_socket
        self.is_running = True

        host, port = self.server_address
        self.logger.info(f"Server started and bound to http://{host}:{port}")
        self.logger.info(f"Serving files from {self.config.document_root}")

    def serve_forever(self):
        """
        Accept connections until shutdown() is called.

        Errors while accepting or dispatching a connection are logged and
        the loop carries on with the next connection.
        """
        if self.server_socket is None:
            self.bind()

        while self.is_running:
            try:
                client_socket, client_address = self.server_socket.accept()
            except socket.timeout:
                continue
            except OSError as e:
                if not self.is_running:
                    break
                self.logger.error(f"Error accepting connection: {e}")
                # Sleep a bit to prevent CPU spinning on repeated errors
                time.sleep(0.1)
                continue

            try:
                self._dispatch(client_socket, client_address)
            except Exception as e:
                self.logger.error(f"Error dispatching connection from {client_address}: {e}")
                client_socket.close()

        self.logger.debug("Accept loop stopped")

    def _dispatch(self, client_socket, client_address):
        """
        Start a handler thread for a connection.

        Args:
            client_socket: Client socket object
            client_address: Client address tuple (ip, port)
        """
        worker = threading.Thread(
            target=self.connection_handler.handle,
            args=(client_socket, client_address),
            name=f"docserve-{client_address[0]}:{client_address[1]}",
            daemon=True
        )
        worker.start()

    def start(self):
        """
        Bind and run the accept loop on a background thread.

        Returns:
            bool: True if the server is now listening, False otherwise
        """
        if self.is_running:
            self.logger.warning("Server is already running")
            return True

        try:
            self.bind()
        except OSError as e:
            self.logger.error(f"Error starting server on {self.config.host}:{self.config.port}: {e}")
            return False

        self._accept_thread = threading.Thread(
            target=self.serve_forever,
            name="docserve-accept",
            daemon=True
        )
        self._accept_thread.start()
        return True

    def shutdown(self):
        """
        Stop the accept loop and close the listening socket.

        Handlers already running are left to finish on their own.
        """
        if not self.is_running:
            return

        self.logger.info("Shutting down server...")
        self.is_running = False

        accept_thread = self._accept_thread
        if accept_thread is not None and accept_thread is not threading.current_thread():
            accept_thread.join()
        self._accept_thread = None

        if self.server_socket:
            self.server_socket.close()
            self.server_socket = None

        self.logger.info("Server shutdown complete")

    def wait_for_shutdown(self):
        """
        Block the calling thread while the server is running.
        """
        while self.is_running:
            time.sleep(1)
