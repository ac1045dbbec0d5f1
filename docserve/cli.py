#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line entry point for docserve.
"""

import argparse
import logging
import signal
import sys

from .server import WebServer
from .utils import setup_logging


def build_parser():
    parser = argparse.ArgumentParser(description='Minimal static-file HTTP server')

    # Basic server options
    parser.add_argument('-H', '--host', type=str, help='Host address to bind to')
    parser.add_argument('-p', '--port', type=int, help='Port to listen on')
    parser.add_argument('-d', '--document-root', type=str, help='Document root directory')
    parser.add_argument('-c', '--config', type=str, help='Path to configuration file')

    # Logging options
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, help='Path to log file')
    parser.add_argument('--no-color', action='store_true', help='Disable colored logging')

    # Connection options
    parser.add_argument('--request-timeout', type=float, help='Per-connection read timeout in seconds')
    parser.add_argument('--connection-queue', type=int, help='Connection queue size')
    return parser


def parse_config_args(argv=None):
    """
    Parse command-line arguments into configuration overrides.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        tuple: (config_file, overrides dict)
    """
    args = build_parser().parse_args(argv)

    # Convert arguments to dictionary, excluding unset values
    config_args = {k: v for k, v in vars(args).items() if v is not None}
    config_file = config_args.pop('config', None)

    if config_args.pop('no_color', False):
        config_args['colored_logging'] = False

    return config_file, config_args


def main(argv=None):
    """
    Main entry point for the server.
    """
    config_file, config_args = parse_config_args(argv)
    server = WebServer(config_file=config_file, **config_args)

    config = server.config
    setup_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        max_size=config.log_max_size,
        backup_count=config.log_backup_count,
        use_colored_logging=config.colored_logging
    )
    logger = logging.getLogger('docserve')

    def handle_signal(sig, frame):
        logger.info(f"Received signal {sig}, shutting down...")
        server.shutdown()

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    if not server.start():
        return 1

    server.wait_for_shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
