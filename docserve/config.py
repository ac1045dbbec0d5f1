#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Configuration Module for docserve
---------------------------------
Loads server settings from, in increasing precedence:
- Default configuration
- Configuration file (JSON)
- Keyword overrides (usually command-line arguments)
"""

import os
import json
import logging


class ServerConfig:
    """
    Server configuration manager.
    """

    # Default configuration settings
    DEFAULT_CONFIG = {
        "host": "0.0.0.0",
        "port": 8080,
        "document_root": "docs",
        "log_level": "INFO",
        "log_file": None,
        "log_max_size": 10485760,  # 10 MB
        "log_backup_count": 5,
        "colored_logging": True,
        "connection_queue": 10,
        "request_timeout": None,  # None means block until the client sends
        "recv_size": 1024,
    }

    def __init__(self, config_file=None, **kwargs):
        """
        Initialize the configuration with values from file and kwargs.

        Args:
            config_file: Path to a JSON configuration file
            **kwargs: Configuration values that override file values
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self.logger = logging.getLogger(__name__)

        if config_file:
            self.load_from_file(config_file)

        for key, value in kwargs.items():
            self._config[key] = value

    def load_from_file(self, config_path="config.json"):
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            bool: True if loaded successfully, False otherwise
        """
        if not os.path.exists(config_path):
            self.logger.warning(f"Configuration file {config_path} not found. Using defaults.")
            return False

        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error loading configuration: {e}")
            return False

        if not isinstance(file_config, dict):
            self.logger.error(f"Configuration in {config_path} must be a JSON object")
            return False

        self._config.update(file_config)
        self.logger.info(f"Loaded configuration from {config_path}")
        return True

    def get(self, key, default=None):
        return self._config.get(key, default)

    def set(self, key, value):
        self._config[key] = value

    def get_all(self):
        """
        Get all configuration values.

        Returns:
            dict: A copy of the configuration
        """
        return self._config.copy()

    # Property accessors for common configuration values
    @property
    def host(self):
        return self.get('host')

    @property
    def port(self):
        return self.get('port')

    @property
    def document_root(self):
        return self.get('document_root')

    @property
    def log_level(self):
        return self.get('log_level')

    @property
    def log_file(self):
        return self.get('log_file')

    @property
    def log_max_size(self):
        return self.get('log_max_size')

    @property
    def log_backup_count(self):
        return self.get('log_backup_count')

    @property
    def colored_logging(self):
        return self.get('colored_logging')

    @property
    def connection_queue(self):
        return self.get('connection_queue')

    @property
    def request_timeout(self):
        return self.get('request_timeout')

    @property
    def recv_size(self):
        return self.get('recv_size')
