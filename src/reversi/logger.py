"""
Logging utilities for Reversi.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config

PACKAGE_LOGGER = 'reversi'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Sets up console and file logging for a play session."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        self.log_file = None

        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level}")
        formatter = logging.Formatter(LOG_FORMAT)

        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self.logger.setLevel(level)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level if config.logging.verbose else logging.WARNING)
        self.console.setFormatter(formatter)
        self.logger.addHandler(self.console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file next to the log."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def close(self):
        """Flush and detach all handlers added to the package logger."""
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()


def setup_logger(config: Config, log_dir: Optional[str] = None) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object
        log_dir: Optional override for the log directory

    Returns:
        Logger instance
    """
    return Logger(config, log_dir)
