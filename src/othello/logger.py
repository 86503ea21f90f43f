"""
Logging utilities for the Othello engine.
"""
import os
import json
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Dict, Any, Optional, List

from .config import Config


class Logger:
    """Logger for match progress and result metrics."""

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

        level = logging.getLevelName(config.logging.log_level.upper())
        if config.logging.verbose:
            level = logging.DEBUG
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'arena.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger('othello')
        self._previous_level = self.logger.level
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if config.logging.log_to_file:
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(asdict(self.config), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics through the package logger.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step/round
            prefix: Prefix for metric names (e.g., 'round/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Detach and close this logger's handlers and restore the level."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self._previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
