# -*- coding: utf-8 -*-
"""
JSON logging setup for scripts.

Library modules only call logging.getLogger(__name__); nothing is configured
on import. Scripts call setup_json_logging() once at start-up.
"""

from __future__ import annotations
import logging
import sys

from pythonjsonlogger.json import JsonFormatter


class CompactJsonFormatter(JsonFormatter):
    """JSON formatter that drops fields whose value is None."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        for key in [k for k, v in log_record.items() if v is None]:
            del log_record[key]


def setup_json_logging(log_level: int = logging.INFO, logger_name: str = "knapsack_bnb") -> logging.Logger:
    """Attach a single stdout JSON handler to the package logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        CompactJsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s "
            "%(variant)s %(items)s %(working)s %(dropped)s %(free)s "
            "%(best_value)s %(commits)s %(prunes)s %(backtracks)s"
        )
    )

    root_logger = logging.getLogger(logger_name)
    root_logger.setLevel(log_level)
    # Replace existing handlers to avoid duplicates on repeated setup
    root_logger.handlers = [handler]
    root_logger.propagate = False
    return root_logger
