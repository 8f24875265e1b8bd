# -*- coding: utf-8 -*-
from .log_setup import setup_json_logging

__all__ = ["setup_json_logging"]
