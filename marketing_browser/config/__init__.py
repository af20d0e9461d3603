"""
Config package for marketing_browser.

Responsible for:
- config models (GlobalConfig)
- config and records I/O (load_global_config / load_records / load_app_data)
"""

from .model import GlobalConfig
from .io import load_app_data, load_global_config, load_records

__all__ = ["GlobalConfig", "load_app_data", "load_global_config", "load_records"]
