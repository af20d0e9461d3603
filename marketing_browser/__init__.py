"""
Top-level package for the marketing performance browser.

This package exposes the core architecture (dataset, view pipeline, UI adapters).
Most code should import from submodules such as:
    marketing_browser.core
    marketing_browser.config
    marketing_browser.ui
"""

__all__: list[str] = []
