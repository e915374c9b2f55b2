"""
Top‑level package for the Tracker Activities API.

This file makes ``tracker_activities_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``tracker_activities_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
