"""
Top‑level package for the Rumbl web application.

This file makes ``rumbl`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``rumbl.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
