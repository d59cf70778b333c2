"""
Top‑level package for Partifuller.

This file makes ``partifuller`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``partifuller.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
