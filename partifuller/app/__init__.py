"""
Application package initializer.

This package contains the main entrypoint for the RSVP service and all
of its submodules.  Persistence and configuration live in ``core``,
business logic in ``services``, request and response models in
``schemas``.  HTML pages are served by ``web`` while the JSON API is
grouped under ``api/<version>/``.
"""

from .main import app  # noqa: F401
