"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (members, portfolios, comments) has its
schemas in ``schemas``, its business logic in ``services`` and its
routes in ``api/v1/endpoints``.  Shared infrastructure (settings,
database, security, errors, logging) lives in ``core``.
"""

from .main import app  # noqa: F401
