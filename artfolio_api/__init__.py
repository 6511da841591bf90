"""
Top‑level package for the Artfolio Marketplace API.

This file makes ``artfolio_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``artfolio_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
