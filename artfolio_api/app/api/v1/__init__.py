"""
Version 1 of the API.

This subpackage bundles the member, portfolio, comment and info
endpoints of the marketplace.
"""
