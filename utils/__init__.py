"""Utility modules for the receipt points service.

This package contains receipt validation and logging configuration helpers
used by the service layer and the Flask application.
"""
