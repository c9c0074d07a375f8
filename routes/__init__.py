"""HTTP routes for the receipt points service."""

from .receipt_routes import receipt_bp

__all__ = ['receipt_bp']
