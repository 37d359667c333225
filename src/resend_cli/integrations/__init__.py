"""
Integrations with external services.

This package wraps the Resend HTTP API behind a typed client.
"""

__all__ = ['resend_api']
