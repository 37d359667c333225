"""
Output rendering for CLI commands.

This package contains pure functions that turn Resend API payloads and
domain models into terminal output.
"""

__all__ = ['rendering']
