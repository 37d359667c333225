"""
Command-line client for the Resend email API.

Exposes received (inbound) emails, their attachments and sending domains
as human-readable or JSON terminal output.
"""

__version__ = '0.1.0'
