"""
Domain layer for Resend API entities.

This layer contains:
- Data models (immutable views over API payloads)
- List envelope normalization (one shape for every list response)
"""
