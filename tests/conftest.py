"""
Pytest configuration and fixtures for all tests.
"""

import logging
import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'WARNING')
os.environ.pop('RESEND_API_URL', None)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attached so each test logs to its own stderr."""
    yield
    package_logger = logging.getLogger('resend_cli')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def received_email_payload():
    """Single received email as returned by GET /emails/receiving/{id}."""
    return {
        'object': 'email',
        'id': '4ef9a417-02e9-4d39-ad75-9611e0fcc33c',
        'from': 'Acme <onboarding@resend.dev>',
        'to': ['delivered@resend.dev', 'support@example.com'],
        'subject': 'Hello World',
        'text': 'It works!',
        'html': '<p>It works!</p>',
        'created_at': '2025-01-01T00:00:00.000000+00:00',
    }


@pytest.fixture
def email_list_payload(received_email_payload):
    """Envelope returned by GET /emails/receiving."""
    second = dict(received_email_payload, id='b2c1f7a0-aaaa-bbbb-cccc-000000000002', subject=None)
    return {
        'object': 'list',
        'has_more': False,
        'data': [received_email_payload, second],
    }


@pytest.fixture
def attachment_payload():
    return {
        'object': 'attachment',
        'id': '2a0c9ce0-3112-4728-976e-47ddcd16a318',
        'filename': 'invoice.pdf',
        'size': 51200,
        'content_type': 'application/pdf',
        'content_disposition': 'attachment',
        'content_id': None,
    }


@pytest.fixture
def domain_payload():
    """Single domain as returned by GET /domains/{id}."""
    return {
        'object': 'domain',
        'id': 'd91cd9bd-1176-453e-8fc1-35364d380206',
        'name': 'example.com',
        'status': 'verified',
        'region': 'us-east-1',
        'created_at': '2025-01-01T00:00:00.000000+00:00',
        'records': [
            {
                'record': 'SPF',
                'name': 'send',
                'type': 'MX',
                'ttl': 'Auto',
                'status': 'verified',
                'value': 'feedback-smtp.us-east-1.amazonses.com',
                'priority': 10,
            },
            {
                'record': 'DKIM',
                'name': 'resend._domainkey',
                'type': 'TXT',
                'ttl': 'Auto',
                'status': 'verified',
                'value': 'p=MIGfMA0GCSqGSIb3DQEBAQUAA4GNADCBiQKBgQ',
            },
        ],
    }
