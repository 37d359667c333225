"""
Resend API Client Module

This module provides a thin client over the Resend HTTP API for the
received-email (inbound) and domain endpoints used by the CLI.

Usage:
    from resend_cli.integrations import resend_api

    client = resend_api.create_client()
    payload = client.get_received_email("4ef9a417-02e9-4d39-ad75-9611e0fcc33c")
    print(payload["subject"])

Every operation returns the decoded JSON payload exactly as the API sent it
(or None for an empty body) and raises ResendApiError on failure.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from resend_cli import __version__

# Configure logging
logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class ConfigurationError(Exception):
    """Raised when client configuration is invalid or missing."""
    pass


class ResendApiError(Exception):
    """
    Raised when a Resend API call fails.

    Attributes:
        status_code: HTTP status code (None for transport failures)
        name: Resend error name (e.g., "not_found", "validation_error")
    """

    def __init__(self, message: str, status_code: Optional[int] = None, name: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.name = name


# ============================================================================
# Configuration
# ============================================================================

API_KEY_ENV = 'RESEND_API_KEY'
API_URL_ENV = 'RESEND_API_URL'
DEFAULT_BASE_URL = 'https://api.resend.com'

# No retries; fail fast and let the caller report the error
CONNECT_TIMEOUT = 10  # seconds to establish connection
READ_TIMEOUT = 60     # seconds max for reading response


def _error_from_response(response: requests.Response) -> ResendApiError:
    """
    Build a ResendApiError from a failed HTTP response.

    Resend error bodies look like
    ``{"statusCode": 404, "name": "not_found", "message": "Email not found"}``.
    Falls back to the HTTP reason when the body is not JSON.
    """
    name = None
    message = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        name = body.get('name')
        message = body.get('message')

    if not message:
        reason = response.reason or 'Request failed'
        message = f"HTTP {response.status_code}: {reason}"

    return ResendApiError(message, status_code=response.status_code, name=name)


# ============================================================================
# Client
# ============================================================================

class ResendClient:
    """
    Authenticated client for the Resend HTTP API.

    One instance is created per process and passed to the command that
    needs it. Each public method issues exactly one GET request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None
    ):
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {api_key}",
            'Accept': 'application/json',
            'User-Agent': f"resend-cli/{__version__}",
        })

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Args:
            path: API path starting with "/"
            params: Optional query parameters

        Returns:
            Decoded JSON payload, or None if the body is empty

        Raises:
            ResendApiError: On transport failure, HTTP error or invalid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(
                url,
                params=params,
                timeout=(CONNECT_TIMEOUT, READ_TIMEOUT)
            )
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise ResendApiError(f"Request to {url} failed: {e}") from e

        logger.debug(f"GET {url} -> {response.status_code}")

        if response.status_code >= 400:
            error = _error_from_response(response)
            logger.debug(
                f"Resend API error: status={error.status_code}, "
                f"name={error.name}, message={error}"
            )
            raise error

        if not response.content:
            logger.debug(f"Empty response body from {url}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Failed to parse JSON response from {url}: {e}")
            raise ResendApiError(
                f"Invalid JSON in response from {url}",
                status_code=response.status_code
            ) from e

    # Received emails (inbound)
    def list_received_emails(self, limit: int = 10) -> Any:
        """List received emails, newest first."""
        return self._get('/emails/receiving', params={'limit': limit})

    def get_received_email(self, email_id: str) -> Any:
        """Get a single received email including its bodies."""
        return self._get(f"/emails/receiving/{quote(email_id, safe='')}")

    def list_attachments(self, email_id: str) -> Any:
        """List attachment metadata for a received email."""
        return self._get(f"/emails/receiving/{quote(email_id, safe='')}/attachments")

    def get_attachment(self, email_id: str, attachment_id: str) -> Any:
        """Get metadata for one attachment of a received email."""
        return self._get(
            f"/emails/receiving/{quote(email_id, safe='')}"
            f"/attachments/{quote(attachment_id, safe='')}"
        )

    # Domains
    def list_domains(self) -> Any:
        """List domains registered with the account."""
        return self._get('/domains')

    def get_domain(self, domain_id: str) -> Any:
        """Get a single domain including its DNS records."""
        return self._get(f"/domains/{quote(domain_id, safe='')}")


def create_client(environ: Optional[Mapping[str, str]] = None) -> ResendClient:
    """
    Create a Resend client from environment configuration.

    Reads RESEND_API_KEY (required) and RESEND_API_URL (optional). No network
    request is made.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ResendClient: Configured client

    Raises:
        ConfigurationError: If RESEND_API_KEY is missing or empty
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV, '').strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

    base_url = environ.get(API_URL_ENV) or DEFAULT_BASE_URL
    client = ResendClient(api_key, base_url=base_url)

    logger.info(f"Resend client initialized: base_url={client.base_url}, "
                f"connect_timeout={CONNECT_TIMEOUT}s, read_timeout={READ_TIMEOUT}s")
    return client
