"""
Output rendering for Resend entities.

Two modes are supported:
- JSON: the raw API payload, indented, with no filtering or reordering
- Human: fixed, labeled lines per entity with placeholders for missing fields

All functions are pure: they return text and never print or touch files.
"""

import json
import os
from typing import Any, Callable, List, Optional, TypeVar

from resend_cli.domain.models import Attachment, Domain, ListEnvelope, ReceivedEmail

T = TypeVar('T')

HTML_PREVIEW_LENGTH = 200
ELLIPSIS = '...'
SEPARATOR = '---'
NOT_AVAILABLE = 'N/A'
NO_SUBJECT = '(no subject)'


def render_json(payload: Any) -> str:
    """
    Serialize an API payload for machine-readable output.

    Args:
        payload: Decoded JSON payload exactly as returned by the client

    Returns:
        str: Indented JSON that parses back to an equal value
    """
    return json.dumps(payload, indent=2, ensure_ascii=False)


def truncate(value: str, limit: int = HTML_PREVIEW_LENGTH) -> str:
    """Cut value to limit characters and mark the cut; shorter values pass through."""
    if len(value) <= limit:
        return value
    return value[:limit] + ELLIPSIS


def _or_placeholder(value: Optional[Any], placeholder: str = NOT_AVAILABLE) -> str:
    if value is None or value == '':
        return placeholder
    return str(value)


def _format_flag(value: Optional[bool]) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


# Received emails

def format_email_summary(email: ReceivedEmail) -> str:
    """Short block used in list output."""
    lines = [
        f"ID: {email.id}",
        f"From: {email.from_address}",
        f"To: {', '.join(email.recipients)}",
        f"Subject: {_or_placeholder(email.subject, NO_SUBJECT)}",
        f"Created: {email.created_at}",
    ]
    return '\n'.join(lines)


def format_email_detail(email: ReceivedEmail) -> str:
    """
    Full block for a single received email.

    The HTML body is previewed only (first 200 characters).
    """
    html = truncate(email.html) if email.html else NOT_AVAILABLE
    lines = [
        f"ID: {email.id}",
        f"From: {email.from_address}",
        f"To: {', '.join(email.recipients)}",
        f"Subject: {_or_placeholder(email.subject, NO_SUBJECT)}",
        f"Text: {_or_placeholder(email.text)}",
        f"HTML: {html}",
        f"Created: {email.created_at}",
    ]
    return '\n'.join(lines)


# Attachments

def format_attachment_summary(attachment: Attachment) -> str:
    lines = [
        f"ID: {attachment.id}",
        f"Filename: {attachment.filename}",
        f"Size: {attachment.size} bytes",
        f"Content-Type: {attachment.content_type}",
    ]
    return '\n'.join(lines)


def format_attachment_detail(attachment: Attachment) -> str:
    lines = [
        format_attachment_summary(attachment),
        f"Content-Disposition: {_or_placeholder(attachment.content_disposition)}",
        f"Content-ID: {_or_placeholder(attachment.content_id)}",
    ]
    return '\n'.join(lines)


def format_attachment_download_notice(attachment: Attachment, output_path: str) -> str:
    """
    Describe an attachment requested with --output.

    Nothing is written to output_path; the notice says so explicitly.

    Args:
        attachment: Attachment metadata
        output_path: Path the user asked for (shown resolved)

    Returns:
        str: Metadata lines followed by the explanatory note
    """
    lines = [
        f"Attachment metadata for {attachment.filename}:",
        f"  Size: {attachment.size} bytes",
        f"  Type: {attachment.content_type}",
        f"  Content-ID: {_or_placeholder(attachment.content_id)}",
        f"  Requested output: {os.path.abspath(output_path)}",
        "",
        "Note: the attachment content was not downloaded and no file was written. "
        "To download the actual file, use the content_id with the Resend API.",
    ]
    return '\n'.join(lines)


# Domains

def format_domain_summary(domain: Domain) -> str:
    lines = [
        f"Name: {domain.name}",
        f"Status: {domain.status}",
        f"Region: {domain.region}",
        f"Created: {domain.created_at}",
    ]
    return '\n'.join(lines)


def format_domain_detail(domain: Domain) -> str:
    """Full block for a single domain, with DNS records when present."""
    lines = [
        format_domain_summary(domain),
        f"Default: {_format_flag(domain.default)}",
    ]
    if domain.records:
        lines.append("")
        lines.append("DNS Records:")
        for record in domain.records:
            lines.append(f"  {record.record}: {record.value}")
    return '\n'.join(lines)


# Lists

def format_list(
    envelope: ListEnvelope[T],
    noun: str,
    item_formatter: Callable[[T], str],
    more_label: Optional[str] = None
) -> str:
    """
    Render a page of entities.

    Each entity is followed by a separator line. When the envelope reports
    more pages, one trailer is appended; further pages are never fetched.

    Args:
        envelope: Normalized list response
        noun: Singular noun for the heading (e.g., "received email")
        item_formatter: Renders one entity
        more_label: Plural noun for the trailer (defaults to noun + "s")

    Returns:
        str: Heading, entity blocks and optional pagination trailer
    """
    lines: List[str] = [f"Found {len(envelope)} {noun}(s):", ""]
    for item in envelope.data:
        lines.append(item_formatter(item))
        lines.append(SEPARATOR)

    if envelope.has_more:
        lines.append("")
        lines.append(f"(More {more_label or noun + 's'} available - use pagination)")

    return '\n'.join(lines)


def format_email_list(envelope: ListEnvelope[ReceivedEmail]) -> str:
    return format_list(envelope, 'received email', format_email_summary, more_label='emails')


def format_attachment_list(envelope: ListEnvelope[Attachment]) -> str:
    return format_list(envelope, 'attachment', format_attachment_summary)


def format_domain_list(envelope: ListEnvelope[Domain]) -> str:
    return format_list(envelope, 'domain', format_domain_summary)
