"""
Data models for Resend API entities.

These immutable structures are read-only views over the JSON payloads the
API returns. They are built for human-readable rendering only; JSON output
always uses the raw payload they were built from.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class ReceivedEmail:
    """
    Email delivered to the account's receiving address.

    Attributes:
        id: Resend email identifier
        from_address: Sender address (``from`` in the API payload)
        to: Recipient address, or list of recipient addresses
        subject: Subject line (None if not present)
        text: Plain text body (None if not present)
        html: HTML body (None if not present)
        created_at: ISO 8601 timestamp when the email was received
    """
    id: str
    from_address: str
    to: Union[str, List[str]]
    created_at: str
    subject: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None

    @property
    def recipients(self) -> Tuple[str, ...]:
        """Recipients as a tuple, whether the API sent one address or many."""
        if isinstance(self.to, (list, tuple)):
            return tuple(str(address) for address in self.to)
        if not self.to:
            return ()
        return (str(self.to),)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReceivedEmail':
        return cls(
            id=data.get('id') or '',
            from_address=data.get('from') or '',
            to=data.get('to') or [],
            created_at=data.get('created_at') or '',
            subject=data.get('subject'),
            text=data.get('text'),
            html=data.get('html'),
        )


@dataclass(frozen=True)
class Attachment:
    """
    Attachment metadata for a received email.

    No binary content is modeled.

    Attributes:
        id: Attachment identifier
        filename: Original filename
        size: Size in bytes
        content_type: MIME type (e.g., "image/png", "application/pdf")
        content_disposition: "attachment" or "inline" (None if not present)
        content_id: Content-ID reference (None if not present)
    """
    id: str
    filename: str
    size: int
    content_type: str
    content_disposition: Optional[str] = None
    content_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Attachment':
        return cls(
            id=data.get('id') or '',
            filename=data.get('filename') or '',
            size=data.get('size') or 0,
            content_type=data.get('content_type') or '',
            content_disposition=data.get('content_disposition'),
            content_id=data.get('content_id'),
        )


@dataclass(frozen=True)
class DnsRecord:
    """
    DNS record Resend expects for a domain.

    Attributes:
        record: Record purpose (e.g., "SPF", "DKIM")
        value: Expected record value
    """
    record: str
    value: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DnsRecord':
        return cls(
            record=data.get('record') or '',
            value=data.get('value') or '',
        )


@dataclass(frozen=True)
class Domain:
    """
    Sending/receiving domain registered with Resend.

    Attributes:
        id: Domain identifier
        name: Domain name (e.g., "example.com")
        status: Verification status (e.g., "verified", "pending")
        region: Sending region (e.g., "us-east-1")
        created_at: ISO 8601 creation timestamp
        default: Whether this is the account's default domain (None if unknown)
        records: DNS records (usually only present on a single-domain fetch)
    """
    id: str
    name: str
    status: str
    region: str
    created_at: str
    default: Optional[bool] = None
    records: Tuple[DnsRecord, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Domain':
        records = data.get('records')
        if not isinstance(records, list):
            records = []
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            status=data.get('status') or '',
            region=data.get('region') or '',
            created_at=data.get('created_at') or '',
            default=data.get('default'),
            records=tuple(DnsRecord.from_dict(r) for r in records if isinstance(r, dict)),
        )


@dataclass(frozen=True)
class ListEnvelope(Generic[T]):
    """
    Wrapper around a list response.

    Attributes:
        object: Object marker sent by the API ("list")
        has_more: True if more pages exist (never fetched automatically)
        data: Entities on this page
    """
    object: str
    has_more: bool
    data: Tuple[T, ...]

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        item_factory: Callable[[Dict[str, Any]], T]
    ) -> 'ListEnvelope[T]':
        """
        Build an envelope from a list payload.

        The API normally answers ``{"object": "list", "has_more": ..., "data": [...]}``
        but some endpoints have been seen returning a bare array. Both shapes
        are accepted; anything else yields an empty envelope.

        Args:
            payload: Decoded JSON payload
            item_factory: Builds one entity from one item dict

        Returns:
            ListEnvelope with normalized entities
        """
        if isinstance(payload, list):
            items = payload
            marker = 'list'
            has_more = False
        elif isinstance(payload, dict):
            items = payload.get('data')
            marker = payload.get('object') or 'list'
            has_more = bool(payload.get('has_more', False))
        else:
            items = None
            marker = 'list'
            has_more = False

        if not isinstance(items, list):
            items = []

        return cls(
            object=marker,
            has_more=has_more,
            data=tuple(item_factory(item) for item in items if isinstance(item, dict)),
        )
