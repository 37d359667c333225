"""
Tests for domain models (data structures).
"""

import copy
import dataclasses

import pytest

from resend_cli.domain.models import Attachment, DnsRecord, Domain, ListEnvelope, ReceivedEmail


class TestReceivedEmail:
    """Test ReceivedEmail dataclass."""

    def test_from_dict(self, received_email_payload):
        """Test building ReceivedEmail from an API payload."""
        email = ReceivedEmail.from_dict(received_email_payload)

        assert email.id == '4ef9a417-02e9-4d39-ad75-9611e0fcc33c'
        assert email.from_address == 'Acme <onboarding@resend.dev>'
        assert email.subject == 'Hello World'
        assert email.text == 'It works!'
        assert email.html == '<p>It works!</p>'
        assert email.created_at == '2025-01-01T00:00:00.000000+00:00'

    def test_recipients_from_list(self, received_email_payload):
        email = ReceivedEmail.from_dict(received_email_payload)

        assert email.recipients == ('delivered@resend.dev', 'support@example.com')

    def test_recipients_from_single_address(self, received_email_payload):
        """Test that a single `to` string becomes a one-element tuple."""
        received_email_payload['to'] = 'delivered@resend.dev'

        email = ReceivedEmail.from_dict(received_email_payload)

        assert email.recipients == ('delivered@resend.dev',)

    def test_recipients_missing(self):
        email = ReceivedEmail.from_dict({'id': 'abc'})

        assert email.recipients == ()

    def test_optional_fields_default_to_none(self):
        """Test that missing optional fields stay None."""
        email = ReceivedEmail.from_dict({'id': 'abc', 'from': 'a@example.com', 'to': 'b@example.com'})

        assert email.subject is None
        assert email.text is None
        assert email.html is None
        assert email.created_at == ''

    def test_from_dict_does_not_mutate_payload(self, received_email_payload):
        original = copy.deepcopy(received_email_payload)

        ReceivedEmail.from_dict(received_email_payload)

        assert received_email_payload == original

    def test_is_immutable(self, received_email_payload):
        email = ReceivedEmail.from_dict(received_email_payload)

        with pytest.raises(dataclasses.FrozenInstanceError):
            email.subject = 'Changed'


class TestAttachment:
    """Test Attachment dataclass."""

    def test_from_dict(self, attachment_payload):
        attachment = Attachment.from_dict(attachment_payload)

        assert attachment.id == '2a0c9ce0-3112-4728-976e-47ddcd16a318'
        assert attachment.filename == 'invoice.pdf'
        assert attachment.size == 51200
        assert attachment.content_type == 'application/pdf'
        assert attachment.content_disposition == 'attachment'
        assert attachment.content_id is None

    def test_missing_fields_default(self):
        """Test that an attachment without metadata still builds."""
        attachment = Attachment.from_dict({'id': 'a1'})

        assert attachment.filename == ''
        assert attachment.size == 0
        assert attachment.content_disposition is None


class TestDomain:
    """Test Domain and DnsRecord dataclasses."""

    def test_from_dict_with_records(self, domain_payload):
        domain = Domain.from_dict(domain_payload)

        assert domain.name == 'example.com'
        assert domain.status == 'verified'
        assert domain.region == 'us-east-1'
        assert domain.default is None
        assert len(domain.records) == 2
        assert domain.records[0].record == 'SPF'
        assert domain.records[0].value == 'feedback-smtp.us-east-1.amazonses.com'

    def test_record_from_dict(self, domain_payload):
        record = DnsRecord.from_dict(domain_payload['records'][1])

        assert record == DnsRecord(record='DKIM', value='p=MIGfMA0GCSqGSIb3DQEBAQUAA4GNADCBiQKBgQ')

    def test_from_dict_without_records(self):
        """Test list-style domain payload without DNS records."""
        domain = Domain.from_dict({
            'id': 'd1',
            'name': 'example.org',
            'status': 'pending',
            'region': 'eu-west-1',
            'created_at': '2025-01-01T00:00:00Z',
            'default': True,
        })

        assert domain.records == ()
        assert domain.default is True


class TestListEnvelope:
    """Test ListEnvelope normalization of list payloads."""

    def test_from_envelope_payload(self, email_list_payload):
        email_list_payload['has_more'] = True

        envelope = ListEnvelope.from_payload(email_list_payload, ReceivedEmail.from_dict)

        assert envelope.object == 'list'
        assert envelope.has_more is True
        assert len(envelope) == 2
        assert all(isinstance(e, ReceivedEmail) for e in envelope.data)

    def test_from_bare_array(self, attachment_payload):
        """Test that a bare JSON array is accepted as a page without more results."""
        envelope = ListEnvelope.from_payload([attachment_payload], Attachment.from_dict)

        assert envelope.object == 'list'
        assert envelope.has_more is False
        assert envelope.data[0].filename == 'invoice.pdf'

    def test_non_sequence_data_is_empty(self):
        envelope = ListEnvelope.from_payload({'object': 'list', 'data': 'oops'}, Attachment.from_dict)

        assert envelope.is_empty
        assert len(envelope) == 0

    def test_none_payload_is_empty(self):
        envelope = ListEnvelope.from_payload(None, Domain.from_dict)

        assert envelope.is_empty
        assert envelope.has_more is False

    def test_skips_non_dict_items(self, domain_payload):
        envelope = ListEnvelope.from_payload({'data': [domain_payload, None, 'x']}, Domain.from_dict)

        assert len(envelope) == 1
        assert envelope.data[0].name == 'example.com'
