"""
Command-line entry point for the Resend CLI.

Thin dispatch layer: parse arguments, create the API client once, run one
command and return its exit status.

Exit codes:
    0 - success
    1 - API failure, or a required payload was empty
    2 - RESEND_API_KEY missing (or invalid command-line usage)
"""

import argparse
import functools
import logging
import os
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv

from resend_cli import __version__
from resend_cli.domain.models import Attachment, Domain, ListEnvelope, ReceivedEmail
from resend_cli.integrations.resend_api import ConfigurationError, ResendClient, create_client
from resend_cli.services import rendering

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2

DEFAULT_EMAIL_LIMIT = 10


class EmptyResultError(Exception):
    """Raised when a call succeeds but returns no payload where one is required."""
    pass


def configure_logging(verbose: bool = False) -> None:
    """
    Configure the package logger to write to stderr.

    Level comes from LOG_LEVEL (default WARNING); --verbose forces DEBUG.
    stdout is reserved for command output.
    """
    package_logger = logging.getLogger('resend_cli')

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.environ.get('LOG_LEVEL', 'WARNING').upper(), logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    package_logger.setLevel(level)

    if not package_logger.handlers:
        console_handler = logging.StreamHandler()
        formatter = logging.Formatter('%(levelname)s - %(message)s')
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)


def command_action(func: Callable[[ResendClient, argparse.Namespace], None]) -> Callable[[ResendClient, argparse.Namespace], int]:
    """
    Wrap a command with the CLI error boundary.

    Any exception raised by the API call or by rendering is reported on
    stderr and turned into exit status 1. Output already printed stays.
    """
    @functools.wraps(func)
    def wrapper(client: ResendClient, args: argparse.Namespace) -> int:
        try:
            func(client, args)
        except EmptyResultError as e:
            logger.debug(f"{func.__name__}: empty result")
            print(str(e), file=sys.stderr)
            return EXIT_FAILURE
        except Exception as e:
            logger.debug(f"{func.__name__} failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FAILURE
        return EXIT_OK

    return wrapper


# ============================================================================
# Email commands
# ============================================================================

@command_action
def email_list(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.list_received_emails(limit=args.limit)
    if result is None:
        raise EmptyResultError('No email data returned')

    if args.json:
        print(rendering.render_json(result))
        return

    envelope = ListEnvelope.from_payload(result, ReceivedEmail.from_dict)
    if envelope.is_empty:
        print('No received emails found')
        return
    print(rendering.format_email_list(envelope))


@command_action
def email_get(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.get_received_email(args.id)
    if not result:
        raise EmptyResultError('No email data returned')

    if args.json:
        print(rendering.render_json(result))
    else:
        print(rendering.format_email_detail(ReceivedEmail.from_dict(result)))


@command_action
def email_attachments(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.list_attachments(args.email_id)
    if result is None:
        raise EmptyResultError('No attachment data returned')

    if args.json:
        print(rendering.render_json(result))
        return

    envelope = ListEnvelope.from_payload(result, Attachment.from_dict)
    if envelope.is_empty:
        print('No attachments found')
        return
    print(rendering.format_attachment_list(envelope))


@command_action
def email_attachment(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.get_attachment(args.email_id, args.attachment_id)
    if not result:
        raise EmptyResultError('No attachment data returned')

    if args.output:
        attachment = Attachment.from_dict(result)
        print(rendering.format_attachment_download_notice(attachment, args.output))
    elif args.json:
        print(rendering.render_json(result))
    else:
        print(rendering.format_attachment_detail(Attachment.from_dict(result)))


# ============================================================================
# Domain commands
# ============================================================================

@command_action
def domain_list(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.list_domains()
    if result is None:
        raise EmptyResultError('No domain data returned')

    if args.json:
        print(rendering.render_json(result))
        return

    envelope = ListEnvelope.from_payload(result, Domain.from_dict)
    if envelope.is_empty:
        print('No domains found')
        return
    print(rendering.format_domain_list(envelope))


@command_action
def domain_get(client: ResendClient, args: argparse.Namespace) -> None:
    result = client.get_domain(args.id)
    if not result:
        raise EmptyResultError('No domain data returned')

    if args.json:
        print(rendering.render_json(result))
    else:
        print(rendering.format_domain_detail(Domain.from_dict(result)))


# ============================================================================
# Parser
# ============================================================================

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-j', '--json', action='store_true', help='JSON output')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='resend',
        description='Resend email API CLI',
    )
    parser.add_argument('--version', action='version', version=__version__)
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Write debug logs to stderr.',
    )
    groups = parser.add_subparsers(dest='group', metavar='<command>')

    # email
    email_parser = groups.add_parser(
        'email',
        help='Manage received emails (inbound)',
        description='Manage received emails (inbound)',
    )
    email_parser.set_defaults(group_parser=email_parser)
    email_commands = email_parser.add_subparsers(dest='command', metavar='<subcommand>')

    list_parser = email_commands.add_parser('list', help='List received emails (inbound)')
    _add_json_flag(list_parser)
    list_parser.add_argument(
        '-l', '--limit',
        type=positive_int,
        default=DEFAULT_EMAIL_LIMIT,
        help=f"Number of emails to retrieve (default: {DEFAULT_EMAIL_LIMIT})",
    )
    list_parser.set_defaults(handler=email_list)

    get_parser = email_commands.add_parser('get', help='Get received email details (inbound)')
    get_parser.add_argument('id', help='Email ID')
    _add_json_flag(get_parser)
    get_parser.set_defaults(handler=email_get)

    attachments_parser = email_commands.add_parser(
        'attachments',
        help='List attachments for a received email (inbound)',
    )
    attachments_parser.add_argument('email_id', help='Email ID')
    _add_json_flag(attachments_parser)
    attachments_parser.set_defaults(handler=email_attachments)

    attachment_parser = email_commands.add_parser(
        'attachment',
        help='Get a specific attachment from a received email (inbound)',
    )
    attachment_parser.add_argument('email_id', help='Email ID')
    attachment_parser.add_argument('attachment_id', help='Attachment ID')
    _add_json_flag(attachment_parser)
    attachment_parser.add_argument(
        '-o', '--output',
        metavar='PATH',
        help='Show download details for the attachment (metadata only, no file is written)',
    )
    attachment_parser.set_defaults(handler=email_attachment)

    # domain
    domain_parser = groups.add_parser(
        'domain',
        help='Manage domains',
        description='Manage domains',
    )
    domain_parser.set_defaults(group_parser=domain_parser)
    domain_commands = domain_parser.add_subparsers(dest='command', metavar='<subcommand>')

    domain_list_parser = domain_commands.add_parser('list', help='List domains')
    _add_json_flag(domain_list_parser)
    domain_list_parser.set_defaults(handler=domain_list)

    domain_get_parser = domain_commands.add_parser('get', help='Get domain details')
    domain_get_parser.add_argument('id', help='Domain ID')
    _add_json_flag(domain_get_parser)
    domain_get_parser.set_defaults(handler=domain_get)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one CLI invocation.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        int: Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handler = getattr(args, 'handler', None)
    if handler is None:
        # Bare group or bare program: show help, touch nothing
        getattr(args, 'group_parser', parser).print_help()
        return EXIT_OK

    try:
        client = create_client()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION

    logger.debug(f"Running {args.group} {args.command}")
    return handler(client, args)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    raise SystemExit(main())
