"""
Serve the task API with uvicorn.

Usage:
    python manage.py serve                 # binds SERVER_ADDRESS (127.0.0.1:3000)
    python manage.py serve --addr 0.0.0.0:8000
"""
import logging
from typing import Tuple

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


def parse_server_address(address: str) -> Tuple[str, int]:
    """
    Split "host:port" into its parts.
    IPv6 hosts must be bracketed, e.g. "[::1]:3000".
    """
    host, sep, port = address.strip().rpartition(':')
    if not sep or not host or not port:
        raise CommandError(f"Invalid server address: {address!r} (expected host:port)")

    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]

    try:
        port_number = int(port)
    except ValueError:
        raise CommandError(f"Invalid port in server address: {address!r}")
    if not 0 < port_number < 65536:
        raise CommandError(f"Port out of range in server address: {address!r}")

    return host, port_number


class Command(BaseCommand):
    help = 'Serves the task API over HTTP with uvicorn'

    def add_arguments(self, parser):
        parser.add_argument(
            '--addr',
            default=None,
            help='host:port to bind (defaults to SERVER_ADDRESS)',
        )

    def handle(self, *args, **options):
        address = options['addr'] or settings.SERVER_ADDRESS
        host, port = parse_server_address(address)

        self.stdout.write(self.style.SUCCESS(f'Listening on {host}:{port}'))
        logger.info(f"Starting uvicorn on {host}:{port}")

        uvicorn.run(
            'config.asgi:application',
            host=host,
            port=port,
            log_level=settings.LOG_LEVEL.lower(),
        )
