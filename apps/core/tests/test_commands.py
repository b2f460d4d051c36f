from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, TestCase, override_settings

from apps.core.management.commands.serve import parse_server_address
from apps.tasks.models import Task


class ParseServerAddressTest(SimpleTestCase):
    def test_host_and_port(self):
        self.assertEqual(parse_server_address("127.0.0.1:3000"), ("127.0.0.1", 3000))

    def test_hostname(self):
        self.assertEqual(parse_server_address("localhost:8080"), ("localhost", 8080))

    def test_bracketed_ipv6(self):
        self.assertEqual(parse_server_address("[::1]:3000"), ("::1", 3000))

    def test_missing_port(self):
        with self.assertRaises(CommandError):
            parse_server_address("127.0.0.1")

    def test_non_numeric_port(self):
        with self.assertRaises(CommandError):
            parse_server_address("127.0.0.1:http")

    def test_port_out_of_range(self):
        with self.assertRaises(CommandError):
            parse_server_address("127.0.0.1:70000")


class ServeCommandTest(SimpleTestCase):
    @override_settings(SERVER_ADDRESS="0.0.0.0:4000")
    def test_serves_configured_address(self):
        out = StringIO()
        with patch('apps.core.management.commands.serve.uvicorn.run') as run:
            call_command('serve', stdout=out)

        run.assert_called_once()
        args, kwargs = run.call_args
        self.assertEqual(args[0], 'config.asgi:application')
        self.assertEqual(kwargs['host'], '0.0.0.0')
        self.assertEqual(kwargs['port'], 4000)
        self.assertIn('Listening on 0.0.0.0:4000', out.getvalue())

    def test_addr_option_overrides_settings(self):
        with patch('apps.core.management.commands.serve.uvicorn.run') as run:
            call_command('serve', addr='127.0.0.1:9000', stdout=StringIO())

        self.assertEqual(run.call_args.kwargs['port'], 9000)

    def test_invalid_address_does_not_start_server(self):
        with patch('apps.core.management.commands.serve.uvicorn.run') as run:
            with self.assertRaises(CommandError):
                call_command('serve', addr='nonsense', stdout=StringIO())

        run.assert_not_called()


class SeedCommandTest(TestCase):
    def test_seed_creates_sample_tasks(self):
        call_command('seed', stdout=StringIO())
        self.assertEqual(Task.objects.count(), 5)
        self.assertTrue(Task.objects.filter(name='Buy milk', priority=2).exists())

    def test_seed_clean_replaces_existing(self):
        Task.objects.create(name='old task')
        call_command('seed', clean=True, stdout=StringIO())

        self.assertEqual(Task.objects.count(), 5)
        self.assertFalse(Task.objects.filter(name='old task').exists())
