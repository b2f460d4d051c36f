from django.core.management.base import BaseCommand
from django.db import transaction

from apps.tasks.models import Task

SAMPLE_TASKS = [
    {'name': 'Buy milk', 'priority': 2},
    {'name': 'Renew passport', 'priority': 1},
    {'name': 'Water the plants', 'priority': None},
    {'name': 'Book dentist appointment', 'priority': 3},
    {'name': 'Clean the garage', 'priority': None},
]


class Command(BaseCommand):
    help = 'Seeds the database with sample tasks for testing.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if options['clean']:
                deleted, _ = Task.objects.all().delete()
                self.stdout.write(self.style.WARNING(f'Deleted {deleted} task(s)'))

            for item in SAMPLE_TASKS:
                task = Task.objects.create(**item)
                self.stdout.write(self.style.SUCCESS(f'Created task: {task}'))

        self.stdout.write(self.style.SUCCESS(f'Seeded {len(SAMPLE_TASKS)} task(s)'))
