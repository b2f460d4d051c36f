"""
ASGI config for the task service.

Served by uvicorn through `python manage.py serve`, or by any other ASGI
server pointed at `config.asgi:application`.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at import time so the first request doesn't pay for it
application = get_asgi_application()
