"""
Data access for tasks.

Each function issues a single SQL statement against the database alias it is
given. The alias selects the connection (and, on PostgreSQL, the connection
pool) so callers decide which storage to use.
"""
import logging
from typing import List

from django.db import DEFAULT_DB_ALIAS, transaction

from .models import Task
from .dtos import TaskIn, TaskUpdateIn

logger = logging.getLogger(__name__)


def list_tasks(using: str = DEFAULT_DB_ALIAS) -> List[Task]:
    """Return every task, ordered by task_id ascending."""
    return list(Task.objects.using(using).order_by('task_id'))


def create_task(payload: TaskIn, using: str = DEFAULT_DB_ALIAS) -> int:
    """Insert a task and return the id assigned by the database."""
    with transaction.atomic(using=using):
        task = Task.objects.using(using).create(
            name=payload.name,
            priority=payload.priority,
        )
    logger.info(f"Created task {task.task_id}")
    return task.task_id


def update_task(task_id: int, payload: TaskUpdateIn, using: str = DEFAULT_DB_ALIAS) -> int:
    """
    Overwrite name and priority of a task.

    Both columns are always assigned, so a field missing from the payload is
    written as NULL. Returns the number of rows changed (0 when the id does
    not exist).
    """
    with transaction.atomic(using=using):
        updated = Task.objects.using(using).filter(task_id=task_id).update(
            name=payload.name,
            priority=payload.priority,
        )
    logger.info(f"Updated task {task_id} ({updated} row(s))")
    return updated


def delete_task(task_id: int, using: str = DEFAULT_DB_ALIAS) -> int:
    """Delete a task by id. Returns the number of rows removed."""
    with transaction.atomic(using=using):
        deleted, _ = Task.objects.using(using).filter(task_id=task_id).delete()
    logger.info(f"Deleted task {task_id} ({deleted} row(s))")
    return deleted
