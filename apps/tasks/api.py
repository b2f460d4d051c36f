"""
Tasks API endpoints.

Provides list/create/update/delete over the tasks table. Storage failures are
returned as a 500 envelope carrying the database error text.
"""
import logging

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpRequest
from ninja import Router, Path

from .dtos import (
    INT32_MIN, INT32_MAX,
    TaskIn, TaskUpdateIn,
    TaskListOut, TaskCreatedOut, SuccessOut, ErrorOut,
)
from . import services

logger = logging.getLogger(__name__)

router = Router(tags=["Tasks"])


# =============================================================================
# Helper Functions
# =============================================================================

def get_database() -> str:
    """Database alias the handlers run their queries against."""
    return settings.TASKS_DATABASE


def storage_error(exc: DatabaseError):
    """Translate a database failure into the error envelope."""
    logger.exception(f"Task storage failure: {exc}")
    return 500, {"success": False, "message": str(exc)}


# =============================================================================
# Task Endpoints
# =============================================================================

@router.get("", response={200: TaskListOut, 500: ErrorOut})
def get_tasks(request: HttpRequest):
    """
    List all tasks ordered by task_id.
    """
    try:
        tasks = services.list_tasks(using=get_database())
    except DatabaseError as e:
        return storage_error(e)
    return 200, {"success": True, "data": tasks}


@router.post("", response={201: TaskCreatedOut, 500: ErrorOut})
def create_task_api(request: HttpRequest, payload: TaskIn):
    """
    Create a task. Returns the id assigned by the database.
    """
    try:
        task_id = services.create_task(payload, using=get_database())
    except DatabaseError as e:
        return storage_error(e)
    return 201, {"success": True, "data": {"task_id": task_id}}


@router.patch("/{task_id}", response={200: SuccessOut, 500: ErrorOut})
def update_task_api(
    request: HttpRequest,
    payload: TaskUpdateIn,
    task_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
):
    """
    Overwrite name and priority of a task.

    Fields missing from the body are stored as NULL. Succeeds even when no
    task has the given id.
    """
    try:
        services.update_task(task_id, payload, using=get_database())
    except DatabaseError as e:
        return storage_error(e)
    return 200, {"success": True}


@router.delete("/{task_id}", response={200: SuccessOut, 500: ErrorOut})
def delete_task_api(
    request: HttpRequest,
    task_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
):
    """
    Delete a task. Deleting a missing id is a successful no-op.
    """
    try:
        services.delete_task(task_id, using=get_database())
    except DatabaseError as e:
        return storage_error(e)
    return 200, {"success": True}
