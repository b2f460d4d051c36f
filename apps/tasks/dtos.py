"""
Request and response schemas for the tasks API.

Every non-root response is wrapped in an envelope:
    {"success": true, "data": ...}   on success
    {"success": false, "message": ...} on storage failure
"""
from typing import List, Optional
from ninja import Schema, Field

# Column range of the INTEGER type used for task_id and priority
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class TaskIn(Schema):
    """Body of POST /tasks."""
    name: str
    priority: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)


class TaskUpdateIn(Schema):
    """
    Body of PATCH /tasks/{task_id}.
    Both fields are written on update; an omitted field is stored as NULL.
    """
    name: Optional[str] = None
    priority: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)


class TaskOut(Schema):
    task_id: int
    name: str
    priority: Optional[int] = None


class TaskIdOut(Schema):
    task_id: int


class TaskListOut(Schema):
    success: bool
    data: List[TaskOut]


class TaskCreatedOut(Schema):
    success: bool
    data: TaskIdOut


class SuccessOut(Schema):
    success: bool


class ErrorOut(Schema):
    """Storage failure; message carries the database error text."""
    success: bool
    message: str
