"""Pydantic schemas for to-do tasks."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    completed: bool = False
    due_date: datetime


class TaskRead(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    completed: bool
    due_date: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskResponse(BaseModel):
    success: bool = True
    task: TaskRead


class TaskListResponse(BaseModel):
    success: bool = True
    tasks: list[TaskRead]
