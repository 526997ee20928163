"""SQLAlchemy models for the MVC architecture."""

from .base import Base
from .log import RequestLog  # noqa: F401
from .task import Task  # noqa: F401

__all__ = [
    "Base",
    "RequestLog",
    "Task",
]
