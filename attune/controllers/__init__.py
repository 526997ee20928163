"""FastAPI routers acting as controllers in the MVC architecture."""

from . import analysis, summary, tasks, tts

__all__ = ["analysis", "summary", "tasks", "tts"]
