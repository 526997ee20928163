"""Per-request log rows, written when ``PERSIST_REQUEST_LOGS`` is enabled."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Integer, String

from .base import Base


class RequestLog(Base):
    __tablename__ = "request_logs"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    method = Column(String(10), nullable=False)
    path = Column(String(2048), nullable=False)
    # Matched route pattern; null for requests that hit no route.
    route = Column(String(255), nullable=True, index=True)
    status_code = Column(Integer, nullable=False)
    client_ip = Column(String(64), nullable=True)
    duration_ms = Column(Float, nullable=True)


__all__ = ["RequestLog"]
