"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from attune.database import get_session
from attune.services import GeminiClient, SpeechClient, get_gemini_client, get_speech_client

SessionDep = Annotated[AsyncSession, Depends(get_session)]
GeminiDep = Annotated[GeminiClient, Depends(get_gemini_client)]
SpeechDep = Annotated[SpeechClient, Depends(get_speech_client)]


__all__ = ["GeminiDep", "SessionDep", "SpeechDep"]
