"""Pydantic schemas used as views in the MVC architecture."""

from .biometrics import (
    AnalysisBatchResponse,
    AnalysisFailure,
    AnalysisSuccess,
    BiometricSample,
    SampleMetrics,
    SessionStatistics,
    SessionSummaryResponse,
)
from .common import ErrorResponse
from .tasks import TaskCreate, TaskListResponse, TaskRead, TaskResponse
from .tts import (
    SpeechAudioResult,
    SpeechBatchResponse,
    SpeechFailure,
    TextToSpeechItem,
    TextToSpeechPayload,
    TextToSpeechRequest,
)

__all__ = [
    "AnalysisBatchResponse",
    "AnalysisFailure",
    "AnalysisSuccess",
    "BiometricSample",
    "SampleMetrics",
    "SessionStatistics",
    "SessionSummaryResponse",
    "ErrorResponse",
    "TaskCreate",
    "TaskListResponse",
    "TaskRead",
    "TaskResponse",
    "SpeechAudioResult",
    "SpeechBatchResponse",
    "SpeechFailure",
    "TextToSpeechItem",
    "TextToSpeechPayload",
    "TextToSpeechRequest",
]
