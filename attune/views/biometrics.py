"""Schemas for biometric samples and the analysis/summary responses."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class BiometricSample(BaseModel):
    """One reading captured during a conversation.

    Field names follow the capture app's wire format (``Pulse``, ``Breath``,
    ``Time``, ``Image``); snake_case names are accepted as well.
    """

    pulse: Optional[Number] = Field(default=None, alias="Pulse")
    breath: Optional[Number] = Field(default=None, alias="Breath")
    time: Optional[Number] = Field(default=None, alias="Time")
    image: Optional[str] = Field(default=None, alias="Image")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SampleMetrics(BaseModel):
    heartRate: Number
    breathRate: Number


class AnalysisSuccess(BaseModel):
    analysis: str
    expression: str
    timestamp: Number
    metrics: SampleMetrics


class AnalysisFailure(BaseModel):
    error: str
    timestamp: Number
    metrics: SampleMetrics


class AnalysisBatchResponse(BaseModel):
    results: list[Union[AnalysisSuccess, AnalysisFailure]]
    totalProcessed: int


class SessionStatistics(BaseModel):
    avgHeartRate: str
    maxHeartRate: Number
    minHeartRate: Number


class SessionSummaryResponse(BaseModel):
    summary: str
    eventCount: Optional[int] = None
    duration: Optional[Number] = None
    statistics: Optional[SessionStatistics] = None
