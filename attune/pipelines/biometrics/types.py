"""Typed containers shared across the biometrics pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from attune.views import BiometricSample
from attune.views.biometrics import Number


@dataclass(frozen=True)
class SampleReading:
    """A biometric sample with absent readings replaced by zero."""

    heart_rate: Number
    breath_rate: Number
    timestamp: Number
    image_base64: str

    @classmethod
    def from_sample(cls, sample: BiometricSample) -> "SampleReading":
        return cls(
            heart_rate=sample.pulse or 0,
            breath_rate=sample.breath or 0,
            timestamp=sample.time or 0,
            image_base64=sample.image or "",
        )


@dataclass(frozen=True)
class PulseStatistics:
    """Aggregate pulse figures for one session."""

    average: float
    maximum: Number
    minimum: Number

    @classmethod
    def from_samples(cls, samples: list[BiometricSample]) -> "PulseStatistics":
        # Missing pulses count as 0, which drags the figures down.
        pulses = [sample.pulse or 0 for sample in samples]
        return cls(
            average=sum(pulses) / len(pulses),
            maximum=max(pulses),
            minimum=min(pulses),
        )
