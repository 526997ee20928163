"""Pydantic models for validating Gemini ``generateContent`` responses.

Only the fields the pipelines read are declared; everything else the API
returns (safety ratings, usage metadata, ...) is allowed through untouched.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class GeminiPart(BaseModel):
    text: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None

    model_config = ConfigDict(extra="allow")


class GenerateContentResponse(BaseModel):
    candidates: list[GeminiCandidate] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    def first_text(self) -> str | None:
        """Return the text of the first part of the first candidate, if any."""

        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text or None

    @classmethod
    def parse_text(cls, payload: str) -> str:
        """Validate a raw response body and return its generated text.

        Raises ``ResponseContractError`` when the body is not JSON, does not
        match the schema, or carries no text.
        """

        try:
            parsed = cls.model_validate_json(payload)
        except ValidationError as exc:
            raise ResponseContractError(str(exc)) from exc

        text = parsed.first_text()
        if text is None:
            raise ResponseContractError("Response carried no candidate text.")
        return text


class ResponseContractError(RuntimeError):
    """Raised when the Gemini response contract cannot be validated."""


__all__ = [
    "GeminiCandidate",
    "GeminiContent",
    "GeminiPart",
    "GenerateContentResponse",
    "ResponseContractError",
]
