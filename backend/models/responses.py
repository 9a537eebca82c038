from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = ""
    version: str = ""


class MatchmakingResponse(BaseModel):
    # Caller's mentor fields plus "matchReasoning"; kept as plain dicts so
    # nothing is added or reshaped on the way out.
    mentors: list[dict[str, Any]] = []


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    message: str = "Invalid request payload"
    errors: list[FieldError] = []


class DemoMentorsResponse(BaseModel):
    mentors: list[dict[str, Any]] = []
