"""Shared API DTOs."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ErrorResponseDTO(BaseModel):
    """Uniform error envelope returned by every failed API call."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
