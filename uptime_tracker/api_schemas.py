from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    uptime_api_url: str | None = Field(default=None)
    uptime_api_timeout_seconds: float | None = Field(default=None)
    ui_refresh_seconds: int = Field(ge=1)


class CheckRequestBody(BaseModel):
    url: str = Field(..., min_length=1, description="Website URL to check")


class RegionResultResponse(BaseModel):
    region: str
    status: str
    responseTime: int | float | None = None


class NoticeResponse(BaseModel):
    id: int
    level: str
    message: str
    created_at: str


class UIStateResponse(BaseModel):
    loading: bool
    results: list[RegionResultResponse] | None = None
    request_seq: int = 0
    notice: NoticeResponse | None = None


class CheckOutcomeResponse(BaseModel):
    ok: bool
    seq: int
    results: list[RegionResultResponse] | None = None
    kind: Literal["transport", "http", "parse", "config", "superseded"] | None = None
    error: str | None = Field(
        default=None, description="Generic user-facing message when ok is false"
    )


class NoticeDismissRequest(BaseModel):
    notice_id: int | None = Field(default=None, description="Dismiss only this notice")


class NoticeDismissResponse(BaseModel):
    dismissed: bool
