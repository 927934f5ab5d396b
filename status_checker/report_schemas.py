from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusOk(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: int = Field(alias="Ok", ge=0, le=65535)


class StatusErr(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    err: str = Field(alias="Err")


class ResultEntry(BaseModel):
    url: str
    status: StatusOk | StatusErr
    response_time_ms: int = Field(ge=0)
    timestamp: str


class SummaryEntry(BaseModel):
    count: int = Field(ge=1)
    min_ms: int = Field(ge=0)
    max_ms: int = Field(ge=0)
    avg_ms: float = Field(ge=0)


class ReportConfig(BaseModel):
    workers: int = Field(ge=1)
    timeout_s: float = Field(gt=0)
    retries: int = Field(ge=0)
    url_count: int = Field(ge=1)


class StatusReport(BaseModel):
    generated_at: str
    started_at: str
    finished_at: str
    config: ReportConfig
    results: list[ResultEntry]
    summary: Optional[SummaryEntry] = None
