from __future__ import annotations

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Defaults(BaseModel):
    workers: Optional[int] = Field(default=None, ge=1)
    timeout_s: Optional[float] = Field(default=None, gt=0)
    retries: Optional[int] = Field(default=None, ge=0)


class UrlList(BaseModel):
    defaults: Defaults = Defaults()
    urls: List[str] = Field(default_factory=list)


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    worker_count: int = Field(..., ge=1)
    timeout_s: float = Field(..., gt=0)
    max_retries: int = Field(default=0, ge=0)
    retry_delay_s: float = Field(default=0.1, ge=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    urls: Tuple[str, ...] = Field(..., min_length=1)
