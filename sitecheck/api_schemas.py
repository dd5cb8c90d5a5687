from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    workers: int = Field(ge=1)
    timeout_s: float = Field(gt=0)
    retries: int = Field(ge=0)
    report_path: str


class ReportRecord(BaseModel):
    url: str
    status_code: int | None = None
    response_time_ms: int = Field(ge=0)
    timestamp: str
    error: str | None = None

    @model_validator(mode="after")
    def _status_xor_error(self) -> "ReportRecord":
        if (self.status_code is None) == (self.error is None):
            raise ValueError("exactly one of status_code and error must be set")
        return self


class CheckRunRequest(BaseModel):
    targets: list[str] = Field(default_factory=list)
    workers: int | None = Field(default=None, ge=1)
    timeout_s: float | None = Field(default=None, gt=0)
    retries: int | None = Field(default=None, ge=0)


class CheckRunResponse(BaseModel):
    generated_at: str
    count: int
    reachable: int
    failed: int
    failed_urls: list[str] = Field(default_factory=list)
    note: str | None = None
    results: list[ReportRecord] = Field(default_factory=list)
