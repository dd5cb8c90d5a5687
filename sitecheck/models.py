from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PoolConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    worker_count: int = Field(..., ge=1)
    timeout_s: float = Field(..., gt=0, allow_inf_nan=False)
    retries: int = Field(default=0, ge=0)


class Defaults(BaseModel):
    workers: Optional[int] = Field(default=None, ge=1)
    timeout_s: Optional[float] = Field(default=None, gt=0)
    retries: Optional[int] = Field(default=None, ge=0)


class TargetFile(BaseModel):
    defaults: Defaults = Defaults()
    targets: List[str] = Field(default_factory=list)

    @field_validator("targets", mode="before")
    @classmethod
    def _strip_blank(cls, value):
        if value is None:
            return []
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
