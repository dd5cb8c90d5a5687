from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CheckOutcome:
    url: str
    status_code: int | None = None
    error: str | None = None
    elapsed: timedelta = timedelta(0)
    observed_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        if (self.status_code is None) == (self.error is None):
            raise ValueError("exactly one of status_code and error must be set")

    @property
    def ok(self) -> bool:
        return self.status_code is not None

    @classmethod
    def success(
        cls,
        url: str,
        status_code: int,
        elapsed: timedelta,
        observed_at: datetime | None = None,
    ) -> CheckOutcome:
        return cls(
            url=url,
            status_code=status_code,
            elapsed=elapsed,
            observed_at=observed_at or utcnow(),
        )

    @classmethod
    def failure(
        cls,
        url: str,
        error: str,
        elapsed: timedelta = timedelta(0),
        observed_at: datetime | None = None,
    ) -> CheckOutcome:
        return cls(
            url=url,
            error=error,
            elapsed=elapsed,
            observed_at=observed_at or utcnow(),
        )
