"""Domain models for the feeding schedule."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from feeding_schedule.domain.errors import ConfigurationError

DEFAULT_MEALS_PER_DAY = 7
DEFAULT_WINDOW_START = time(7, 30)
DEFAULT_WINDOW_END = time(23, 0)
INTERVAL_STEP_SECONDS = 5 * 60


@dataclass(frozen=True)
class ScheduleConfig:
    """Feeding parameters used to generate a month of meal slots."""

    meals_per_day: int = DEFAULT_MEALS_PER_DAY
    window_start: time = DEFAULT_WINDOW_START
    window_end: time = DEFAULT_WINDOW_END

    def validate(self) -> None:
        """Raise ConfigurationError when the parameters are unusable."""
        if self.meals_per_day < 2:
            raise ConfigurationError(
                f"meals_per_day must be at least 2, got {self.meals_per_day}"
            )
        if self.window_end <= self.window_start:
            raise ConfigurationError(
                "window_end must be later than window_start "
                f"({self.window_start.isoformat()} >= {self.window_end.isoformat()})"
            )
        if self.window_length() / (self.meals_per_day - 1) < timedelta(
            seconds=INTERVAL_STEP_SECONDS
        ):
            raise ConfigurationError(
                f"Feeding window of {self.window_length()} is too short for "
                f"{self.meals_per_day} meals per day"
            )

    def window_length(self) -> timedelta:
        anchor = date(2000, 1, 1)
        return datetime.combine(anchor, self.window_end) - datetime.combine(
            anchor, self.window_start
        )


@dataclass(frozen=True)
class MealSlot:
    """A planned meal within a day."""

    serving_number: int
    scheduled_at: datetime
    status: bool = False


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a store write."""

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> "WriteResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "WriteResult":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class ScheduleRunReport:
    """Summary of one initialization pass."""

    config: ScheduleConfig
    config_created: bool
    generated_months: list[tuple[int, int]] = field(default_factory=list)

    def summary(self) -> str:
        """Return a one-line description of the pass."""
        window = (
            f"{self.config.window_start.isoformat(timespec='minutes')}-"
            f"{self.config.window_end.isoformat(timespec='minutes')}"
        )
        months = ", ".join(
            f"{year:04d}-{month:02d}" for year, month in self.generated_months
        )
        return (
            f"{self.config.meals_per_day} meals/day {window}; "
            f"generated months: {months or 'none'}"
        )
