"""Run settings for the demo races."""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RaceSettings(BaseModel):
    """How the demo races are run."""

    step_interval: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between race steps",
    )
    realtime: bool = Field(
        default=False,
        description="Wait out the step interval instead of firing steps immediately",
    )
    shared_car: bool = Field(
        default=False,
        description="Race both drivers with the same car instance",
    )
    show_summary: bool = Field(
        default=True,
        description="Print the summary table after the races",
    )
    log_level: LogLevel = Field(default="WARNING", description="Logging level name")
