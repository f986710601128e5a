"""Track layouts and their effect on car speed."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from .car import Car


@runtime_checkable
class TrackLayout(Protocol):
    """Anything that changes a car's behavior according to the track shape."""

    def apply_layout_effects(self, car: Car) -> None: ...


class Track(BaseModel):
    """A track layout that shifts car speed by a fixed amount per lap."""

    name: str = Field(..., description="Layout name used in status lines")
    speed_delta: float = Field(..., description="Speed change applied per lap")

    def apply_layout_effects(self, car: Car) -> None:
        car.speed += self.speed_delta
        change = "increased" if self.speed_delta >= 0 else "decreased"
        print(
            f"{self.name} track: Car speed {change} by {abs(self.speed_delta):g}. "
            f"Speed: {car.speed}"
        )


class OvalTrack(Track):
    """Long straights, the car carries more speed."""

    name: str = "Oval"
    speed_delta: float = 10.0


class CircuitTrack(Track):
    """Tight corners, the car loses speed."""

    name: str = "Circuit"
    speed_delta: float = -5.0
