"""Car state model."""

from pydantic import BaseModel, ConfigDict, Field

from .aero import AerodynamicConfig
from .tire import TireChoice


class Car(BaseModel):
    """Represents a race car and the few numbers that change during a race.

    Nothing is clamped: speed can drop below zero and fuel or tires can run
    past empty.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    speed: float = Field(default=0.0, description="Current speed")
    fuel_level: float = Field(default=100.0, description="Fuel left (100 = full tank)")
    tire_condition: float = Field(default=100.0, description="Tire wear left (100 = new)")

    # Setup strategies, applied once at the start of a race
    aerodynamic_config: AerodynamicConfig | None = Field(
        default=None,
        description="Aero setup applied before the start",
    )
    tire_choice: TireChoice | None = Field(
        default=None,
        description="Tire set fitted before the start",
    )

    def accelerate(self) -> None:
        self.speed += 10
        self.fuel_level -= 1
        print(f"Car is accelerating. Speed: {self.speed}, Fuel Level: {self.fuel_level}")

    def brake(self) -> None:
        self.speed -= 10
        print(f"Car is braking. Speed: {self.speed}")

    def handle_turn(self) -> None:
        self.tire_condition -= 5
        print(f"Car is turning. Tire Condition: {self.tire_condition}")

    def snapshot(self) -> dict[str, float]:
        """Current numeric state of the car."""
        return {
            "speed": self.speed,
            "fuel_level": self.fuel_level,
            "tire_condition": self.tire_condition,
        }
