"""Pit stop service."""

from pydantic import BaseModel, Field

from .car import Car


class PitStop(BaseModel):
    """Refuels the car and fits fresh tires."""

    refuel_level: float = Field(default=100.0, description="Fuel level after the stop")
    fresh_tire_condition: float = Field(
        default=100.0,
        description="Tire condition after the stop",
    )

    def perform_pit_stop(self, car: Car) -> None:
        car.tire_condition = self.fresh_tire_condition
        car.fuel_level = self.refuel_level
        print(
            f"Performed pit stop. Tire Condition: {car.tire_condition}, "
            f"Fuel Level: {car.fuel_level}"
        )
