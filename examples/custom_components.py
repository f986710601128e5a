#!/usr/bin/env python3
"""Example: plug new components into a race without touching the core.

A new track layout, tire set and driver are added here purely by providing
the methods the race expects.

Usage:
    python examples/custom_components.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from solidrace.models import (
    Car,
    HighDragConfig,
    PitStop,
    RecklessDriver,
    TireCompound,
    TireSet,
    Track,
    Weather,
    WeatherCondition,
)
from solidrace.output import ConsoleOutput
from solidrace.simulation import IncompleteDriverError, Race, RaceScheduler


class StreetTrack(Track):
    """Walls everywhere, lots of braking."""

    name: str = "Street"
    speed_delta: float = -8.0


class RookieDriver:
    name = "Rookie"

    def accelerate(self, car: Car) -> None:
        print("Rookie driver is accelerating nervously.")
        car.accelerate()

    def brake(self, car: Car) -> None:
        print("Rookie driver is braking late.")
        car.brake()

    def handle_turn(self, car: Car) -> None:
        print("Rookie driver is running wide in the turn.")
        car.handle_turn()


def main():
    scheduler = RaceScheduler()
    car = Car(aerodynamic_config=HighDragConfig(), tire_choice=TireSet(compound=TireCompound.HARD))

    race = Race(
        car=car,
        driver=RookieDriver(),
        track_layout=StreetTrack(),
        weather=Weather(condition=WeatherCondition.CLOUDY),
        pit_stop=PitStop(),
        scheduler=scheduler,
        name="Rookie on streets",
    )
    ConsoleOutput.print_race_banner(race)
    race.start_race()
    scheduler.run()
    ConsoleOutput.print_race_summary([race.summary()])

    # A driver that cannot corner is turned away before the race starts
    try:
        Race(car, RecklessDriver(), StreetTrack(), Weather(), PitStop())
    except IncompleteDriverError as e:
        print(f"\nRejected: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
