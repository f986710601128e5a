"""Driver capabilities.

Capabilities are split into single-method protocols so a driver only has to
provide what it can actually do. ``Driver`` is the full set a race needs.
"""

from typing import Protocol, runtime_checkable

from .car import Car


@runtime_checkable
class Acceleration(Protocol):
    def accelerate(self, car: Car) -> None: ...


@runtime_checkable
class Braking(Protocol):
    def brake(self, car: Car) -> None: ...


@runtime_checkable
class Cornering(Protocol):
    def handle_turn(self, car: Car) -> None: ...


@runtime_checkable
class Driver(Acceleration, Braking, Cornering, Protocol):
    """A driver able to accelerate, brake and take corners."""


class RecklessDriver:
    """Only knows the throttle and the brake pedal."""

    name = "Reckless"

    def accelerate(self, car: Car) -> None:
        print("Reckless driver is accelerating aggressively.")
        car.accelerate()

    def brake(self, car: Car) -> None:
        print("Reckless driver is braking aggressively.")
        car.brake()


class ProfessionalDriver:
    name = "Professional"

    def accelerate(self, car: Car) -> None:
        print("Professional driver is accelerating smoothly.")
        car.accelerate()

    def brake(self, car: Car) -> None:
        print("Professional driver is braking smoothly.")
        car.brake()

    def handle_turn(self, car: Car) -> None:
        print("Professional driver is handling the turn expertly.")
        car.handle_turn()


class AmateurDriver:
    name = "Amateur"

    def accelerate(self, car: Car) -> None:
        print("Amateur driver is accelerating cautiously.")
        car.accelerate()

    def brake(self, car: Car) -> None:
        print("Amateur driver is braking cautiously.")
        car.brake()

    def handle_turn(self, car: Car) -> None:
        print("Amateur driver is handling the turn cautiously.")
        car.handle_turn()
