"""Race orchestration."""

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from solidrace.models import Car, Driver, PitStop, TrackLayout, Weather
from solidrace.simulation.events import RaceScheduler

logger = logging.getLogger(__name__)


class IncompleteDriverError(TypeError):
    """Raised when a driver lacks one of the capabilities a race needs."""


@dataclass
class CarSnapshot:
    """Car state captured after a race step."""

    race: str
    step: int
    time: float
    speed: float
    fuel_level: float
    tire_condition: float


@dataclass
class RaceSummary:
    """What the car looked like over a race."""

    race: str
    driver: str
    snapshots: list[CarSnapshot] = field(default_factory=list)

    @property
    def final(self) -> CarSnapshot | None:
        return self.snapshots[-1] if self.snapshots else None

    @property
    def peak_speed(self) -> float:
        if not self.snapshots:
            return 0.0
        return float(np.max([s.speed for s in self.snapshots]))

    @property
    def average_speed(self) -> float:
        if not self.snapshots:
            return 0.0
        return float(np.mean([s.speed for s in self.snapshots]))


class Race:
    """Runs a fixed five-step race for one car and one driver.

    The race only depends on the capability protocols, so any driver, track
    layout or weather implementation can be plugged in.
    """

    STEP_COUNT = 5

    def __init__(
        self,
        car: Car,
        driver: Driver,
        track_layout: TrackLayout,
        weather: Weather,
        pit_stop: PitStop,
        scheduler: RaceScheduler | None = None,
        step_interval: float = 1.0,
        name: str | None = None,
    ):
        """Initialize a race.

        Args:
            car: Car to race, may be shared with other races
            driver: Driver with the full capability set
            track_layout: Layout applied on every flying lap
            weather: Weather applied on every flying lap
            pit_stop: Pit crew used mid-race
            scheduler: Queue the steps are pushed to (a private one if omitted)
            step_interval: Seconds between race steps
            name: Label used in telemetry and summaries
        """
        if not isinstance(driver, Driver):
            missing = [
                method for method in ("accelerate", "brake", "handle_turn")
                if not callable(getattr(driver, method, None))
            ]
            raise IncompleteDriverError(
                f"{type(driver).__name__} cannot race, missing: {', '.join(missing)}"
            )

        self.car = car
        self.driver = driver
        self.track_layout = track_layout
        self.weather = weather
        self.pit_stop = pit_stop
        self.scheduler = scheduler if scheduler is not None else RaceScheduler()
        self.step_interval = step_interval
        self.driver_name = getattr(driver, "name", type(driver).__name__)
        self.name = name or f"{self.driver_name} race"
        self.telemetry: list[CarSnapshot] = []
        self.finished = False

    def start_race(self) -> None:
        """Apply the car setup and queue the race steps.

        Nothing moves until the scheduler runs.
        """
        print("Race is starting.")
        logger.info(f"[{self.name}] starting")

        # Apply initial configurations
        if self.car.aerodynamic_config is not None:
            self.car.aerodynamic_config.apply_aerodynamics()
        if self.car.tire_choice is not None:
            self.car.tire_choice.apply_tires()

        steps: list[tuple[str, Callable[[], None]]] = [
            ("flying lap", self._flying_lap),
            ("corner", self._corner),
            ("pit stop", self._pit),
            ("flying lap", self._flying_lap),
            ("finish", self._finish),
        ]
        for number, (label, action) in enumerate(steps, 1):
            self.scheduler.schedule(
                number * self.step_interval,
                f"{self.name}: {label}",
                self._recorded(number, action),
            )

    def summary(self) -> RaceSummary:
        return RaceSummary(race=self.name, driver=self.driver_name, snapshots=list(self.telemetry))

    def _recorded(self, step: int, action: Callable[[], None]) -> Callable[[], None]:
        def run_step() -> None:
            action()
            self.telemetry.append(CarSnapshot(
                race=self.name,
                step=step,
                time=self.scheduler.now,
                **self.car.snapshot(),
            ))

        return run_step

    def _flying_lap(self) -> None:
        self.driver.accelerate(self.car)
        self.track_layout.apply_layout_effects(self.car)
        self.weather.affect_car_performance(self.car)

    def _corner(self) -> None:
        self.driver.handle_turn(self.car)

    def _pit(self) -> None:
        self.pit_stop.perform_pit_stop(self.car)

    def _finish(self) -> None:
        self.driver.brake(self.car)
        print("Race has ended.")
        self.finished = True
        logger.info(f"[{self.name}] finished")
