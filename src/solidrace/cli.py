"""Command line entry point: two demo races on one scheduler.

Usage:
    solidrace [--realtime] [--interval SECONDS] [--shared-car] [--no-summary]

Examples:
    solidrace
    solidrace --realtime --interval 0.5
    solidrace --shared-car --log-level DEBUG
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from solidrace.config import RaceSettings
from solidrace.models import (
    AmateurDriver,
    Car,
    CircuitTrack,
    LowDragConfig,
    MediumTires,
    OvalTrack,
    PitStop,
    ProfessionalDriver,
    Weather,
    WeatherCondition,
)
from solidrace.output import ConsoleOutput
from solidrace.simulation import Race, RaceScheduler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Run the SOLID race demo")
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Wait between race steps instead of firing them immediately",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between race steps (default: 1.0)",
    )
    parser.add_argument(
        "--shared-car",
        action="store_true",
        help="Race both drivers with the same car, as the original demo did",
    )
    parser.add_argument(
        "--no-summary",
        action="store_false",
        dest="summary",
        help="Skip the summary table",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def build_car() -> Car:
    return Car(aerodynamic_config=LowDragConfig(), tire_choice=MediumTires())


def build_races(settings: RaceSettings, scheduler: RaceScheduler) -> list[Race]:
    """Create the professional and amateur races.

    Each race gets its own car unless ``settings.shared_car`` is set, in which
    case the interleaved steps of both races act on the same car.
    """
    shared = build_car() if settings.shared_car else None
    pit_stop = PitStop()

    pro_race = Race(
        car=shared if shared is not None else build_car(),
        driver=ProfessionalDriver(),
        track_layout=OvalTrack(),
        weather=Weather(condition=WeatherCondition.SUNNY),
        pit_stop=pit_stop,
        scheduler=scheduler,
        step_interval=settings.step_interval,
        name="Professional on oval",
    )
    amateur_race = Race(
        car=shared if shared is not None else build_car(),
        driver=AmateurDriver(),
        track_layout=CircuitTrack(),
        weather=Weather(condition=WeatherCondition.RAINY),
        pit_stop=pit_stop,
        scheduler=scheduler,
        step_interval=settings.step_interval,
        name="Amateur on circuit",
    )
    return [pro_race, amateur_race]


def run(settings: RaceSettings) -> list[Race]:
    """Start both races and drain the scheduler."""
    scheduler = RaceScheduler(realtime=settings.realtime)
    races = build_races(settings, scheduler)

    for race in races:
        if settings.show_summary:
            ConsoleOutput.print_race_banner(race)
        race.start_race()

    fired = scheduler.run()
    logger.info(f"Fired {fired} race steps")

    if settings.show_summary:
        ConsoleOutput.print_race_summary([race.summary() for race in races])
    return races


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = RaceSettings(
            step_interval=args.interval,
            realtime=args.realtime,
            shared_car=args.shared_car,
            show_summary=args.summary,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(f"invalid settings: {e.errors()[0]['msg']}")

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
