"""Tests for the scheduler and race orchestration."""

import pytest

from solidrace.models import (
    AmateurDriver,
    Car,
    CircuitTrack,
    LowDragConfig,
    MediumTires,
    OvalTrack,
    PitStop,
    ProfessionalDriver,
    RecklessDriver,
    Weather,
    WeatherCondition,
)
from solidrace.simulation import IncompleteDriverError, Race, RaceScheduler


def make_race(car=None, driver=None, scheduler=None, **kwargs):
    return Race(
        car=car if car is not None else Car(),
        driver=driver if driver is not None else ProfessionalDriver(),
        track_layout=kwargs.pop("track_layout", OvalTrack()),
        weather=kwargs.pop("weather", Weather(condition=WeatherCondition.SUNNY)),
        pit_stop=PitStop(),
        scheduler=scheduler,
        **kwargs,
    )


class TestRaceScheduler:
    """Test the timed action queue."""

    def test_fires_in_due_order(self):
        scheduler = RaceScheduler()
        fired = []
        scheduler.schedule(3.0, "c", lambda: fired.append("c"))
        scheduler.schedule(1.0, "a", lambda: fired.append("a"))
        scheduler.schedule(2.0, "b", lambda: fired.append("b"))

        assert scheduler.pending == 3
        assert scheduler.run() == 3
        assert fired == ["a", "b", "c"]
        assert scheduler.pending == 0
        assert scheduler.now == 3.0

    def test_ties_fire_in_scheduling_order(self):
        scheduler = RaceScheduler()
        fired = []
        for name in ["first", "second", "third"]:
            scheduler.schedule(1.0, name, lambda name=name: fired.append(name))

        scheduler.run()
        assert fired == ["first", "second", "third"]

    def test_negative_delay_rejected(self):
        scheduler = RaceScheduler()
        with pytest.raises(ValueError):
            scheduler.schedule(-0.5, "late", lambda: None)

    def test_run_until(self):
        scheduler = RaceScheduler()
        fired = []
        for delay in (1.0, 2.0, 3.0):
            scheduler.schedule(delay, str(delay), lambda d=delay: fired.append(d))

        assert scheduler.run_until(2.0) == 2
        assert fired == [1.0, 2.0]
        assert scheduler.pending == 1
        assert scheduler.run() == 1
        assert fired == [1.0, 2.0, 3.0]

    def test_actions_scheduled_while_running(self):
        """Test an action can queue follow-ups relative to its own fire time."""
        scheduler = RaceScheduler()
        fired = []

        def chain():
            fired.append(("chain", scheduler.now))
            scheduler.schedule(0.5, "follow-up", lambda: fired.append(("follow-up", scheduler.now)))

        scheduler.schedule(1.0, "chain", chain)
        scheduler.schedule(2.0, "later", lambda: fired.append(("later", scheduler.now)))
        scheduler.run()

        assert fired == [("chain", 1.0), ("follow-up", 1.5), ("later", 2.0)]

    def test_realtime_sleeps_between_actions(self):
        sleeps = []
        scheduler = RaceScheduler(realtime=True, sleep=sleeps.append)
        scheduler.schedule(1.0, "a", lambda: None)
        scheduler.schedule(1.0, "b", lambda: None)
        scheduler.schedule(2.5, "c", lambda: None)
        scheduler.run()

        assert sleeps == [1.0, 1.5]

    def test_virtual_clock_does_not_sleep(self):
        sleeps = []
        scheduler = RaceScheduler(sleep=sleeps.append)
        scheduler.schedule(5.0, "a", lambda: None)
        scheduler.run()
        assert sleeps == []

    def test_failing_action_propagates(self):
        scheduler = RaceScheduler()
        fired = []

        def boom():
            raise RuntimeError("engine failure")

        scheduler.schedule(1.0, "boom", boom)
        scheduler.schedule(2.0, "after", lambda: fired.append("after"))

        with pytest.raises(RuntimeError):
            scheduler.run()
        assert scheduler.now == 1.0
        assert scheduler.pending == 1

        scheduler.run()
        assert fired == ["after"]


class TestRaceConstruction:
    """Test what a race accepts."""

    def test_reckless_driver_rejected(self):
        with pytest.raises(IncompleteDriverError, match="handle_turn"):
            make_race(driver=RecklessDriver())

    def test_incomplete_driver_is_type_error(self):
        with pytest.raises(TypeError):
            make_race(driver=object())

    def test_private_scheduler_by_default(self):
        race = make_race()
        assert isinstance(race.scheduler, RaceScheduler)
        assert make_race().scheduler is not race.scheduler

    def test_default_name(self):
        assert make_race(driver=AmateurDriver()).name == "Amateur race"


class TestRace:
    """Test the scripted race."""

    def test_nothing_moves_before_scheduler_runs(self, capsys):
        car = Car(aerodynamic_config=LowDragConfig(), tire_choice=MediumTires())
        race = make_race(car=car)
        race.start_race()

        assert capsys.readouterr().out.splitlines() == [
            "Race is starting.",
            "Applying low drag aerodynamics.",
            "Applying medium tires.",
        ]
        assert car.speed == 0.0
        assert race.scheduler.pending == 5
        assert not race.finished

    def test_missing_setup_is_skipped(self, capsys):
        race = make_race()
        race.start_race()
        assert capsys.readouterr().out == "Race is starting.\n"

    def test_professional_oval_sunny(self):
        """Test the full five-step race end to end."""
        car = Car()
        race = make_race(car=car)
        race.start_race()
        race.scheduler.run()

        assert car.speed == 40.0
        assert car.fuel_level == 99.0
        assert car.tire_condition == 100.0
        assert race.finished

    def test_step_timing(self):
        race = make_race(step_interval=0.5)
        race.start_race()
        race.scheduler.run()

        assert [s.step for s in race.telemetry] == [1, 2, 3, 4, 5]
        assert [s.time for s in race.telemetry] == [0.5, 1.0, 1.5, 2.0, 2.5]

    def test_telemetry_after_each_step(self):
        race = make_race()
        race.start_race()
        race.scheduler.run()

        speeds = [s.speed for s in race.telemetry]
        tires = [s.tire_condition for s in race.telemetry]
        fuel = [s.fuel_level for s in race.telemetry]
        assert speeds == [25.0, 25.0, 25.0, 50.0, 40.0]
        assert tires == [100.0, 95.0, 100.0, 100.0, 100.0]
        assert fuel == [99.0, 99.0, 100.0, 99.0, 99.0]

    def test_race_output(self, capsys):
        race = make_race()
        race.start_race()
        race.scheduler.run()

        lines = capsys.readouterr().out.splitlines()
        assert lines[:4] == [
            "Race is starting.",
            "Professional driver is accelerating smoothly.",
            "Car is accelerating. Speed: 10.0, Fuel Level: 99.0",
            "Oval track: Car speed increased by 10. Speed: 20.0",
        ]
        assert lines[4] == "Sunny weather: Car speed increased by 5. Speed: 25.0"
        assert lines[-1] == "Race has ended."

    def test_amateur_circuit_rainy(self):
        car = Car()
        race = make_race(
            car=car,
            driver=AmateurDriver(),
            track_layout=CircuitTrack(),
            weather=Weather(condition=WeatherCondition.RAINY),
        )
        race.start_race()
        race.scheduler.run()

        # (10 - 5 - 10) twice, then a brake
        assert car.speed == -20.0
        assert car.fuel_level == 99.0
        assert car.tire_condition == 100.0

    def test_summary(self):
        race = make_race(name="Test race")
        race.start_race()
        race.scheduler.run()

        summary = race.summary()
        assert summary.race == "Test race"
        assert summary.driver == "Professional"
        assert summary.final.speed == 40.0
        assert summary.peak_speed == 50.0
        assert summary.average_speed == pytest.approx(33.0)

    def test_summary_before_running(self):
        summary = make_race().summary()
        assert summary.final is None
        assert summary.peak_speed == 0.0


class TestSharedScheduler:
    """Test races queued on the same scheduler."""

    def test_steps_interleave_by_time(self):
        scheduler = RaceScheduler()
        pro = make_race(scheduler=scheduler, name="pro")
        amateur = make_race(driver=AmateurDriver(), scheduler=scheduler, name="amateur")
        pro.start_race()
        amateur.start_race()

        order = []
        pro.telemetry = _Recorder(order)
        amateur.telemetry = _Recorder(order)
        scheduler.run()

        assert order == [
            ("pro", 1), ("amateur", 1),
            ("pro", 2), ("amateur", 2),
            ("pro", 3), ("amateur", 3),
            ("pro", 4), ("amateur", 4),
            ("pro", 5), ("amateur", 5),
        ]

    def test_independent_cars(self):
        scheduler = RaceScheduler()
        pro_car = Car()
        amateur_car = Car()
        make_race(car=pro_car, scheduler=scheduler).start_race()
        make_race(
            car=amateur_car,
            driver=AmateurDriver(),
            track_layout=CircuitTrack(),
            weather=Weather(condition=WeatherCondition.RAINY),
            scheduler=scheduler,
        ).start_race()
        scheduler.run()

        assert pro_car.speed == 40.0
        assert amateur_car.speed == -20.0

    def test_shared_car_accumulates_both_races(self):
        """Test both races act on one car when it is shared."""
        scheduler = RaceScheduler()
        car = Car()
        make_race(car=car, scheduler=scheduler).start_race()
        make_race(
            car=car,
            driver=AmateurDriver(),
            track_layout=CircuitTrack(),
            weather=Weather(condition=WeatherCondition.RAINY),
            scheduler=scheduler,
        ).start_race()
        scheduler.run()

        assert car.speed == 20.0
        # Two accelerations after the last pit stop
        assert car.fuel_level == 98.0
        assert car.tire_condition == 100.0


class _Recorder(list):
    """Telemetry list that also records which race appended."""

    def __init__(self, order):
        super().__init__()
        self.order = order

    def append(self, snapshot):
        self.order.append((snapshot.race, snapshot.step))
        super().append(snapshot)
