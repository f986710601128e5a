"""Console output formatting."""

from solidrace.simulation.race import Race, RaceSummary


class ConsoleOutput:
    """Formats race information for console display."""

    @staticmethod
    def print_race_banner(race: Race) -> None:
        """Print the line-up of a race before it starts."""
        car = race.car
        aero = type(car.aerodynamic_config).__name__ if car.aerodynamic_config else "none"
        tires = type(car.tire_choice).__name__ if car.tire_choice else "none"

        print("\n" + "=" * 60)
        print(race.name.upper())
        print("=" * 60)
        print(f"Driver:  {race.driver_name}")
        print(f"Track:   {type(race.track_layout).__name__}")
        print(f"Weather: {race.weather.condition.value}")
        print(f"Setup:   {aero}, {tires}")
        print("-" * 60)

    @staticmethod
    def print_race_summary(summaries: list[RaceSummary]) -> None:
        """Print final car state for each race.

        Args:
            summaries: One summary per race
        """
        print("\n" + "=" * 70)
        print("RACE SUMMARY")
        print("=" * 70)
        print(
            f"{'Race':<22} {'Driver':<14} {'Speed':>7} {'Fuel':>7} "
            f"{'Tires':>7} {'Peak':>7}"
        )
        print("-" * 70)

        for summary in summaries:
            final = summary.final
            if final is None:
                print(f"{summary.race:<22} {summary.driver:<14} {'did not run':>7}")
                continue

            print(
                f"{summary.race:<22} "
                f"{summary.driver:<14} "
                f"{final.speed:>7.1f} "
                f"{final.fuel_level:>7.1f} "
                f"{final.tire_condition:>7.1f} "
                f"{summary.peak_speed:>7.1f}"
            )

        print("=" * 70)
