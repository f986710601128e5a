"""Weather model and conditions."""

from enum import Enum

from pydantic import BaseModel, Field

from .car import Car


class WeatherCondition(str, Enum):
    """Weather condition types."""

    SUNNY = "sunny"
    RAINY = "rainy"
    CLOUDY = "cloudy"


class Weather(BaseModel):
    """Represents current weather conditions."""

    condition: WeatherCondition = Field(
        default=WeatherCondition.SUNNY,
        description="Current weather condition",
    )

    def affect_car_performance(self, car: Car) -> None:
        """Apply the weather's effect on the car's speed.

        Args:
            car: Car to adjust in place
        """
        if self.condition == WeatherCondition.SUNNY:
            car.speed += 5
            print(f"Sunny weather: Car speed increased by 5. Speed: {car.speed}")
        elif self.condition == WeatherCondition.RAINY:
            car.speed -= 10
            print(f"Rainy weather: Car speed decreased by 10. Speed: {car.speed}")
        else:  # CLOUDY
            print(f"Cloudy weather: Car speed remains the same. Speed: {car.speed}")
