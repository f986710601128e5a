"""Data models for the race simulation."""

from .aero import AerodynamicConfig, AeroPackage, DragLevel, HighDragConfig, LowDragConfig
from .car import Car
from .driver import (
    Acceleration,
    AmateurDriver,
    Braking,
    Cornering,
    Driver,
    ProfessionalDriver,
    RecklessDriver,
)
from .pit_stop import PitStop
from .tire import HardTires, MediumTires, SoftTires, TireChoice, TireCompound, TireSet
from .track import CircuitTrack, OvalTrack, Track, TrackLayout
from .weather import Weather, WeatherCondition

__all__ = [
    "Acceleration",
    "AeroPackage",
    "AerodynamicConfig",
    "AmateurDriver",
    "Braking",
    "Car",
    "CircuitTrack",
    "Cornering",
    "DragLevel",
    "Driver",
    "HardTires",
    "HighDragConfig",
    "LowDragConfig",
    "MediumTires",
    "OvalTrack",
    "PitStop",
    "ProfessionalDriver",
    "RecklessDriver",
    "SoftTires",
    "TireChoice",
    "TireCompound",
    "TireSet",
    "Track",
    "TrackLayout",
    "Weather",
    "WeatherCondition",
]
