"""Aerodynamic configurations applied to a car before the start."""

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class AerodynamicConfig(Protocol):
    """Anything that can set up a car's aerodynamics."""

    def apply_aerodynamics(self) -> None: ...


class DragLevel(str, Enum):
    """Aero package drag levels."""

    LOW = "low"
    HIGH = "high"


class AeroPackage(BaseModel):
    """Base aero package, reports the drag level it fits."""

    drag_level: DragLevel = Field(..., description="Drag level of the package")

    def apply_aerodynamics(self) -> None:
        print(f"Applying {self.drag_level.value} drag aerodynamics.")


class LowDragConfig(AeroPackage):
    """Low drag setup for fast straights."""

    drag_level: DragLevel = DragLevel.LOW


class HighDragConfig(AeroPackage):
    """High downforce setup for twisty layouts."""

    drag_level: DragLevel = DragLevel.HIGH
