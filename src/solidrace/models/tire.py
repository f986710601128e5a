"""Tire choices fitted to a car before the start."""

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class TireChoice(Protocol):
    """Anything that can fit a set of tires."""

    def apply_tires(self) -> None: ...


class TireCompound(str, Enum):
    """Available tire compounds."""

    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"


class TireSet(BaseModel):
    """A set of tires of a single compound."""

    compound: TireCompound = Field(..., description="Tire compound type")

    def apply_tires(self) -> None:
        print(f"Applying {self.compound.value} tires.")


class SoftTires(TireSet):
    compound: TireCompound = TireCompound.SOFT


class MediumTires(TireSet):
    compound: TireCompound = TireCompound.MEDIUM


class HardTires(TireSet):
    compound: TireCompound = TireCompound.HARD
