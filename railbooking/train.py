"""Trains and their seat accounting."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Train:
    """A scheduled train with a fixed number of seats."""

    number: int
    departure: str
    arrival: str
    departure_time: str
    arrival_time: str
    capacity: int
    free_seats: int = field(init=False)

    def __post_init__(self) -> None:
        self.free_seats = self.capacity

    def is_available(self) -> bool:
        """Return whether at least one seat is free."""
        return self.free_seats > 0

    def reserve_seat(self) -> bool:
        """Take one seat; return False if the train is full."""
        if self.free_seats > 0:
            self.free_seats -= 1
            return True
        return False

    def release_seat(self) -> bool:
        """Give back one seat; return False if no seat was taken."""
        if self.free_seats < self.capacity:
            self.free_seats += 1
            return True
        return False

    def describe(self) -> str:
        """Return a three-line description of the train."""
        return (
            f"Train {self.number} : {self.departure} -> {self.arrival}\n"
            f"Départ : {self.departure_time}, Arrivée : {self.arrival_time}\n"
            f"Places disponibles : {self.free_seats}/{self.capacity}"
        )