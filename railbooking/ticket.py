"""Train tickets and fare computation."""

from __future__ import annotations

from dataclasses import dataclass

FIRST_CLASS = "Première Classe"
_RATE_PER_KM = 0.2
_FIRST_CLASS_FACTOR = 1.5


@dataclass
class Ticket:
    """A ticket for one trip on a given train."""

    number: int
    travel_class: str
    price: float
    train_number: int
    travel_date: str
    cancelled: bool = False

    def details(self) -> str:
        """Return a one-line description of the ticket."""
        return (
            f"Billet #{self.number} - {self.travel_class}"
            f" - Prix: {self.price:g} EUR - Train: {self.train_number}"
            f" - Date: {self.travel_date}"
        )

    def cancel(self) -> None:
        """Mark the ticket as cancelled."""
        self.cancelled = True


def compute_price(travel_class: str, distance: float) -> float:
    """Return the fare for a distance; first class costs half as much again."""
    base = _RATE_PER_KM * distance
    return base * _FIRST_CLASS_FACTOR if travel_class == FIRST_CLASS else base