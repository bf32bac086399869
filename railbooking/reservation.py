"""Reservations linking a passenger to a ticket."""

from __future__ import annotations

from dataclasses import dataclass

from railbooking.passenger import Passenger
from railbooking.ticket import Ticket


@dataclass
class Reservation:
    """A numbered booking of one ticket by one passenger."""

    number: int
    passenger: Passenger
    ticket: Ticket
    cancelled: bool = False

    def confirm(self) -> str:
        """Return the confirmation notice for this reservation."""
        return f"Réservation confirmée pour {self.passenger.last_name}."

    def cancel(self) -> None:
        """Mark the reservation as cancelled."""
        self.cancelled = True

    def describe(self) -> str:
        """Return the reservation details, or a notice if it was cancelled."""
        if self.cancelled:
            return "Cette réservation a été annulée."
        return "\n".join(
            [
                f"Détails de la réservation #{self.number}:",
                self.passenger.describe_reservations(),
                self.ticket.details(),
            ]
        )