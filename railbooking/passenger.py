"""Passengers and the tickets they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from railbooking.ticket import Ticket


@dataclass
class Passenger:
    """A traveller identified by name and a numeric identifier."""

    last_name: str
    first_name: str
    identifier: int
    tickets: list[Ticket] = field(default_factory=list)

    def add_ticket(self, ticket: Ticket) -> None:
        """Record a ticket for this passenger."""
        self.tickets.append(ticket)

    def remove_ticket(self, train_number: int) -> Ticket:
        """Remove and return the first ticket for the given train.

        Raises LookupError when the passenger holds no such ticket.
        """
        for ticket in self.tickets:
            if ticket.train_number == train_number:
                self.tickets.remove(ticket)
                return ticket
        raise LookupError(f"no ticket for train {train_number}")

    def describe_reservations(self) -> str:
        """Return a listing of the passenger's tickets."""
        lines = [f"Réservations pour {self.last_name} {self.first_name}:"]
        for ticket in self.tickets:
            if ticket.cancelled:
                lines.append(f"Billet #{ticket.train_number} - Annulé")
            else:
                lines.append(ticket.details())
        return "\n".join(lines)