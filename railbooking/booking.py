"""The booking system holding trains, passengers and reservations."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from railbooking.passenger import Passenger
from railbooking.reservation import Reservation
from railbooking.ticket import Ticket
from railbooking.train import Train

DEFAULT_PRICE = 50.0


class BookingError(Exception):
    """Base class for booking failures."""


class TrainUnavailableError(BookingError):
    """The train does not exist or has no free seat."""


class ReservationNotFoundError(BookingError, LookupError):
    """No reservation carries the requested number."""


class PassengerNotFoundError(BookingError, LookupError):
    """No passenger carries the requested identifier."""


def default_trains() -> list[Train]:
    """Return the timetable the system starts with."""
    return [
        Train(101, "Paris", "Lille", "08:00", "10:00", 100),
        Train(102, "Bordeaux", "Toulon", "09:00", "11:30", 80),
        Train(103, "Nice", "Toulouse", "07:30", "09:45", 50),
    ]


class BookingSystem:
    """Books and cancels seats on a fixed set of trains."""

    def __init__(self, trains: Iterable[Train]) -> None:
        self.trains: list[Train] = list(trains)
        self.passengers: list[Passenger] = []
        self.reservations: list[Reservation] = []

    def find_train(self, train_number: int) -> Train:
        """Return the train with this number, or raise TrainUnavailableError."""
        for train in self.trains:
            if train.number == train_number:
                return train
        raise TrainUnavailableError(f"no train numbered {train_number}")

    def _passenger_named(self, last_name: str, first_name: str) -> Passenger:
        for passenger in self.passengers:
            if passenger.last_name == last_name and passenger.first_name == first_name:
                return passenger
        passenger = Passenger(last_name, first_name, len(self.passengers) + 1)
        self.passengers.append(passenger)
        return passenger

    def book(
        self,
        train_number: int,
        last_name: str,
        first_name: str,
        travel_class: str,
        travel_date: str,
    ) -> Reservation:
        """Book a seat and return the new reservation.

        Passengers are matched by name; a new one is registered if needed.
        """
        train = self.find_train(train_number)
        if not train.is_available():
            raise TrainUnavailableError(f"train {train_number} is full")

        passenger = self._passenger_named(last_name, first_name)
        number = len(self.reservations) + 1
        ticket = Ticket(number, travel_class, DEFAULT_PRICE, train_number, travel_date)
        # The reservation keeps its own snapshot of the passenger and ticket.
        reservation = Reservation(number, copy.deepcopy(passenger), copy.copy(ticket))
        self.reservations.append(reservation)

        passenger.add_ticket(ticket)
        train.reserve_seat()
        return reservation

    def cancel(self, reservation_number: int) -> Reservation:
        """Cancel a reservation, free its seat and return it."""
        reservation = next(
            (r for r in self.reservations if r.number == reservation_number), None
        )
        if reservation is None:
            raise ReservationNotFoundError(
                f"no reservation numbered {reservation_number}"
            )

        reservation.cancel()
        try:
            self.find_train(reservation.ticket.train_number).release_seat()
        except TrainUnavailableError:
            pass
        if reservation.cancelled:
            self.reservations.remove(reservation)
        return reservation

    def find_passenger(self, passenger_id: int) -> Passenger:
        """Return the passenger with this identifier."""
        for passenger in self.passengers:
            if passenger.identifier == passenger_id:
                return passenger
        raise PassengerNotFoundError(f"no passenger with identifier {passenger_id}")