import pytest

from railbooking.passenger import Passenger
from railbooking.ticket import Ticket


def ticket(number=1, train=101):
    return Ticket(number, "Deuxième", 50.0, train, "2024-05-01")


def test_add_ticket_keeps_order():
    passenger = Passenger("Dupont", "Jean", 1)
    first, second = ticket(1, 101), ticket(2, 102)
    passenger.add_ticket(first)
    passenger.add_ticket(second)
    assert passenger.tickets == [first, second]


def test_remove_ticket_by_train_number():
    passenger = Passenger("Dupont", "Jean", 1)
    kept, dropped = ticket(1, 101), ticket(2, 102)
    passenger.add_ticket(kept)
    passenger.add_ticket(dropped)
    assert passenger.remove_ticket(102) is dropped
    assert passenger.tickets == [kept]


def test_remove_missing_ticket_raises():
    passenger = Passenger("Dupont", "Jean", 1)
    passenger.add_ticket(ticket(1, 101))
    with pytest.raises(LookupError):
        passenger.remove_ticket(999)
    assert len(passenger.tickets) == 1


def test_describe_lists_tickets():
    passenger = Passenger("Dupont", "Jean", 1)
    t = ticket(1, 101)
    passenger.add_ticket(t)
    text = passenger.describe_reservations()
    assert text.splitlines() == ["Réservations pour Dupont Jean:", t.details()]


def test_describe_marks_cancelled_tickets():
    passenger = Passenger("Dupont", "Jean", 1)
    t = ticket(1, 101)
    t.cancel()
    passenger.add_ticket(t)
    assert passenger.describe_reservations().splitlines()[1] == "Billet #101 - Annulé"


def test_tickets_not_shared_between_passengers():
    a = Passenger("A", "B", 1)
    b = Passenger("C", "D", 2)
    a.add_ticket(ticket())
    assert b.tickets == []