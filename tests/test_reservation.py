from railbooking.passenger import Passenger
from railbooking.reservation import Reservation
from railbooking.ticket import Ticket


def make_reservation():
    passenger = Passenger("Dupont", "Jean", 1)
    ticket = Ticket(1, "Deuxième", 50.0, 101, "2024-05-01")
    return Reservation(3, passenger, ticket)


def test_confirm_names_passenger():
    assert make_reservation().confirm() == "Réservation confirmée pour Dupont."


def test_new_reservation_active():
    assert make_reservation().cancelled is False


def test_cancel_sets_flag():
    reservation = make_reservation()
    reservation.cancel()
    assert reservation.cancelled is True


def test_cancel_leaves_ticket_untouched():
    reservation = make_reservation()
    reservation.cancel()
    assert reservation.ticket.cancelled is False


def test_describe_active():
    reservation = make_reservation()
    lines = reservation.describe().splitlines()
    assert lines[0] == "Détails de la réservation #3:"
    assert lines[1] == "Réservations pour Dupont Jean:"
    assert lines[-1] == reservation.ticket.details()


def test_describe_cancelled():
    reservation = make_reservation()
    reservation.cancel()
    assert reservation.describe() == "Cette réservation a été annulée."