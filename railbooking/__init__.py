"""Train ticket reservation: trains, tickets, passengers, a booking system and a console menu."""

__version__ = "0.1.0"
__all__ = ["ticket", "train", "passenger", "reservation", "booking", "cli"]