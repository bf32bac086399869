"""Interactive text menu for the booking system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from railbooking.booking import (
    BookingSystem,
    PassengerNotFoundError,
    ReservationNotFoundError,
    TrainUnavailableError,
    default_trains,
)


def menu_text() -> str:
    """Return the main menu, ending with the choice prompt."""
    return (
        "\n--- Système de Réservation de Billets de Trains ---\n"
        "1. Afficher les trains disponibles\n"
        "2. Réserver un billet\n"
        "3. Annuler une réservation\n"
        "4. Afficher les réservations d'un passager\n"
        "5. Quitter\n"
        "Choisissez une option : "
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _EndOfInput(Exception):
    pass


class _Session:
    def __init__(self, system: BookingSystem, stdin: TextIO, stdout: TextIO) -> None:
        self.system = system
        self.tokens = _tokens(stdin)
        self.out = stdout

    def write(self, text: str) -> None:
        self.out.write(text)

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        token = next(self.tokens, None)
        if token is None:
            raise _EndOfInput
        return token

    def ask_int(self, prompt: str) -> int | None:
        try:
            return int(self.ask(prompt))
        except ValueError:
            return None

    def show_trains(self) -> None:
        self.write("\n--- Trains Disponibles ---\n")
        for train in self.system.trains:
            self.write(train.describe() + "\n")

    def book(self) -> None:
        train_number = self.ask_int("Entrez le numéro du train : ")
        try:
            if train_number is None:
                raise TrainUnavailableError("invalid train number")
            available = self.system.find_train(train_number).is_available()
        except TrainUnavailableError:
            available = False
        if not available:
            self.write("Train indisponible ou complet.\n")
            return
        last_name = self.ask("Entrez votre nom : ")
        first_name = self.ask("Entrez votre prénom : ")
        travel_class = self.ask("Entrez le type de classe (Deuxième/Première) : ")
        travel_date = self.ask("Entrez la date du voyage (AAAA-MM-JJ) : ")
        reservation = self.system.book(
            train_number, last_name, first_name, travel_class, travel_date
        )
        self.write(f"Réservation ajoutée pour le passager {last_name} {first_name}.\n")
        self.write(
            f"Réservation confirmée ! Numéro de réservation : {reservation.number}\n"
        )

    def cancel(self) -> None:
        number = self.ask_int("Entrez le numéro de la réservation à annuler : ")
        try:
            if number is None:
                raise ReservationNotFoundError("invalid reservation number")
            reservation = self.system.cancel(number)
        except ReservationNotFoundError:
            self.write("Réservation introuvable.\n")
            return
        self.write(
            f"Réservation annulée pour le billet #{reservation.ticket.train_number}.\n"
        )
        self.write("Réservation annulée avec succès.\n")

    def show_passenger(self) -> None:
        if not self.system.passengers:
            self.write("Aucun passager disponible.\n")
            return
        self.write("Liste des passagers :\n")
        for p in self.system.passengers:
            self.write(f"ID: {p.identifier}, Nom: {p.last_name}, Prénom: {p.first_name}\n")
        passenger_id = self.ask_int("Entrez l'identifiant du passager : ")
        try:
            if passenger_id is None:
                raise PassengerNotFoundError("invalid identifier")
            passenger = self.system.find_passenger(passenger_id)
        except PassengerNotFoundError:
            self.write("Passager introuvable.\n")
            return
        self.write(passenger.describe_reservations() + "\n")

    def loop(self) -> None:
        actions = {
            1: self.show_trains,
            2: self.book,
            3: self.cancel,
            4: self.show_passenger,
        }
        while True:
            choice = self.ask_int(menu_text())
            if choice == 5:
                self.write("Merci d'avoir utilisé notre système. À bientôt !\n")
                return
            action = actions.get(choice) if choice is not None else None
            if action is None:
                self.write("Option invalide. Veuillez réessayer.\n")
            else:
                action()


def run(system: BookingSystem, stdin: TextIO, stdout: TextIO) -> None:
    """Drive the menu, reading answers from stdin until the user quits or input ends."""
    try:
        _Session(system, stdin, stdout).loop()
    except _EndOfInput:
        stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive booking menu."""
    parser = argparse.ArgumentParser(
        prog="railbooking", description="Interactive train ticket booking."
    )
    parser.parse_args(argv)
    run(BookingSystem(default_trains()), sys.stdin, sys.stdout)
    return 0