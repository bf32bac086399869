# railbooking

railbooking is a small train ticket reservation system that runs in the console. The menus and messages are in French.

It starts with three trains (`railbooking.booking.default_trains()`):

| Train | Route              | Departure | Arrival | Seats |
|-------|--------------------|-----------|---------|-------|
| 101   | Paris → Lille      | 08:00     | 10:00   | 100   |
| 102   | Bordeaux → Toulon  | 09:00     | 11:30   | 80    |
| 103   | Nice → Toulouse    | 07:30     | 09:45   | 50    |

## Installation

```
pip install .
```

## Interactive use

```
railbooking
```

The menu has five options:

1. List the trains and their free seats.
2. Book a ticket. You give the train number, your last name, your first name, the class (for example `Deuxième` or `Première`) and the travel date (`AAAA-MM-JJ`). Each answer is read as one word. Every ticket is priced at 50 EUR.
3. Cancel a reservation by its number. This frees a seat on the train and removes the reservation.
4. List the passengers, then show the tickets of one of them, chosen by identifier.
5. Quit.

A passenger who books again with the same last name and first name keeps the same identifier. Reservation numbers are one more than the number of reservations currently held. The menu also stops when input runs out.

## Library use

```python
from railbooking.booking import BookingSystem, default_trains

system = BookingSystem(default_trains())
reservation = system.book(101, "Dupont", "Marie", "Première", "2024-06-01")
print(system.find_train(101).describe())
system.cancel(reservation.number)
```

- `BookingSystem.book` returns a `Reservation` and raises `TrainUnavailableError` when the train does not exist or is full.
- `BookingSystem.cancel` returns the cancelled `Reservation` and raises `ReservationNotFoundError` when no reservation has that number.
- `BookingSystem.find_train` raises `TrainUnavailableError` for an unknown number; `find_passenger` raises `PassengerNotFoundError` for an unknown identifier.
- All of these errors are subclasses of `BookingError`.

The building blocks live in their own modules: `railbooking.train.Train` (seat accounting with `reserve_seat` and `release_seat`), `railbooking.ticket.Ticket` and `compute_price` (0.2 EUR per km, half as much again for `"Première Classe"`), `railbooking.passenger.Passenger` and `railbooking.reservation.Reservation`.

To run the menu over other streams, call `railbooking.cli.run(system, stdin, stdout)`.

## What it does not do

- Nothing is saved: trains, passengers and reservations live only as long as the program runs.
- Booking does not use `compute_price`; every ticket costs the same fixed price.
- Cancelling a reservation does not remove or mark the ticket in the passenger's list, so option 4 still shows it.

## Tests

```
pip install ".[test]"
pytest
```