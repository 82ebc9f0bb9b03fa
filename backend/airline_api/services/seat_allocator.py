"""Random seat assignment for a single flight instance.

A flight instance is the pair (aircraft number, departure time). Seats are
labels like ``B12``: one row letter from A-D and a number from 1 to 32, so
every flight has 128 of them. There is no aircraft layout behind the labels.
"""
import random
from typing import AbstractSet

from airline_api.core.errors import CapacityExhausted

SEAT_LETTERS = "ABCD"
SEAT_NUMBERS = range(1, 33)
ALL_SEATS: tuple[str, ...] = tuple(f"{letter}{number}" for letter in SEAT_LETTERS for number in SEAT_NUMBERS)
_SEAT_SET = frozenset(ALL_SEATS)

# Above this share of taken seats, pick from the free ones directly
DENSE_THRESHOLD = 0.5


def is_valid_seat(label: str) -> bool:
    return label in _SEAT_SET


def allocate(existing_seats: AbstractSet[str], rng: random.Random | None = None) -> str:
    """Return a seat label that is not in ``existing_seats``.

    Draws uniformly from all 128 labels and redraws on collision. Once more
    than half the cabin is taken the draw is made from the free labels
    instead, which keeps the loop short. Raises CapacityExhausted when no
    label is free.
    """
    rng = rng or random
    taken = _SEAT_SET.intersection(existing_seats)
    if len(taken) >= len(ALL_SEATS):
        raise CapacityExhausted()

    if len(taken) > len(ALL_SEATS) * DENSE_THRESHOLD:
        free = [seat for seat in ALL_SEATS if seat not in taken]
        return rng.choice(free)

    while True:
        candidate = f"{rng.choice(SEAT_LETTERS)}{rng.randint(SEAT_NUMBERS.start, SEAT_NUMBERS.stop - 1)}"
        if candidate not in taken:
            return candidate
