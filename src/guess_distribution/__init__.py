from .trial import (
    MAX_GUESSES,
    SECRET_HIGH,
    SECRET_LOW,
    BinarySearchTrialRunner,
    TrialOutcome,
    make_guess,
    search,
)

__all__ = [
    "MAX_GUESSES",
    "SECRET_HIGH",
    "SECRET_LOW",
    "BinarySearchTrialRunner",
    "TrialOutcome",
    "make_guess",
    "search",
]
