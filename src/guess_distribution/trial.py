import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# The secret is always drawn from this range, whatever interval is searched.
SECRET_LOW = 1
SECRET_HIGH = 100

# Safety valve, far above the 7-guess worst case for 100 values.
MAX_GUESSES = 100


@dataclass(frozen=True)
class TrialOutcome:
    """
    Result of one trial.

    diverged is True when the safety valve stopped the search; guesses then
    holds the counter at the point of abort and is not a valid data point.
    """
    guesses: int
    secret: int
    diverged: bool = False


def make_guess(low: int, high: int) -> int:
    """
    Next candidate for the interval [low, high]: ceil(low + (high - low) / 2).
    """
    return math.ceil((high - low) / 2.0 + low)


def search(
    secret: int,
    low: int,
    high: int,
    max_guesses: int = MAX_GUESSES,
    on_guess: Optional[Callable[[int], None]] = None,
) -> TrialOutcome:
    """
    Binary search for secret inside [low, high], counting guesses.

    Gives up once the counter passes max_guesses. That only happens when
    the bounds stop converging (e.g. the secret lies outside [low, high]).
    """
    guesses = 0

    while True:
        guess = make_guess(low, high)
        guesses += 1
        if on_guess is not None:
            on_guess(guess)

        if guess < secret:
            low = guess + 1
        elif guess > secret:
            high = guess - 1
        else:
            return TrialOutcome(guesses=guesses, secret=secret)

        if guesses > max_guesses:
            logger.warning(
                "search diverged: secret=%d guess=%d low=%d high=%d",
                secret, guess, low, high,
            )
            return TrialOutcome(guesses=guesses, secret=secret, diverged=True)


class BinarySearchTrialRunner:
    """
    BinarySearchTrialRunner

    Each call to run() is one trial: draw a secret uniformly from
    [SECRET_LOW, SECRET_HIGH], then binary search for it.

    IMPORTANT NOTES:

    - The secret range is fixed. The low/high passed to run() only bound
      the search, not the draw. With the default [1, 100] this is harmless;
      any other interval can miss the secret and trip the safety valve.
    - Single-threaded, not thread-safe. Give each caller its own runner.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_guesses: int = MAX_GUESSES,
    ):
        if max_guesses <= 0:
            raise ValueError("max_guesses must be > 0")

        self.max_guesses = max_guesses
        self._rng = rng if rng is not None else random.Random(seed)

    def draw_secret(self) -> int:
        return self._rng.randint(SECRET_LOW, SECRET_HIGH)

    def run(self, low: int = SECRET_LOW, high: int = SECRET_HIGH) -> TrialOutcome:
        if high < low:
            raise ValueError("high must be >= low")

        return search(self.draw_secret(), low, high, max_guesses=self.max_guesses)
