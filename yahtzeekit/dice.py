import numpy as np
from loguru import logger


class DiceStateError(Exception):
    """Base class for refused dice actions."""


class InvalidSelection(DiceStateError, ValueError):
    """Selected dice positions do not exist in the current roll."""


class RollBudgetExhausted(DiceStateError):
    """All rolls for this turn have been used."""


def throw_dice(rng, num_dice):
    """Draw ``num_dice`` independent uniform die values from ``rng``."""
    if num_dice == 0:
        return []
    return [int(v) for v in rng.integers(1, 7, size=num_dice)]


class DiceState:
    """Dice and roll budget of a single turn.

    ``rng`` must provide ``integers(low, high, size)`` like
    :class:`numpy.random.Generator`; pass a seeded generator for
    reproducible games.
    """

    def __init__(self, num_dice=5, max_rolls=3, rng=None):
        if num_dice < 1:
            raise ValueError(f"Need at least one die, got {num_dice}")

        if max_rolls < 1:
            raise ValueError(f"Need at least one roll per turn, got {max_rolls}")

        if rng is None:
            rng = np.random.default_rng()

        self.num_dice = num_dice
        self.max_rolls = max_rolls
        self.rolls_taken = 0
        self.dice = []
        self._rng = rng

    @property
    def rolls_left(self):
        return self.max_rolls - self.rolls_taken

    def reached_max_rolls(self):
        return self.rolls_taken >= self.max_rolls

    def reset(self):
        self.dice = []
        self.rolls_taken = 0

    def roll_all(self):
        """Throw all dice. Does nothing once the roll budget is used up."""
        if self.reached_max_rolls():
            logger.debug("Roll budget exhausted, ignoring roll")
            return False

        self.rolls_taken += 1
        self.dice = throw_dice(self._rng, self.num_dice)
        logger.debug("Roll #{}: {}", self.rolls_taken, self.dice)
        return True

    def reroll_subset(self, indices):
        """Throw the dice at the given zero-based positions again.

        Dice at other positions keep their value and position. Rerolling
        consumes one roll no matter how many dice are selected.
        """
        indices = set(indices)

        if not self.dice:
            raise InvalidSelection("No dice have been rolled yet")

        for idx in indices:
            if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
                raise InvalidSelection(f"Die index must be an integer, got {idx!r}")

            if not 0 <= idx < len(self.dice):
                raise InvalidSelection(
                    f"Die index {idx} is out of range, "
                    f"must be between 0 and {len(self.dice) - 1}"
                )

        if self.reached_max_rolls():
            raise RollBudgetExhausted(
                f"Already rolled {self.rolls_taken} of {self.max_rolls} times"
            )

        selected = sorted(indices)
        new_values = throw_dice(self._rng, len(selected))

        self.rolls_taken += 1
        for idx, value in zip(selected, new_values):
            self.dice[idx] = value

        logger.debug(
            "Reroll #{} of positions {}: {}", self.rolls_taken, selected, self.dice
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(dice={self.dice}, "
            f"rolls_taken={self.rolls_taken}, max_rolls={self.max_rolls})"
        )
