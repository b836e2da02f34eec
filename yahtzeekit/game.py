from enum import Enum

import numpy as np
from loguru import logger

from yahtzeekit.dice import DiceState, DiceStateError
from yahtzeekit.rulesets import yahtzee_rules


def dice_count(dice):
    """Convert die values to the number of dice showing each face 1..6."""
    dice = np.asarray(dice).reshape(-1)
    if dice.size and dice.dtype.kind not in "iu":
        raise ValueError(f"Die values must be integers, got {dice.tolist()}")
    dice = dice.astype("int")
    if np.any((dice < 1) | (dice > 6)):
        raise ValueError(f"Die values must be between 1 and 6, got {dice.tolist()}")
    return np.bincount(dice, minlength=7)[1:]


class Scorecard:
    """Category slots of one game.

    Every slot is write-once, except for cumulative categories (Yahtzee),
    which add up each time they are committed with a qualifying roll.
    """

    def __init__(self, ruleset=yahtzee_rules, scores=None, bonus=None):
        self.scores = np.zeros(ruleset.num_categories, dtype="int")
        self.filled = np.zeros(ruleset.num_categories, dtype="bool")
        self.bonus = bonus

        if scores is not None:
            assert len(scores) == ruleset.num_categories
            for i in range(ruleset.num_categories):
                if scores[i] is not None:
                    self.scores[i] = scores[i]
                    self.filled[i] = 1

        self.ruleset_ = ruleset

    @property
    def slots(self):
        return [
            int(score) if filled else None
            for score, filled in zip(self.scores, self.filled)
        ]

    def value(self, category):
        return self.slots[self.ruleset_.category_index(category)]

    def is_filled(self, category):
        return bool(self.filled[self.ruleset_.category_index(category)])

    def open_categories(self):
        return [
            cat.name
            for cat, filled in zip(self.ruleset_.categories, self.filled)
            if cat.cumulative or not filled
        ]

    def potential_score(self, category, dice):
        """Points a commit of ``dice`` to ``category`` would add to the slot."""
        cat_idx = self.ruleset_.category_index(category)
        cat = self.ruleset_.categories[cat_idx]

        if self.filled[cat_idx] and not cat.cumulative:
            return 0

        score = self.ruleset_.score(dice_count(dice), cat_idx)
        return score or 0

    def commit(self, category, dice):
        """Score ``dice`` in ``category`` and return the change in total score.

        Filled categories and rolls that do not qualify leave the card as is.
        """
        cat_idx = self.ruleset_.category_index(category)
        cat = self.ruleset_.categories[cat_idx]
        total_score_old = self.grand_total()

        if self.filled[cat_idx] and not cat.cumulative:
            logger.info("Category {} already filled, ignoring", cat.name)
            return 0

        score = self.ruleset_.score(dice_count(dice), cat_idx)
        if score is None:
            logger.info("Roll {} does not qualify for {}", list(dice), cat.name)
            return 0

        if cat.cumulative:
            self.scores[cat_idx] += score
        else:
            self.scores[cat_idx] = score
        self.filled[cat_idx] = 1

        if cat.counts_towards_bonus:
            self._check_and_set_bonus()

        logger.info("Scored {} in {}", int(self.scores[cat_idx]), cat.name)
        return self.grand_total() - total_score_old

    def _check_and_set_bonus(self):
        if self.bonus is not None:
            return

        if self.upper_score_without_bonus() >= self.ruleset_.bonus_cutoff_:
            self.bonus = self.ruleset_.bonus_score_
            logger.info("Upper section bonus reached: {}", self.bonus)

    def upper_score_without_bonus(self):
        return int(self.scores[self.ruleset_.upper_indices].sum())

    def upper_total(self):
        return self.upper_score_without_bonus() + (self.bonus or 0)

    def lower_total(self):
        return int(self.scores[self.ruleset_.lower_indices].sum())

    def grand_total(self):
        return self.upper_total() + self.lower_total()

    def score_summary(self):
        return self.upper_total(), self.lower_total()

    def __repr__(self):
        score_str = ", ".join(
            str(score) if filled else "None"
            for score, filled in zip(self.scores, self.filled)
        )
        return (
            f"{self.__class__.__name__}(ruleset={self.ruleset_}, "
            f"scores=[{score_str}], bonus={self.bonus})"
        )


class InputMode(Enum):
    NORMAL = "normal"
    SELECTING = "selecting"


class Game:
    """Sequences the turns of a single-player game.

    A turn is: roll, optionally reroll a selection of dice, commit the dice to
    one category. Committing ends the turn and clears the dice.
    """

    def __init__(self, ruleset=yahtzee_rules, rng=None):
        if rng is None:
            rng = np.random.default_rng()

        self.ruleset = ruleset
        self._rng = rng
        self.new_game()

    def new_game(self):
        self.dice_state = DiceState(
            num_dice=self.ruleset.num_dice,
            max_rolls=self.ruleset.max_rolls,
            rng=self._rng,
        )
        self.scorecard = Scorecard(self.ruleset)
        self.input_mode = InputMode.NORMAL
        self.turn = 0
        logger.info("New game with {}", self.ruleset)

    @property
    def dice(self):
        return list(self.dice_state.dice)

    def end_turn(self):
        self.dice_state.reset()
        self.input_mode = InputMode.NORMAL

    def roll_all(self):
        if self.input_mode is not InputMode.NORMAL:
            return False
        return self.dice_state.roll_all()

    def begin_selection(self):
        if self.input_mode is InputMode.NORMAL and self.dice_state.dice:
            self.input_mode = InputMode.SELECTING
            return True
        return False

    def cancel_selection(self):
        self.input_mode = InputMode.NORMAL

    def confirm_selection(self, indices):
        """Reroll the selected dice; a refused reroll counts as a cancel."""
        if self.input_mode is not InputMode.SELECTING:
            return False

        self.input_mode = InputMode.NORMAL
        try:
            self.dice_state.reroll_subset(indices)
        except DiceStateError as exc:
            logger.info("Reroll refused: {}", exc)
            return False

        return True

    def commit(self, category):
        """Commit the current dice to ``category`` and start the next turn.

        Returns the points gained, or None when no commit is possible
        (dice selection pending, or nothing rolled yet this turn).
        """
        if self.input_mode is not InputMode.NORMAL or not self.dice_state.dice:
            return None

        points = self.scorecard.commit(category, self.dice_state.dice)
        self.turn += 1
        self.end_turn()
        return points


def play_random_game(ruleset=yahtzee_rules, rng=None):
    """Play a full game, choosing rerolls and categories uniformly at random."""
    if rng is None:
        rng = np.random.default_rng()

    game = Game(ruleset, rng=rng)

    for _ in range(ruleset.num_rounds):
        game.roll_all()

        while not game.dice_state.reached_max_rolls():
            to_reroll = np.flatnonzero(rng.integers(0, 2, size=ruleset.num_dice))
            if len(to_reroll) == 0:
                break
            game.begin_selection()
            game.confirm_selection(int(i) for i in to_reroll)

        open_categories = game.scorecard.open_categories()
        game.commit(open_categories[rng.integers(len(open_categories))])

    return game.scorecard
