from collections import namedtuple


Category = namedtuple(
    "category", ["name", "score", "counts_towards_bonus", "cumulative"]
)


def make_category(*args, name=None, counts_towards_bonus=False, cumulative=False):
    """Decorator that creates a new category from a function.

    The decorated function receives the dice count vector (number of dice
    showing each face 1..6) and returns the score, or None if the roll does
    not qualify for the category.
    """

    def inner(func):
        cat_name = name or func.__name__
        return Category(cat_name, func, counts_towards_bonus, cumulative)

    if args and callable(args[0]):
        return inner(args[0])

    return inner


class Ruleset:
    """Represents the rules of the game.

    Used to convert rolls and categories to scores, and holds the game
    configuration (number of dice, roll budget, bonus threshold).
    """

    def __init__(
        self,
        categories,
        num_dice=5,
        max_rolls=3,
        bonus_cutoff=63,
        bonus_score=35,
        ruleset_name="custom",
    ):
        if num_dice < 1:
            raise ValueError(f"Need at least one die, got {num_dice}")

        if max_rolls < 1:
            raise ValueError(f"Need at least one roll per turn, got {max_rolls}")

        self.name = ruleset_name
        self.num_dice = num_dice
        self.max_rolls = max_rolls
        self.num_rounds = len(categories)
        self.num_categories = len(categories)
        self.categories = tuple(categories)

        self.bonus_cutoff_ = bonus_cutoff
        self.bonus_score_ = bonus_score

    @property
    def upper_indices(self):
        return [i for i, cat in enumerate(self.categories) if cat.counts_towards_bonus]

    @property
    def lower_indices(self):
        return [
            i for i, cat in enumerate(self.categories) if not cat.counts_towards_bonus
        ]

    def category_index(self, key):
        """Resolve a category given by index, name, or Category object."""
        if isinstance(key, Category):
            key = key.name

        if isinstance(key, str):
            for i, cat in enumerate(self.categories):
                if cat.name == key:
                    return i
            raise ValueError(f"Unknown category: {key!r}")

        if isinstance(key, int) and 0 <= key < self.num_categories:
            return key

        raise ValueError(f"Unknown category: {key!r}")

    def score(self, roll, cat_idx):
        return self.categories[cat_idx].score(roll)

    def configure(self, num_dice=None, max_rolls=None):
        """Return a copy of this ruleset with a different dice setup."""
        return Ruleset(
            self.categories,
            num_dice=self.num_dice if num_dice is None else num_dice,
            max_rolls=self.max_rolls if max_rolls is None else max_rolls,
            bonus_cutoff=self.bonus_cutoff_,
            bonus_score=self.bonus_score_,
            ruleset_name=self.name,
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(ruleset_name={self.name}, "
            f"num_dice={self.num_dice}, max_rolls={self.max_rolls})"
        )
