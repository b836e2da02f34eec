"""
Scoring rules as used by the classic game.

Categories that a roll does not qualify for return None. There is no
scratching: a non-qualifying roll leaves the category open.
"""

from .base import make_category, Ruleset


def _sum_of_all_dice(roll):
    return int(sum(die_value * num_dice for die_value, num_dice in enumerate(roll, 1)))


def _longest_run(roll):
    # duplicates are already folded into the counts
    longest = current = 0
    for num_dice in roll:
        current = current + 1 if num_dice > 0 else 0
        longest = max(longest, current)
    return longest


@make_category(counts_towards_bonus=True)
def aces(roll):
    return 1 * int(roll[0])


@make_category(counts_towards_bonus=True)
def twos(roll):
    return 2 * int(roll[1])


@make_category(counts_towards_bonus=True)
def threes(roll):
    return 3 * int(roll[2])


@make_category(counts_towards_bonus=True)
def fours(roll):
    return 4 * int(roll[3])


@make_category(counts_towards_bonus=True)
def fives(roll):
    return 5 * int(roll[4])


@make_category(counts_towards_bonus=True)
def sixes(roll):
    return 6 * int(roll[5])


@make_category
def three_of_a_kind(roll):
    if max(roll) >= 3:
        return _sum_of_all_dice(roll)

    return None


@make_category
def four_of_a_kind(roll):
    if max(roll) >= 4:
        return _sum_of_all_dice(roll)

    return None


@make_category
def full_house(roll):
    if 3 in roll and 2 in roll:
        return 25

    return None


@make_category
def small_straight(roll):
    if _longest_run(roll) >= 4:
        return 30

    return None


@make_category
def large_straight(roll):
    if _longest_run(roll) >= 5:
        return 40

    return None


@make_category(cumulative=True)
def yahtzee(roll):
    num_dice = sum(roll)
    if num_dice > 0 and max(roll) == num_dice:
        return 50

    return None


@make_category
def chance(roll):
    return _sum_of_all_dice(roll)


yahtzee_rules = Ruleset(
    ruleset_name="yahtzee",
    num_dice=5,
    max_rolls=3,
    categories=(
        aces,
        twos,
        threes,
        fours,
        fives,
        sixes,
        three_of_a_kind,
        four_of_a_kind,
        full_house,
        small_straight,
        large_straight,
        yahtzee,
        chance,
    ),
    bonus_cutoff=63,
    bonus_score=35,
)
