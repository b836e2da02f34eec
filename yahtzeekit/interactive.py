import click
from loguru import logger

from yahtzeekit.game import Game

# key bindings for committing to a category
CATEGORY_KEYS = {
    "1": "aces",
    "2": "twos",
    "3": "threes",
    "4": "fours",
    "5": "fives",
    "6": "sixes",
    "t": "three_of_a_kind",
    "f": "four_of_a_kind",
    "h": "full_house",
    "s": "small_straight",
    "l": "large_straight",
    "y": "yahtzee",
    "c": "chance",
}

HELP_TEXT = (
    "r: roll dice | e: select dice to reroll | n: new game | q: quit\n"
    "1-6: aces to sixes | t: three of a kind | f: four of a kind | "
    "h: full house\ns: small straight | l: large straight | y: yahtzee | c: chance"
)


def speak(msg, action=None):
    click.echo("> ", nl=False)

    if action == "prompt":
        return click.prompt(msg, prompt_suffix=" ", default="", show_default=False)

    click.echo(msg)


def parse_selection(selection_input):
    """Translate a comma separated list of 1-indexed dice to 0-indexed positions.

    Raises ValueError if any entry is not a non-negative integer.
    """
    indices = []
    for token in selection_input.split(","):
        token = token.strip()
        if not token.isdecimal():
            raise ValueError(f"Not a die number: {token!r}")
        indices.append(int(token) - 1)
    return indices


def pretty_name(category):
    return category.name.replace("_", " ").title()


def print_score(scorecard):
    categories = scorecard.ruleset_.categories
    pretty_names = [pretty_name(cat) for cat in categories]
    colwidth = max(len(pn) for pn in pretty_names) + 2

    def align(string):
        format_string = f"{{:<{colwidth}}}"
        return format_string.format(string)

    separator_line = "".join(["=" * colwidth, "+", "=" * 5])

    def section(indices):
        return [
            "".join(
                [
                    align(f" {pretty_names[i]}"),
                    "| ",
                    str(scorecard.scores[i]) if scorecard.filled[i] else "",
                ]
            )
            for i in indices
        ]

    out = ["", separator_line]
    out.extend(section(scorecard.ruleset_.upper_indices))
    out.append(separator_line)
    out.append(
        "".join(
            [
                align(" Bonus"),
                "| ",
                str(scorecard.bonus) if scorecard.bonus is not None else "",
            ]
        )
    )
    out.append(separator_line)
    out.extend(section(scorecard.ruleset_.lower_indices))
    out.append(separator_line)
    out.append("".join([align(" Total "), "| ", str(scorecard.grand_total())]))
    out.append(separator_line)
    out.append("")

    return "\n".join(out)


def print_dice(game):
    dice_state = game.dice_state
    dice_str = " ".join(str(d) for d in dice_state.dice) or "-"
    return (
        f" Dice: {dice_str}   "
        f"(roll {dice_state.rolls_taken} / {dice_state.max_rolls})"
    )


def print_options(game):
    """List the open categories with what the current dice would score there."""
    if not game.dice:
        return ""

    scorecard = game.scorecard
    keys = {category: key for key, category in CATEGORY_KEYS.items()}
    return "\n".join(
        f"  [{keys.get(name, '?')}] {name.replace('_', ' ').title():<17} "
        f"+{scorecard.potential_score(name, game.dice)}"
        for name in scorecard.open_categories()
    )


def handle_selection(game, selection_input):
    """Apply a typed reroll selection; malformed input discards the attempt."""
    if not selection_input.strip():
        game.cancel_selection()
        return False

    try:
        indices = parse_selection(selection_input)
    except ValueError as exc:
        logger.info("Discarding selection {!r}: {}", selection_input, exc)
        game.cancel_selection()
        return False

    return game.confirm_selection(indices)


def handle_key(game, key):
    """Dispatch a single command key in normal mode.

    Returns False when the player wants to quit.
    """
    key = key.strip().lower()

    if key == "q":
        return False

    if key == "n":
        game.new_game()
        speak("New game started.")
    elif key == "r":
        if not game.roll_all():
            speak("No rolls left, pick a category.")
    elif key == "e":
        if not game.begin_selection():
            speak("Roll the dice first.")
            return True

        selection_input = speak(
            "Which dice do you want to reroll (e.g. 1,3,5)?", action="prompt"
        )
        if not handle_selection(game, selection_input):
            speak("No dice rerolled.")
    elif key in CATEGORY_KEYS:
        category = CATEGORY_KEYS[key]
        points = game.commit(category)
        if points is None:
            speak("Roll the dice first.")
        else:
            speak(f"OK, I've added {points} to your score.")
    else:
        speak(HELP_TEXT)

    return True


def play_interactive(ruleset, rng=None):
    game = Game(ruleset, rng=rng)

    speak("Let's play. Press r to roll the dice.")
    click.echo(HELP_TEXT)

    while True:
        if game.dice_state.rolls_taken == 0:
            click.echo(print_score(game.scorecard))
        click.echo(print_dice(game))
        if game.dice:
            click.echo(print_options(game))

        key = speak("What next?", action="prompt")
        if not handle_key(game, key):
            break

    click.echo(print_score(game.scorecard))
    speak(f"Final score: {game.scorecard.grand_total()}. Good-bye.")
