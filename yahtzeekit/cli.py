"""
cli.py

Entry point for CLI.
"""

import sys

import click
from loguru import logger

from yahtzeekit import __version__
from yahtzeekit.rulesets import AVAILABLE_RULESETS


@click.group("yahtzeekit", invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
@click.option(
    "-v",
    "--loglevel",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def cli(ctx, loglevel):
    """Play Yahtzee in your terminal."""

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    logger.remove()
    logger.add(sys.stderr, level=loglevel.upper())


@cli.command("play")
@click.option(
    "--ruleset", type=click.Choice(list(AVAILABLE_RULESETS.keys())), default="yahtzee"
)
@click.option("--num-dice", type=click.IntRange(min=1), default=None)
@click.option("--max-rolls", type=click.IntRange(min=1), default=None)
@click.option("--seed", type=int, default=None, help="Seed for reproducible dice.")
def play(ruleset, num_dice, max_rolls, seed):
    """Play a game of Yahtzee."""
    import numpy as np

    from yahtzeekit.interactive import play_interactive

    rules = AVAILABLE_RULESETS[ruleset].configure(
        num_dice=num_dice, max_rolls=max_rolls
    )
    play_interactive(rules, rng=np.random.default_rng(seed))


@cli.command("simulate")
@click.option("-n", "--num-games", type=click.IntRange(min=1), default=1000)
@click.option(
    "--ruleset", type=click.Choice(list(AVAILABLE_RULESETS.keys())), default="yahtzee"
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible dice.")
def simulate(num_games, ruleset, seed):
    """Play games with random moves and summarize the final scores."""
    import tqdm
    import numpy as np

    from yahtzeekit.game import play_random_game

    rules = AVAILABLE_RULESETS[ruleset]
    rng = np.random.default_rng(seed)

    final_scores = []
    bonus_count = 0

    try:
        progress = tqdm.tqdm(range(num_games), disable=num_games < 100)
        for _ in progress:
            scorecard = play_random_game(rules, rng=rng)
            final_scores.append(scorecard.grand_total())
            bonus_count += scorecard.bonus is not None

    except KeyboardInterrupt:
        pass

    final_scores = np.asarray(final_scores)
    if final_scores.size == 0:
        return

    summary = []
    summary.append(f"Random play ({final_scores.size} games)")
    summary.append("-" * len(summary[-1]))
    summary.append(
        f" Final score: {np.mean(final_scores):.1f} ± {np.std(final_scores):.1f}"
    )
    summary.append(f" Best game: {final_scores.max()}")
    summary.append(f" Upper bonus reached: {bonus_count}")
    summary.append("")
    click.echo("\n".join(summary))


if __name__ == "__main__":
    cli()
