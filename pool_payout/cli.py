"""
Command-line interface for the prize-pool payout builder.
"""

import click
import logging

from .types import PrizePool
from .config import DEFAULT_CONFIG, POOL_PRESETS, load_config_from_json, load_pool_from_json
from .engine import try_compute_distribution
from .errors import ErrorKind
from .report import format_distribution_table, format_number
from .serialization import distribution_to_json

_ERROR_HINTS = {
    ErrorKind.RECONCILIATION_FAILURE: "This is an internal error; please report the inputs that caused it.",
}


@click.command()
@click.argument('winners', type=int, required=False)
@click.argument('pool', type=int, required=False)
@click.argument('min_coins', type=int, required=False)
@click.option(
    '--pool-file',
    type=click.Path(exists=True, dir_okay=False),
    help='Pool JSON file with winners, total_coins and min_coins'
)
@click.option(
    '--config', 'config_file',
    type=click.Path(exists=True, dir_okay=False),
    help='Pipeline configuration JSON (overrides defaults)'
)
@click.option(
    '--json', 'show_json',
    is_flag=True,
    default=False,
    help='Also print the raw JSON distribution'
)
@click.option(
    '--verbose/--quiet', '-v/-q',
    default=False,
    help='Verbose output'
)
def main(winners, pool, min_coins, pool_file, config_file, show_json, verbose):
    """
    Compute a fair prize distribution.

    WINNERS POOL MIN_COINS: paid ranks, total pool and minimum award.
    Run without arguments for interactive mode.
    """
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    config = DEFAULT_CONFIG
    if config_file:
        try:
            config = load_config_from_json(config_file)
        except (ValueError, TypeError) as e:
            raise click.BadParameter(str(e), param_hint="'--config'")

    positional = [v for v in (winners, pool, min_coins) if v is not None]
    if positional and len(positional) != 3:
        raise click.UsageError("Provide all of WINNERS POOL MIN_COINS, or none for interactive mode")
    if positional and pool_file:
        raise click.UsageError("Use either positional arguments or --pool-file, not both")

    interactive = False
    if pool_file:
        try:
            prize_pool = load_pool_from_json(pool_file)
        except (KeyError, ValueError) as e:
            raise click.BadParameter(f"invalid pool file: {e}", param_hint="'--pool-file'")
    elif positional:
        prize_pool = PrizePool(winners=winners, total_coins=pool, min_coins=min_coins)
    else:
        prize_pool = _prompt_for_pool()
        interactive = True
        click.echo("\nCalculating distribution...")

    result = try_compute_distribution(
        prize_pool.winners, prize_pool.total_coins, prize_pool.min_coins, config
    )

    if not result.ok:
        message = result.message
        if result.kind in _ERROR_HINTS:
            message = f"{message}\n{_ERROR_HINTS[result.kind]}"
        raise click.ClickException(message)

    click.echo("")
    click.echo(format_distribution_table(result.buckets, prize_pool))
    click.echo("")

    if show_json or (interactive and click.confirm("Show raw JSON output?", default=False)):
        click.echo("\nJSON Output:")
        click.echo(distribution_to_json(result.buckets, indent=2))


def _prompt_for_pool() -> PrizePool:
    """Offer the presets, or prompt for custom values."""
    presets = list(POOL_PRESETS.values())

    click.echo("")
    click.echo("=" * 55)
    click.echo("   POOL PAYOUT STRUCTURE - Interactive Mode")
    click.echo("   Fair prize distribution on a calibrated power-law curve")
    click.echo("=" * 55)

    click.echo("\nPreset Examples:")
    for i, preset in enumerate(presets, start=1):
        click.echo(
            f"  [{i}] {preset.name:<18} - {preset.winners} winners, "
            f"{format_number(preset.total_coins)} pool, {preset.min_coins} min"
        )
    custom_choice = len(presets) + 1
    click.echo(f"  [{custom_choice}] {'Custom':<18} - Enter your own values")
    click.echo("")

    choice = click.prompt(
        f"Select an option [1-{custom_choice}]",
        type=click.IntRange(1, custom_choice)
    )

    if choice < custom_choice:
        preset = presets[choice - 1]
        click.echo(
            f"\nUsing preset: {preset.winners} winners, "
            f"{format_number(preset.total_coins)} pool, {preset.min_coins} minimum"
        )
        return preset

    click.echo("\nEnter custom values:")
    winners = click.prompt("  Number of winners", type=int)
    total_coins = click.prompt("  Total prize pool", type=int)
    min_coins = click.prompt("  Minimum prize per winner", type=int)

    return PrizePool(winners=winners, total_coins=total_coins, min_coins=min_coins)


if __name__ == '__main__':
    main()
