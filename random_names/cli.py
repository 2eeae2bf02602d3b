"""
Command-line interface for the name generator.
"""

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from random_names import __version__
from random_names.core import (
    Casing,
    CasingStyle,
    GeneratorBuilder,
    Length,
    Naming,
    NamesError,
    Separator,
)
from random_names.utils import load_config, load_word_list, save_config

app = typer.Typer(
    help='A random name generator with results like "delirious-pail"',
    add_completion=False,
)
console = Console(stderr=True)
logger = logging.getLogger("NamesCLI")


def version_callback(value: bool):
    if value:
        typer.echo(f"names {__version__}")
        raise typer.Exit()


@app.command()
def main(
    amount: int = typer.Argument(1, min=0, help="Number of names to generate"),
    number: Optional[int] = typer.Option(None, "--number", "-n", min=1, help="Adds a random number with this many digits to the name(s)"),
    casing: Optional[CasingStyle] = typer.Option(None, "--casing", "-c", case_sensitive=False, help="Casing style for the words"),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Separator between the words"),
    truncate: Optional[int] = typer.Option(None, min=0, help="Cut names down to this many characters"),
    reroll: Optional[int] = typer.Option(None, min=0, help="Only emit names of exactly this many characters"),
    adjectives_file: Optional[Path] = typer.Option(None, "--adjectives", exists=True, dir_okay=False, help="File with one adjective per line"),
    nouns_file: Optional[Path] = typer.Option(None, "--nouns", exists=True, dir_okay=False, help="File with one noun per line"),
    config_file: Optional[Path] = typer.Option(None, "--config", envvar="NAMES_CONFIG", exists=True, dir_okay=False, help="JSON file with generator settings"),
    save_config_file: Optional[Path] = typer.Option(None, "--save-config", dir_okay=False, help="Write the effective settings to this JSON file"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible names"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True, help="Show the version and exit"),
):
    """Generate random names, one per line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if truncate is not None and reroll is not None:
        raise typer.BadParameter("--truncate and --reroll cannot be combined")

    try:
        settings = {}
        if config_file:
            logger.debug(f"Loading settings from {config_file}")
            settings = load_config(config_file)
        builder = GeneratorBuilder.from_dict(settings)

        if adjectives_file:
            builder.adjectives(load_word_list(adjectives_file))
        if nouns_file:
            builder.nouns(load_word_list(nouns_file))
        if number is not None:
            builder.naming(Naming.zero_padded(number, Separator.dash()))
        if casing is not None or separator is not None:
            # Options only replace the parts of the configured casing they name.
            current = Casing.model_validate(settings.get("casing") or Casing())
            if separator is None:
                builder.casing(current.with_style(casing))
            else:
                builder.casing(Casing.of(casing or current.style, Separator.parse(separator)))
        if truncate is not None:
            builder.length(Length.truncate(truncate))
        if reroll is not None:
            builder.length(Length.reroll(reroll))
        if seed is not None:
            builder.rng(random.Random(seed))

        generator = builder.build()

        if save_config_file:
            save_config(generator, save_config_file)
            logger.debug(f"Settings saved to {save_config_file}")

        for _ in range(amount):
            typer.echo(next(generator))
    except (NamesError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
