"""Command-line interface for safecolor."""

import json
import logging
import sys

import click
import numpy as np

from . import __version__
from .color_utils import format_color_output, parse_color
from .generator import SafeColor
from .luminance import contrast_ratio, relative_luminance


@click.command()
@click.version_option(version=__version__, prog_name="safecolor")
@click.argument("seeds", nargs=-1)
@click.option(
    "-c",
    "--color",
    default="#000000",
    show_default=True,
    help="Reference color in format: #RRGGBB, rgb(R,G,B), or hsl(H,S%,L%)",
)
@click.option(
    "--contrast",
    type=click.FloatRange(0.0, min_open=True),
    default=4.5,
    help=(
        "Minimum contrast ratio against the reference color (default: 4.5). "
        "Common values: 3.0 (AA large text), 4.5 (AA normal text), "
        "7.0 (AAA normal text)"
    ),
)
@click.option(
    "--step",
    type=click.FloatRange(0.0, min_open=True),
    default=0.05,
    help="Fallback lightness step for string-derived colors (default: 0.05)",
)
@click.option(
    "--max-iterations",
    type=click.IntRange(min=1),
    default=1000,
    help="Laundering attempts before giving up (default: 1000)",
)
@click.option(
    "-n",
    "--number",
    type=click.IntRange(1, 256),
    default=1,
    help="Number of random colors to generate when no SEEDS are given (default: 1)",
)
@click.option(
    "-f",
    "--format",
    type=click.Choice(["rgb", "hex"], case_sensitive=False),
    default="rgb",
    help="Output format for colors (default: rgb)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["list", "json"], case_sensitive=False),
    default="list",
    help="Output format (default: list)",
)
@click.option(
    "--random-seed",
    type=int,
    default=None,
    help="Seed for the random number generator, for reproducible random colors",
)
@click.option("-v", "--verbose", is_flag=True, help="Log laundering details")
def main(
    seeds: tuple[str, ...],
    color: str,
    contrast: float,
    step: float,
    max_iterations: int,
    number: int,
    format: str,
    output_format: str,
    random_seed: int | None,
    verbose: bool,
) -> None:
    """Generate colors that keep a WCAG contrast ratio against a color.

    Each SEED string always maps to the same color. Without SEEDS, random
    colors are generated instead.

    Examples:

        safecolor alice bob carol

        safecolor -c "#ffffff" --contrast 7 alice

        safecolor -c "rgb(40, 44, 52)" -n 10 -F json

        safecolor -c "hsl(210, 30%, 95%)" -f hex alice bob
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        reference = parse_color(color)
        generator = SafeColor(
            color=reference,
            contrast=contrast,
            step=step,
            max_iterations=max_iterations,
            rng=np.random.default_rng(random_seed),
        )

        labels: list[str | None] = list(seeds) if seeds else [None] * number
        colors = [generator.generate_rgb(label) for label in labels]
        formatted_colors = format_color_output(colors, format.lower())

        reference_luma = relative_luminance(reference)
        ratios = [
            contrast_ratio(reference_luma, relative_luminance(rgb)) for rgb in colors
        ]

        if output_format == "json":
            click.echo(
                json.dumps(
                    [
                        {"seed": label, "color": text, "contrast": round(ratio, 2)}
                        for label, text, ratio in zip(labels, formatted_colors, ratios)
                    ],
                    indent=2,
                )
            )
        else:
            click.echo(
                f"Generated {len(formatted_colors)} colors with at least "
                f"{contrast}:1 contrast against {color}:"
            )
            click.echo()

            for label, text, ratio in zip(labels, formatted_colors, ratios):
                name = label if label is not None else "(random)"
                click.echo(f"  {name:20}  {text:18}  {ratio:.2f}:1")

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
