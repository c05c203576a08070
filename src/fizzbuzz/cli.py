"""The ``fizzbuzz`` Click command and console-script entry point."""

from __future__ import annotations

from typing import Any

import click

from fizzbuzz.commands._base import FizzBuzzCommand
from fizzbuzz.commands._context import AppContext
from fizzbuzz.commands.args import args_from_params, get_examples
from fizzbuzz.config.settings import FizzBuzzSettings
from fizzbuzz.output.formatters import supported_formats


def _epilog() -> str:
    formats = "\n".join(f"  {name}" for name in supported_formats())
    examples = "\n".join(f"  {line}" for line in get_examples())
    return (
        f"\b\nFormats:\n{formats}\n\n"
        "\b\nRules:\n"
        '  Rules are written as "divisor:replacement", e.g. --rule "7:Lucky".\n'
        "  Custom rules replace the standard 15:FizzBuzz, 3:Fizz, 5:Buzz.\n"
        "  The largest matching divisor wins.\n"
        "  Numbers matching no rule are printed as-is.\n"
        "  The range is limited to 1,000,000 numbers.\n\n"
        f"\b\nExamples:\n{examples}"
    )


@click.command(
    "fizzbuzz",
    cls=FizzBuzzCommand,
    add_help_option=False,
    epilog=_epilog(),
)
@click.argument("bounds", nargs=-1, type=int, metavar="[START] [END]")
@click.option("-s", "--start", type=int, default=None, help="Starting number (default: 1).")
@click.option("-e", "--end", type=int, default=None, help="Ending number (default: 100).")
@click.option(
    "-f",
    "--format",
    "output_format",
    default=None,
    metavar="FORMAT",
    help="Output format (default: numbered).",
)
@click.option(
    "-r",
    "--rule",
    "--rules",
    "rules",
    multiple=True,
    metavar="RULE",
    help='Custom rule "divisor:replacement". Repeatable.',
)
@click.option("--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this message and exit.")
@click.option("-v", "--version", "show_version", is_flag=True, help="Show the version and exit.")
@click.pass_context
def cli(ctx: click.Context, **_params: Any) -> None:
    """A configurable FizzBuzz generator with multiple output formats and custom rules."""
    args = args_from_params(ctx.params)
    settings = FizzBuzzSettings.from_cli(
        verbose=args.verbose or None,
        log_json=args.log_json or None,
    )
    app = AppContext(settings)

    if args.help:
        app.emit(ctx.get_help())
        return
    if args.version:
        from fizzbuzz.commands.help import get_version_text

        app.emit(get_version_text())
        return

    from fizzbuzz.commands.runner import run_fizzbuzz_command

    app.emit(run_fizzbuzz_command(args, settings=settings))


def main() -> None:
    """Console-script entry point."""
    cli()
