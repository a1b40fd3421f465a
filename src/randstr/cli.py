import logging
import random
from enum import Enum
from pathlib import Path
from typing import Annotated

import srsly
import typer
from pydantic import ValidationError

from randstr.alphabets import BUILTIN_CLASSES, get_alphabet
from randstr.builder import RandStrBuilder
from randstr.errors import RandStrError
from randstr.models import RandStrConfig
from randstr.presets import PRESETS, get_preset

app = typer.Typer(help="Generate random strings from character classes.")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_file: Path) -> RandStrConfig:
    try:
        data = srsly.read_json(config_file)
    except (OSError, ValueError) as err:
        typer.echo(f"Error: cannot read {config_file}: {err}", err=True)
        raise typer.Exit(1) from err
    try:
        return RandStrConfig.model_validate(data)
    except ValidationError as err:
        typer.echo(f"Error: invalid config in {config_file}:", err=True)
        for issue in err.errors():
            loc = ".".join(str(part) for part in issue["loc"]) or "<root>"
            typer.echo(f"  {loc}: {issue['msg']}", err=True)
        raise typer.Exit(1) from err


def _base_config(
    preset: str | None, config_file: Path | None
) -> RandStrConfig:
    if preset is not None and config_file is not None:
        typer.echo("Error: Cannot use both --preset and --config", err=True)
        raise typer.Exit(1)
    if preset is not None:
        try:
            return get_preset(preset)
        except ValueError as err:
            raise typer.BadParameter(str(err)) from err
    if config_file is not None:
        return _load_config(config_file)
    return RandStrConfig()


@app.callback()
def main(
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = LogLevel.WARNING,
) -> None:
    _configure_logging(log_level)


@app.command()
def generate(
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", min=0, help="Output length"),
    ] = None,
    upper: Annotated[bool, typer.Option("--upper", help="A-Z")] = False,
    lower: Annotated[bool, typer.Option("--lower", help="a-z")] = False,
    letter: Annotated[
        bool, typer.Option("--letter", help="A-Z and a-z")
    ] = False,
    digit: Annotated[bool, typer.Option("--digit", help="0-9")] = False,
    symbol: Annotated[
        bool, typer.Option("--symbol", help="ASCII punctuation")
    ] = False,
    whitespace: Annotated[
        bool, typer.Option("--whitespace", help="ASCII whitespace")
    ] = False,
    all_classes: Annotated[
        bool,
        typer.Option("--all", help="Letters, digits and symbols"),
    ] = False,
    custom: Annotated[
        str | None,
        typer.Option("--custom", help="Extra characters to allow"),
    ] = None,
    must_upper: Annotated[bool, typer.Option("--must-upper")] = False,
    must_lower: Annotated[bool, typer.Option("--must-lower")] = False,
    must_letter: Annotated[bool, typer.Option("--must-letter")] = False,
    must_digit: Annotated[bool, typer.Option("--must-digit")] = False,
    must_symbol: Annotated[bool, typer.Option("--must-symbol")] = False,
    must_whitespace: Annotated[
        bool, typer.Option("--must-whitespace")
    ] = False,
    must_custom: Annotated[
        str | None,
        typer.Option(
            "--must-custom",
            help="Custom characters, at least one of which must appear",
        ),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Start from a named preset"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Start from a JSON config file"),
    ] = None,
    save_config: Annotated[
        Path | None,
        typer.Option("--save-config", help="Write resolved config as JSON"),
    ] = None,
    count: Annotated[
        int, typer.Option("--count", "-n", min=0, help="Number of strings")
    ] = 1,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output JSONL file"),
    ] = None,
) -> None:
    """Generate random strings."""
    base = _base_config(preset, config_file)
    builder = RandStrBuilder.from_config(base, rng=random.Random(seed))

    toggles = [
        (upper, builder.upper),
        (lower, builder.lower),
        (letter, builder.letter),
        (digit, builder.digit),
        (symbol, builder.symbol),
        (whitespace, builder.whitespace),
        (all_classes, builder.all),
        (must_upper, builder.must_upper),
        (must_lower, builder.must_lower),
        (must_letter, builder.must_letter),
        (must_digit, builder.must_digit),
        (must_symbol, builder.must_symbol),
        (must_whitespace, builder.must_whitespace),
    ]
    for enabled, setter in toggles:
        if enabled:
            setter()

    if custom is not None:
        builder.custom(custom)
    if must_custom is not None:
        builder.must_custom(must_custom)
    if length is not None:
        builder.length(length)

    try:
        generator = builder.try_build()
    except RandStrError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if save_config is not None:
        srsly.write_json(save_config, builder.config.model_dump())

    if output is None:
        for value in generator.generate_many(count):
            typer.echo(value)
        return

    srsly.write_jsonl(
        output, ({"value": value} for value in generator.generate_many(count))
    )
    typer.echo(f"Generated {count} strings to {output}")


@app.command()
def classes() -> None:
    """Show the built-in character classes."""
    for char_class in BUILTIN_CLASSES:
        chars = get_alphabet(char_class).decode("ascii")
        typer.echo(f"{char_class.value:<10} {len(chars):>3}  {chars!r}")


@app.command()
def presets() -> None:
    """List the named presets."""
    for name, preset in PRESETS.items():
        typer.echo(f"{name:<12} {preset.description}")
