"""Command line interface for value-converters."""
import logging
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

import click
import yaml
from click_default_group import DefaultGroup

from value_converters import __version__
from value_converters.converters import ValueConverter, get_converter, list_converters
from value_converters.errors import UnsupportedConversionError

__all__ = [
    "main",
]

logger = logging.getLogger(__name__)

VALUE_TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "decimal": Decimal,
    "date": date.fromisoformat,
    "datetime": datetime.fromisoformat,
    "time": time.fromisoformat,
}

converter_option = click.option(
    "-c",
    "--converter",
    default="string_format",
    show_default=True,
    help="Name of the converter to use.",
)
language_option = click.option("-l", "--language", help="Language tag, e.g. en-US.")
init_with_option = click.option(
    "--init-with",
    "-I",
    help="YAML string for initialization of the converter, e.g. '{invariant_locale: fr}'.",
)


def make_converter(name: str, init_with: str = None) -> ValueConverter:
    """Instantiate a converter, with optional YAML constructor arguments."""
    kwargs = {}
    if init_with:
        kwargs = yaml.safe_load(init_with)
        if not isinstance(kwargs, dict):
            raise click.BadParameter(f"Expected a YAML mapping, got: {init_with}")
    try:
        return get_converter(name, **kwargs)
    except (ValueError, TypeError) as e:
        raise click.BadParameter(str(e)) from e


def parse_value(value: str, value_type: str):
    """Coerce a command line argument to the requested type."""
    try:
        return VALUE_TYPES[value_type](value)
    except (ValueError, InvalidOperation) as e:
        raise click.BadParameter(f"Cannot read {value!r} as {value_type}") from e


@click.group(
    cls=DefaultGroup,
    default="format",
)
@click.option("-v", "--verbose", count=True)
@click.option("-q", "--quiet", is_flag=True)
@click.version_option(__version__)
def main(verbose: int, quiet: bool):
    """CLI for value-converters.

    :param verbose: Verbosity while running.
    :param quiet: Boolean to be quiet or verbose.
    """
    logging.basicConfig()
    logger = logging.root
    if verbose >= 2:
        logger.setLevel(level=logging.DEBUG)
    elif verbose == 1:
        logger.setLevel(level=logging.INFO)
    else:
        logger.setLevel(level=logging.WARNING)
    if quiet:
        logger.setLevel(level=logging.ERROR)
    logger.info(f"Logger {logger.name} set to level {logger.level}")


@main.command(name="format")
@converter_option
@init_with_option
@language_option
@click.option("-f", "--format", "format_string", help="Format template, e.g. '{0:N2}'.")
@click.option(
    "-t",
    "--type",
    "value_type",
    type=click.Choice(list(VALUE_TYPES)),
    default="str",
    show_default=True,
    help="Type the value is read as before conversion.",
)
@click.argument("value")
def format_value(value, converter, init_with, language, format_string, value_type):
    """Convert a value for display.

    Example:

        vconv format -t float -f "{0:N2}" -l de-DE 1234.5

    """
    c = make_converter(converter, init_with)
    source = parse_value(value, value_type)
    result = c.convert(source, str, format_string, language)
    if result is None:
        logger.info("Converter returned None")
        return
    if not isinstance(result, str):
        logger.warning(f"Could not format {source!r}; showing the original value")
        result = repr(result)
    click.echo(result)


@main.command(name="convert-back")
@converter_option
@init_with_option
@language_option
@click.option("-f", "--format", "format_string", help="Converter parameter.")
@click.argument("value")
def convert_back(value, converter, init_with, language, format_string):
    """Convert a displayed value back to a source value."""
    c = make_converter(converter, init_with)
    try:
        result = c.convert_back(value, None, format_string, language)
    except UnsupportedConversionError as e:
        raise click.ClickException(str(e)) from e
    click.echo(repr(result))


@main.command(name="converters")
def converters():
    """List available converters."""
    for name in list_converters():
        click.echo(name)


if __name__ == "__main__":
    main()
