#!/usr/bin/env python3

import re

import click
from dotenv import load_dotenv

from fluent_validator import Validate, ValidationError, ValidationResult
from fluent_validator.config import get_settings
from fluent_validator.error_details import get_error_human_message
from fluent_validator.utils.logging import get_logger, setup_logging

logger = get_logger("cli")

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]

EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def report(ctx: click.Context, validator_name: str, result: ValidationResult) -> None:
    """Print the outcome and exit non-zero when the value was rejected"""
    logger.debug(
        "Validated value", validator=validator_name, is_valid=result.is_valid
    )
    quiet = get_settings().cli.quiet
    if result.is_valid:
        if not quiet:
            click.echo("valid")
        return
    if not quiet:
        click.echo(result.error_message)
    ctx.exit(EXIT_INVALID)


def configuration_error(ctx: click.Context, error: Exception) -> None:
    logger.debug("Validator configuration rejected", error=repr(error))
    click.echo(get_error_human_message(error), err=True)
    ctx.exit(EXIT_CONFIG_ERROR)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """fluent-validator - check a single value against validation rules"""
    setup_logging()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("value")
@click.option("--required", is_flag=True, help="Reject empty values")
@click.option("--min-length", type=int, default=0, help="Minimum length (0 = unchecked)")
@click.option("--max-length", type=int, default=None, help="Maximum length")
@click.option("--pattern", default=None, help="Regular expression the value must match")
@click.pass_context
def string(ctx, value, required, min_length, max_length, pattern) -> None:
    """Validate a string value"""
    validator = Validate.string().required(required).min_length(min_length)
    if max_length is not None:
        validator.max_length(max_length)
    if pattern:
        try:
            validator.matches(pattern)
        except (re.error, ValidationError) as e:
            configuration_error(ctx, e)
    report(ctx, validator.name, validator.validate(value))


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("value", type=int)
@click.option("--min", "min_value", type=int, default=None, help="Smallest accepted value")
@click.option("--max", "max_value", type=int, default=None, help="Largest accepted value")
@click.pass_context
def integer(ctx, value, min_value, max_value) -> None:
    """Validate an integer value"""
    validator = Validate.integer()
    if min_value is not None:
        validator.min(min_value)
    if max_value is not None:
        validator.max(max_value)
    report(ctx, validator.name, validator.validate(value))


@cli.command()
@click.argument("value", type=click.DateTime(formats=DATE_FORMATS))
@click.option(
    "--after",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Earliest accepted date (inclusive)",
)
@click.option(
    "--before",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Latest accepted date (inclusive)",
)
@click.pass_context
def date(ctx, value, after, before) -> None:
    """Validate a date (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)"""
    validator = Validate.date()
    if after is not None:
        validator.after(after)
    if before is not None:
        validator.before(before)
    report(ctx, validator.name, validator.validate(value))


@cli.command()
@click.argument("value")
@click.option("--required", is_flag=True, help="Reject empty values")
@click.option("--min-length", type=int, default=0, help="Minimum length (0 = unchecked)")
@click.option("--max-length", type=int, default=None, help="Maximum length")
@click.pass_context
def email(ctx, value, required, min_length, max_length) -> None:
    """Validate an email address"""
    validator = Validate.email().required(required).min_length(min_length)
    if max_length is not None:
        validator.max_length(max_length)
    report(ctx, validator.name, validator.validate(value))


def main() -> None:
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
