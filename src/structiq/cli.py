"""Command-line interface for the StructIQ calculators.

Usage::

    structiq run <calculator> <input_yaml> [--json]
    structiq template <calculator>
    structiq validate <calculator> <input_yaml>
    structiq convert <value> <from_unit> <to_unit>
    structiq units
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import BaseModel, ValidationError

from structiq.core.units import UNIT_FACTORS, list_units
from structiq.engine import CALCULATORS, convert_stress
from structiq.logging_config import configure_logging, get_logger
from structiq.models.outputs import CalculationFailure, DesignStatus
from structiq.settings import SETTINGS, get_defaults

logger = get_logger("cli")

CALCULATOR_CHOICE = click.Choice(sorted(CALCULATORS))


def _load_yaml(input_file: str) -> dict[str, Any]:
    try:
        with open(Path(input_file), encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        click.secho(f"Error parsing input: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc
    if not isinstance(data, dict):
        raise click.ClickException("YAML root must be a mapping (dict)")
    return data


def _echo_failure(failure: CalculationFailure) -> None:
    label = failure.kind.value.replace("_", " ")
    click.secho(f"Error ({label}): {failure.message}", fg="red", err=True)


def _echo_result(result: BaseModel) -> None:
    """Print scalar fields, check tables and curve sizes."""
    for name, value in result:
        title = name.replace("_", " ")
        if name == "checks":
            click.echo(f"\n{title.capitalize()}:")
            for check in value:
                passed = check.status.value.upper()
                colour = "green" if check.status == DesignStatus.PASS else "red"
                detail = getattr(check, "limit_description", None)
                if detail is None:
                    detail = f"limit {check.limit_value:.3f} {check.unit}"
                actual = getattr(check, "value", None)
                if actual is None:
                    actual = check.actual_value
                click.echo(f"  {check.name:<24} {actual:>12.3f}  {detail:<22} ", nl=False)
                click.secho(passed, fg=colour)
        elif name == "calculation_steps":
            click.echo(f"\n{title.capitalize()}:")
            for step in value:
                click.echo(
                    f"  {step.step_number}. {step.description}: {step.formula} "
                    f"{step.substitution} = {step.result} {step.unit}".rstrip()
                )
        elif isinstance(value, list):
            click.echo(f"{title}: {len(value)} points")
        elif isinstance(value, float):
            click.echo(f"{title}: {value:.4f}")
        else:
            click.echo(f"{title}: {value}")


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(
    version=SETTINGS.version,
    prog_name="structiq",
    message=f"{SETTINGS.app_name} %(version)s",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """StructIQ - structural engineering calculators."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

@main.command()
@click.argument("calculator", type=CALCULATOR_CHOICE)
@click.argument("input_file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def run(calculator: str, input_file: str, as_json: bool) -> None:
    """Run CALCULATOR on the inputs in INPUT_FILE."""
    calc = CALCULATORS[calculator]
    data = _load_yaml(input_file)
    logger.debug("Running %s with %s", calculator, data)

    result = calc.run(data)
    if isinstance(result, CalculationFailure):
        _echo_failure(result)
        raise SystemExit(1)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    click.secho(calc.title, bold=True)
    _echo_result(result)


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
@click.argument("calculator", type=CALCULATOR_CHOICE)
def template(calculator: str) -> None:
    """Print default inputs for CALCULATOR as YAML."""
    click.echo(yaml.safe_dump(get_defaults(calculator), sort_keys=False).rstrip())


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@main.command()
@click.argument("calculator", type=CALCULATOR_CHOICE)
@click.argument("input_file", type=click.Path(exists=True))
def validate(calculator: str, input_file: str) -> None:
    """Validate INPUT_FILE against the inputs of CALCULATOR."""
    calc = CALCULATORS[calculator]
    data = _load_yaml(input_file)
    try:
        calc.input_model.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            loc = ".".join(str(part) for part in error["loc"]) or "input"
            click.secho(f"  {loc}: {error['msg']}", fg="red", err=True)
        raise SystemExit(1) from exc
    click.secho(f"{input_file}: valid {calc.title} input", fg="green")


# ---------------------------------------------------------------------------
# convert / units
# ---------------------------------------------------------------------------

@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("from_unit")
@click.argument("to_unit")
def convert(value: str, from_unit: str, to_unit: str) -> None:
    """Convert a stress VALUE from FROM_UNIT to TO_UNIT."""
    result = convert_stress(value, from_unit, to_unit)
    if isinstance(result, CalculationFailure):
        _echo_failure(result)
        raise SystemExit(1)
    click.echo(result.summary)


@main.command()
def units() -> None:
    """List supported stress units and their factor per MPa."""
    for unit in list_units():
        click.echo(f"  {unit.value:<8} {UNIT_FACTORS[unit]:>12g} per MPa")


if __name__ == "__main__":
    main()
