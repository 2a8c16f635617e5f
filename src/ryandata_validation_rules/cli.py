from __future__ import annotations

import inspect
import json
from typing import Optional

import typer

from ryandata_validation_rules.models.errors import RuleBuilderError
from ryandata_validation_rules.rules.base import BaseRules
from ryandata_validation_rules.rules.validation_rules import ValidationRules

# Public BaseRules methods that read or manage state rather than add a rule
BUILDER_ACCESSORS = frozenset(
    {
        "key",
        "label",
        "attribute",
        "rules",
        "rule_names",
        "messages",
        "add_string",
        "add_object",
        "add_registered",
        "reset",
        "to_field_rules",
        "validate_definition",
    }
)

app = typer.Typer(help="Build validation rule lists from the command line.")


def rule_methods(rules_class: type[BaseRules] = ValidationRules) -> list[str]:
    """List the fluent rule methods a builder class offers."""
    return sorted(
        name
        for name, _ in inspect.getmembers(rules_class, inspect.isfunction)
        if not name.startswith("_") and name not in BUILDER_ACCESSORS
    )


def _parse_messages(pairs: list[str]) -> dict[str, str]:
    messages: dict[str, str] = {}
    for pair in pairs:
        rule_name, sep, text = pair.partition("=")
        if not sep or not rule_name:
            raise typer.BadParameter(f"expected RULE=TEXT, got '{pair}'", param_hint="--message")
        messages[rule_name] = text
    return messages


@app.command()
def methods() -> None:
    """List the rule methods available on ValidationRules."""
    for name in rule_methods():
        typer.echo(name)


@app.command()
def build(
    key: str = typer.Argument(..., help="Field name the rules apply to."),
    rule: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--rule",
        "-r",
        help="Rule token such as 'required' or 'max:255'. Repeatable.",
    ),
    message: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--message",
        "-m",
        help="Message override as RULE=TEXT. Repeatable.",
    ),
    label: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--label",
        help="Display label for the field.",
    ),
    check: bool = typer.Option(  # noqa: B008
        False,
        "--check",
        help="Run the definition checks and exit 1 if any fail.",
    ),
) -> None:
    """Build the rules for one field and print them as JSON."""
    tokens = rule or []
    messages = _parse_messages(message or [])

    try:
        builder = ValidationRules(key)
        for token in tokens:
            rule_name = token.partition(":")[0]
            builder.add_string(token, messages.pop(rule_name, None))
    except RuleBuilderError as exc:
        typer.echo(f"Error: {exc.message()}", err=True)
        raise typer.Exit(code=2) from exc

    if messages:
        orphans = ", ".join(sorted(messages))
        raise typer.BadParameter(f"no --rule given for: {orphans}", param_hint="--message")

    if label is not None:
        builder.label(label)

    typer.echo(json.dumps(builder.to_field_rules().to_dict(stringify=True), indent=2))

    if check:
        result = builder.validate_definition()
        if not result.is_valid:
            for error in result.errors:
                typer.echo(f"{error.field}: {error.message}")
            raise typer.Exit(code=1)
        typer.echo("Rule definition checks passed.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
