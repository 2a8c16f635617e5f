import json

from typer.testing import CliRunner

from ryandata_validation_rules import cli
from ryandata_validation_rules.rules.standard import StandardRules

runner = CliRunner()


def test_methods_lists_rule_methods() -> None:
    result = runner.invoke(cli.app, ["methods"])

    assert result.exit_code == 0
    names = result.stdout.split()
    assert "required" in names
    assert "unique_ignore_not_deleted" in names
    assert "as_date" in names
    # Accessors are not rule methods
    assert "rules" not in names
    assert "add_string" not in names


def test_rule_methods_for_standard_rules() -> None:
    names = cli.rule_methods(StandardRules)

    assert "exists" in names
    assert "tel" not in names
    assert names == sorted(names)


def test_build_prints_json() -> None:
    result = runner.invoke(
        cli.app,
        ["build", "email", "-r", "required", "-r", "email", "-r", "max:255"],
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["key"] == "email"
    assert data["rules"] == ["required", "email", "max:255"]
    assert data["rule_names"] == ["required", "email", "max"]
    assert data["messages"] == {}
    assert data["attribute"] is None


def test_build_with_messages_and_label() -> None:
    result = runner.invoke(
        cli.app,
        [
            "build",
            "name",
            "--rule",
            "required",
            "--rule",
            "max:50",
            "--message",
            "max=Name is too long",
            "--label",
            "Full name",
        ],
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["messages"] == {"name.max": "Name is too long"}
    assert data["attribute"] == "Full name"


def test_build_rejects_malformed_message() -> None:
    result = runner.invoke(cli.app, ["build", "name", "-r", "required", "-m", "oops"])

    assert result.exit_code == 2
    assert "RULE=TEXT" in result.output


def test_build_rejects_message_without_rule() -> None:
    result = runner.invoke(cli.app, ["build", "name", "-r", "required", "-m", "max=Too long"])

    assert result.exit_code == 2
    assert "max" in result.output


def test_build_reports_builder_errors() -> None:
    result = runner.invoke(cli.app, ["build", "name", "--rule", ""])

    assert result.exit_code == 2
    assert "rule cannot be empty." in result.output


def test_build_empty_key() -> None:
    result = runner.invoke(cli.app, ["build", "", "-r", "required"])

    assert result.exit_code == 2
    assert "key cannot be empty." in result.output


def test_build_check_passes() -> None:
    result = runner.invoke(
        cli.app, ["build", "email", "-r", "required", "-r", "email", "-m", "email=Bad", "--check"]
    )

    assert result.exit_code == 0
    assert "Rule definition checks passed." in result.stdout


def test_build_check_fails_on_contradicting_rules() -> None:
    result = runner.invoke(
        cli.app, ["build", "email", "-r", "required", "-r", "prohibited", "--check"]
    )

    assert result.exit_code == 1
    assert "email: Rules 'required' and 'prohibited' cannot both pass" in result.stdout
