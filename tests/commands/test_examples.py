"""Every subcommand ships ``--examples`` and a readable ``--help``."""

import pytest
from click.testing import CliRunner

from rankclock.cli import cli

COMMANDS: list[tuple[str, list[str]]] = [
    ("parse", ["--unix", "--accsaber"]),
    ("format", ["--date-style", "--time-style", "--no-time", "--tz"]),
    ("relative", ["--unit", "--count"]),
    ("duration", ["VALUE"]),
    ("color", ["VALUE"]),
    ("batch", ["--approved"]),
]


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("name,keywords", COMMANDS)
def test_help(cli_runner: CliRunner, name: str, keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output
    assert "--examples" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("name", [name for name, _ in COMMANDS])
def test_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cli {name}'" in result.output
    assert f"rankclock {name}" in result.output
