"""CLI config stories: display, JSON format, sections, and profiles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from greetings.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_shows_packaged_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The packaged defaultconfig.toml contributes the [greetings] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "greetings" in result.stdout
    assert "Laura" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_mocked_data_it_displays_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Human output lists sections, keys, and values."""
    factory = config_cli_context({"greetings": {"names": ["Ana", "Bo"], "duplicates": "reject"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "[greetings]" in result.output
    assert "duplicates" in result.output
    assert "reject" in result.output
    assert "Ana" in result.output


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_and_section_it_shows_section(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """--section restricts the output to one table."""
    factory = config_cli_context(
        {"greetings": {"names": ["Ana"], "seed": 3}, "lib_log_rich": {"environment": "test"}},
    )

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "greetings"], obj=factory
    )

    assert result.exit_code == 0
    assert "seed" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_nonexistent_section_it_fails(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """A missing section is reported on stderr with a non-zero exit."""
    factory = config_cli_context({"greetings": {"names": ["Ana"]}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nope"], obj=factory)

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_root_profile_is_given_it_reaches_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """The root --profile is passed to the config loader."""
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"greetings": {}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == ["staging"]


@pytest.mark.os_agnostic
def test_when_config_is_invoked_without_profile_it_passes_none(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """Without --profile the loader sees None and is called once."""
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"greetings": {}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == [None]


@pytest.mark.os_agnostic
def test_when_config_subcommand_profile_reloads_it_preserves_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """config --profile reloads configuration and reapplies the root --set overrides."""
    captured_profiles: list[str | None] = []
    base_config = config_factory({"greetings": {"duplicates": "overwrite"}})
    factory = inject_config_with_profile_capture(base_config, captured_profiles)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greetings.duplicates=reject", "config", "--profile", "test", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert captured_profiles == [None, "test"]
    assert '"reject"' in result.stdout
    assert '"overwrite"' not in result.stdout


@pytest.mark.os_agnostic
def test_when_config_subcommand_has_no_profile_it_uses_stored_config_with_overrides(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Without a subcommand profile, the root command's overridden config is shown."""
    factory = config_cli_context({"greetings": {"seed": 1}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greetings.seed=99", "config", "--format", "json", "--section", "greetings"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "99" in result.stdout

