"""CLI tests for the vega-population commands.

Each test runs against a population repository written to tmp_path and a
context rooted at a temporary home directory.
"""

from pathlib import Path

from click.testing import CliRunner

from vega_population.cli.cli import cli
from vega_population.context import PopulationContext
from vega_population.version import __version__
from tests.test_utils.population import write_population


def _setup(tmp_path: Path) -> tuple[PopulationContext, str]:
    repo = write_population(tmp_path / "repo")
    return PopulationContext.for_test(tmp_path / "home"), str(repo)


def _installed(tmp_path: Path, *parts: str) -> Path:
    return tmp_path.joinpath("home", ".vega", *parts, "vega.yaml")


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_search(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["search", "kubernetes", "--source", source], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Found 2 result(s) for 'kubernetes':" in result.output
    assert "kubernetes-ops" in result.output
    assert "tags: k8s, cluster" in result.output
    assert "+platform-engineer" in result.output


def test_search_with_filters(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli,
        ["search", "incident", "--tags", "ops, misc", "--kind", "skill", "--source", source],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert "Found 1 result(s)" in result.output
    assert "incident-notes" in result.output


def test_search_no_results(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["search", "nothing", "here", "--source", source, "--no-cache"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "No results found for 'nothing here'" in result.output
    assert not (tmp_path / "home" / ".vega" / "cache").exists()


def test_search_missing_source_reports_error(tmp_path: Path) -> None:
    ctx = PopulationContext.for_test(tmp_path / "home")

    result = CliRunner().invoke(
        cli, ["search", "kubernetes", "--source", str(tmp_path / "missing")], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error: Failed to fetch" in result.output


def test_install_skill(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["install", "docker-build", "--source", source], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Installing skill 'docker-build'..." in result.output
    assert "✓ Installed docker-build to" in result.output
    assert _installed(tmp_path, "skills", "docker-build").exists()


def test_install_profile_with_dependencies(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["install", "+platform-engineer", "--source", source], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Installing persona 'incident-commander'..." in result.output
    assert "✓ Installed +platform-engineer to" in result.output
    assert _installed(tmp_path, "personas", "incident-commander").exists()
    assert _installed(tmp_path, "skills", "kubernetes-ops").exists()
    assert _installed(tmp_path, "skills", "docker-build").exists()
    assert _installed(tmp_path, "profiles", "platform-engineer").exists()


def test_install_twice_requires_force(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)
    runner = CliRunner()
    runner.invoke(cli, ["install", "@cmo", "--source", source], obj=ctx)

    result = runner.invoke(cli, ["install", "@cmo", "--source", source], obj=ctx)

    assert result.exit_code == 1
    assert "Error: persona '@cmo' is already installed" in result.output

    forced = runner.invoke(cli, ["install", "@cmo", "-f", "--source", source], obj=ctx)

    assert forced.exit_code == 0, forced.output


def test_install_dry_run(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["install", "+platform-engineer", "--dry-run", "--source", source], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Would install persona 'incident-commander'" in result.output
    assert "Would install profile 'platform-engineer'" in result.output
    assert not (tmp_path / "home" / ".vega" / "profiles").exists()


def test_install_custom_dir(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)
    install_dir = tmp_path / "agents"

    result = CliRunner().invoke(
        cli,
        ["install", "kubernetes-ops", "--source", source, "--install-dir", str(install_dir)],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert (install_dir / "skills" / "kubernetes-ops" / "vega.yaml").exists()


def test_list_empty(tmp_path: Path) -> None:
    ctx, _ = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No items installed" in result.output


def test_list_groups_by_kind(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)
    runner = CliRunner()
    runner.invoke(cli, ["install", "docker-build", "@cmo", "--source", source], obj=ctx)

    result = runner.invoke(cli, ["ls"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Skills:" in result.output
    assert "Personas:" in result.output
    assert "Profiles:" not in result.output
    assert "v1.2.0" in result.output
    assert "@cmo" in result.output

    personas_only = runner.invoke(cli, ["list", "--kind", "persona"], obj=ctx)

    assert "Skills:" not in personas_only.output


def test_info(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["info", "@cmo", "--source", source], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Name:        @cmo" in result.output
    assert "Recommended: market-research, copywriting" in result.output
    assert "Status:      Not installed" in result.output


def test_info_unknown(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["info", "+ghost", "--source", source], obj=ctx)

    assert result.exit_code == 1
    assert "Error: profile 'ghost' not found" in result.output


def test_export_persona(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["export", "@cmo", "--source", source, "--temperature", "0.2"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("  Maya:\n")
    assert "    temperature: 0.2" in result.output
    assert "      You are Maya, the chief marketing officer." in result.output


def test_export_falls_back_to_title_case(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["export", "@incident-commander", "--source", source], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("  Incident-commander:\n")


def test_export_name_override(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(
        cli, ["export", "@cmo", "--name", "Marketer", "--source", source], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("  Marketer:\n")


def test_export_rejects_non_persona(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["export", "docker-build", "--source", source], obj=ctx)

    assert result.exit_code == 1
    assert "export only works with personas" in result.output


def test_update(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)

    result = CliRunner().invoke(cli, ["update", "--source", source], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "✓ Cache updated" in result.output
    cache_dir = tmp_path / "home" / ".vega" / "cache" / "population"
    assert (cache_dir / "profiles-index.yaml").exists()


def test_kind_option_accepts_every_kind(tmp_path: Path) -> None:
    ctx, source = _setup(tmp_path)
    runner = CliRunner()

    profiles = runner.invoke(
        cli, ["search", "platform", "--kind", "profile", "--source", source], obj=ctx
    )
    invalid_search = runner.invoke(cli, ["search", "x", "--kind", "skills"], obj=ctx)
    invalid_list = runner.invoke(cli, ["list", "--kind", "agent"], obj=ctx)

    assert profiles.exit_code == 0, profiles.output
    assert "+platform-engineer" in profiles.output
    assert invalid_search.exit_code == 2
    assert invalid_list.exit_code == 2
