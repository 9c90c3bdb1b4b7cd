"""End-to-end tests for the hyperworker-install command."""

import json
from pathlib import Path

from click.testing import CliRunner

from hyperworker_install.cli import install
from hyperworker_install.constants import DEFAULT_REMOTE_URL
from hyperworker_install.context import InstallContext
from hyperworker_install.integrations.git.fake import FakeGit
from hyperworker_install.integrations.prompter.fake import ScriptedPrompter
from hyperworker_install.integrations.prompter.real import ClickPrompter


def _context(
    home_dir: Path,
    target_dir: Path,
    *,
    git: FakeGit | None = None,
    answers: list[str] | None = None,
    bundled_dir: Path | None = None,
) -> InstallContext:
    return InstallContext.for_test(
        git=git,
        prompter=ScriptedPrompter(answers or []),
        home=home_dir,
        cwd=target_dir,
        bundled_dir=bundled_dir if bundled_dir is not None else home_dir / "no-bundle",
    )


def test_fresh_install_into_git_repo(
    cli_runner: CliRunner, make_stack, source_dir: Path, target_dir: Path, home_dir: Path
) -> None:
    make_stack(skills={"prd/SKILL.md": "# PRD"}, settings={"env": {"X": "1"}})
    (target_dir / ".git").mkdir()

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir), "--target", str(target_dir), "--stack", "typescript", "-y"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 0, result.output
    skill = target_dir / ".claude" / "skills" / "prd" / "SKILL.md"
    assert skill.read_text(encoding="utf-8") == "# PRD"
    settings = json.loads((target_dir / ".claude" / "settings.json").read_text(encoding="utf-8"))
    assert settings == {"env": {"X": "1"}}
    assert (target_dir / ".gitignore").read_text(encoding="utf-8") == "/plans\n"
    assert "Installation complete." in result.output
    assert "Next steps:" in result.output


def test_fresh_install_without_git_warns(
    cli_runner: CliRunner, make_stack, source_dir: Path, target_dir: Path, home_dir: Path
) -> None:
    make_stack(skills={"prd/SKILL.md": "# PRD"}, settings={"env": {"X": "1"}})

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir), "--target", str(target_dir), "--stack", "typescript", "-y"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 0, result.output
    assert not (target_dir / ".gitignore").exists()
    assert "not a git repository" in result.output


def test_existing_settings_are_preserved(
    cli_runner: CliRunner, make_stack, source_dir: Path, target_dir: Path, home_dir: Path
) -> None:
    make_stack(
        settings={"env": {"X": "template", "Y": "2"}},
        user_settings={"permissions": {"allow": ["Bash(ls)"]}},
    )
    project_settings = target_dir / ".claude" / "settings.json"
    project_settings.parent.mkdir()
    project_settings.write_text(json.dumps({"env": {"X": "user"}, "extra": True}), encoding="utf-8")
    user_settings = home_dir / ".claude" / "settings.json"
    user_settings.parent.mkdir()
    user_settings.write_text(
        json.dumps({"permissions": {"allow": ["Read"]}, "theme": "dark"}), encoding="utf-8"
    )

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir), "--stack", "typescript", "--yes"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 0, result.output
    assert json.loads(project_settings.read_text(encoding="utf-8")) == {
        "env": {"X": "user", "Y": "2"},
        "extra": True,
    }
    assert json.loads(user_settings.read_text(encoding="utf-8")) == {
        "permissions": {"allow": ["Read", "Bash(ls)"]},
        "theme": "dark",
    }


def test_dry_run_changes_nothing(
    cli_runner: CliRunner,
    make_stack,
    source_dir: Path,
    target_dir: Path,
    home_dir: Path,
    snapshot_tree,
) -> None:
    make_stack(
        skills={"prd/SKILL.md": "# PRD", "review/SKILL.md": "# Review"},
        settings={"env": {"X": "1"}},
        user_settings={"theme": "light"},
    )
    (target_dir / ".git").mkdir()
    existing = target_dir / ".claude" / "skills" / "review" / "SKILL.md"
    existing.parent.mkdir(parents=True)
    existing.write_text("mine", encoding="utf-8")
    target_before = snapshot_tree(target_dir)
    home_before = snapshot_tree(home_dir)

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir), "--stack", "typescript", "--dry-run"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 0, result.output
    assert snapshot_tree(target_dir) == target_before
    assert snapshot_tree(home_dir) == home_before
    assert not (home_dir / ".claude").exists()
    assert "DRY RUN MODE" in result.output
    assert "[DRY RUN] COPY: prd/SKILL.md" in result.output
    assert "no files were written" in result.output
    assert "Next steps:" not in result.output


def test_interactive_conflict_and_stack_prompt(
    cli_runner: CliRunner, make_stack, source_dir: Path, target_dir: Path, home_dir: Path
) -> None:
    make_stack("typescript", skills={"prd/SKILL.md": "template"})
    make_stack("kubernetes", skills={"helm/SKILL.md": "helm"})
    existing = target_dir / ".claude" / "skills" / "prd" / "SKILL.md"
    existing.parent.mkdir(parents=True)
    existing.write_text("mine", encoding="utf-8")
    ctx = InstallContext.for_test(
        prompter=ClickPrompter(),
        home=home_dir,
        cwd=target_dir,
        bundled_dir=home_dir / "no-bundle",
    )

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir)],
        obj=ctx,
        input="typescript\nd\no\n",
    )

    assert result.exit_code == 0, result.output
    assert "Which stack would you like to install?" in result.output
    assert "-mine" in result.output
    assert existing.read_text(encoding="utf-8") == "template"


def test_remote_without_url_clones_default(
    cli_runner: CliRunner, make_stack, tmp_path: Path, target_dir: Path, home_dir: Path
) -> None:
    upstream = tmp_path / "upstream"
    make_stack("typescript", skills={"prd/SKILL.md": "# PRD"}, root=upstream)
    git = FakeGit(clone_from=upstream)

    result = cli_runner.invoke(
        install,
        ["--remote", "--stack", "typescript", "--yes"],
        obj=_context(home_dir, target_dir, git=git),
    )

    assert result.exit_code == 0, result.output
    [(url, temp_dir)] = git.clone_calls
    assert url == DEFAULT_REMOTE_URL
    assert not temp_dir.exists()
    assert (target_dir / ".claude" / "skills" / "prd" / "SKILL.md").exists()
    assert "Cleaned up temporary directory." in result.output


def test_remote_with_url(
    cli_runner: CliRunner, make_stack, tmp_path: Path, target_dir: Path, home_dir: Path
) -> None:
    upstream = tmp_path / "upstream"
    make_stack("kubernetes", root=upstream)
    git = FakeGit(clone_from=upstream)

    result = cli_runner.invoke(
        install,
        ["--stack", "kubernetes", "-y", "--remote", "https://example.com/fork.git"],
        obj=_context(home_dir, target_dir, git=git),
    )

    assert result.exit_code == 0, result.output
    assert git.clone_calls[0][0] == "https://example.com/fork.git"


def test_clone_failure_exits_nonzero(
    cli_runner: CliRunner, target_dir: Path, home_dir: Path
) -> None:
    git = FakeGit(clone_error="fatal: could not read from remote")

    result = cli_runner.invoke(
        install,
        ["--remote", "--stack", "typescript", "--yes"],
        obj=_context(home_dir, target_dir, git=git),
    )

    assert result.exit_code == 1
    assert "Failed to clone remote repository" in result.output


def test_missing_source_exits_nonzero(
    cli_runner: CliRunner, tmp_path: Path, target_dir: Path, home_dir: Path
) -> None:
    result = cli_runner.invoke(
        install,
        ["--source", str(tmp_path / "missing"), "--stack", "typescript", "--yes"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 1
    assert "Source directory does not exist" in result.output


def test_malformed_source_settings_exits_nonzero(
    cli_runner: CliRunner, make_stack, source_dir: Path, target_dir: Path, home_dir: Path
) -> None:
    stack_dir = make_stack()
    (stack_dir / "settings.json").write_text("{broken", encoding="utf-8")

    result = cli_runner.invoke(
        install,
        ["--source", str(source_dir), "--stack", "typescript", "--yes"],
        obj=_context(home_dir, target_dir),
    )

    assert result.exit_code == 1
    assert "Could not parse source settings" in result.output
    assert not (target_dir / ".claude" / "settings.json").exists()


def test_yes_without_stack_is_usage_error(
    cli_runner: CliRunner, target_dir: Path, home_dir: Path
) -> None:
    git = FakeGit()

    result = cli_runner.invoke(install, ["--yes"], obj=_context(home_dir, target_dir, git=git))

    assert result.exit_code == 2
    assert "requires --stack" in result.output
    assert git.clone_calls == []


def test_invalid_stack_is_usage_error(
    cli_runner: CliRunner, target_dir: Path, home_dir: Path
) -> None:
    result = cli_runner.invoke(
        install, ["--stack", "rust"], obj=_context(home_dir, target_dir)
    )

    assert result.exit_code == 2
    assert "Usage:" in result.output


def test_unknown_flag_is_usage_error(
    cli_runner: CliRunner, target_dir: Path, home_dir: Path
) -> None:
    result = cli_runner.invoke(install, ["--bogus"], obj=_context(home_dir, target_dir))

    assert result.exit_code == 2
    assert "No such option" in result.output


def test_missing_flag_value_is_usage_error(
    cli_runner: CliRunner, target_dir: Path, home_dir: Path
) -> None:
    result = cli_runner.invoke(install, ["--target"], obj=_context(home_dir, target_dir))

    assert result.exit_code == 2


def test_help(cli_runner: CliRunner) -> None:
    for flag in ("--help", "-h"):
        result = cli_runner.invoke(install, [flag])

        assert result.exit_code == 0
        assert "--dry-run" in result.output
        assert "--remote [URL]" in result.output
