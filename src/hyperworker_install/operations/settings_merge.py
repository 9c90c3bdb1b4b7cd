"""Reconcile a settings template into an existing settings.json.

The target file may hold irreplaceable user configuration, so it is never
discarded without consent:

- missing or empty target: merge into an empty base
- malformed target: skip in non-interactive mode, otherwise ask whether to
  replace it with the template
- malformed source template: fatal, since templates ship with the installer

The merged document is written with an atomic temp-file-then-rename.
"""

import logging
from pathlib import Path
from typing import Any, NamedTuple

from hyperworker_install.errors import TemplateIntegrityError
from hyperworker_install.integrations.prompter.abc import Prompter
from hyperworker_install.io.settings_json import (
    InvalidSettingsError,
    parse_settings,
    render_settings,
    save_settings,
)
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.models.results import MergeResult
from hyperworker_install.operations.reverse_merge import json_equal, reverse_merge
from hyperworker_install.output import user_output, user_warning

logger = logging.getLogger(__name__)


def _load_template(source_path: Path) -> dict[str, Any]:
    try:
        return parse_settings(source_path.read_bytes())
    except InvalidSettingsError as e:
        raise TemplateIntegrityError(source_path, e.reason) from e


class _TargetSettings(NamedTuple):
    settings: dict[str, Any]
    started_empty: bool
    # The file on disk is malformed and the user agreed to replace it.
    discard_existing: bool = False


def _confirm_overwrite(prompter: Prompter) -> bool:
    answer = prompter.ask("  Overwrite with hyperworker defaults? (y/N): ")
    return answer.lower() in ("y", "yes")


def _load_target(
    target_path: Path,
    label: str,
    options: InstallOptions,
    prompter: Prompter,
) -> _TargetSettings | None:
    """Read the target settings, or return None if the merge should be skipped."""
    if not target_path.exists():
        return _TargetSettings(settings={}, started_empty=True)

    raw = target_path.read_bytes()
    if not raw.strip():
        user_warning(f"  Warning: {target_path} is empty.")
        return _TargetSettings(settings={}, started_empty=True)

    try:
        return _TargetSettings(settings=parse_settings(raw), started_empty=False)
    except InvalidSettingsError as e:
        user_warning(f"  Warning: {target_path} contains invalid JSON: {e.reason}")

    if options.yes:
        user_output(f"  --yes mode: skipping {label} settings merge (invalid target JSON).")
        return None

    if _confirm_overwrite(prompter):
        user_output("  Overwriting invalid settings file.")
        return _TargetSettings(settings={}, started_empty=True, discard_existing=True)

    user_output(f"  Skipping {label} settings merge.")
    return None


def summarize_key_changes(
    before: dict[str, Any], after: dict[str, Any]
) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
    """Classify top-level keys as (added, changed, unchanged).

    added: keys only present after. changed: keys present before whose value
    differs after. unchanged: keys present before with an equal value after.
    """
    added = tuple(key for key in after if key not in before)
    changed = tuple(key for key in before if not json_equal(before[key], after.get(key)))
    unchanged = tuple(key for key in before if key not in changed)
    return added, changed, unchanged


def _print_changes(
    target_path: Path,
    label: str,
    before: dict[str, Any],
    after: dict[str, Any],
    started_empty: bool,
    keys: tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]],
) -> None:
    added, changed, unchanged = keys

    user_output(f"\n  {label.capitalize()} settings changes ({target_path}):")
    if added:
        user_output(f"    Keys added:     {', '.join(added)}")
    if changed:
        user_output(f"    Keys merged:    {', '.join(changed)}")
    preserved = ", ".join(unchanged) if unchanged else "(none - new file)"
    user_output(f"    Keys preserved: {preserved}")

    user_output("  --- Before ---")
    if started_empty:
        user_output("    (file did not exist or was empty)")
    else:
        for line in render_settings(before).splitlines():
            user_output(f"    {line}")
    user_output("  --- After ---")
    for line in render_settings(after).splitlines():
        user_output(f"    {line}")
    user_output()


def _ensure_parent_dir(target_path: Path, dry_run: bool) -> None:
    parent = target_path.parent
    if parent.exists():
        return
    if dry_run:
        user_output(f"  [DRY RUN] Would create directory: {parent}")
        return
    parent.mkdir(parents=True, exist_ok=True)
    user_output(f"  Created directory: {parent}")


def reconcile_settings(
    source_path: Path,
    target_path: Path,
    label: str,
    options: InstallOptions,
    prompter: Prompter,
) -> MergeResult:
    """Reverse-merge the template at source_path into target_path.

    Args:
        source_path: Settings template inside the source stack
        target_path: settings.json to create or update
        label: Human-readable scope name used in messages ("project", "user")
        options: Run options (dry_run and yes are consulted)
        prompter: Source of answers when the target is malformed

    Returns:
        MergeResult with status skipped, unchanged, dry-run or updated

    Raises:
        TemplateIntegrityError: If the template is not a valid JSON object
        OSError: If the merged settings cannot be written
    """
    user_output(f"\nMerging {label} settings...")

    if not source_path.exists():
        user_output(f"  No source template found at {source_path} - skipping.")
        return MergeResult.skipped()

    template = _load_template(source_path)

    loaded = _load_target(target_path, label, options, prompter)
    if loaded is None:
        return MergeResult.skipped()
    current = loaded.settings
    started_empty = loaded.started_empty

    merged = reverse_merge(current, template)

    if not loaded.discard_existing and render_settings(current) == render_settings(merged):
        user_output(f"  {label.capitalize()} settings already up to date - no changes needed.")
        return MergeResult(status="unchanged", merged=merged, unchanged=tuple(current))

    keys = summarize_key_changes(current, merged)
    added, changed, unchanged = keys
    logger.debug("%s settings: added=%s changed=%s", label, added, changed)
    _print_changes(target_path, label, current, merged, started_empty, keys)

    _ensure_parent_dir(target_path, options.dry_run)

    if options.dry_run:
        user_output(f"  [DRY RUN] Would write merged settings to {target_path}")
        return MergeResult(
            status="dry-run", merged=merged, added=added, changed=changed, unchanged=unchanged
        )

    save_settings(target_path, merged)
    user_output(f"  Wrote merged settings to {target_path}")

    return MergeResult(
        status="updated", merged=merged, added=added, changed=changed, unchanged=unchanged
    )
