"""CLI parser and command tests."""

from __future__ import annotations

import json

import pytest

from starterdoc.cli import _build_parser, main
from tests._fixtures.draft_builder import UNDOCUMENTED, DraftBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build"])
    assert args.verbose is True
    assert args.command == "build"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["publish", "--verbose"])
    assert args.verbose is True
    assert args.command == "publish"


def test_cli_build_options_map_to_build_fields() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["build", "drafts/counter", "-o", "out", "--template", "doc.md.j2", "-n", "my-counter", "--has-ui"]
    )
    assert args.draft == "drafts/counter"
    assert args.output_path == "out"
    assert args.template_path == "doc.md.j2"
    assert args.starter_name == "my-counter"
    assert args.has_ui is True


def test_cli_has_ui_defaults_to_unset() -> None:
    parser = _build_parser()
    args = parser.parse_args(["metadata", "Counter.sol"])
    assert args.has_ui is None


def test_cli_publish_accepts_force_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["publish", "-f"])
    assert args.force is True
    assert args.draft is None


def test_cli_docs_requires_metadata() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["docs", "Counter.sol"])


def test_cli_accepts_dry_run_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["rebuild", "--dry-run"])
    assert args.command == "rebuild"
    assert args.dry_run is True


def test_main_build_and_publish_default_draft(draft_builder: DraftBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    draft_builder.standard()
    root = str(draft_builder.root)

    main(["--config", root, "build"])
    main(["--config", root, "publish"])

    out = capsys.readouterr().out
    assert "Starter 'fhe-counter' built at" in out
    assert "Starter 'fhe-counter' published to" in out
    assert (draft_builder.root / "starters" / "fhe-counter" / "README.md").exists()


def test_main_build_failure_exits_with_reason(
    draft_builder: DraftBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    draft_builder.standard(contract=UNDOCUMENTED, filename="Plain.sol")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(draft_builder.root), "build"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "starterdoc build failed at validating: metadata invalid" in err
    assert "description: must not be empty" in err


def test_main_metadata_honours_overrides(draft_builder: DraftBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    draft = draft_builder.standard()
    output = draft_builder.root / "meta.json"

    main(
        [
            "--config",
            str(draft_builder.root),
            "metadata",
            str(draft / "contracts" / "FHECounter.sol"),
            "-o",
            str(output),
            "--chapter",
            "handles",
        ]
    )

    assert "Metadata written to" in capsys.readouterr().out
    assert json.loads(output.read_text(encoding="utf-8"))["chapter"] == "handles"


def test_main_rebuild_reports_counts(draft_builder: DraftBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    (draft_builder.root / "starters" / "empty").mkdir(parents=True)

    main(["--config", str(draft_builder.root), "rebuild", "--dry-run"])

    out = capsys.readouterr().out
    assert "Rebuilt 0 starter(s), skipped 1 (dry-run)" in out
    assert "skipped empty:" in out


def test_main_rejects_invalid_config(draft_builder: DraftBuilder) -> None:
    (draft_builder.root / ".starterdoc.yml").write_text("validation:\n  profile: lenient\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(draft_builder.root), "rebuild"])

    assert excinfo.value.code == 1
