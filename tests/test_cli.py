from __future__ import annotations

from pathlib import Path

import pytest

from customizer.cli import build_parser, main
from customizer.prompt import MappingAnswerProvider


def test_parser_accepts_single_project_name():
    args = build_parser().parse_args(["widget maker", "-C", "somewhere"])
    assert args.name == "widget maker"
    assert args.directory == Path("somewhere")
    assert not args.help


def test_missing_name_prints_usage_and_fails(template_tree: Path, snapshot, capsys):
    before = snapshot(template_tree)

    exit_code = main(["-C", str(template_tree)])

    assert exit_code == 1
    assert "PROJECT-NAME" in capsys.readouterr().out
    assert snapshot(template_tree) == before


def test_help_flag_prints_usage_and_fails(template_tree: Path, snapshot, capsys):
    before = snapshot(template_tree)

    exit_code = main(["--help", "widget maker", "-C", str(template_tree)])

    assert exit_code == 1
    assert "usage:" in capsys.readouterr().out
    assert snapshot(template_tree) == before


def test_cli_customizes_project(template_tree: Path, answers, capsys):
    exit_code = main(["widget maker", "-C", str(template_tree)], answers=MappingAnswerProvider(answers))

    assert exit_code == 0
    assert (template_tree / "src" / "bin" / "widget_maker.rs").exists()
    assert "re-initialize the git repository" in capsys.readouterr().err


def test_cli_reports_core_failures(tmp_path: Path, answers, capsys):
    exit_code = main(["widget maker", "-C", str(tmp_path)], answers=MappingAnswerProvider(answers))

    assert exit_code == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_uses_manifest_file(tmp_path: Path, capsys):
    root = tmp_path / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "pkg" / "template_name.py").write_text("class TemplateName: ...\n", encoding="utf-8")
    (root / "NOTES.md").write_text("{{ author }} wrote {{ title }}\n", encoding="utf-8")
    manifest = tmp_path / "manifest.toml"
    manifest.write_text(
        """
advisory = ""

[[files]]
path = "pkg/template_name.py"
rename_to = "{{ snake }}.py"
replacements = [{ pattern = "TemplateName", style = "pascal" }]

[[prompts]]
name = "author"
prompt = "Author?"

[[templates]]
path = "NOTES.md"
fields = ["author"]
derived = { title = "kebab" }
""",
        encoding="utf-8",
    )

    exit_code = main(
        ["data cruncher", "-C", str(root), "-m", str(manifest)],
        answers=MappingAnswerProvider({"author": "Jo"}),
    )

    assert exit_code == 0
    assert (root / "pkg" / "data_cruncher.py").read_text(encoding="utf-8") == "class DataCruncher: ...\n"
    assert (root / "NOTES.md").read_text(encoding="utf-8") == "Jo wrote data-cruncher\n"
    assert "git repository" not in capsys.readouterr().err


def test_cli_reports_invalid_manifest(tmp_path: Path, capsys):
    manifest = tmp_path / "manifest.toml"
    manifest.write_text("files = 3\n", encoding="utf-8")

    exit_code = main(["demo", "-C", str(tmp_path), "-m", str(manifest)])

    assert exit_code == 1
    assert "invalid manifest" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_verbose_flag_shows_debug_output(template_tree: Path, answers, capsys, flag):
    main(["widget maker", "-C", str(template_tree), flag], answers=MappingAnswerProvider(answers))
    assert "snake=widget_maker" in capsys.readouterr().err


def test_unknown_option_prints_usage_and_fails(template_tree: Path, snapshot, capsys):
    before = snapshot(template_tree)

    exit_code = main(["widget maker", "--bogus", "-C", str(template_tree)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "usage:" in err
    assert "--bogus" in err
    assert snapshot(template_tree) == before
