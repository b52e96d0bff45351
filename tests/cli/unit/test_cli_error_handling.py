"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from mdmodel_codegen.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--output-dir", "/tmp/out"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--schema" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_schema_errors_are_reported_on_stderr_with_location(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "model.md"
    schema_path.write_text("### Item\n- ref\n  - Type: Missing\n", encoding="utf-8")

    exit_code = main(["check", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "unknown type 'Missing'" in captured.err
    assert "section 'Item', line 2" in captured.err
    assert "Traceback" not in captured.err
    assert captured.out == ""


def test_missing_schema_file_returns_domain_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["generate", "--schema", str(tmp_path / "nope.md"), "--output-dir", "out"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema file not found" in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "mdmodel-codegen.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"
