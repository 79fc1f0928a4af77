"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from es_schema_reverse.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["infer", "--output", "/tmp/out.schema.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--mapping" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["reverse", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_domain_error_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    mapping_path = tmp_path / "mapping.json"
    mapping_path.write_text("{not json", encoding="utf-8")

    exit_code = main(["infer", "--mapping", str(mapping_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Invalid JSON" in captured.err
    assert "Traceback" not in captured.err
