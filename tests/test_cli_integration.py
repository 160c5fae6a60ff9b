"""Integration-style tests that exercise the CLI export entrypoint."""
import csv
from pathlib import Path

from openpyxl import load_workbook

from datareview.cli import main as cli_main
from datareview.review.store import FETCH_ERROR_MESSAGE


def _read_rows(path: Path) -> list[dict]:
    with path.open(encoding="utf-8", newline="") as fh:
        return list(csv.DictReader(fh))


def test_cli_writes_all_records_without_query(tmp_path: Path, dummy_source: Path) -> None:
    output = tmp_path / "export.csv"

    exit_code = cli_main(["--source", str(dummy_source), "--output", str(output)])

    assert exit_code == 0
    rows = _read_rows(output)
    assert [row["id"] for row in rows] == ["1", "2", "3", "4", "5", "6"]
    assert rows[2]["street"] == ""
    assert rows[2]["street_severity"] == "warning"


def test_cli_exports_only_matching_records(tmp_path: Path, dummy_source: Path) -> None:
    output = tmp_path / "export.csv"

    cli_main(["--source", str(dummy_source), "--query", "PENDING", "--output", str(output)])

    assert [row["name"] for row in _read_rows(output)] == ["Carlos Ruiz", "Lena Fischer"]


def test_cli_writes_excel_output(tmp_path: Path, dummy_source: Path) -> None:
    output = tmp_path / "export.csv"
    excel_output = tmp_path / "export.xlsx"

    cli_main(
        [
            "--source",
            str(dummy_source),
            "--output",
            str(output),
            "--sink",
            "excel",
            "--excel-output",
            str(excel_output),
        ]
    )

    sheet = load_workbook(excel_output).active
    assert sheet.max_row - 1 == 6


def test_cli_reports_fetch_failure(tmp_path: Path, capsys, caplog) -> None:
    output = tmp_path / "export.csv"

    exit_code = cli_main(["--source", str(tmp_path / "missing.json"), "--output", str(output)])

    assert exit_code == 1
    assert FETCH_ERROR_MESSAGE in capsys.readouterr().err
    assert not output.exists()
    assert "missing.json" in caplog.text
