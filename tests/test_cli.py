"""Tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest

from jdk_license_audit.cli import main


ORACLE_11 = """java.version=11.0.3
java.runtime.version=11.0.3+12-LTS
java.vm.version=11.0.3+12-LTS
java.vendor=Oracle Corporation
java.vm.vendor=Oracle Corporation
java.vendor.version=18.9
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logging.getLogger("jdk_license_audit").handlers.clear()


def test_cli_writes_json_report(tmp_path: Path):
    dumps = tmp_path / "dumps"
    dumps.mkdir()
    (dumps / "host1.properties").write_text(ORACLE_11, encoding="latin-1")
    (dumps / "host2.properties").write_text(ORACLE_11, encoding="latin-1")
    output_dir = tmp_path / "out"

    status = main([str(dumps), "--output-dir", str(output_dir), "--no-progress"])

    assert status == 0
    payload = json.loads((output_dir / "audit_results.json").read_text(encoding="utf-8"))
    assert payload["total_files"] == 2
    assert payload["distinct_count"] == 1
    assert payload["license_required_count"] == 1


def test_cli_multiple_formats(tmp_path: Path):
    (tmp_path / "a.properties").write_text(ORACLE_11, encoding="latin-1")
    output_dir = tmp_path / "out"

    status = main([
        str(tmp_path / "a.properties"),
        "--output-dir", str(output_dir),
        "--name", "fleet",
        "--format", "csv",
        "--format", "xlsx",
        "--no-progress",
    ])

    assert status == 0
    assert (output_dir / "fleet_runtimes.csv").exists()
    assert (output_dir / "fleet_runtimes.xlsx").exists()
    assert not (output_dir / "fleet_results.json").exists()


def test_cli_list_versions(tmp_path: Path, capsys):
    catalog = tmp_path / "versions.txt"
    catalog.write_text("17.0.2\n\n21.0.1\n", encoding="utf-8")

    status = main(["--list-versions", "--catalog", str(catalog)])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["17.0.2", "21.0.1"]


def test_cli_fails_on_empty_catalog(tmp_path: Path, capsys):
    catalog = tmp_path / "versions.txt"
    catalog.write_text("\n\n", encoding="utf-8")

    status = main(["--list-versions", "--catalog", str(catalog)])

    assert status == 1
    assert "version catalog" in capsys.readouterr().err


def test_cli_requires_paths():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
