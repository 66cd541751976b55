from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from eventarchive.domain.catalog_views import CatalogStats
from eventarchive.domain.csv_import import ImportReport
from eventarchive.domain.model import EntityKind
from eventarchive.ui import cli as cli_module

if TYPE_CHECKING:
    from pathlib import Path

    from eventarchive.config import ImportConfig


def test_import_command_passes_directories(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured: dict[str, ImportConfig] = {}

    def fake_import(*, config: ImportConfig) -> ImportReport:
        captured["config"] = config
        return ImportReport()

    monkeypatch.setattr(cli_module, "import_csv_exports", fake_import)

    cli_module.main(["import", "--root", str(tmp_path), "--unidentified-dir", "Senza-ID"])

    config = captured["config"]
    assert config.identified_dir == tmp_path / "Eventi"
    assert config.unidentified_dir == tmp_path / "Senza-ID"


def test_import_command_exits_non_zero_on_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def failing_import(**_: object) -> ImportReport:
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(cli_module, "import_csv_exports", failing_import)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["import", "--root", str(tmp_path)])

    assert excinfo.value.code == 1


def test_import_command_rejects_missing_root(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["import", "--root", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "Import root is not a directory" in caplog.text


def test_unknown_command_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["export"])

    assert excinfo.value.code == 2


def test_stats_command_prints_json(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        cli_module,
        "get_catalog_stats",
        lambda: CatalogStats(totals={EntityKind.EVENT: 3}),
    )

    cli_module.main(["stats"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"totals": {"events": 3}, "links": {}}
