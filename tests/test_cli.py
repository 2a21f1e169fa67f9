"""Tests for the command-line entry point."""

from openpyxl import load_workbook

from catalog_viewer import cli
from catalog_viewer.excel_writer import SHEET_NAME
from catalog_viewer.types import LoadError


def _patch_loader(monkeypatch, products=None, error=None):
    def fake_load(settings, session=None):
        if error is not None:
            raise error
        return products

    monkeypatch.setattr(cli, "load_products", fake_load)


def test_export_applies_filters(monkeypatch, tmp_path, catalog, capsys):
    _patch_loader(monkeypatch, products=catalog)
    out = tmp_path / "Filtered_Products.xlsx"

    code = cli.main(["export", "-b", "Acme", "-s", "plug", "-o", str(out)])

    assert code == 0
    rows = list(load_workbook(out)[SHEET_NAME].iter_rows(values_only=True))
    assert [r[0] for r in rows[1:]] == [4]
    assert "Saved products: 1" in capsys.readouterr().out


def test_export_without_filters_writes_everything(monkeypatch, tmp_path, catalog):
    _patch_loader(monkeypatch, products=catalog)
    out = tmp_path / "all.xlsx"

    assert cli.main(["export", "-o", str(out)]) == 0
    rows = list(load_workbook(out)[SHEET_NAME].iter_rows(values_only=True))
    assert len(rows) - 1 == len(catalog)


def test_load_error_exit_code(monkeypatch, tmp_path, capsys):
    _patch_loader(monkeypatch, error=LoadError("JWT expired"))
    out = tmp_path / "never.xlsx"

    assert cli.main(["export", "-o", str(out)]) == 1
    assert "JWT expired" in capsys.readouterr().err
    assert not out.exists()


def test_export_error_exit_code(monkeypatch, tmp_path, catalog, capsys):
    _patch_loader(monkeypatch, products=catalog)
    out = tmp_path / "missing-dir" / "out.xlsx"

    assert cli.main(["export", "-o", str(out)]) == 1
    assert "Export error" in capsys.readouterr().err


def test_russian_messages(monkeypatch, tmp_path, sample_products, capsys):
    _patch_loader(monkeypatch, products=sample_products)
    out = tmp_path / "ru.xlsx"

    assert cli.main(["--lang", "ru", "export", "-o", str(out)]) == 0
    assert "Сохранено товаров: 2" in capsys.readouterr().out


def test_serve_launches_streamlit(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.subprocess, "call", lambda args: calls.append(args) or 0)

    assert cli.main(["serve"]) == 0
    assert calls[0][1:4] == ["-m", "streamlit", "run"]
    assert calls[0][4].endswith("app.py")


def test_bad_timeout_setting_exit_code(monkeypatch, tmp_path, catalog, capsys):
    _patch_loader(monkeypatch, products=catalog)
    monkeypatch.setenv("CATALOG_REQUEST_TIMEOUT", "soon")

    assert cli.main(["export", "-o", str(tmp_path / "out.xlsx")]) == 1
    err = capsys.readouterr().err
    assert "Configuration error" in err
    assert "CATALOG_REQUEST_TIMEOUT" in err
