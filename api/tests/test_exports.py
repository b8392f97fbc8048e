"""Tests for Excel and PDF exports."""

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from asset_registry.schemas.asset import AssetCreate
from asset_registry.services.actor import SYSTEM_ACTOR
from asset_registry.services.asset_service import create_asset, get_all_assets
from asset_registry.services.errors import EmptyExportError
from asset_registry.services.excel_export import COLUMNS, SHEET_TITLE, export_assets_to_excel
from asset_registry.services.pdf_export import render_inventory_report, render_qr_label
from tests.conftest import ADMIN_HEADERS


@pytest.fixture
def stored_assets(test_db, asset_payload):
    create_asset(test_db, AssetCreate(**asset_payload), SYSTEM_ACTOR)
    create_asset(
        test_db,
        AssetCreate(**{**asset_payload, "name": "desk", "category": "Furniture", "annual_depreciation_rate": None}),
        SYSTEM_ACTOR,
    )
    return get_all_assets(test_db)


class TestExcelExport:
    """Tests for export_assets_to_excel function."""

    def test_workbook_contents(self, stored_assets):
        content = export_assets_to_excel(stored_assets, as_of=date(2023, 1, 1))
        sheet = load_workbook(io.BytesIO(content))[SHEET_TITLE]

        rows = list(sheet.iter_rows(values_only=True))
        assert list(rows[0]) == COLUMNS
        assert len(rows) == 3
        assert rows[1][0] == 1
        assert rows[1][1] == "Laptop Dell"
        assert rows[1][-1] == pytest.approx(700.0)
        assert rows[1][COLUMNS.index("Annual Depreciation (%)")] == pytest.approx(0.10)
        assert rows[2][1] == "Desk"
        assert rows[2][-1] == pytest.approx(1000.0)

    def test_minimum_column_width(self, stored_assets):
        sheet = load_workbook(io.BytesIO(export_assets_to_excel(stored_assets)))[SHEET_TITLE]
        assert sheet.column_dimensions["A"].width >= 18

    def test_empty_registry(self):
        with pytest.raises(EmptyExportError):
            export_assets_to_excel([])


class TestPdfExport:
    """Tests for PDF rendering."""

    def test_inventory_report(self, stored_assets):
        content = render_inventory_report(stored_assets)
        assert content.startswith(b"%PDF")

    def test_empty_report(self):
        with pytest.raises(EmptyExportError):
            render_inventory_report([])

    def test_qr_label(self, stored_assets):
        content = render_qr_label(stored_assets[0])
        assert content.startswith(b"%PDF")


class TestExportEndpoints:
    """Tests for export endpoints."""

    def test_excel_download(self, client_with_db, asset_payload):
        client_with_db.post("/v1/assets/", json=asset_payload, headers=ADMIN_HEADERS)
        response = client_with_db.get("/v1/assets/export.xlsx")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert ".xlsx" in response.headers["content-disposition"]

    def test_pdf_download(self, client_with_db, asset_payload):
        client_with_db.post("/v1/assets/", json=asset_payload, headers=ADMIN_HEADERS)
        response = client_with_db.get("/v1/assets/export.pdf")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_export_empty_registry(self, client_with_db):
        assert client_with_db.get("/v1/assets/export.xlsx").status_code == 400
        assert client_with_db.get("/v1/assets/export.pdf").status_code == 400

    def test_qr_label_download(self, client_with_db, asset_payload):
        client_with_db.post("/v1/assets/", json=asset_payload, headers=ADMIN_HEADERS)
        response = client_with_db.get("/v1/assets/1/qr-label.pdf")
        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")
        assert "asset_1_qr.pdf" in response.headers["content-disposition"]

    def test_qr_label_missing_asset(self, client_with_db):
        assert client_with_db.get("/v1/assets/3/qr-label.pdf").status_code == 404
