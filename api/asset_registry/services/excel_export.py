"""Excel export of the asset registry."""

import io
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from asset_registry.models.asset import Asset
from asset_registry.services.depreciation import compute_depreciation
from asset_registry.services.errors import EmptyExportError

logger = logging.getLogger(__name__)

SHEET_TITLE = "Assets"
MIN_COLUMN_WIDTH = 18
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

COLUMNS = [
    "ID",
    "Name",
    "Category",
    "Status",
    "Location",
    "Quantity",
    "Acquisition Date",
    "Registration Date",
    "Initial Cost",
    "Annual Depreciation (%)",
    "Current Value",
]


def asset_row(asset: Asset, as_of: date) -> List[object]:
    """One worksheet row for an asset."""
    valuation = compute_depreciation(
        asset.initial_cost, asset.annual_depreciation_rate, asset.acquisition_date, as_of
    )
    rate = Decimal(asset.annual_depreciation_rate or 0) / 100
    return [
        asset.id,
        asset.name,
        asset.category,
        asset.status,
        asset.location,
        asset.quantity,
        asset.acquisition_date,
        asset.registration_timestamp,
        float(asset.initial_cost or 0),
        float(rate),
        float(valuation.current_value),
    ]


def _apply_formatting(worksheet, row_count: int) -> None:
    header_fill = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=11)
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    zebra = PatternFill(start_color="F2F2F2", end_color="F2F2F2", fill_type="solid")

    for col_num in range(1, len(COLUMNS) + 1):
        cell = worksheet.cell(row=1, column=col_num)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
        cell.border = border

    for row_num in range(2, row_count + 2):
        for col_num, col_name in enumerate(COLUMNS, 1):
            cell = worksheet.cell(row=row_num, column=col_num)
            cell.border = border
            if row_num % 2 == 0:
                cell.fill = zebra
            if cell.value is None:
                continue
            if col_name == "Acquisition Date":
                cell.number_format = "yyyy-mm-dd"
            elif col_name == "Registration Date":
                cell.number_format = "yyyy-mm-dd hh:mm"
            elif col_name in ("Initial Cost", "Current Value"):
                cell.number_format = "#,##0.00"
            elif col_name.endswith("(%)"):
                cell.number_format = "0.00%"

    for idx, col_name in enumerate(COLUMNS, 1):
        worksheet.column_dimensions[get_column_letter(idx)].width = max(len(col_name), MIN_COLUMN_WIDTH)

    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = f"A1:{get_column_letter(len(COLUMNS))}{row_count + 1}"


def export_assets_to_excel(assets: Sequence[Asset], as_of: Optional[date] = None) -> bytes:
    """Build an .xlsx workbook with one row per asset.

    Args:
        assets: Assets to export
        as_of: Valuation date for the Current Value column (defaults to today)

    Returns:
        Workbook file content

    Raises:
        EmptyExportError: If there are no assets
    """
    if not assets:
        raise EmptyExportError("There are no assets to export")

    as_of = as_of or date.today()
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_TITLE

    worksheet.append(COLUMNS)
    for asset in assets:
        worksheet.append(asset_row(asset, as_of))

    _apply_formatting(worksheet, len(assets))

    buffer = io.BytesIO()
    workbook.save(buffer)
    logger.info(f"Exported {len(assets)} assets to Excel")
    return buffer.getvalue()
