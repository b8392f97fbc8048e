"""PDF rendering for inventory reports and QR labels."""

import io
import logging
from datetime import date, datetime
from typing import Optional, Sequence

from reportlab.graphics import renderPDF
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from asset_registry.config import settings
from asset_registry.models.asset import Asset
from asset_registry.services.asset_service import qr_payload
from asset_registry.services.depreciation import compute_depreciation
from asset_registry.services.errors import EmptyExportError

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

REPORT_COLUMNS = [
    "ID",
    "Name",
    "Category",
    "Status",
    "Location",
    "Qty",
    "Acquired",
    "Registered",
    "Initial Cost",
    "Rate (%)",
    "Current Value",
]

# Label page is 100 x 150 mm
LABEL_SIZE = (100 * mm, 150 * mm)
QR_SIZE = 70 * mm


def _money(value) -> str:
    return f"{float(value or 0):,.2f}"


def _report_row(asset: Asset, as_of: date) -> list:
    valuation = compute_depreciation(
        asset.initial_cost, asset.annual_depreciation_rate, asset.acquisition_date, as_of
    )
    registered = asset.registration_timestamp
    return [
        str(asset.id),
        asset.name,
        asset.category,
        asset.status,
        asset.location,
        str(asset.quantity),
        asset.acquisition_date.isoformat() if asset.acquisition_date else "",
        registered.strftime("%Y-%m-%d") if registered else "",
        _money(asset.initial_cost),
        f"{float(asset.annual_depreciation_rate or 0):.2f}",
        _money(valuation.current_value),
    ]


def render_inventory_report(assets: Sequence[Asset], as_of: Optional[date] = None) -> bytes:
    """Render an A4 landscape table of all assets.

    Raises:
        EmptyExportError: If there are no assets
    """
    if not assets:
        raise EmptyExportError("There are no assets to export")

    as_of = as_of or date.today()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=f"{settings.organization_name} inventory",
        author=settings.organization_name,
        creator="Asset Registry Service",
    )

    styles = getSampleStyleSheet()
    story = [
        Paragraph(f"{settings.organization_name}: inventory report", styles["Title"]),
        Paragraph(
            f"{len(assets)} assets, valued as of {as_of.isoformat()} "
            f"(generated {datetime.utcnow().strftime('%Y-%m-%d %H:%M')} UTC)",
            styles["Normal"],
        ),
        Spacer(1, 6 * mm),
    ]

    data = [REPORT_COLUMNS] + [_report_row(asset, as_of) for asset in assets]
    table = Table(data, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1F4E78")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F2F2F2")]),
                ("ALIGN", (5, 1), (-1, -1), "RIGHT"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    story.append(table)

    doc.build(story)
    logger.info(f"Rendered inventory report with {len(assets)} assets")
    return buffer.getvalue()


def render_qr_label(asset: Asset) -> bytes:
    """Render a printable label with the asset name, id and QR code.

    The QR code encodes the asset id as a decimal string.
    """
    buffer = io.BytesIO()
    page_width, page_height = LABEL_SIZE

    c = canvas.Canvas(buffer, pagesize=LABEL_SIZE)
    c.setTitle(f"Asset {asset.id} label")
    c.setAuthor(settings.organization_name)
    c.setCreator("Asset Registry Service")

    c.setFont("Helvetica-Bold", 16)
    c.drawCentredString(page_width / 2, page_height - 20 * mm, asset.name or "")
    c.setFont("Helvetica", 12)
    c.setFillColor(colors.HexColor("#555555"))
    c.drawCentredString(page_width / 2, page_height - 28 * mm, f"ID: {asset.id}")
    c.setFillColor(colors.black)

    widget = QrCodeWidget(qr_payload(asset))
    x1, y1, x2, y2 = widget.getBounds()
    width, height = x2 - x1, y2 - y1
    drawing = Drawing(QR_SIZE, QR_SIZE, transform=[QR_SIZE / width, 0, 0, QR_SIZE / height, 0, 0])
    drawing.add(widget)
    renderPDF.draw(drawing, c, (page_width - QR_SIZE) / 2, page_height - 35 * mm - QR_SIZE)

    c.setFont("Helvetica", 9)
    c.drawCentredString(page_width / 2, 12 * mm, f"{asset.category} / {asset.location}")

    c.showPage()
    c.save()
    return buffer.getvalue()
