import io
import logging
from typing import Iterable

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from mealkit.domain.LabelData import LabelData
from mealkit.logic.labels.sheet import (
    LABEL_SHEET,
    LabelView,
    SheetGeometry,
    build_label_view,
    paginate,
    slot_origin,
)
from mealkit.utilities.config import LABEL_BRAND_NAME, LABEL_FOOTER_TEXT

logger = logging.getLogger(__name__)

PRIMARY = colors.HexColor("#4CAF50")
TEXT = colors.HexColor("#0f172a")
MUTED = colors.HexColor("#475569")
DESTRUCTIVE = colors.HexColor("#dc2626")


class _LabelPainter:
    """Draws one label top-down inside its slot. All distances are in mm."""

    def __init__(self, pdf: canvas.Canvas, x: float, y: float, geometry: SheetGeometry):
        self.pdf = pdf
        self.left = x + geometry.label_padding
        self.width = geometry.label_width - 2 * geometry.label_padding
        self.bottom = y + geometry.label_height - geometry.label_padding
        self.cursor = y + geometry.label_padding
        self.page_height = geometry.page_height

    def _y(self, y_mm: float) -> float:
        return (self.page_height - y_mm) * mm

    def text(self, value: str, size: float, *, font: str = "Helvetica", color=TEXT,
             align: str = "center", leading: float = 1.2) -> None:
        if not value:
            return
        lines = simpleSplit(value, font, size * mm, self.width * mm)
        self.pdf.setFont(font, size * mm)
        self.pdf.setFillColor(color)
        for line in lines:
            self.cursor += size * leading
            baseline = self._y(self.cursor - size * (leading - 1) / 2)
            if align == "center":
                self.pdf.drawCentredString((self.left + self.width / 2) * mm, baseline, line)
            else:
                self.pdf.drawString(self.left * mm, baseline, line)

    def gap(self, amount: float) -> None:
        self.cursor += amount

    def separator(self) -> None:
        width = self.width * 0.25
        x = self.left + (self.width - width) / 2
        self.pdf.setFillColor(PRIMARY)
        self.pdf.rect(x * mm, self._y(self.cursor + 0.4), width * mm, 0.4 * mm, stroke=0, fill=1)
        self.cursor += 0.4

    def footer(self, value: str, size: float, margin: float) -> None:
        baseline = self.bottom - size * 0.2
        rule = baseline - size - margin
        self.pdf.setStrokeColor(PRIMARY)
        self.pdf.setLineWidth(0.15 * mm)
        self.pdf.line(self.left * mm, self._y(rule), (self.left + self.width) * mm, self._y(rule))
        self.pdf.setFont("Helvetica", size * mm)
        self.pdf.setFillColor(PRIMARY)
        self.pdf.drawCentredString((self.left + self.width / 2) * mm, self._y(baseline), value)


def _draw_debug(pdf: canvas.Canvas, view: LabelView, x: float, y: float, page_height: float) -> None:
    lines = [
        f"Density: {view.analysis.density}%",
        f"Mode: {view.analysis.quality_mode.value}",
        f"Scale: {view.analysis.scaling_factors.meal_name_scale:.2f}x",
    ]
    pdf.setFillColor(colors.Color(0.94, 0.27, 0.27, alpha=0.9))
    pdf.rect(x * mm, (page_height - y - 9) * mm, 24 * mm, 9 * mm, stroke=0, fill=1)
    pdf.setFillColor(colors.white)
    pdf.setFont("Helvetica", 6)
    for i, line in enumerate(lines):
        pdf.drawString((x + 1) * mm, (page_height - y - 2.8 - i * 2.6) * mm, line)


def draw_label(pdf: canvas.Canvas, view: LabelView, x: float, y: float,
               geometry: SheetGeometry = LABEL_SHEET, debug: bool = False) -> None:
    """Draw ``view`` with its top-left corner at (x, y) mm from the page's top-left."""
    sizes, spacing, visibility = view.sizes, view.analysis.spacing, view.visibility

    pdf.saveState()
    clip = pdf.beginPath()
    clip.rect(x * mm, (geometry.page_height - y - geometry.label_height) * mm,
              geometry.label_width * mm, geometry.label_height * mm)
    pdf.clipPath(clip, stroke=0, fill=0)

    painter = _LabelPainter(pdf, x, y, geometry)
    # text stand-in for the logo mark, sized from the fixed logo height
    painter.text(LABEL_BRAND_NAME, sizes.logo * 0.5, font="Helvetica-Bold", color=PRIMARY)
    painter.gap(spacing.logo_margin)
    painter.text(view.data.meal_name, sizes.meal_name, font="Helvetica-Bold", leading=0.95)
    painter.gap(spacing.meal_name_margin)
    painter.separator()
    painter.gap(spacing.separator_margin + spacing.header_margin)

    if visibility.show_nutrition_details:
        painter.text(view.nutrition, sizes.nutrition, color=MUTED, leading=1.1)
        painter.gap(spacing.nutrition_margin)

    if view.use_by:
        painter.text(f"USE BY: {view.use_by}", sizes.instructions * 1.1,
                     font="Helvetica-Bold", color=DESTRUCTIVE, leading=1.0)
        painter.gap(spacing.use_by_margin)
    if visibility.show_detailed_instructions:
        painter.text(view.storage_instructions, sizes.instructions, leading=1.15)
        painter.gap(spacing.storage_margin)
        painter.text(view.heating_instructions, sizes.instructions * 0.95,
                     font="Helvetica-Oblique", color=MUTED, leading=1.1)
        painter.gap(spacing.storage_margin)
    painter.gap(spacing.section_margin)

    painter.text(f"Ingredients: {view.ingredients}", sizes.ingredients, color=MUTED, align="left")
    if visibility.show_allergens and view.data.allergens:
        painter.gap(0.6)
        painter.text(f"Allergens: {view.data.allergens}", sizes.ingredients,
                     font="Helvetica-Bold", align="left", leading=1.15)
    painter.gap(spacing.ingredients_margin)

    painter.footer(LABEL_FOOTER_TEXT, sizes.footer, spacing.footer_margin)
    pdf.restoreState()

    if debug:
        _draw_debug(pdf, view, x, y, geometry.page_height)


def generate_label_sheet_pdf(labels: Iterable[LabelData], debug: bool = False,
                             geometry: SheetGeometry = LABEL_SHEET) -> bytes:
    """Render every label (times its quantity) onto A4 sheets, 10 per page."""
    labels = list(labels)
    views = {id(label): build_label_view(label) for label in labels}
    pages = paginate(labels, geometry)

    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=A4)
    pdf.setTitle("Meal Labels")
    for page in pages:
        for index, label in enumerate(page.slots):
            if label is None:
                continue
            x, y = slot_origin(index, geometry)
            draw_label(pdf, views[id(label)], x, y, geometry, debug=debug)
        pdf.showPage()
    if not pages:
        pdf.showPage()
    pdf.save()
    logger.info("Generated label PDF: %d page(s) for %d meal(s)", len(pages), len(labels))
    return buf.getvalue()

