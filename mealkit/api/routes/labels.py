from fastapi import APIRouter, Response
import logging

from mealkit.infra.pdf_utils import generate_label_sheet_pdf
from mealkit.logic.labels.analyzer import analyze
from mealkit.logic.labels.sheet import build_label_view, paginate
from mealkit.logic.production.label_report import (
    build_meal_production,
    production_to_label_data,
    total_labels,
)
from mealkit.utilities.config import USE_BY_DAYS
from mealkit.utilities.validators import LabelBatchInput, LabelDataInput, ProductionInput

router = APIRouter(prefix="/api/labels")
logger = logging.getLogger(__name__)


@router.post("/analyze")
def analyze_label(payload: LabelDataInput):
    """Density score, quality mode, scaling factors and spacing for one label."""
    return analyze(payload.to_label_data()).to_dict()


@router.post("/preview")
def preview_labels(payload: LabelBatchInput):
    """Everything the renderer uses for each label, plus sheet occupancy."""
    labels = payload.to_label_data()
    pages = paginate(labels)
    return {
        "labels": [build_label_view(label).to_dict() for label in labels],
        "pages": [{"page": p.number, "filled": p.filled} for p in pages],
        "total_labels": sum(label.quantity for label in labels),
    }


@router.post("/pdf")
def labels_pdf(payload: LabelBatchInput):
    labels = payload.to_label_data()
    pdf_bytes = generate_label_sheet_pdf(labels, debug=payload.debug)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="meal_labels.pdf"'},
    )


@router.post("/production")
def production_report(payload: ProductionInput):
    """Aggregate confirmed order items into per-meal label counts."""
    rows = build_meal_production(
        [item.model_dump() for item in payload.order_items],
        [meal.model_dump() for meal in payload.meals],
    )
    labels = production_to_label_data(rows, payload.use_by_date, days=USE_BY_DAYS)
    return {
        "meals": [row.to_dict() for row in rows],
        "labels": [label.to_dict() for label in labels],
        "total_labels": total_labels(rows),
    }
