from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

import logging

from mealkit.api.routes import labels
from mealkit.logic.labels.sheet import LABEL_SHEET, build_label_view, paginate
from mealkit.utilities.config import LABEL_BRAND_NAME, LABEL_FOOTER_TEXT, TEMPLATES_DIR
from mealkit.utilities.validators import LabelBatchInput

# Logging
logger = logging.getLogger("mealkit_app")

# Initialize FastAPI app
app = FastAPI(title="Meal-kit Label Service")

# Include routers
app.include_router(labels.router)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/labels/sheet", response_class=HTMLResponse)
def label_sheet_page(request: Request, payload: LabelBatchInput):
    """Printable HTML sheet, laid out like the PDF (2 x 5 labels per A4 page)."""
    labels_data = payload.to_label_data()
    views = {id(label): build_label_view(label) for label in labels_data}
    pages = [
        [views[id(slot)] if slot is not None else None for slot in page.slots]
        for page in paginate(labels_data)
    ]
    logger.info("Rendering HTML label sheet with %d page(s)", len(pages))
    return templates.TemplateResponse(
        request,
        "label_sheet.html",
        {
            "pages": pages,
            "sheet": LABEL_SHEET,
            "brand_name": LABEL_BRAND_NAME,
            "footer_text": LABEL_FOOTER_TEXT,
            "debug": payload.debug,
        },
    )
