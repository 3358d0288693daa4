from pathlib import Path
import logging
from fastapi import FastAPI, Request, Depends, Form
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from .config import settings
from .logging_config import setup_logging
from .models import AgeResult, CalendarDate, DateComponents
from .utils import calculate_age, format_age, parse_int_field, reference_date_today
from .validation import validate

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title=settings.app_name)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")

@app.on_event("startup")
async def startup():
    setup_logging(settings.log_level, use_json=settings.log_json)
    logger.info("%s started (min year %d)", settings.app_name, settings.min_year)

def get_reference_date() -> CalendarDate:
    return reference_date_today()

def _render_form(request: Request, values: dict, errors: dict, age: AgeResult | None = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.app_name, "values": values, "errors": errors, "age": age},
        status_code=status_code,
    )

@app.get("/health")
async def health():
    return {"status": "ok", "service": settings.app_name}

# --- Form ---
@app.get("/", response_class=HTMLResponse)
async def age_form(request: Request):
    return _render_form(request, values={}, errors={})

@app.post("/", response_class=HTMLResponse)
async def age_submit(
    request: Request,
    day: str | None = Form(None),
    month: str | None = Form(None),
    year: str | None = Form(None),
    reference_date: CalendarDate = Depends(get_reference_date),
):
    values = {"day": day or "", "month": month or "", "year": year or ""}
    result = validate(parse_int_field(day), parse_int_field(month), parse_int_field(year), reference_date)
    if not result.is_valid:
        return _render_form(request, values=values, errors=result.messages(), status_code=400)

    age = calculate_age(result.birth_date, reference_date)
    logger.info("Computed age %s", format_age(age))
    return _render_form(request, values=values, errors=result.messages(), age=age)

# --- JSON API ---
@app.post("/api/age")
async def age_api(payload: DateComponents, reference_date: CalendarDate = Depends(get_reference_date)):
    result = validate(
        parse_int_field(payload.day),
        parse_int_field(payload.month),
        parse_int_field(payload.year),
        reference_date,
    )
    if not result.is_valid:
        return JSONResponse(
            status_code=422,
            content={"detail": "Invalid date of birth", "errors": result.messages()},
        )

    age = calculate_age(result.birth_date, reference_date)
    logger.info("Computed age %s", format_age(age))
    return {
        "birth_date": str(result.birth_date),
        "reference_date": str(reference_date),
        "age": age.model_dump(),
        "display": format_age(age),
    }
