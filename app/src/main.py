"""FastAPI web app for life calendar generation."""

import logging
import time
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from life_calendar.config import Settings
from life_calendar.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from life_calendar.errors import CalendarError, InvalidInput
from life_calendar.logging_setup import configure_logging
from life_calendar.models import CalendarRequest, RenderResult
from life_calendar.output import media_type_for_output_format
from life_calendar.pipeline import render_calendar
from life_calendar.themes import supported_theme_names

load_dotenv()

settings = Settings.from_env()
configure_logging(settings.log_level, settings.log_format)
logger = logging.getLogger("life_calendar.app")

GENERIC_FAILURE = "Failed to generate calendar image"
OUTPUT_FORMAT = "png"

app = FastAPI(title="Life Calendar API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=500)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


class GenerateCalendarBody(BaseModel):
    """JSON body of the generate endpoint. Values are checked by the calendar core."""
    model_config = ConfigDict(populate_by_name=True)

    mode: Any = "life"
    birth_date: Any = Field(None, alias="birthDate")
    life_expectancy: Any = Field(None, alias="lifeExpectancy")
    theme: Any = None
    reference_date: Any = Field(None, alias="referenceDate")


def generate_output(body: GenerateCalendarBody) -> RenderResult:
    """Render the calendar described by a request body."""
    request = CalendarRequest(
        mode=body.mode or "life",
        birth_date=body.birth_date,
        life_expectancy=body.life_expectancy,
        theme_name=body.theme,
        reference_date=body.reference_date,
    )
    logger.info(
        "Generating calendar: mode=%s birthDate=%s referenceDate=%s lifeExpectancy=%s theme=%s",
        request.mode,
        request.birth_date,
        request.reference_date or "today",
        request.life_expectancy,
        request.theme_name,
    )
    return render_calendar(request, settings)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms", request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    message = "Not found" if exc.status_code == 404 else exc.detail
    return JSONResponse(status_code=exc.status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def body_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Serve the API documentation page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "base_url": str(request.base_url).rstrip("/"),
            "themes": supported_theme_names(),
            "width": CANVAS_WIDTH,
            "height": CANVAS_HEIGHT,
            "default_life_expectancy": settings.default_life_expectancy,
        },
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/generate-calendar")
def generate(body: GenerateCalendarBody):
    """Generate and return a calendar PNG."""
    try:
        result = generate_output(body)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CalendarError:
        logger.exception("Error generating calendar")
        raise HTTPException(status_code=500, detail=GENERIC_FAILURE)
    except Exception:
        logger.exception("Unexpected error generating calendar")
        raise HTTPException(status_code=500, detail=GENERIC_FAILURE)

    logger.info("Generated image buffer: %d bytes", result.length)
    return Response(
        content=result.data,
        media_type=media_type_for_output_format(OUTPUT_FORMAT),
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
