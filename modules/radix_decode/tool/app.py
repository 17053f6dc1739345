from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from hub.errors import ValidationNormalizeMiddleware
from hub.logger import setup_logger
from hub.registry import module_meta
from hub.settings import (
    configure_templates,
    default_base,
    max_input_chars,
    shared_templates_dir,
)
from modules.radix_decode.core.alphabet import MAX_BASE, MIN_BASE
from modules.radix_decode.core.convert import (
    EMPTY_INPUT_MESSAGE,
    convert as convert_input,
)
from modules.radix_decode.core.errors import (
    ConversionError,
    ConversionResult,
    ErrorKind,
)
from modules.radix_decode.core.options import (
    DIGIT_HELP,
    INPUT_MODES,
    base_options,
    parse_base,
)

MODULE_NAME = "radix_decode"

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
BRAND_DIR = ROOT_DIR / "brand"
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

logger = setup_logger().bind(module=MODULE_NAME)
meta = module_meta(MODULE_NAME)

app = FastAPI(title=meta.get("title", "Base System Converter"))
app.add_middleware(ValidationNormalizeMiddleware)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)
configure_templates(templates)

if BRAND_DIR.exists():
    app.mount("/brand", StaticFiles(directory=BRAND_DIR), name="brand")


def _error_response(result: ConversionResult) -> JSONResponse:
    return JSONResponse(result.to_dict(), status_code=400)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "base_path": base_path,
            "title": meta.get("title", "Base System Converter"),
            "description": meta.get("description", ""),
            "modes": INPUT_MODES,
            "bases": base_options(),
            "selected_base": default_base(MIN_BASE, MAX_BASE),
            "digit_help": DIGIT_HELP,
        },
    )


@app.get("/bases")
def bases():
    return base_options()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    input_type: str = Form("number"),
    base: str | None = Form(None),
):
    limit = max_input_chars()
    if limit is not None and value is not None and len(value) > limit:
        logger.info("conversion_rejected", reason="too_long", length=len(value))
        return _error_response(
            ConversionResult.failure(
                ConversionError(
                    ErrorKind.INPUT_TOO_LONG,
                    f"Input is too long (max {limit} characters).",
                )
            )
        )

    parsed_base, error = parse_base(base)
    if not (value or "").strip():
        result = ConversionResult.failure(
            ConversionError(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)
        )
    elif error or parsed_base is None:
        result = ConversionResult.failure(error)
    else:
        result = convert_input(value, input_type, parsed_base)

    logger.info(
        "conversion",
        input_type=input_type,
        base=parsed_base,
        ok=result.ok,
        kind=result.kind.value if result.kind else None,
    )
    if not result.ok:
        return _error_response(result)
    return result.to_dict()
