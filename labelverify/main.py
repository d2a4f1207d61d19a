from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from labelverify.config import get_settings
from labelverify.errors import OcrUnavailableError, PreconditionError
from labelverify.logging import setup_logging
from labelverify.routes import health, rules, verify

settings = get_settings()
setup_logging(settings.log_level, settings.log_json)

app = FastAPI(
    title="Label Compliance Verification",
    description="Checks recognized beverage label text against submitted form data",
    version="0.1.0",
)

# Register route modules.
app.include_router(health.router)
app.include_router(rules.router)
app.include_router(verify.router)


@app.exception_handler(PreconditionError)
async def precondition_error_handler(request: Request, exc: PreconditionError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.exception_handler(OcrUnavailableError)
async def ocr_unavailable_handler(request: Request, exc: OcrUnavailableError):
    return JSONResponse(
        status_code=503,
        content={"detail": str(exc), "error": type(exc).__name__},
    )
