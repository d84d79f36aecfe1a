import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from spendwise.core.config import settings
from spendwise.core.errors import NotFoundError, ValidationError
from spendwise.routers import analysis, health

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected dataset: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "record_index": exc.record_index,
            "transaction_index": exc.transaction_index,
        },
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# Root endpoint
@app.get("/")
def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}


# Register routers
app.include_router(health.router, prefix=f"{settings.API_PREFIX}", tags=["Health"])  # /api/health
app.include_router(analysis.router, prefix=f"{settings.API_PREFIX}/analysis", tags=["Analysis"])
