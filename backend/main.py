from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .errors import EnergyValidationError
from .routers import energy, energy_session, materials

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("crater_energy")

app = FastAPI(
    title=settings.APP_NAME,
    description="Estimate the energy needed to punch a crater of given geometry into a material",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(materials.router, prefix="/api")
app.include_router(energy.router, prefix="/api")
app.include_router(energy_session.router, prefix="/api")


@app.exception_handler(EnergyValidationError)
def handle_validation_error(request: Request, exc: EnergyValidationError):
    """Bad calculator input is a user error: report the message, never a 500."""
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        status_code=422,
        content={"error": exc.code, "detail": exc.message},
    )


@app.get("/health")
def health():
    return {"status": "ok", "app": "crater-energy"}
