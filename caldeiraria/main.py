from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .calculators.registry import list_calculators
from .config import settings
from .routers import calculations

logger = logging.getLogger("caldeiraria")
logger.setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title=settings.APP_NAME,
    description="Plate-work and structural calculators: flat patterns, cut templates, weights",
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
app.include_router(calculations.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME, "calculators": len(list_calculators())}


logger.info("Registered calculators: %s", ", ".join(list_calculators()))
