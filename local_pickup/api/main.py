import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from local_pickup.api.deps import get_settings
from local_pickup.app_shell.config import validate_ops_rules
from local_pickup.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Rules load failed: {e}")
        sys.exit(1)

    validate_ops_rules(rules)
    logger.info(f"Rules loaded from {settings.rules_path}")

    yield


app = FastAPI(
    title="Local Pickup Function",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from local_pickup.api.routes import delivery_options  # noqa: E402

app.include_router(
    delivery_options.router, prefix="/api/delivery-options", tags=["Delivery Options"]
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "local-pickup"}
