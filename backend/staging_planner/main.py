"""
Staging Planner API

FastAPI application for deterministic furniture placement.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from staging_planner.config import get_settings
from staging_planner.models.api import ErrorResponse, HealthResponse
from staging_planner.routes import anchors, placement, room


# Get settings
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **Staging Planner API** - Pure-geometry furniture placement for room staging.

    ## Features
    - **Place**: Assign furniture to room anchors with collision checks
    - **Validate**: Audit an existing layout for overlaps and room bounds
    - **Anchors**: Build anchors from furniture zones and track occupancy
    - **Room**: Floor outlines for rectangular and L-shaped rooms

    ## Workflow
    1. Build anchors from analysed zones → `/api/v1/anchors/from-zones`
    2. Place furniture → `/api/v1/furniture-placement`
    3. Reserve the used anchors → `/api/v1/anchors/occupancy`
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(placement.router, prefix=settings.api_prefix)
app.include_router(anchors.router, prefix=settings.api_prefix)
app.include_router(room.router, prefix=settings.api_prefix)


# ============ Error Handlers ============

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are request failures, reported like any other error."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"

    logger.warning("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=message).model_dump(),
    )


# ============ Health Check ============

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        message="Staging Planner API is running. Visit /docs for API documentation."
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        version=settings.app_version
    )


# ============ Run with Uvicorn ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "staging_planner.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
