"""
BarrelLab Backend API

FastAPI application for baseball swing metrics: scoring, motor-profile
classification, leak diagnosis and drill prescriptions.

Run with:
    uvicorn main:app --reload --host 0.0.0.0 --port 8000

API docs available at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from api.routes import router as api_router
from api.websocket import websocket_endpoint
from core.services import InMemorySessionRepository, SwingAnalyzer

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan (startup/shutdown)
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup code before app starts accepting requests,
    and cleanup code when app shuts down.
    """
    # Startup
    logger.info(f" {config.APP_NAME} starting up...")
    logger.info(f" API docs: http://localhost:{config.PORT}/docs")
    logger.info(f" WebSocket: ws://localhost:{config.PORT}/ws/session")
    logger.info(f" Default age group: {config.DEFAULT_AGE_GROUP}")

    yield  # App runs here

    # Shutdown
    logger.info(f" {config.APP_NAME} shutting down...")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title=config.APP_NAME,
    description="""
    **Baseball Swing Metrics Engine**

    Turns bat-sensor exports and vision-service scores into normalized
    swing metrics and coaching output.

    ## Features

    - **Percentiles** against age-group bat speed benchmarks
    - **Tempo & Efficiency** scoring
    - **Motor Profiles** (Spinner, Whipper, Slingshotter, Titan)
    - **4B Composite** (Body / Brain / Bat / Ball) with source-fidelity caps
    - **Energy Leaks** and drill prescriptions
    - **Live Sessions** via WebSocket

    ## Endpoints

    - `GET /api/health` - Health check
    - `GET /api/benchmarks/{age_group}` - Age-group benchmarks
    - `POST /api/analysis/swing` - Single swing analysis
    - `POST /api/analysis/session` - Batch analysis with summary
    - `POST /api/analysis/vision` - Score a vision-service result
    - `POST /api/scores/composite` - 4B composite and grade
    - `POST /api/sessions` - Open a capture session
    - `WS /ws/session` - Live capture stream

    ## WebSocket Protocol

    Connect to `/ws/session?age_group=HS` and send swings as JSON:
```json
    {
        "type": "swing",
        "data": {"bat_speed_mph": 68.2, "trigger_to_impact_ms": 152},
        "timestamp": 1704067200000
    }
```
    """,
    version=config.API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Shared services (replace via app.state or dependency_overrides in tests)
app.state.analyzer = SwingAnalyzer()
app.state.repository = InMemorySessionRepository()


# =============================================================================
# CORS Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Routes
# =============================================================================

# Include REST API routes
app.include_router(api_router, prefix="/api")

# WebSocket endpoint
app.websocket("/ws/session")(websocket_endpoint)


# =============================================================================
# Root endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "name": config.APP_NAME,
        "version": config.API_VERSION,
        "description": "Baseball Swing Metrics Engine",
        "docs": "/docs",
        "health": "/api/health",
        "websocket": f"ws://localhost:{config.PORT}/ws/session"
    }


# =============================================================================
# Run directly (for development)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
        log_level=config.LOG_LEVEL.lower()
    )
