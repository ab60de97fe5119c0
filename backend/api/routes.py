"""
REST API Routes

FastAPI routes for swing analysis.
Handles HTTP requests for single swings, sessions, vision results and
capture-session bookkeeping.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

import config
from core.domain import AGE_BENCHMARKS, TIMING_BENCHMARKS, AgeGroup, SwingFeatureVector
from core.services import (
    FourBCalculator,
    SessionNotFoundError,
    SessionRepository,
    SwingAnalyzer,
    VisionPayloadError,
    parse_vision_payload,
)

from .converters import (
    convert_analysis,
    convert_capture_session,
    convert_four_b,
    convert_summary,
    convert_vision_summary,
    resolve_age_group,
    to_features,
    to_fidelity,
    to_four_b_scores,
)
from .schemas import (
    AgeGroupEnum,
    AnalyzeSessionRequest,
    AnalyzeSwingRequest,
    BenchmarkResponse,
    CaptureSessionResponse,
    CompositeRequest,
    CreateSessionRequest,
    FourBResultSchema,
    HealthResponse,
    SessionAnalysisResponse,
    SwingAnalysisResponse,
    SwingFeaturesSchema,
    VisionAnalysisRequest,
    VisionSessionRequest,
    VisionSessionResponse,
)

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


# =============================================================================
# Dependencies
# =============================================================================

def get_analyzer(request: Request) -> SwingAnalyzer:
    return request.app.state.analyzer


def get_repository(request: Request) -> SessionRepository:
    return request.app.state.repository


# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check(analyzer: SwingAnalyzer = Depends(get_analyzer)) -> HealthResponse:
    """
    Check if the API is running and the scoring engine responds.

    Returns:
        Health status and version information
    """
    engine_ok = False
    try:
        analyzer.analyze(SwingFeatureVector(), AgeGroup.parse(config.DEFAULT_AGE_GROUP))
        engine_ok = True
    except ValueError as e:
        logger.warning(f"Scoring engine not available: {e}")

    return HealthResponse(
        status="healthy",
        version=config.API_VERSION,
        engine_available=engine_ok
    )


# =============================================================================
# Benchmarks
# =============================================================================

@router.get(
    "/benchmarks/{age_group}",
    response_model=BenchmarkResponse,
    tags=["Benchmarks"],
    summary="Bat speed and timing benchmarks for an age group"
)
async def get_benchmarks(age_group: AgeGroupEnum) -> BenchmarkResponse:
    domain_age = AgeGroup(age_group.value)
    timing = TIMING_BENCHMARKS[domain_age]
    return BenchmarkResponse(
        age_group=age_group,
        bat_speed_percentiles=AGE_BENCHMARKS[domain_age].as_dict(),
        timing_ideal_ms=timing.ideal,
        timing_min_ms=timing.min,
        timing_max_ms=timing.max,
    )


# =============================================================================
# Swing Analysis
# =============================================================================

@router.post(
    "/analysis/swing",
    response_model=SwingAnalysisResponse,
    tags=["Swing Analysis"],
    summary="Analyze one swing"
)
async def analyze_swing(
    request: AnalyzeSwingRequest,
    analyzer: SwingAnalyzer = Depends(get_analyzer),
) -> SwingAnalysisResponse:
    """
    Analyze a single swing from its measurements.

    Missing measurements are scored with neutral defaults; nothing in
    the feature vector is required.

    Args:
        request: Features, age group and capture source

    Returns:
        Complete swing analysis with scores, profile and drills
    """
    result = analyzer.analyze(
        to_features(request.features),
        resolve_age_group(request.age_group),
        to_fidelity(request.source_fidelity),
    )
    return convert_analysis(result)


@router.post(
    "/analysis/session",
    response_model=SessionAnalysisResponse,
    tags=["Swing Analysis"],
    summary="Analyze a batch of swings"
)
async def analyze_session(
    request: AnalyzeSessionRequest,
    analyzer: SwingAnalyzer = Depends(get_analyzer),
) -> SessionAnalysisResponse:
    """
    Analyze every swing of a session and summarize it.

    Waggles (bat speed under 25 mph) are analysed but left out of the
    summary.
    """
    analyses, summary = analyzer.analyze_session(
        [to_features(f) for f in request.swings],
        resolve_age_group(request.age_group),
        to_fidelity(request.source_fidelity),
    )
    return SessionAnalysisResponse(
        analyses=[convert_analysis(a) for a in analyses],
        summary=convert_summary(summary),
    )


@router.post(
    "/analysis/vision",
    response_model=SwingAnalysisResponse,
    tags=["Vision Analysis"],
    summary="Score a vision-service result"
)
async def analyze_vision(
    request: VisionAnalysisRequest,
    analyzer: SwingAnalyzer = Depends(get_analyzer),
) -> SwingAnalysisResponse:
    """
    Turn an external vision-service response into a swing analysis.

    Brain and Ball are capped (55 / 50) and the composite is recomputed.
    """
    try:
        vision_result = parse_vision_payload(request.payload)
    except VisionPayloadError as e:
        logger.error(f"Vision payload rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    result = analyzer.analyze_vision(vision_result, resolve_age_group(request.age_group))
    return convert_analysis(result)


@router.post(
    "/analysis/vision/session",
    response_model=VisionSessionResponse,
    tags=["Vision Analysis"],
    summary="Score a batch of vision-service results"
)
async def analyze_vision_session(
    request: VisionSessionRequest,
    analyzer: SwingAnalyzer = Depends(get_analyzer),
) -> VisionSessionResponse:
    try:
        results = [parse_vision_payload(p) for p in request.payloads]
    except VisionPayloadError as e:
        logger.error(f"Vision batch rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    analyses, summary = analyzer.analyze_vision_session(
        results, resolve_age_group(request.age_group)
    )
    return VisionSessionResponse(
        analyses=[convert_analysis(a) for a in analyses],
        summary=convert_vision_summary(summary),
    )


# =============================================================================
# 4B Composite
# =============================================================================

@router.post(
    "/scores/composite",
    response_model=FourBResultSchema,
    tags=["Scores"],
    summary="Composite and grade for four component scores"
)
async def score_composite(request: CompositeRequest) -> FourBResultSchema:
    result = FourBCalculator.score(
        to_four_b_scores(request.scores),
        to_fidelity(request.source_fidelity),
    )
    return convert_four_b(result)


# =============================================================================
# Capture Sessions
# =============================================================================

@router.post(
    "/sessions",
    response_model=CaptureSessionResponse,
    status_code=201,
    tags=["Sessions"],
    summary="Open a capture session"
)
async def create_session(
    request: CreateSessionRequest,
    repository: SessionRepository = Depends(get_repository),
) -> CaptureSessionResponse:
    session = repository.create(resolve_age_group(request.age_group), request.player_name)
    logger.info(f"Capture session {session.id} opened ({session.age_group.value})")
    return convert_capture_session(session)


@router.post(
    "/sessions/{session_id}/swings",
    response_model=CaptureSessionResponse,
    tags=["Sessions"],
    summary="Add a swing to a capture session"
)
async def add_session_swing(
    session_id: str,
    features: SwingFeaturesSchema,
    analyzer: SwingAnalyzer = Depends(get_analyzer),
    repository: SessionRepository = Depends(get_repository),
) -> CaptureSessionResponse:
    """
    Analyze a swing, store it, and recompute the session summary.

    The summary is always rebuilt from every stored swing, never
    updated incrementally.
    """
    session = repository.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")

    analysis = analyzer.analyze(to_features(features), session.age_group)
    try:
        session = repository.add_swing(session_id, analysis)
        summary = analyzer.summarize(session.swings, session.age_group)
        session = repository.save_summary(session_id, summary)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")

    return convert_capture_session(session)


@router.get(
    "/sessions/{session_id}",
    response_model=CaptureSessionResponse,
    tags=["Sessions"],
    summary="Get a capture session"
)
async def get_session(
    session_id: str,
    repository: SessionRepository = Depends(get_repository),
) -> CaptureSessionResponse:
    session = repository.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return convert_capture_session(session)
