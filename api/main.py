"""
FactCheck API — Main Application

POST /api/analyze          — Analyze an article and store the result
GET  /api/analyze/latest   — Most recent analysis (extension popup)
GET  /api/analyze/{id}     — A stored analysis by id
POST /api/report           — Report a problem with an analysis
POST /api/features         — Raw feature scores for a piece of text
GET  /api/policy           — The active scoring policy
GET  /health               — Health check
"""

from __future__ import annotations

import random
import time
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import urlparse

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from factcheck.analyzer import analyze_article, extract_features
from factcheck.cache import latest_result
from factcheck.classifier import CredibilityClassifier
from factcheck.config import settings
from factcheck.logging import get_logger, setup_logging
from factcheck.models import Article
from factcheck.policy import DEFAULT_POLICY, ScoringPolicy, load_policy
from factcheck.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponseModel,
    FeatureRequest,
    FeatureResponse,
    HealthResponse,
    ReportRequest,
    ReportResponse,
)
from factcheck.store import StoredAnalysis, store
from factcheck.synthesizer import recommendations_for

logger = get_logger("api")


# Active scoring policy and classifier, wired at startup
_policy: ScoringPolicy = DEFAULT_POLICY
_classifier: Optional[CredibilityClassifier] = None


def _build_classifier(policy: ScoringPolicy) -> CredibilityClassifier:
    rng = random.Random(settings.CLAIM_SEED) if settings.CLAIM_SEED is not None else None
    return CredibilityClassifier(policy.classifier, rng=rng)


def _get_classifier() -> CredibilityClassifier:
    global _classifier
    if _classifier is None:
        _classifier = _build_classifier(_policy)
    return _classifier


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the scoring policy and wire the classifier."""
    global _policy, _classifier
    setup_logging()

    if settings.POLICY_PATH:
        _policy = load_policy(settings.POLICY_PATH)
        logger.info("Loaded scoring policy overrides",
                    extra={"policy_path": settings.POLICY_PATH})
    _classifier = _build_classifier(_policy)

    logger.info(f"FactCheck API {settings.APP_VERSION} starting")
    yield
    logger.info("FactCheck API shutting down")


app = FastAPI(
    title="FactCheck API",
    description="Heuristic credibility scoring for news articles",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# CORS — the browser extension calls from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The request could not be completed."},
    )


# ============================================================
# HELPERS
# ============================================================

def _source_for(request: AnalysisRequest) -> str:
    if request.source:
        return request.source
    return urlparse(request.url or "https://unknown.source").hostname or "unknown.source"


def _check_content_length(text: str) -> None:
    """Reject text over the configured character limit."""
    if len(text) > settings.MAX_CONTENT_CHARS:
        raise HTTPException(
            422,
            f"Content exceeds the {settings.MAX_CONTENT_CHARS}-character limit",
        )


def _payload(stored: StoredAnalysis, article: Article) -> dict:
    """Stored analysis joined with its article, in the extension's JSON shape."""
    return {
        "id": stored.id,
        "articleId": article.id,
        "url": article.url,
        "title": article.title,
        "source": article.source,
        "credibilityScore": stored.credibility_score,
        "classification": stored.classification,
        "confidence": stored.confidence,
        "criteria": stored.criteria,
        "factChecks": stored.fact_checks,
        "recommendations": recommendations_for(stored.classification, _policy.report),
        "analyzedAt": stored.analyzed_at.isoformat(),
    }


# ============================================================
# ROUTES
# ============================================================

@app.post("/api/analyze", response_model=AnalysisResponseModel)
async def analyze(request: AnalysisRequest):
    """Analyze an article for credibility and store the result."""
    _check_content_length(request.content)
    start = time.time()

    article = store.create_article(
        url=request.url or "",
        title=request.title or "Untitled Article",
        content=request.content,
        source=_source_for(request),
    )

    response = analyze_article(article, policy=_policy, classifier=_get_classifier())
    body = response.to_dict()

    stored = store.create_analysis_result(
        article_id=article.id,
        credibility_score=body["credibilityScore"],
        classification=body["classification"],
        confidence=body["confidence"],
        criteria=body["criteria"],
        fact_checks=body["factChecks"],
    )

    payload = AnalysisResponseModel(**_payload(stored, article)).model_dump()
    latest_result.put(payload)

    logger.info(
        f"Analysis complete: score={stored.credibility_score} "
        f"classification={stored.classification}",
        extra={
            "article_id": article.id,
            "analysis_id": stored.id,
            "credibility_score": stored.credibility_score,
            "classification": stored.classification,
            "confidence": stored.confidence,
            "duration_ms": int((time.time() - start) * 1000),
        },
    )
    return payload


@app.get("/api/analyze/latest", response_model=AnalysisResponseModel)
async def get_latest():
    """Most recent analysis produced by this service."""
    payload = latest_result.get()
    if payload is None:
        raise HTTPException(404, "No analysis results found")
    return payload


@app.get("/api/analyze/{analysis_id}", response_model=AnalysisResponseModel)
async def get_analysis(analysis_id: str):
    """A stored analysis by id."""
    try:
        result_id = int(analysis_id)
    except ValueError:
        raise HTTPException(400, "Invalid ID")

    stored = store.get_analysis_result(result_id)
    if stored is None:
        raise HTTPException(404, "Analysis result not found")

    article = store.get_article(stored.article_id)
    if article is None:
        raise HTTPException(404, "Article not found")

    return _payload(stored, article)


@app.post("/api/report", response_model=ReportResponse)
async def report(request: ReportRequest):
    """Record a user report about an analysis."""
    stored = store.create_report(request.analysisId, request.details)
    logger.info("Report received", extra={"analysis_id": request.analysisId})
    return {"message": "Report received", "reportId": stored.id}


@app.post("/api/features", response_model=FeatureResponse)
async def features(request: FeatureRequest):
    """Feature scores for raw text, without synthesis or storage."""
    _check_content_length(request.text)
    return extract_features(request.text, _policy).to_dict()


@app.get("/api/policy")
async def get_policy():
    """Every term list and coefficient the pipeline scores with."""
    return {
        "version": settings.APP_VERSION,
        "policy_source": settings.POLICY_PATH or "default",
        "policy": _policy.describe(),
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    counts = store.counts()
    return {
        "status": "operational",
        "version": settings.APP_VERSION,
        "articles": counts["articles"],
        "analyses": counts["analyses"],
        "reports": counts["reports"],
        "latest_available": latest_result.stats["occupied"],
        "policy_source": settings.POLICY_PATH or "default",
    }


# --- Version + Security Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security and version headers to all responses."""
    response = await call_next(request)
    response.headers["X-FactCheck-Version"] = settings.APP_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 1_048_576  # 1 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject request bodies over 1MB, declared or actual."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            if int(content_length) > _MAX_BODY_BYTES:
                return JSONResponse(
                    status_code=413,
                    content={"detail": "Request body too large."},
                )
        except ValueError:
            pass  # Malformed content-length; let the framework handle it

    # Bodies sent without a Content-Length (chunked) are measured directly
    if request.method in ("POST", "PUT", "PATCH"):
        body = await request.body()
        if len(body) > _MAX_BODY_BYTES:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body too large."},
            )

    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


def main():
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
