"""
API Schemas — Request and Response Models

Pydantic models for the FactCheck API. Field names follow the JSON
the browser extension consumes (camelCase).
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

Category = Literal["reliable", "potentially_misleading", "likely_false"]


# ============================================================
# ANALYZE
# ============================================================

class AnalysisRequest(BaseModel):
    """POST /api/analyze request body."""
    url: Optional[str] = Field(None, pattern=r"^https?://\S+$",
                               description="Page URL the content was taken from.")
    title: Optional[str] = Field(None, min_length=1)
    content: str = Field(..., min_length=1,
                         description="Article body text. Capped at FACTCHECK_MAX_CONTENT_CHARS.")
    source: Optional[str] = Field(None, description="Publisher domain. Defaults to the URL host.")

    model_config = {"json_schema_extra": {"examples": [
        {
            "url": "https://www.bbc.com/news/science-123",
            "title": "Study finds sleep improves memory",
            "content": "According to a study published in Nature, researchers found that sleep improves memory.",
        },
    ]}}


class CriterionModel(BaseModel):
    name: str
    rating: Literal["high", "medium", "low"]
    description: str
    status: Literal["good", "warning", "bad"]


class FactCheckModel(BaseModel):
    claim: str
    verdict: Literal["verified", "misleading", "false"]
    explanation: str


class AnalysisResponseModel(BaseModel):
    """Analysis result as returned to the extension."""
    id: Optional[int] = None
    articleId: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    source: Optional[str] = None
    credibilityScore: int = Field(..., ge=0, le=100)
    classification: Category
    confidence: int = Field(..., ge=0, le=100)
    criteria: list[CriterionModel]
    factChecks: list[FactCheckModel]
    recommendations: list[str]
    analyzedAt: Optional[str] = None


# ============================================================
# REPORT
# ============================================================

class ReportRequest(BaseModel):
    """POST /api/report request body."""
    analysisId: int
    details: str


class ReportResponse(BaseModel):
    message: str
    reportId: int


# ============================================================
# FEATURES
# ============================================================

class FeatureRequest(BaseModel):
    """POST /api/features request body."""
    text: str = Field(..., min_length=1)


class FeatureBundleModel(BaseModel):
    sentiment: float
    emotionalTone: float
    bias: float
    sensationalism: float
    factual: float
    evidence: float
    entityConsistency: float


class FeatureResponse(BaseModel):
    features: FeatureBundleModel
    readability: int
    keywords: list[dict]
    entities: dict[str, list[str]]
    sourcesCited: list[str]
    claims: list[str]
    termRatios: dict[str, float]
    rawPolarity: float
    credibilityScore: float
    category: Category


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    articles: int
    analyses: int
    reports: int
    latest_available: bool
    policy_source: str
