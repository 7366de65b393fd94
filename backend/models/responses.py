from typing import Literal

from pydantic import BaseModel, ConfigDict

from models.schemas.analysis import DetailedAnalysisReport, Severity

WarningType = Literal[
    "keyword_mismatch",
    "skills_gap",
    "experience_mismatch",
    "achievements_missing",
    "industry_mismatch",
    "ats_incompatible",
]


class WarningAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    type: Literal["primary", "secondary", "destructive"]
    icon: str | None = None


class WarningExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    before: str
    after: str
    context: str = ""


class Warning(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: WarningType
    severity: Severity
    title: str
    description: str
    explanation: str
    importance: str
    actions: list[WarningAction] = []
    solutions: list[str] = []
    examples: list[WarningExample] = []
    dismissible: bool = True
    criticality_score: float = 0.0  # 1 - dimension score


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_significant_mismatch: bool
    warnings: list[Warning] = []
    details: DetailedAnalysisReport
    confidence: float = 0.0
