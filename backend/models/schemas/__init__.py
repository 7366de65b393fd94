"""Pydantic contracts passed between the validation engine's components."""

from models.schemas.analysis import (
    ATSCompatibilityResult,
    ATSIssue,
    AchievementsAnalysisResult,
    DetailedAnalysisReport,
    ExperienceAnalysisResult,
    IndustryAlignmentResult,
    KeywordAnalysisResult,
    SemanticMatch,
    SkillsAnalysisResult,
)

__all__ = [
    "ATSCompatibilityResult",
    "ATSIssue",
    "AchievementsAnalysisResult",
    "DetailedAnalysisReport",
    "ExperienceAnalysisResult",
    "IndustryAlignmentResult",
    "KeywordAnalysisResult",
    "SemanticMatch",
    "SkillsAnalysisResult",
]
