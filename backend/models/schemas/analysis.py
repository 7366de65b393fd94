"""Per-dimension analysis contracts produced by the validation engine.

Each dimension result is its own record type with a ``dimension`` tag and a
``score`` property, so the warning synthesizer can switch on the tag instead
of probing fields.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Severity = Literal["HIGH", "MEDIUM", "LOW"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Keyword dimension
# ---------------------------------------------------------------------------

class SemanticMatch(_Frozen):
    """One job keyword linked to one resume keyword above the match bar."""
    job_keyword: str
    resume_keyword: str
    similarity: float  # 0.0-1.0
    context: str = "general"  # technical, leadership, analytics, general


class MissingKeyword(_Frozen):
    keyword: str
    importance: float  # 0.0-1.0
    category: str
    alternatives: list[str] = []
    contexts: list[str] = []  # job description lines mentioning the keyword


class CriticalKeyword(_Frozen):
    keyword: str
    criticality: float  # 0.0-1.0
    frequency: int = 1
    alternatives: list[str] = []


class KeywordAnalysisResult(_Frozen):
    dimension: Literal["keywords"] = "keywords"
    match_score: float = 1.0
    missing_keywords: list[MissingKeyword] = []
    critical_keywords: list[CriticalKeyword] = []
    semantic_matches: list[SemanticMatch] = []
    keyword_density: float = 0.0
    contextual_relevance: float = 0.0
    job_keywords: list[str] = []
    resume_keywords: list[str] = []

    @property
    def score(self) -> float:
        return self.match_score


# ---------------------------------------------------------------------------
# Skills dimension
# ---------------------------------------------------------------------------

class MissingSkill(_Frozen):
    skill: str
    category: Literal["technical", "soft", "domain"]
    importance: float
    alternatives: list[str] = []
    learning_resources: list[str] = []


class SkillCategory(_Frozen):
    name: str
    required_skills: list[str] = []
    present_skills: list[str] = []
    coverage: float = 1.0


class LevelMismatch(_Frozen):
    skill: str
    required_level: str
    present_level: str
    gap: float  # 0.0-1.0, normalised level distance


class SkillsAnalysisResult(_Frozen):
    dimension: Literal["skills"] = "skills"
    skill_match_score: float = 1.0
    missing_critical_skills: list[MissingSkill] = []
    industry_alignment: float = 1.0
    skill_categories: list[SkillCategory] = []
    level_mismatch: list[LevelMismatch] = []

    @property
    def score(self) -> float:
        return self.skill_match_score


# ---------------------------------------------------------------------------
# Experience dimension
# ---------------------------------------------------------------------------

class SeniorityMismatch(_Frozen):
    required: str
    present: str
    confidence: float
    indicators: list[str] = []


class ExperienceAnalysisResult(_Frozen):
    dimension: Literal["experience"] = "experience"
    role_alignment: float = 1.0
    years_gap: float = 0.0
    required_years: float = 0.0
    resume_years: float = 0.0
    industry_alignment: float = 1.0
    seniority_mismatch: SeniorityMismatch
    relevant_experience_percentage: float = 0.0

    @property
    def score(self) -> float:
        return self.role_alignment


# ---------------------------------------------------------------------------
# Achievements dimension
# ---------------------------------------------------------------------------

class Achievement(_Frozen):
    text: str
    is_quantified: bool
    metrics: list[str] = []
    impact: Literal["high", "medium", "low"] = "low"
    improvements: list[str] = []


class AchievementsAnalysisResult(_Frozen):
    dimension: Literal["achievements"] = "achievements"
    achievement_score: float = 0.0
    quantified_achievements: list[Achievement] = []
    qualitative_achievements: list[Achievement] = []
    missing_metrics: list[str] = []
    improvement_opportunities: list[str] = []

    @property
    def score(self) -> float:
        return self.achievement_score


# ---------------------------------------------------------------------------
# Industry alignment dimension
# ---------------------------------------------------------------------------

class IndustryAlignmentResult(_Frozen):
    dimension: Literal["industry_alignment"] = "industry_alignment"
    alignment_score: float = 1.0
    detected_industry: str = "general"
    target_industry: str = "general"
    transferable_skills: list[str] = []
    industry_gaps: list[str] = []

    @property
    def score(self) -> float:
        return self.alignment_score


# ---------------------------------------------------------------------------
# ATS compatibility
# ---------------------------------------------------------------------------

class ATSIssue(_Frozen):
    type: Literal["format", "content"]
    severity: Severity
    description: str
    solution: str


class ATSCompatibilityResult(_Frozen):
    """score = 0.4 * format_score + 0.6 * content_score, all in 0.0-1.0."""
    score: float
    format_score: float
    content_score: float
    issues: list[ATSIssue] = []
    recommendations: list[str] = []


DimensionResult = (
    KeywordAnalysisResult
    | SkillsAnalysisResult
    | ExperienceAnalysisResult
    | AchievementsAnalysisResult
    | IndustryAlignmentResult
)


class DetailedAnalysisReport(_Frozen):
    """Everything warning synthesis and confidence calculation may look at."""
    keywords: KeywordAnalysisResult
    skills: SkillsAnalysisResult
    experience: ExperienceAnalysisResult
    achievements: AchievementsAnalysisResult
    industry_alignment: IndustryAlignmentResult
    ats_compatibility: ATSCompatibilityResult

    def dimensions(self) -> tuple[DimensionResult, ...]:
        return (
            self.keywords,
            self.skills,
            self.experience,
            self.achievements,
            self.industry_alignment,
        )
