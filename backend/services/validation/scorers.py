"""The five dimension scorers.

Every scorer is a pure function of one immutable ``ScoringContext`` so the
facade can run them concurrently. Scores are clamped to 0.0-1.0 and every
gap list is derived from the same extracted keywords and semantic matches,
which keeps warnings consistent with the evidence shown next to them.
"""

import re

from pydantic import BaseModel, ConfigDict

from models.schemas.analysis import (
    Achievement,
    AchievementsAnalysisResult,
    CriticalKeyword,
    ExperienceAnalysisResult,
    IndustryAlignmentResult,
    KeywordAnalysisResult,
    LevelMismatch,
    MissingKeyword,
    MissingSkill,
    SemanticMatch,
    SeniorityMismatch,
    SkillCategory,
    SkillsAnalysisResult,
)
from services import bullet_parser, section_parser
from services.similarity import jaccard_similarity, tfidf_cosine_similarity
from services.validation.feature_extractor import TextFeatures, tokenize, vocabulary_hits
from services.validation.matcher import best_similarity_by_job_keyword
from services.validation.taxonomy import (
    CLOUD_DEVOPS_PATTERNS,
    INDUSTRY_KEYWORDS,
    LEARNING_RESOURCE_TEMPLATES,
    METHODOLOGY_PATTERNS,
    PROCESS_TERMS,
    SOFT_SKILLS,
    TECHNICAL_PATTERNS,
    count_occurrences,
    is_technical,
    keyword_category,
    keyword_importance,
    synonyms_of,
)

_ALL_WORDS_RE = re.compile(r"[a-z0-9+#]+(?:\.[a-z0-9+#]+)*")

MAX_CONTEXTS = 2
CONTEXT_CHARS = 120
CRITICAL_IMPORTANCE = 0.7


class ScoringContext(BaseModel):
    """Immutable inputs shared by all dimension scorers."""
    model_config = ConfigDict(frozen=True)

    resume_text: str
    job_description: str
    job: TextFeatures
    resume: TextFeatures
    matches: list[SemanticMatch] = []

    @property
    def best_matches(self) -> dict[str, float]:
        return best_similarity_by_job_keyword(self.matches)

    @property
    def matched_resume_keywords(self) -> list[str]:
        return list(dict.fromkeys(m.resume_keyword for m in self.matches))


def _clamp(value: float) -> float:
    return round(min(1.0, max(0.0, value)), 4)


def all_words(text: str) -> list[str]:
    return _ALL_WORDS_RE.findall(text.lower())


def _lines_mentioning(term: str, text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if count_occurrences(term, line)]


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

def score_keywords(ctx: ScoringContext) -> KeywordAnalysisResult:
    job_keywords = ctx.job.keywords
    best = ctx.best_matches

    if job_keywords:
        match_score = _clamp(sum(best.values()) / len(job_keywords))
    else:
        match_score = 1.0

    missing = [
        MissingKeyword(
            keyword=kw,
            importance=keyword_importance(kw),
            category=keyword_category(kw),
            alternatives=synonyms_of(kw),
            contexts=[
                line[:CONTEXT_CHARS]
                for line in _lines_mentioning(kw, ctx.job_description)[:MAX_CONTEXTS]
            ],
        )
        for kw in job_keywords
        if kw not in best
    ]

    critical = []
    for kw in job_keywords:
        frequency = max(1, count_occurrences(kw, ctx.job_description))
        importance = keyword_importance(kw)
        if frequency > 1 or importance > CRITICAL_IMPORTANCE:
            critical.append(CriticalKeyword(
                keyword=kw,
                criticality=_clamp(importance + 0.05 * (frequency - 1)),
                frequency=frequency,
                alternatives=synonyms_of(kw),
            ))

    resume_words = all_words(ctx.resume_text)
    job_keyword_set = set(job_keywords)
    if resume_words:
        density = sum(1 for w in resume_words if w in job_keyword_set) / len(resume_words)
    else:
        density = 0.0

    relevance = jaccard_similarity(set(resume_words), set(all_words(ctx.job_description)))

    return KeywordAnalysisResult(
        match_score=match_score,
        missing_keywords=missing,
        critical_keywords=critical,
        semantic_matches=ctx.matches,
        keyword_density=_clamp(density),
        contextual_relevance=_clamp(relevance),
        job_keywords=job_keywords,
        resume_keywords=ctx.resume.keywords,
    )


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

SKILL_GROUPS: dict[str, frozenset[str]] = {
    "technical": frozenset(TECHNICAL_PATTERNS),
    "cloud_devops": frozenset(CLOUD_DEVOPS_PATTERNS),
    "methodology": frozenset(METHODOLOGY_PATTERNS),
    "soft": SOFT_SKILLS,
}

LEVEL_WORDS: dict[str, int] = {
    "basic": 1, "beginner": 1, "exposure": 1, "familiar": 1, "familiarity": 1,
    "working knowledge": 2, "intermediate": 2, "hands-on": 2,
    "proficient": 3, "proficiency": 3, "advanced": 3, "strong": 3,
    "expert": 4, "expertise": 4, "deep": 4, "mastery": 4,
}
LEVEL_NAMES = {1: "basic", 2: "intermediate", 3: "advanced", 4: "expert"}
_LEVEL_RE = re.compile(
    r"\b(" + "|".join(sorted(LEVEL_WORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def _skill_group(skill: str) -> str | None:
    for name, members in SKILL_GROUPS.items():
        if skill in members:
            return name
    return None


def _level_for(term: str, text: str) -> int:
    level = 0
    for line in _lines_mentioning(term, text):
        for word in _LEVEL_RE.findall(line):
            level = max(level, LEVEL_WORDS[word.lower()])
    return level


def score_skills(ctx: ScoringContext) -> SkillsAnalysisResult:
    best = ctx.best_matches
    required = [kw for kw in ctx.job.keywords if _skill_group(kw) is not None]

    if required:
        skill_score = _clamp(sum(best.get(s, 0.0) for s in required) / len(required))
    else:
        skill_score = 1.0

    missing = []
    for skill in required:
        if skill in best:
            continue
        if is_technical(skill):
            category = "technical"
        elif skill in SOFT_SKILLS:
            category = "soft"
        else:
            category = "domain"
        missing.append(MissingSkill(
            skill=skill,
            category=category,
            importance=keyword_importance(skill),
            alternatives=synonyms_of(skill),
            learning_resources=[t.format(skill=skill) for t in LEARNING_RESOURCE_TEMPLATES],
        ))

    categories = []
    for name in SKILL_GROUPS:
        group_required = [s for s in required if _skill_group(s) == name]
        if not group_required:
            continue
        present = [s for s in group_required if s in best]
        categories.append(SkillCategory(
            name=name,
            required_skills=group_required,
            present_skills=present,
            coverage=_clamp(len(present) / len(group_required)),
        ))

    if categories:
        alignment = _clamp(sum(c.coverage for c in categories) / len(categories))
    else:
        alignment = 1.0

    resume_side: dict[str, list[str]] = {}
    for m in ctx.matches:
        resume_side.setdefault(m.job_keyword, []).append(m.resume_keyword)

    level_mismatch = []
    for skill in required:
        if skill not in best:
            continue
        required_level = _level_for(skill, ctx.job_description)
        present_level = max(
            (_level_for(term, ctx.resume_text) for term in resume_side.get(skill, [skill])),
            default=0,
        )
        if required_level and present_level and required_level > present_level:
            level_mismatch.append(LevelMismatch(
                skill=skill,
                required_level=LEVEL_NAMES[required_level],
                present_level=LEVEL_NAMES[present_level],
                gap=_clamp((required_level - present_level) / 3),
            ))

    return SkillsAnalysisResult(
        skill_match_score=skill_score,
        missing_critical_skills=missing,
        industry_alignment=alignment,
        skill_categories=categories,
        level_mismatch=level_mismatch,
    )


# ---------------------------------------------------------------------------
# Industry detection (shared by experience and industry alignment)
# ---------------------------------------------------------------------------

def industry_evidence(text: str) -> dict[str, list[str]]:
    lower = text.lower()
    evidence: dict[str, list[str]] = {}
    for industry, terms in INDUSTRY_KEYWORDS.items():
        hits = [t for t in terms if re.search(rf"(?<![\w-]){re.escape(t)}(?![\w-])", lower)]
        if hits:
            evidence[industry] = hits
    return evidence


def detect_industry(text: str) -> str:
    """Industry with the most distinct keyword hits; ``general`` when none."""
    evidence = industry_evidence(text)
    if not evidence:
        return "general"
    # max() keeps the first industry on ties, so the result is stable
    return max(evidence, key=lambda name: len(evidence[name]))


def _industry_match(detected: str, target: str) -> float:
    if target == "general" or detected == target:
        return 1.0
    if detected == "general":
        return 0.6
    return 0.3


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def score_experience(ctx: ScoringContext) -> ExperienceAnalysisResult:
    required_years = section_parser.extract_required_years(ctx.job_description)
    resume_years = section_parser.extract_experience_years(ctx.resume_text)
    years_score = 1.0 if required_years <= 0 else min(1.0, resume_years / required_years)

    relevant_terms = set(ctx.job.keywords) | set(ctx.matched_resume_keywords)
    bullets = ctx.resume.region_bullets.get("experience", [])
    relevant = 0
    for bullet in bullets:
        terms = set(tokenize(bullet)) | set(vocabulary_hits(bullet))
        if terms & relevant_terms:
            relevant += 1
    relevant_pct = relevant / len(bullets) if bullets else 0.0

    required_level, required_ind = section_parser.detect_seniority(ctx.job_description, required_years)
    present_level, present_ind = section_parser.detect_seniority(ctx.resume_text, resume_years)
    order = section_parser.SENIORITY_ORDER
    levels_gap = max(0, order.index(required_level) - order.index(present_level))
    seniority_score = max(0.0, 1.0 - 0.25 * levels_gap)

    role_alignment = 0.4 * years_score + 0.4 * relevant_pct + 0.2 * seniority_score

    return ExperienceAnalysisResult(
        role_alignment=_clamp(role_alignment),
        years_gap=round(max(0.0, required_years - resume_years), 1),
        required_years=required_years,
        resume_years=resume_years,
        industry_alignment=_industry_match(
            detect_industry(ctx.resume_text), detect_industry(ctx.job_description)
        ),
        seniority_mismatch=SeniorityMismatch(
            required=required_level,
            present=present_level,
            confidence=_clamp(0.5 + 0.1 * (len(required_ind) + len(present_ind))),
            indicators=required_ind + present_ind,
        ),
        relevant_experience_percentage=_clamp(relevant_pct),
    )


# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------

ACHIEVEMENT_CHARS = 200
MISSING_METRIC_CHARS = 100


def _analyze_achievement(bullet: str) -> Achievement:
    metrics = bullet_parser.find_metrics(bullet)
    has_verb = bullet_parser.starts_with_action_verb(bullet)
    improvements = []
    if not metrics:
        improvements.append("Add a measurable result (%, $, time saved, users served)")
    if not has_verb:
        improvements.append("Open with a strong action verb")
    if bullet_parser.has_weak_phrase(bullet):
        improvements.append("Replace duty phrasing such as 'responsible for' with the outcome you delivered")

    if metrics and has_verb:
        impact = "high"
    elif metrics or has_verb:
        impact = "medium"
    else:
        impact = "low"

    return Achievement(
        text=bullet[:ACHIEVEMENT_CHARS],
        is_quantified=bool(metrics),
        metrics=metrics,
        impact=impact,
        improvements=improvements,
    )


def score_achievements(ctx: ScoringContext) -> AchievementsAnalysisResult:
    bullets = ctx.resume.region_bullets.get("achievements", [])
    if not bullets:
        return AchievementsAnalysisResult(
            achievement_score=0.0,
            improvement_opportunities=[
                "Add bullet points that describe concrete accomplishments",
            ],
        )

    analyzed = [_analyze_achievement(b) for b in bullets]
    quantified = [a for a in analyzed if a.is_quantified]
    qualitative = [a for a in analyzed if not a.is_quantified]
    with_verb = sum(1 for b in bullets if bullet_parser.starts_with_action_verb(b))

    score = 0.7 * len(quantified) / len(bullets) + 0.3 * with_verb / len(bullets)

    opportunities = []
    if qualitative:
        opportunities.append(
            f"{len(qualitative)} of {len(bullets)} achievements lack a measurable result"
        )
    if with_verb < len(bullets):
        opportunities.append(
            f"{len(bullets) - with_verb} bullet points do not start with an action verb"
        )
    weak = sum(1 for b in bullets if bullet_parser.has_weak_phrase(b))
    if weak:
        opportunities.append(f"{weak} bullet points describe duties instead of results")

    return AchievementsAnalysisResult(
        achievement_score=_clamp(score),
        quantified_achievements=quantified,
        qualitative_achievements=qualitative,
        missing_metrics=[a.text[:MISSING_METRIC_CHARS] for a in qualitative],
        improvement_opportunities=opportunities,
    )


# ---------------------------------------------------------------------------
# Industry alignment
# ---------------------------------------------------------------------------

def score_industry_alignment(ctx: ScoringContext) -> IndustryAlignmentResult:
    target = detect_industry(ctx.job_description)
    detected = detect_industry(ctx.resume_text)
    topical = tfidf_cosine_similarity(ctx.resume_text, ctx.job_description)
    alignment = 0.7 * _industry_match(detected, target) + 0.3 * topical

    transferable = [
        kw for kw in ctx.matched_resume_keywords
        if kw in SOFT_SKILLS or kw in PROCESS_TERMS
    ]

    gaps: list[str] = []
    if target != "general":
        resume_hits = set(industry_evidence(ctx.resume_text).get(target, []))
        gaps = [t for t in industry_evidence(ctx.job_description)[target] if t not in resume_hits]

    return IndustryAlignmentResult(
        alignment_score=_clamp(alignment),
        detected_industry=detected,
        target_industry=target,
        transferable_skills=transferable,
        industry_gaps=gaps,
    )


DIMENSION_SCORERS = (
    score_keywords,
    score_skills,
    score_experience,
    score_achievements,
    score_industry_alignment,
)
