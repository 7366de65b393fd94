"""Turn a DetailedAnalysisReport into user-facing warnings.

A dimension produces a warning only when its score falls below its trigger
threshold. Severity is graded on criticality (1 - score), and warnings whose
criticality does not exceed the significance bar are dropped.
"""

import logging
from typing import Callable

from models.responses import Warning, WarningAction, WarningExample
from models.schemas.analysis import (
    AchievementsAnalysisResult,
    ATSCompatibilityResult,
    DetailedAnalysisReport,
    ExperienceAnalysisResult,
    IndustryAlignmentResult,
    KeywordAnalysisResult,
    Severity,
    SkillsAnalysisResult,
)
from services.validation.config import ValidationThresholds

logger = logging.getLogger(__name__)

HIGH_CRITICALITY = 0.8
MEDIUM_CRITICALITY = 0.6
MAX_EXAMPLES = 2
MAX_LISTED_TERMS = 5

AI_OPTIMIZE = WarningAction(id="ai_optimize", label="AI Optimize", type="secondary", icon="sparkles")
DISMISS = WarningAction(id="dismiss", label="Dismiss", type="destructive", icon="x")


def severity_for(criticality: float) -> Severity:
    """Grade by criticality (1 - score): HIGH when score < 0.2, MEDIUM when score < 0.4."""
    if criticality > HIGH_CRITICALITY:
        return "HIGH"
    if criticality > MEDIUM_CRITICALITY:
        return "MEDIUM"
    return "LOW"


def _percent(score: float) -> int:
    return round(score * 100)


def _listing(terms: list[str]) -> str:
    shown = terms[:MAX_LISTED_TERMS]
    suffix = f" and {len(terms) - len(shown)} more" if len(terms) > len(shown) else ""
    return ", ".join(shown) + suffix


def _actions(primary_id: str, primary_label: str, icon: str) -> list[WarningAction]:
    return [
        WarningAction(id=primary_id, label=primary_label, type="primary", icon=icon),
        AI_OPTIMIZE,
        DISMISS,
    ]


# ---------------------------------------------------------------------------
# Per-dimension builders
# ---------------------------------------------------------------------------

def _keyword_warning(result: KeywordAnalysisResult, criticality: float, severity: Severity) -> Warning:
    missing = [m.keyword for m in result.missing_keywords]
    by_importance = sorted(result.missing_keywords, key=lambda m: -m.importance)

    solutions = [
        f"Work these job keywords into your resume where they truthfully apply: {_listing(missing)}"
        if missing else "Mirror the job description's wording for skills you already have",
        "Use the exact spelling the posting uses (e.g. 'Node.js' rather than 'Node')",
        "Repeat the most important terms in both your skills section and experience bullets",
    ]
    for m in by_importance:
        if m.alternatives:
            solutions.append(f"If you know {m.keyword} by another name ({', '.join(m.alternatives[:3])}), use the posting's term")
            break

    examples = [
        WarningExample(
            before="Built and maintained web applications",
            after=f"Built and maintained web applications using {m.keyword}",
            context=f"'{m.keyword}' appears in the job description",
        )
        for m in by_importance[:MAX_EXAMPLES]
    ]

    return Warning(
        id="keyword_gap",
        type="keyword_mismatch",
        severity=severity,
        title="Missing job keywords",
        description=f"Your resume covers {_percent(result.match_score)}% of the job's keywords.",
        explanation=(
            f"The job description asks for {_listing(missing)}, which your resume does not mention."
            if missing else "Few of the job description's keywords have a close match in your resume."
        ),
        importance="Applicant tracking systems rank resumes by keyword overlap before a recruiter reads them.",
        actions=_actions("show_missing_keywords", "Show Missing Keywords", "search"),
        solutions=solutions,
        examples=examples,
        criticality_score=criticality,
    )


def _skills_warning(result: SkillsAnalysisResult, criticality: float, severity: Severity) -> Warning:
    missing = [s.skill for s in result.missing_critical_skills]
    weakest = sorted(result.skill_categories, key=lambda c: c.coverage)

    solutions = []
    if missing:
        solutions.append(f"Add the skills you have from this list to your skills section: {_listing(missing)}")
    for category in weakest[:2]:
        if category.coverage < 1.0:
            solutions.append(
                f"Strengthen your {category.name.replace('_', '/')} skills coverage "
                f"({_percent(category.coverage)}% of what the job lists)"
            )
    for mismatch in result.level_mismatch[:2]:
        solutions.append(
            f"Show {mismatch.required_level} {mismatch.skill} depth with a concrete project or result"
        )
    for skill in result.missing_critical_skills[:1]:
        solutions.extend(skill.learning_resources)

    examples = [
        WarningExample(
            before="Skills: ...",
            after=f"Skills: ..., {s.skill}",
            context=f"Only if you have hands-on {s.skill} experience",
        )
        for s in result.missing_critical_skills[:MAX_EXAMPLES]
    ]

    return Warning(
        id="skills_gap",
        type="skills_gap",
        severity=severity,
        title="Required skills not shown",
        description=f"Your resume shows {_percent(result.skill_match_score)}% of the skills this job requires.",
        explanation=(
            f"Missing skills: {_listing(missing)}."
            if missing else "Several required skills only loosely match what your resume lists."
        ),
        importance="Hiring managers screen for must-have skills first; missing ones often end the review.",
        actions=_actions("show_missing_skills", "Show Missing Skills", "list"),
        solutions=solutions or ["List the required skills you have in a dedicated skills section"],
        examples=examples,
        criticality_score=criticality,
    )


def _experience_warning(result: ExperienceAnalysisResult, criticality: float, severity: Severity) -> Warning:
    seniority = result.seniority_mismatch
    details = []
    if result.years_gap > 0:
        details.append(
            f"The role asks for {result.required_years:g} years; your resume shows about {result.resume_years:g}."
        )
    if seniority.required != seniority.present:
        details.append(f"The role is {seniority.required}-level; your resume reads as {seniority.present}-level.")
    details.append(
        f"{_percent(result.relevant_experience_percentage)}% of your experience bullets relate to this job."
    )

    solutions = [
        "Lead each role with the responsibilities closest to this job",
        "Make your total years of experience explicit in your summary",
    ]
    if seniority.required != seniority.present:
        solutions.append(f"Highlight {seniority.required}-level scope: ownership, mentoring, decisions you drove")

    return Warning(
        id="experience_mismatch",
        type="experience_mismatch",
        severity=severity,
        title="Experience does not line up with the role",
        description=f"Your experience aligns {_percent(result.role_alignment)}% with this role.",
        explanation=" ".join(details),
        importance="Recruiters compare years, seniority and relevance of experience before anything else.",
        actions=_actions("review_experience", "Review Experience", "briefcase"),
        solutions=solutions,
        criticality_score=criticality,
    )


def _achievements_warning(result: AchievementsAnalysisResult, criticality: float, severity: Severity) -> Warning:
    examples = [
        WarningExample(
            before=a.text,
            after=f"{a.text.rstrip('.')}, cutting turnaround time by 30%",
            context="Replace the number with your real result",
        )
        for a in result.qualitative_achievements[:MAX_EXAMPLES]
    ]

    return Warning(
        id="achievements_missing",
        type="achievements_missing",
        severity=severity,
        title="Achievements lack measurable impact",
        description=f"Your achievements score {_percent(result.achievement_score)}% for quantified impact.",
        explanation=(
            "; ".join(result.improvement_opportunities)
            or "Your bullet points describe tasks rather than results."
        ),
        importance="Quantified results are the strongest evidence a recruiter has of your impact.",
        actions=_actions("add_metrics", "Add Metrics", "chart"),
        solutions=[
            "Add numbers to your bullets: percentages, revenue, time saved, users served",
            "Start each bullet with a strong action verb",
            "Describe the outcome you delivered, not the duty you held",
        ],
        examples=examples,
        criticality_score=criticality,
    )


def _industry_warning(result: IndustryAlignmentResult, criticality: float, severity: Severity) -> Warning:
    solutions = []
    if result.transferable_skills:
        solutions.append(f"Lead with transferable skills: {_listing(result.transferable_skills)}")
    if result.industry_gaps:
        solutions.append(f"Show familiarity with {result.target_industry} terms: {_listing(result.industry_gaps)}")
    solutions.append(f"Frame past work in terms a {result.target_industry} employer recognises")

    return Warning(
        id="industry_mismatch",
        type="industry_mismatch",
        severity=severity,
        title="Different industry background",
        description=(
            f"Your resume reads as {result.detected_industry}; this job is in {result.target_industry}."
        ),
        explanation=f"Industry alignment is {_percent(result.alignment_score)}%.",
        importance="Domain familiarity shortens ramp-up time, which employers weigh heavily.",
        actions=_actions("show_transferable_skills", "Highlight Transferable Skills", "shuffle"),
        solutions=solutions,
        criticality_score=criticality,
    )


def _ats_warning(result: ATSCompatibilityResult, criticality: float, severity: Severity) -> Warning:
    problems = [i for i in result.issues if i.severity != "LOW"] or result.issues
    return Warning(
        id="ats_issues",
        type="ats_incompatible",
        severity=severity,
        title="Resume may not parse cleanly in ATS",
        description=f"ATS compatibility is {_percent(result.score)}%.",
        explanation="; ".join(i.description for i in problems) or "Formatting may confuse resume parsers.",
        importance="If an ATS cannot parse your resume, a recruiter may never see it.",
        actions=_actions("fix_formatting", "Fix Formatting", "wrench"),
        solutions=result.recommendations or ["Use a simple single-column layout with standard headings"],
        criticality_score=criticality,
    )


Builder = Callable[..., Warning]


class WarningSynthesizer:
    def __init__(self, thresholds: ValidationThresholds | None = None) -> None:
        self.thresholds = thresholds or ValidationThresholds()

    def _rules(self, report: DetailedAnalysisReport) -> list[tuple[object, float, float, Builder]]:
        """(result, score, trigger threshold, builder) in tie-break order."""
        rules = []
        for result in report.dimensions():
            if result.dimension == "keywords":
                rules.append((result, result.match_score, self.thresholds.keyword, _keyword_warning))
            elif result.dimension == "skills":
                rules.append((result, result.skill_match_score, self.thresholds.skills, _skills_warning))
            elif result.dimension == "experience":
                rules.append((result, result.role_alignment, self.thresholds.experience, _experience_warning))
            elif result.dimension == "achievements":
                rules.append((result, result.achievement_score, self.thresholds.achievements, _achievements_warning))
            elif result.dimension == "industry_alignment":
                rules.append((result, result.alignment_score, self.thresholds.industry, _industry_warning))
            else:
                raise ValueError(f"Unknown dimension: {result.dimension}")

        ats = report.ats_compatibility
        rules.append((ats, ats.score, self.thresholds.ats, _ats_warning))
        return rules

    def synthesize(self, report: DetailedAnalysisReport) -> list[Warning]:
        warnings: list[Warning] = []
        for result, score, threshold, builder in self._rules(report):
            if score >= threshold:
                continue
            criticality = round(1.0 - score, 4)
            if criticality <= self.thresholds.significance:
                continue
            warnings.append(builder(result, criticality, severity_for(criticality)))

        # sorted() is stable, so equal criticality keeps dimension order
        warnings = sorted(warnings, key=lambda w: -w.criticality_score)
        logger.debug("Synthesized %d warnings", len(warnings))
        return warnings
