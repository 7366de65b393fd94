"""Tests for warning synthesis from a detailed analysis report."""

import pytest

from models.schemas.analysis import (
    Achievement,
    AchievementsAnalysisResult,
    ATSCompatibilityResult,
    ATSIssue,
    DetailedAnalysisReport,
    ExperienceAnalysisResult,
    IndustryAlignmentResult,
    KeywordAnalysisResult,
    MissingKeyword,
    SeniorityMismatch,
    SkillsAnalysisResult,
)
from services.validation.config import ValidationThresholds
from services.validation.synthesizer import WarningSynthesizer, severity_for


def make_report(
    keyword: float = 1.0,
    skills: float = 1.0,
    experience: float = 1.0,
    achievements: float = 1.0,
    industry: float = 1.0,
    ats: float = 1.0,
    missing_keywords: list[str] | None = None,
) -> DetailedAnalysisReport:
    return DetailedAnalysisReport(
        keywords=KeywordAnalysisResult(
            match_score=keyword,
            missing_keywords=[
                MissingKeyword(keyword=k, importance=0.9, category="technical")
                for k in (missing_keywords or [])
            ],
        ),
        skills=SkillsAnalysisResult(skill_match_score=skills),
        experience=ExperienceAnalysisResult(
            role_alignment=experience,
            seniority_mismatch=SeniorityMismatch(required="mid", present="mid", confidence=0.5),
        ),
        achievements=AchievementsAnalysisResult(
            achievement_score=achievements,
            qualitative_achievements=[
                Achievement(text="Handled deployments", is_quantified=False),
            ],
        ),
        industry_alignment=IndustryAlignmentResult(
            alignment_score=industry, detected_industry="healthcare", target_industry="finance",
        ),
        ats_compatibility=ATSCompatibilityResult(
            score=ats,
            format_score=ats,
            content_score=ats,
            issues=[ATSIssue(type="format", severity="MEDIUM",
                             description="Table formatting detected", solution="Use plain text")],
            recommendations=["Use plain text"],
        ),
    )


@pytest.fixture
def synthesizer():
    return WarningSynthesizer()


def test_strong_report_has_no_warnings(synthesizer):
    assert synthesizer.synthesize(make_report()) == []


@pytest.mark.parametrize("criticality,severity", [
    (1.0, "HIGH"),
    (0.81, "HIGH"),
    (0.8, "MEDIUM"),
    (0.61, "MEDIUM"),
    (0.6, "LOW"),
    (0.51, "LOW"),
])
def test_severity_for(criticality, severity):
    assert severity_for(criticality) == severity


class TestKeywordWarning:
    def test_triggered_but_insignificant_is_dropped(self, synthesizer):
        # below the 0.6 trigger, but criticality 0.45 fails the precision filter
        assert synthesizer.synthesize(make_report(keyword=0.55)) == []

    def test_not_triggered_at_threshold(self, synthesizer):
        assert synthesizer.synthesize(make_report(keyword=0.6)) == []

    def test_warning_contents(self, synthesizer):
        report = make_report(keyword=0.3, missing_keywords=["typescript", "aws", "docker"])
        [warning] = synthesizer.synthesize(report)
        assert warning.id == "keyword_gap"
        assert warning.type == "keyword_mismatch"
        assert warning.severity == "MEDIUM"
        assert warning.criticality_score == pytest.approx(0.7)
        assert "typescript" in warning.explanation
        assert warning.dismissible

    def test_actions(self, synthesizer):
        [warning] = synthesizer.synthesize(make_report(keyword=0.1))
        assert [(a.label, a.type) for a in warning.actions] == [
            ("Show Missing Keywords", "primary"),
            ("AI Optimize", "secondary"),
            ("Dismiss", "destructive"),
        ]

    def test_at_most_two_examples(self, synthesizer):
        report = make_report(keyword=0.2, missing_keywords=["typescript", "aws", "docker"])
        [warning] = synthesizer.synthesize(report)
        assert len(warning.examples) == 2
        assert "typescript" in warning.examples[0].after


@pytest.mark.parametrize("field,warning_type", [
    ("skills", "skills_gap"),
    ("experience", "experience_mismatch"),
    ("achievements", "achievements_missing"),
    ("industry", "industry_mismatch"),
    ("ats", "ats_incompatible"),
])
def test_each_dimension_warns(synthesizer, field, warning_type):
    [warning] = synthesizer.synthesize(make_report(**{field: 0.2}))
    assert warning.type == warning_type
    assert warning.severity == "MEDIUM"
    assert warning.solutions


def test_ats_warning_uses_recommendations(synthesizer):
    [warning] = synthesizer.synthesize(make_report(ats=0.3))
    assert warning.solutions == ["Use plain text"]
    assert "Table formatting detected" in warning.explanation


def test_achievement_examples_rewrite_weak_bullets(synthesizer):
    [warning] = synthesizer.synthesize(make_report(achievements=0.0))
    assert warning.examples[0].before == "Handled deployments"
    assert warning.severity == "HIGH"


def test_ordering_by_criticality_then_dimension(synthesizer):
    report = make_report(keyword=0.3, skills=0.3, achievements=0.0, ats=0.45)
    types = [w.type for w in synthesizer.synthesize(report)]
    assert types == [
        "achievements_missing",
        "keyword_mismatch",
        "skills_gap",
        "ats_incompatible",
    ]


def test_custom_thresholds():
    synthesizer = WarningSynthesizer(ValidationThresholds(keyword=0.9, significance=0.05))
    [warning] = synthesizer.synthesize(make_report(keyword=0.85))
    assert warning.type == "keyword_mismatch"
    assert warning.severity == "LOW"
