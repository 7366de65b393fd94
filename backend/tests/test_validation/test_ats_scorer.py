"""Tests for the ATS compatibility rule engine."""

import pytest

from services.validation.ats_scorer import ATSScorer, solution_for

CLEAN_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567

Experience
- Developed payment services 2019 - 2023
- Led migration to microservices
- Mentored four engineers

Education
B.S. Computer Science, 2018

Skills
Python, Go, PostgreSQL
"""

NO_CONTACT_DETAILS = """Jane Smith
Contact
Portfolio available on request

Experience
- Developed payment services 2019 - 2023
- Led migration to microservices
- Mentored four engineers

Education
B.S. Computer Science, 2018

Skills
Python, Go, PostgreSQL
"""


@pytest.fixture
def scorer():
    return ATSScorer()


def descriptions(result):
    return [i.description for i in result.issues]


def test_clean_resume_scores_full(scorer):
    result = scorer.score(CLEAN_RESUME)
    assert result.issues == []
    assert result.score == 1.0
    assert result.recommendations == []


def test_missing_contact_details_cost_fifteen(scorer):
    result = scorer.score(NO_CONTACT_DETAILS)
    assert result.format_score == 1.0
    assert result.content_score == pytest.approx(0.85)
    assert descriptions(result) == ["No email address found", "No phone number found"]
    assert all(i.severity == "LOW" for i in result.issues)
    assert result.score == pytest.approx(0.91)


def test_empty_resume(scorer):
    result = scorer.score("")
    found = descriptions(result)
    for section in ("contact", "experience", "education", "skills"):
        assert f"Missing {section} section" in found
    assert "No email address found" in found
    assert "No phone number found" in found
    assert 0.0 <= result.score <= 1.0
    # content: 100 - 40 - 10 - 5 - 10 - 5
    assert result.content_score == pytest.approx(0.30)


def test_contact_section_satisfied_by_email(scorer):
    result = scorer.score(CLEAN_RESUME)
    assert "Missing contact section" not in descriptions(result)


def test_format_penalties(scorer):
    text = CLEAN_RESUME + "\n│ Table │ Cell │\nName     Role\nCafé\n[link]\n"
    result = scorer.score(text)
    format_issues = [i for i in result.issues if i.type == "format"]
    assert len(format_issues) == 4
    assert all(i.severity == "MEDIUM" for i in format_issues)
    assert result.format_score == pytest.approx(0.60)
    assert result.score == pytest.approx((60 * 0.4 + 100 * 0.6) / 100)


def test_section_issues_are_medium(scorer):
    result = scorer.score("jane@example.com 555-123-4567 2020\n- a\n- b\n- c")
    sections = [i for i in result.issues if i.description.endswith("section")]
    assert len(sections) == 3
    assert all(i.severity == "MEDIUM" for i in sections)


def test_few_bullets(scorer):
    result = scorer.score(CLEAN_RESUME.replace("- Mentored", "Mentored"))
    assert "Too few bullet points" in descriptions(result)


def test_recommendations_are_unique(scorer):
    result = scorer.score("")
    assert len(result.recommendations) == len(set(result.recommendations))
    # four missing sections share one remediation
    assert result.recommendations.count(solution_for("Missing skills section")) == 1


def test_solution_for():
    assert "tables" in solution_for("Table formatting detected")
    assert "email" in solution_for("No email address found")
    assert "heading" in solution_for("Missing education section")
    assert solution_for("Something unexpected")
