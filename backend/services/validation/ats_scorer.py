"""ATS (Applicant Tracking System) compatibility rule engine.

Independent of the job description. Format and content each start at 100
and lose fixed penalties per triggered check:

Format
    table-drawing characters  -15
    runs of 5+ spaces         -10
    non-ASCII characters      -10
    square brackets           -5
Content
    missing section heading   -10 each (contact, experience, education, skills)
    no email address          -10
    no phone number           -5
    no 4-digit year           -10
    fewer than 3 bullets      -5

score = (format * 0.4 + content * 0.6) / 100
"""

import logging
import re

from models.schemas.analysis import ATSCompatibilityResult, ATSIssue, Severity
from services import bullet_parser, section_parser

logger = logging.getLogger(__name__)

FORMAT_WEIGHT = 0.4
CONTENT_WEIGHT = 0.6

TABLE_PENALTY = 15
SPACING_PENALTY = 10
NON_ASCII_PENALTY = 10
BRACKET_PENALTY = 5
SECTION_PENALTY = 10
EMAIL_PENALTY = 10
PHONE_PENALTY = 5
DATE_PENALTY = 10
BULLET_PENALTY = 5

MIN_BULLETS = 3

TABLE_CHARS_RE = re.compile(r"[│─┌┐└┘├┤┬┴┼═║]")
WIDE_SPACING_RE = re.compile(r" {5,}")
NON_ASCII_RE = re.compile(r"[^\x00-\x7f]")
BRACKET_RE = re.compile(r"[\[\]]")

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(?:\+?1[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

REQUIRED_SECTIONS: dict[str, list[str]] = {
    "contact": [
        "contact", "contact\\s+info(?:rmation)?", "contact\\s+details",
        "personal\\s+info(?:rmation)?",
    ],
    "experience": ["experience", "employment", "work\\s+history"],
    "education": ["education", "academic\\s+background"],
    "skills": ["skills", "technologies", "competencies"],
}

# First pattern matching the issue description picks the remediation
SOLUTION_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"table", re.I), "Replace tables with plain text sections and bullet points"),
    (re.compile(r"spacing", re.I), "Use single spaces and standard line breaks instead of manual alignment"),
    (re.compile(r"special|non-ascii", re.I), "Replace special characters and symbols with plain ASCII text"),
    (re.compile(r"bracket", re.I), "Remove square brackets and write links or notes as plain text"),
    (re.compile(r"section", re.I), "Add clearly labelled standard section headings"),
    (re.compile(r"email", re.I), "Add a professional email address near the top of the resume"),
    (re.compile(r"phone", re.I), "Add a phone number including the area code"),
    (re.compile(r"date", re.I), "Include dates for each role and degree (e.g. 2019 - 2023)"),
    (re.compile(r"bullet", re.I), "Describe responsibilities and results as bullet points"),
]
DEFAULT_SOLUTION = "Review the resume layout for ATS compatibility"


def solution_for(description: str) -> str:
    for pattern, solution in SOLUTION_PATTERNS:
        if pattern.search(description):
            return solution
    return DEFAULT_SOLUTION


def _issue(kind: str, severity: Severity, description: str) -> ATSIssue:
    return ATSIssue(
        type=kind,
        severity=severity,
        description=description,
        solution=solution_for(description),
    )


def _has_section(text: str, name: str) -> bool:
    if section_parser.has_heading(text, REQUIRED_SECTIONS[name]):
        return True
    # Contact details usually sit under the name line without a heading
    if name == "contact":
        return bool(EMAIL_RE.search(text) or PHONE_RE.search(text))
    return False


class ATSScorer:
    """Score how safely a resume survives ATS parsing."""

    def score(self, resume_text: str) -> ATSCompatibilityResult:
        text = resume_text or ""
        issues: list[ATSIssue] = []

        format_score = 100
        if TABLE_CHARS_RE.search(text):
            format_score -= TABLE_PENALTY
            issues.append(_issue("format", "MEDIUM", "Table formatting detected"))
        if WIDE_SPACING_RE.search(text):
            format_score -= SPACING_PENALTY
            issues.append(_issue("format", "MEDIUM", "Excessive spacing detected"))
        if NON_ASCII_RE.search(text):
            format_score -= NON_ASCII_PENALTY
            issues.append(_issue("format", "MEDIUM", "Non-ASCII special characters detected"))
        if BRACKET_RE.search(text):
            format_score -= BRACKET_PENALTY
            issues.append(_issue("format", "MEDIUM", "Square brackets detected"))

        content_score = 100
        for name in REQUIRED_SECTIONS:
            if not _has_section(text, name):
                content_score -= SECTION_PENALTY
                issues.append(_issue("content", "MEDIUM", f"Missing {name} section"))
        if not EMAIL_RE.search(text):
            content_score -= EMAIL_PENALTY
            issues.append(_issue("content", "LOW", "No email address found"))
        if not PHONE_RE.search(text):
            content_score -= PHONE_PENALTY
            issues.append(_issue("content", "LOW", "No phone number found"))
        if not YEAR_RE.search(text):
            content_score -= DATE_PENALTY
            issues.append(_issue("content", "LOW", "No dates found"))
        if bullet_parser.count_bullet_markers(text) < MIN_BULLETS:
            content_score -= BULLET_PENALTY
            issues.append(_issue("content", "LOW", "Too few bullet points"))

        format_score = max(0, min(100, format_score))
        content_score = max(0, min(100, content_score))
        combined = (format_score * FORMAT_WEIGHT + content_score * CONTENT_WEIGHT) / 100

        logger.debug(
            "ATS format=%d content=%d issues=%d", format_score, content_score, len(issues)
        )
        return ATSCompatibilityResult(
            score=round(combined, 4),
            format_score=format_score / 100,
            content_score=content_score / 100,
            issues=issues,
            recommendations=list(dict.fromkeys(i.solution for i in issues)),
        )
