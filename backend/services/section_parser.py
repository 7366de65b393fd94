"""Heading-based region slicing plus experience and seniority extraction."""

import re
from datetime import datetime

# ---------------------------------------------------------------------------
# Section headings
# ---------------------------------------------------------------------------

JOB_REGION_HEADINGS = ["requirements", "qualifications", "skills", "experience"]
JOB_STOP_HEADINGS = [
    "responsibilities", "duties", "benefits", "perks", "compensation",
    "about\\s+(?:us|the\\s+company)", "what\\s+we\\s+offer",
]

RESUME_REGION_HEADINGS: dict[str, list[str]] = {
    "skills": ["skills", "technologies", "tools"],
    "experience": ["experience", "employment", "work\\s+history"],
    "achievements": ["achievements", "accomplishments"],
}

# Every heading a resume commonly carries; any of them closes the current region
KNOWN_HEADINGS = [
    "summary", "profile", "objective", "about\\s+me",
    "experience", "employment", "work\\s+history",
    "education", "skills", "technologies", "tools", "competencies",
    "projects", "certifications?", "licenses?",
    "achievements", "accomplishments", "awards", "honors",
    "contact", "references", "interests", "languages",
    "publications", "volunteer(?:ing)?",
    "requirements", "qualifications", "responsibilities", "duties",
]


def heading_pattern(names: list[str]) -> re.Pattern:
    """Compile a line pattern for headings such as ``Technical Skills:``.

    Up to two qualifier words may precede the name ("Work Experience",
    "Minimum Qualifications") and one joined word may follow it
    ("Skills & Tools"). Text after a colon is captured as ``rest`` so
    inline headings like ``Skills: Python, Go`` keep their content.
    Markdown ``#`` and ``**`` prefixes are allowed; a ``* `` bullet is not.
    """
    combined = "|".join(names)
    return re.compile(
        r"^\s*(?:#+\s*|\*\*)?(?:[A-Za-z]+\s+){0,2}"
        rf"(?:{combined})"
        r"(?:\s*(?:&|and|/)\s*[A-Za-z]+)?"
        r"\s*(?::\s*(?P<rest>.*)|[*]*\s*)$",
        re.IGNORECASE,
    )


_ANY_HEADING = heading_pattern(KNOWN_HEADINGS)
_JOB_START = heading_pattern(JOB_REGION_HEADINGS)
_JOB_STOP = heading_pattern(JOB_STOP_HEADINGS)
_RESUME_START: dict[str, re.Pattern] = {
    name: heading_pattern(names) for name, names in RESUME_REGION_HEADINGS.items()
}


def collect_region(
    text: str, start: re.Pattern, stop: re.Pattern | None = None
) -> list[str] | None:
    """Return the lines found under every ``start`` heading.

    A region runs until a ``stop`` heading (or end of text). Returns None
    when no ``start`` heading exists, so callers can tell an absent section
    apart from an empty one.
    """
    lines: list[str] = []
    inside = False
    found = False

    for line in text.split("\n"):
        match = start.match(line)
        if match:
            inside = True
            found = True
            rest = (match.group("rest") or "").strip()
            if rest:
                lines.append(rest)
            continue
        if stop is not None and stop.match(line):
            inside = False
            continue
        if inside:
            lines.append(line)

    return lines if found else None


def job_requirement_lines(job_description: str) -> list[str]:
    """Lines under requirement-style headings.

    A region ends at responsibilities, benefits or company headings.
    """
    return collect_region(job_description, _JOB_START, _JOB_STOP) or []


def resume_region_lines(resume_text: str, region: str) -> list[str] | None:
    """Lines of one resume region (``skills``, ``experience``, ``achievements``)."""
    return collect_region(resume_text, _RESUME_START[region], _ANY_HEADING)


def has_heading(text: str, names: list[str]) -> bool:
    pattern = heading_pattern(names)
    return any(pattern.match(line) for line in text.split("\n"))


# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

# "5+ years of experience" or "3 years experience in Python"
EXP_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:\w+\s+)?(?:experience|exp\b)",
    re.IGNORECASE,
)

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}})"
    r"\s*(?:-|–|—|to)+\s*"
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}}|[Pp]resent|[Cc]urrent)",
    re.IGNORECASE,
)

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}


def _parse_date(date_str: str) -> tuple[int, int]:
    """Parse a date string into (year, month). Returns (year, 1) if month not found."""
    date_str = date_str.strip().rstrip(".")
    if date_str.lower() in ("present", "current"):
        now = datetime.now()
        return now.year, now.month

    parts = date_str.split()
    if len(parts) == 2:
        month_str = parts[0].lower().rstrip(".")
        if month_str in _MONTH_MAP:
            try:
                return int(parts[1]), _MONTH_MAP[month_str]
            except ValueError:
                pass

    try:
        year = int(date_str)
        if 1970 <= year <= 2100:
            return year, 1
    except ValueError:
        pass

    return 0, 0


def extract_experience_years(text: str) -> float:
    """Estimate total years of experience from resume text.

    Takes the larger of explicit claims ("5+ years of experience") and the
    sum of all role date ranges.
    """
    explicit_years = 0.0
    for match in EXP_YEARS_RE.finditer(text):
        years = int(match.group(1))
        if years > explicit_years:
            explicit_years = float(years)

    total_months = 0
    for match in DATE_RANGE_RE.finditer(text):
        start_year, start_month = _parse_date(match.group(1))
        end_year, end_month = _parse_date(match.group(2))
        if start_year > 0 and end_year > 0:
            months = (end_year - start_year) * 12 + (end_month - start_month)
            if 0 < months < 600:  # Sanity: < 50 years
                total_months += months

    date_years = round(total_months / 12, 1) if total_months > 0 else 0.0
    return max(explicit_years, date_years)


def extract_required_years(job_description: str) -> float:
    """Extract required years of experience from a job description."""
    best = 0.0
    for match in EXP_YEARS_RE.finditer(job_description):
        years = float(match.group(1))
        if years > best:
            best = years
    return best


# ---------------------------------------------------------------------------
# Seniority detection
# ---------------------------------------------------------------------------

SENIORITY_ORDER = ["intern", "junior", "mid", "senior", "lead"]

SENIORITY_PATTERNS: dict[str, re.Pattern] = {
    "intern": re.compile(r"\b(?:intern|internship|trainee)\b", re.IGNORECASE),
    "junior": re.compile(r"\b(?:junior|jr\.?|entry[\s-]level|graduate)\b", re.IGNORECASE),
    "mid": re.compile(r"\b(?:mid[\s-]level|intermediate)\b", re.IGNORECASE),
    "senior": re.compile(r"\b(?:senior|sr\.?)\b", re.IGNORECASE),
    "lead": re.compile(
        r"\b(?:lead|principal|staff\s+engineer|head\s+of|director|architect)\b",
        re.IGNORECASE,
    ),
}


def seniority_from_years(years: float) -> str:
    if years <= 0:
        return "mid"
    if years < 2:
        return "junior"
    if years < 5:
        return "mid"
    if years < 10:
        return "senior"
    return "lead"


def detect_seniority(text: str, years: float = 0.0) -> tuple[str, list[str]]:
    """Return the highest seniority level mentioned plus the matched indicators.

    Falls back to a years-based estimate when no title keyword is present.
    """
    level = ""
    indicators: list[str] = []
    for name in SENIORITY_ORDER:
        match = SENIORITY_PATTERNS[name].search(text)
        if match:
            level = name
            indicators.append(match.group(0).lower())

    if not level:
        level = seniority_from_years(years)
        if years > 0:
            indicators.append(f"{years:g} years")
    return level, indicators
