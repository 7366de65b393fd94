from services.section_parser import (
    detect_seniority,
    extract_experience_years,
    extract_required_years,
    has_heading,
    job_requirement_lines,
    resume_region_lines,
    seniority_from_years,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567

Summary
Experienced software engineer with 5+ years building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Led team of 5 engineers

Software Engineer | StartupXYZ | 2019 - 2021
• Developed React frontend components

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""

SAMPLE_JD = """Senior Backend Engineer

Requirements:
- 5+ years of experience with Python
- Kubernetes in production

Responsibilities:
- Own the billing platform
"""


# --- Region slicing ---

def test_resume_region_lines_stops_at_next_heading():
    lines = resume_region_lines(SAMPLE_RESUME, "experience")
    text = "\n".join(lines)
    assert "Built REST APIs" in text
    assert "Developed React frontend components" in text
    assert "Computer Science" not in text


def test_resume_region_lines_absent_heading_is_none():
    assert resume_region_lines(SAMPLE_RESUME, "achievements") is None


def test_resume_region_lines_empty_section_is_empty_list():
    assert resume_region_lines("Achievements\nEducation\nB.S.", "achievements") == []


def test_inline_heading_keeps_content():
    lines = resume_region_lines("Technical Skills: Python, Go", "skills")
    assert lines == ["Python, Go"]


def test_job_requirement_lines_stop_at_responsibilities():
    lines = job_requirement_lines(SAMPLE_JD)
    text = "\n".join(lines)
    assert "Kubernetes in production" in text
    assert "billing platform" not in text


def test_job_requirement_lines_without_headings():
    assert job_requirement_lines("We are hiring a designer.") == []


def test_has_heading():
    assert has_heading(SAMPLE_RESUME, ["education"])
    assert not has_heading(SAMPLE_RESUME, ["certifications?"])


# --- Experience extraction tests ---

def test_extract_experience_years_explicit():
    text = "Senior engineer with 5+ years of experience in Python."
    years = extract_experience_years(text)
    assert years >= 5.0


def test_extract_experience_years_date_ranges():
    text = """
    Software Engineer | TechCorp | Jan 2020 - Present
    Junior Developer | StartupXYZ | Mar 2018 - Dec 2019
    """
    years = extract_experience_years(text)
    assert years >= 4.0


def test_extract_experience_years_none():
    assert extract_experience_years("Recent graduate looking for a role") == 0.0


def test_extract_required_years():
    jd = "Requirements: 5+ years of experience in software development"
    years = extract_required_years(jd)
    assert years == 5.0


def test_extract_required_years_with_qualifier_word():
    assert extract_required_years("3 years professional experience") == 3.0


# --- Seniority ---

def test_detect_seniority_from_title():
    level, indicators = detect_seniority("Senior Backend Engineer")
    assert level == "senior"
    assert indicators == ["senior"]


def test_detect_seniority_highest_wins():
    level, _ = detect_seniority("Lead engineer who mentored junior developers")
    assert level == "lead"


def test_detect_seniority_falls_back_to_years():
    level, indicators = detect_seniority("Software Engineer", years=6)
    assert level == "senior"
    assert indicators == ["6 years"]


def test_seniority_from_years():
    assert seniority_from_years(0) == "mid"
    assert seniority_from_years(1) == "junior"
    assert seniority_from_years(3) == "mid"
    assert seniority_from_years(12) == "lead"


def test_star_bullet_is_not_a_heading():
    text = "Experience\n* Kubernetes experience\n- Built billing microservice\n"
    lines = resume_region_lines(text, "experience")
    assert "* Kubernetes experience" in lines
    assert not has_heading("* Cloud skills", ["skills"])


def test_markdown_headings_still_match():
    assert has_heading("## Experience", ["experience"])
    assert has_heading("**Skills**", ["skills"])


def test_job_requirement_lines_stop_at_benefits_and_company():
    jd = (
        "Requirements:\n- Python\n\nBenefits\n- Remote stipend\n\n"
        "About us\nWe sell billing software.\n"
    )
    lines = job_requirement_lines(jd)
    text = "\n".join(lines)
    assert "Python" in text
    assert "Remote stipend" not in text
    assert "billing software" not in text
