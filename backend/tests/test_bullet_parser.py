from services.bullet_parser import (
    count_bullet_markers,
    extract_bullets,
    find_metrics,
    has_weak_phrase,
    starts_with_action_verb,
)


def test_extract_bullets_strips_markers():
    text = """Experience
• Built REST APIs
- Led team of 5 engineers
* Shipped the mobile app
Plain sentence that is not a bullet
"""
    assert extract_bullets(text) == [
        "Built REST APIs",
        "Led team of 5 engineers",
        "Shipped the mobile app",
    ]


def test_extract_bullets_skips_empty_markers():
    assert extract_bullets("-\n•   \n- Real bullet") == ["Real bullet"]


def test_extract_bullets_empty_text():
    assert extract_bullets("") == []


def test_count_bullet_markers():
    assert count_bullet_markers("- a\n- b\n  • c\nd") == 3


def test_find_metrics():
    bullet = "Reduced latency by 40% saving $1.2M for 3 teams"
    assert find_metrics(bullet) == ["40%", "$1.2M", "3 teams"]


def test_find_metrics_multiplier_and_users():
    assert find_metrics("Grew signups 3x to 10,000 users") == ["3x", "10,000 users"]


def test_find_metrics_none():
    assert find_metrics("Improved the onboarding flow") == []


def test_starts_with_action_verb():
    assert starts_with_action_verb("Led migration to Kubernetes")
    assert starts_with_action_verb("Optimized, then shipped")
    assert not starts_with_action_verb("Responsible for deployments")
    assert not starts_with_action_verb("")


def test_has_weak_phrase():
    assert has_weak_phrase("Responsible for code reviews")
    assert has_weak_phrase("I worked on the billing system")
    assert not has_weak_phrase("Cut billing errors by 30%")
