import re

# Bullet markers recognised by the extractor and the ATS linter
BULLET_MARKERS = ("•", "-", "*")

# Strong action verbs for achievement scoring
ACTION_VERBS = frozenset({
    "achieved", "administered", "advanced", "analyzed", "architected",
    "automated", "built", "collaborated", "conducted", "configured",
    "consolidated", "contributed", "coordinated", "created", "cut", "decreased",
    "delivered", "deployed", "designed", "developed", "directed",
    "drove", "eliminated", "enabled", "engineered", "enhanced",
    "established", "evaluated", "executed", "expanded", "facilitated",
    "founded", "generated", "grew", "identified", "implemented",
    "improved", "increased", "influenced", "initiated", "innovated",
    "integrated", "introduced", "launched", "led", "leveraged",
    "maintained", "managed", "mentored", "migrated", "modernized",
    "negotiated", "optimized", "orchestrated", "organized", "overhauled",
    "partnered", "performed", "pioneered", "planned", "presented",
    "processed", "produced", "programmed", "proposed", "published",
    "rebuilt", "reduced", "refactored", "refined", "remodeled",
    "resolved", "restructured", "revamped", "saved", "scaled", "secured",
    "simplified", "spearheaded", "standardized", "streamlined",
    "strengthened", "supervised", "surpassed", "tested", "trained",
    "transformed", "tripled", "upgraded", "utilized", "won",
})

# Weak openers that hide the result behind the duty
WEAK_PHRASES = (
    "responsible for", "duties included", "worked on", "helped with",
    "assisted with", "participated in", "involved in", "tasked with",
)

# Quantified metrics: percentages, money, multipliers, counted things
METRICS_RE = re.compile(
    r"\d+(?:\.\d+)?\s?%"
    r"|\$\s?\d[\d,.]*\s?[KMB]?\b"
    r"|\b\d+(?:\.\d+)?x\b"
    r"|\b\d[\d,.]*\s?[KMB]?\+?\s+(?:users|clients|requests|customers|endpoints|"
    r"services|teams?|members?|engineers|people|projects|hours|days|weeks|"
    r"transactions|downloads|accounts|stores|sites)\b",
    re.IGNORECASE,
)


def is_bullet_line(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and stripped.startswith(BULLET_MARKERS)


def extract_bullets(text: str) -> list[str]:
    """Extract bullet-point lines (``•``, ``-``, ``*``) with the marker removed."""
    bullets = []
    for line in text.split("\n"):
        if not is_bullet_line(line):
            continue
        cleaned = line.strip().lstrip("".join(BULLET_MARKERS) + " ").strip()
        if cleaned:
            bullets.append(cleaned)
    return bullets


def count_bullet_markers(text: str) -> int:
    return sum(1 for line in text.split("\n") if is_bullet_line(line))


def find_metrics(text: str) -> list[str]:
    """Return the quantified metrics mentioned in a line, in order."""
    return [m.group(0).strip() for m in METRICS_RE.finditer(text)]


def starts_with_action_verb(bullet: str) -> bool:
    words = bullet.split()
    if not words:
        return False
    return words[0].lower().strip(".,:;") in ACTION_VERBS


def has_weak_phrase(bullet: str) -> bool:
    lower = bullet.lower()
    return any(phrase in lower for phrase in WEAK_PHRASES)
