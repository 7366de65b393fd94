"""Section-aware keyword extraction from raw resume and job-description text.

Scorers and the synthesizer only ever see ``TextFeatures``; the strategy
behind it (regex passes today) sits behind the ``FeatureExtractor`` protocol.
"""

import logging
import re
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict

from services import bullet_parser, section_parser
from services.validation.taxonomy import (
    CLOUD_DEVOPS_PATTERNS,
    METHODOLOGY_PATTERNS,
    STOP_WORDS,
    TECHNICAL_PATTERNS,
)

logger = logging.getLogger(__name__)

Role = Literal["job", "resume"]

# Words keep inner dots and +/# so "node.js", "c++" and "c#" survive
_WORD_RE = re.compile(r"[a-z][a-z0-9+#]*(?:\.[a-z0-9+#]+)*")

MIN_WORD_LENGTH = 3


class TextFeatures(BaseModel):
    """Keywords extracted from one text plus the regions they came from."""
    model_config = ConfigDict(frozen=True)

    role: Role
    keywords: list[str] = []  # deduplicated, first-seen order
    region_keywords: dict[str, list[str]] = {}
    region_bullets: dict[str, list[str]] = {}
    missing_regions: list[str] = []  # regions whose heading was absent


class FeatureExtractor(Protocol):
    def extract(self, text: str, role: Role) -> TextFeatures: ...

    def extract_keywords(self, text: str, role: Role) -> list[str]: ...


def tokenize(text: str) -> list[str]:
    """Lowercase words of length >= 3 with stop-words removed."""
    return [
        word
        for word in _WORD_RE.findall(text.lower())
        if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    ]


def _dedupe(terms: list[str]) -> list[str]:
    return list(dict.fromkeys(terms))


def vocabulary_hits(text: str) -> list[str]:
    """Run the technical, cloud/devops and methodology passes over the whole text."""
    hits: list[str] = []
    for patterns in (TECHNICAL_PATTERNS, CLOUD_DEVOPS_PATTERNS, METHODOLOGY_PATTERNS):
        hits.extend(term for term, pattern in patterns.items() if pattern.search(text))
    return hits


class RegexFeatureExtractor:
    """Heading regions + bullet tokenisation + fixed-vocabulary regex passes."""

    def extract(self, text: str, role: Role) -> TextFeatures:
        if not text or not text.strip():
            return TextFeatures(role=role)

        if role == "job":
            regions = {"requirements": section_parser.job_requirement_lines(text)}
            missing: list[str] = []
        else:
            regions, missing = self._resume_regions(text)

        region_bullets: dict[str, list[str]] = {}
        region_keywords: dict[str, list[str]] = {}
        ordered: list[str] = []
        for name, lines in regions.items():
            bullets = bullet_parser.extract_bullets("\n".join(lines))
            words = _dedupe([w for bullet in bullets for w in tokenize(bullet)])
            region_bullets[name] = bullets
            region_keywords[name] = words
            ordered.extend(words)

        ordered.extend(vocabulary_hits(text))
        keywords = _dedupe(ordered)
        logger.debug("Extracted %d %s keywords", len(keywords), role)

        return TextFeatures(
            role=role,
            keywords=keywords,
            region_keywords=region_keywords,
            region_bullets=region_bullets,
            missing_regions=missing,
        )

    def extract_keywords(self, text: str, role: Role) -> list[str]:
        return self.extract(text, role).keywords

    @staticmethod
    def _resume_regions(text: str) -> tuple[dict[str, list[str]], list[str]]:
        regions: dict[str, list[str]] = {}
        missing: list[str] = []
        for name in section_parser.RESUME_REGION_HEADINGS:
            lines = section_parser.resume_region_lines(text, name)
            if lines is None:
                missing.append(name)
                # Achievements are often scattered through the resume
                lines = text.split("\n") if name == "achievements" else []
            regions[name] = lines
        return regions, missing
