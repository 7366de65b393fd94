"""Pairwise semantic matching between job keywords and resume keywords.

Similarity per pair, first rule wins:
    1. exact string equality             -> 1.0
    2. shared synonym group              -> 0.9
    3. normalised Levenshtein similarity -> 1 - distance / max(len(a), len(b))

Only pairs strictly above ``MATCH_THRESHOLD`` are kept. The pass is
O(|resume| x |job|); inputs are capped upstream (``max_input_chars``) so
pathological keyword counts cannot reach it.
"""

import logging

from rapidfuzz.distance import Levenshtein

from models.schemas.analysis import SemanticMatch
from services.validation.taxonomy import context_for, share_synonym_group

logger = logging.getLogger(__name__)

EXACT_SIMILARITY = 1.0
SYNONYM_SIMILARITY = 0.9
MATCH_THRESHOLD = 0.8


def term_similarity(job_keyword: str, resume_keyword: str) -> float:
    if job_keyword == resume_keyword:
        return EXACT_SIMILARITY
    if share_synonym_group(job_keyword, resume_keyword):
        return SYNONYM_SIMILARITY
    return Levenshtein.normalized_similarity(job_keyword, resume_keyword)


class SimilarityMatcher:
    def __init__(self, threshold: float = MATCH_THRESHOLD) -> None:
        self.threshold = threshold

    def match(self, resume_keywords: list[str], job_keywords: list[str]) -> list[SemanticMatch]:
        """Return every (job, resume) pair above the threshold.

        Pairs are not deduplicated: one job keyword may link to several
        resume keywords, so callers aggregate by ``job_keyword``.
        """
        matches: list[SemanticMatch] = []
        for job_kw in job_keywords:
            for resume_kw in resume_keywords:
                similarity = term_similarity(job_kw, resume_kw)
                if similarity > self.threshold:
                    matches.append(SemanticMatch(
                        job_keyword=job_kw,
                        resume_keyword=resume_kw,
                        similarity=round(similarity, 4),
                        context=context_for(job_kw),
                    ))

        logger.debug(
            "Matched %d pairs across %d job x %d resume keywords",
            len(matches), len(job_keywords), len(resume_keywords),
        )
        return matches


def best_similarity_by_job_keyword(matches: list[SemanticMatch]) -> dict[str, float]:
    """Collapse many-to-many matches to the best similarity per job keyword."""
    best: dict[str, float] = {}
    for m in matches:
        if m.similarity > best.get(m.job_keyword, 0.0):
            best[m.job_keyword] = m.similarity
    return best
