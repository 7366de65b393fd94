"""Tests for pairwise keyword matching."""

import pytest

from models.schemas.analysis import SemanticMatch
from services.validation.matcher import (
    SimilarityMatcher,
    best_similarity_by_job_keyword,
    term_similarity,
)


class TestTermSimilarity:
    def test_exact(self):
        assert term_similarity("python", "python") == 1.0

    @pytest.mark.parametrize("job_kw,resume_kw", [
        ("javascript", "js"),
        ("javascript", "node"),
        ("leadership", "lead"),
        ("lead", "supervise"),  # both in the leadership group
        ("postgresql", "postgres"),
    ])
    def test_synonyms(self, job_kw, resume_kw):
        assert term_similarity(job_kw, resume_kw) == 0.9

    def test_levenshtein(self):
        assert term_similarity("kubernetes", "kubernete") == pytest.approx(0.9)
        assert term_similarity("python", "java") < 0.5


class TestSimilarityMatcher:
    def test_exact_matches(self):
        matches = SimilarityMatcher().match(["react", "postgresql"], ["react", "aws"])
        assert [(m.job_keyword, m.resume_keyword, m.similarity) for m in matches] == [
            ("react", "react", 1.0),
        ]

    def test_threshold_is_strict(self):
        # 1 edit over 5 characters is exactly 0.8
        assert term_similarity("react", "reach") == pytest.approx(0.8)
        assert SimilarityMatcher().match(["reach"], ["react"]) == []

    def test_one_job_keyword_may_link_many_resume_keywords(self):
        matches = SimilarityMatcher().match(["js", "ecmascript", "golang"], ["javascript"])
        assert {m.resume_keyword for m in matches} == {"js", "ecmascript"}

    def test_context_tags(self):
        matches = SimilarityMatcher().match(
            ["python", "leadership", "analytics", "budget"],
            ["python", "leadership", "analytics", "budget"],
        )
        contexts = {m.job_keyword: m.context for m in matches}
        assert contexts == {
            "python": "technical",
            "leadership": "leadership",
            "analytics": "analytics",
            "budget": "general",
        }

    def test_empty_inputs(self):
        assert SimilarityMatcher().match([], ["python"]) == []
        assert SimilarityMatcher().match(["python"], []) == []


def test_best_similarity_by_job_keyword():
    matches = [
        SemanticMatch(job_keyword="javascript", resume_keyword="js", similarity=0.9),
        SemanticMatch(job_keyword="javascript", resume_keyword="javascript", similarity=1.0),
        SemanticMatch(job_keyword="python", resume_keyword="python3", similarity=0.9),
    ]
    assert best_similarity_by_job_keyword(matches) == {"javascript": 1.0, "python": 0.9}
