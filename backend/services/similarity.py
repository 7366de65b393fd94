"""TF-IDF similarity for coarse topical comparison of resume and JD text."""

import logging

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=5000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return min(1.0, max(0.0, float(score)))
    except ValueError:
        # Empty vocabulary after stop-word removal
        logger.debug("TF-IDF vocabulary empty, similarity defaults to 0.0")
        return 0.0


def jaccard_similarity(a: set[str], b: set[str]) -> float:
    """Intersection over union of two word sets; 0.0 when both are empty."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)
