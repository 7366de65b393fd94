"""Resume match validator: the single entry point of the validation engine.

Flow:
    Idle -> Checking-Cache
      ├─ Cache-Hit  -> Done
      └─ Cache-Miss -> Analyzing -> Synthesizing -> Caching -> Logging -> Done

Analyzing extracts keywords from both texts, matches them, then runs the
five dimension scorers and the ATS scorer in a thread pool. Any failure is
normalised into ``ValidationFailed`` at this boundary; partial results are
never returned.
"""

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from enum import Enum

from models.responses import ValidationResult
from models.schemas.analysis import DetailedAnalysisReport
from services.validation.ats_scorer import ATSScorer
from services.validation.audit import AuditLogger, LoggingAuditLogger, submit_audit_event
from services.validation.cache import ValidationCache
from services.validation.config import ValidatorConfig
from services.validation.errors import RecursionLimitExceeded, ValidationFailed
from services.validation.feature_extractor import FeatureExtractor, RegexFeatureExtractor, TextFeatures
from services.validation.matcher import SimilarityMatcher
from services.validation.scorers import DIMENSION_SCORERS, ScoringContext
from services.validation.synthesizer import WarningSynthesizer

logger = logging.getLogger(__name__)

AUDIT_EVENT = "validation_completed"


class ValidationState(str, Enum):
    IDLE = "idle"
    CHECKING_CACHE = "checking_cache"
    CACHE_HIT = "cache_hit"
    CACHE_MISS = "cache_miss"
    ANALYZING = "analyzing"
    SYNTHESIZING = "synthesizing"
    CACHING = "caching"
    LOGGING = "logging"
    DONE = "done"


def compute_confidence(job: TextFeatures, resume: TextFeatures) -> float:
    """More extracted evidence on both sides means a more trustworthy verdict."""
    confidence = (
        0.4
        + 0.3 * min(1.0, len(job.keywords) / 10)
        + 0.3 * min(1.0, len(resume.keywords) / 20)
    )
    return round(min(1.0, max(0.0, confidence)), 4)


class ResumeMatchValidator:
    """Owns the cache and the analysis collaborators for one host application.

    Construct once and share. The recursion counter and state live in context
    variables: each request thread starts from its own context, and scorer
    workers run in a copy of the caller's context so re-entry from a scorer
    still counts against the depth limit.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        extractor: FeatureExtractor | None = None,
        matcher: SimilarityMatcher | None = None,
        ats_scorer: ATSScorer | None = None,
        synthesizer: WarningSynthesizer | None = None,
        cache: ValidationCache | None = None,
        audit_logger: AuditLogger | None = None,
    ):
        self.config = config or ValidatorConfig()
        self.extractor = extractor or RegexFeatureExtractor()
        self.matcher = matcher or SimilarityMatcher()
        self.ats_scorer = ats_scorer or ATSScorer()
        self.synthesizer = synthesizer or WarningSynthesizer(self.config.thresholds)
        self.cache = cache or ValidationCache(ttl_seconds=self.config.cache_ttl_seconds)
        self.audit_logger = audit_logger or LoggingAuditLogger()
        self._depth: contextvars.ContextVar[int] = contextvars.ContextVar(
            f"validation_depth_{id(self)}", default=0
        )
        self._state: contextvars.ContextVar[ValidationState] = contextvars.ContextVar(
            f"validation_state_{id(self)}", default=ValidationState.IDLE
        )

    # --- per-context state ---

    @property
    def depth(self) -> int:
        return self._depth.get()

    @property
    def state(self) -> ValidationState:
        return self._state.get()

    def _set_depth(self, depth: int) -> None:
        self._depth.set(depth)

    def _transition(self, state: ValidationState) -> None:
        logger.debug("Validator %s -> %s", self.state.value, state.value)
        self._state.set(state)

    # --- public API ---

    def validate_match(
        self, resume_text: str, job_description: str, user_id: str | None = None
    ) -> ValidationResult:
        """Validate how well a resume matches a job description.

        Raises:
            RecursionLimitExceeded: re-entered deeper than ``max_recursion_depth``.
            ValidationFailed: any other failure, with the original as ``cause``.
        """
        depth = self.depth + 1
        if depth > self.config.max_recursion_depth:
            self._set_depth(0)
            self._transition(ValidationState.DONE)
            raise RecursionLimitExceeded(depth, self.config.max_recursion_depth)
        self._set_depth(depth)

        try:
            result = self._run(resume_text, job_description, user_id)
        except ValidationFailed:
            self._set_depth(0)
            self._transition(ValidationState.DONE)
            raise
        except Exception as e:
            self._set_depth(0)
            self._transition(ValidationState.DONE)
            logger.exception("Resume match validation failed")
            raise ValidationFailed("Resume match validation failed", cause=e) from e

        self._set_depth(max(0, self.depth - 1))
        self._transition(ValidationState.DONE)
        return result

    # --- pipeline ---

    def _run(self, resume_text: str, job_description: str, user_id: str | None) -> ValidationResult:
        self._transition(ValidationState.CHECKING_CACHE)
        limit = self.config.max_input_chars
        if len(resume_text) > limit or len(job_description) > limit:
            raise ValidationFailed(
                f"Input exceeds {limit} characters", code="INPUT_TOO_LARGE"
            )

        cached = self.cache.get(resume_text, job_description)
        if cached is not None:
            self._transition(ValidationState.CACHE_HIT)
            logger.debug("Cache hit")
            return cached
        self._transition(ValidationState.CACHE_MISS)

        self._transition(ValidationState.ANALYZING)
        job = self.extractor.extract(job_description, "job")
        resume = self.extractor.extract(resume_text, "resume")
        report = self._analyze(resume_text, job_description, job, resume)

        self._transition(ValidationState.SYNTHESIZING)
        warnings = self.synthesizer.synthesize(report)
        result = ValidationResult(
            has_significant_mismatch=bool(warnings),
            warnings=warnings,
            details=report,
            confidence=compute_confidence(job, resume),
        )

        self._transition(ValidationState.CACHING)
        self.cache.put(resume_text, job_description, result)
        self.cache.evict_expired()

        self._transition(ValidationState.LOGGING)
        if user_id and self.config.audit_enabled:
            submit_audit_event(
                self.audit_logger,
                user_id,
                AUDIT_EVENT,
                {
                    "has_significant_mismatch": result.has_significant_mismatch,
                    "warning_count": len(result.warnings),
                    "confidence": result.confidence,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                },
                severity="info",
            )

        logger.info(
            "Validation complete: %d warnings, confidence %.2f",
            len(result.warnings), result.confidence,
        )
        return result

    def _analyze(
        self,
        resume_text: str,
        job_description: str,
        job: TextFeatures,
        resume: TextFeatures,
    ) -> DetailedAnalysisReport:
        matches = self.matcher.match(resume.keywords, job.keywords)
        ctx = ScoringContext(
            resume_text=resume_text,
            job_description=job_description,
            job=job,
            resume=resume,
            matches=matches,
        )

        with ThreadPoolExecutor(max_workers=self.config.scorer_workers) as pool:
            futures = [
                pool.submit(contextvars.copy_context().run, scorer, ctx)
                for scorer in DIMENSION_SCORERS
            ]
            ats_future = pool.submit(
                contextvars.copy_context().run, self.ats_scorer.score, resume_text
            )
            keywords, skills, experience, achievements, industry = [f.result() for f in futures]
            ats = ats_future.result()

        return DetailedAnalysisReport(
            keywords=keywords,
            skills=skills,
            experience=experience,
            achievements=achievements,
            industry_alignment=industry,
            ats_compatibility=ats,
        )
