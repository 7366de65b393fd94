"""Tests for best-effort audit logging."""

import logging
import threading

import pytest

from services.validation.audit import LoggingAuditLogger, submit_audit_event
from services.validation.config import ValidatorConfig
from services.validation.validator import ResumeMatchValidator


class RecordingAuditLogger:
    def __init__(self, fail: bool = False):
        self.events = []
        self.fail = fail
        self.called = threading.Event()

    def log_event(self, user_id, event_type, metadata, severity):
        self.events.append((user_id, event_type, metadata, severity))
        self.called.set()
        if self.fail:
            raise ConnectionError("audit store unreachable")


pytestmark = pytest.mark.concurrency


def test_event_is_logged_for_known_user(scenario_a):
    audit = RecordingAuditLogger()
    validator = ResumeMatchValidator(audit_logger=audit)
    result = validator.validate_match(*scenario_a, user_id="user-1")

    assert audit.called.wait(timeout=2)
    user_id, event_type, metadata, severity = audit.events[0]
    assert user_id == "user-1"
    assert event_type == "validation_completed"
    assert severity == "info"
    assert metadata["has_significant_mismatch"] == result.has_significant_mismatch
    assert metadata["warning_count"] == len(result.warnings)
    assert metadata["confidence"] == result.confidence
    assert "timestamp" in metadata


def test_no_event_without_user(scenario_a):
    audit = RecordingAuditLogger()
    ResumeMatchValidator(audit_logger=audit).validate_match(*scenario_a)
    assert not audit.called.wait(timeout=0.2)


def test_no_event_when_disabled(scenario_a):
    audit = RecordingAuditLogger()
    validator = ResumeMatchValidator(ValidatorConfig(audit_enabled=False), audit_logger=audit)
    validator.validate_match(*scenario_a, user_id="user-1")
    assert not audit.called.wait(timeout=0.2)


def test_no_event_on_cache_hit(scenario_a):
    audit = RecordingAuditLogger()
    validator = ResumeMatchValidator(audit_logger=audit)
    validator.validate_match(*scenario_a, user_id="user-1")
    assert audit.called.wait(timeout=2)
    audit.called.clear()
    validator.validate_match(*scenario_a, user_id="user-1")
    assert not audit.called.wait(timeout=0.2)


def test_audit_failure_does_not_fail_validation(scenario_a):
    audit = RecordingAuditLogger(fail=True)
    validator = ResumeMatchValidator(audit_logger=audit)
    result = validator.validate_match(*scenario_a, user_id="user-1")
    assert audit.called.wait(timeout=2)
    assert result.details.keywords.match_score == pytest.approx(0.6)


def test_audit_failure_is_logged_locally(caplog):
    caplog.set_level(logging.WARNING, logger="services.validation.audit")
    thread = submit_audit_event(RecordingAuditLogger(fail=True), "user-1", "validation_completed", {})
    thread.join(timeout=2)
    assert "Audit log write failed" in caplog.text


def test_logging_audit_logger(caplog):
    caplog.set_level(logging.INFO, logger="resume_match.audit")
    LoggingAuditLogger().log_event("user-1", "validation_completed", {"warning_count": 0}, "info")
    assert "event=validation_completed" in caplog.text
    assert "user=user-1" in caplog.text
