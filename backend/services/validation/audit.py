"""Best-effort audit logging of validation runs."""

import logging
import threading
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class AuditLogger(Protocol):
    def log_event(self, user_id: str, event_type: str, metadata: dict[str, Any], severity: str) -> None: ...


class LoggingAuditLogger:
    """Default collaborator: writes audit events to a dedicated logger."""

    def __init__(self, name: str = "resume_match.audit"):
        self._logger = logging.getLogger(name)

    def log_event(self, user_id: str, event_type: str, metadata: dict[str, Any], severity: str) -> None:
        self._logger.info(
            "audit user=%s event=%s severity=%s metadata=%s",
            user_id, event_type, severity, metadata,
        )


def submit_audit_event(
    audit_logger: AuditLogger,
    user_id: str,
    event_type: str,
    metadata: dict[str, Any],
    severity: str = "info",
) -> threading.Thread:
    """Fire-and-forget: hand the event to a daemon thread and return at once.

    Failures inside the collaborator are logged locally and never propagate.
    """

    def _send() -> None:
        try:
            audit_logger.log_event(user_id, event_type, metadata, severity)
        except Exception as e:
            logger.warning("Audit log write failed for %s: %s", event_type, e)

    thread = threading.Thread(target=_send, name="audit-log", daemon=True)
    thread.start()
    return thread
