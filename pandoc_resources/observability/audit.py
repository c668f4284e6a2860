"""Audit logging interfaces and implementations for pandoc-resources.

This module provides the AuditSink abstract interface for recording resolver
operations, along with concrete implementations for different logging backends.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from pandoc_resources.models import AuditEvent


class AuditSink(ABC):
    """Abstract interface for audit logging.

    Resolves, listings and layout bootstraps are reported through an
    AuditSink. So are listing faults that are otherwise swallowed, which
    makes a sink the place to look when a listing comes back shorter than
    expected.
    """

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The AuditEvent to record.
        """
        pass


class JSONLAuditSink(AuditSink):
    """Writes audit events to a JSONL (JSON Lines) file.

    Each event is serialized as a single JSON line and appended to the log file.

    Example log file content:
        {"ts":"2024-01-01T12:00:00","kind":"resolve","resource_kind":"template","name":"ieee",...}
        {"ts":"2024-01-01T12:00:01","kind":"list","resource_kind":"preset",...}
    """

    def __init__(self, log_path: Path):
        """Initialize JSONLAuditSink with log file path.

        Args:
            log_path: Path to the JSONL log file. Parent directories are
                     created if they don't exist.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        """Append audit event as a JSON line to the log file.

        Raises:
            OSError: If the log file cannot be written to.
        """
        json_line = json.dumps(event.to_dict(), separators=(',', ':'))
        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(json_line + '\n')


class StdoutAuditSink(AuditSink):
    """Writes audit events to stdout as JSON lines."""

    def log(self, event: AuditEvent) -> None:
        print(json.dumps(event.to_dict(), separators=(',', ':')))
