"""
Console Audit Logger.

A simple audit logger that prints pipeline stage events to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only summaries.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_stage_start(self, stage_name: str) -> None:
        """Log the start of a pipeline stage."""
        if self._verbose:
            self._log("INFO", f"Starting {stage_name}")

    def log_stage_end(
        self,
        stage_name: str,
        status: str,
        duration_seconds: float,
    ) -> None:
        """Log the end of a pipeline stage."""
        level = "ERROR" if status == "error" else "INFO"
        self._log(level, f"Finished {stage_name}: {status} ({duration_seconds:.3f}s)")

    def log_field_failure(self, field: str, message: str) -> None:
        """Log a field that failed validation."""
        if self._verbose:
            self._log("DEBUG", f"{field} invalid: {message}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        suffix = f" {context}" if context and self._verbose else ""
        self._log(severity, f"ANOMALY: {message}{suffix}")

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
