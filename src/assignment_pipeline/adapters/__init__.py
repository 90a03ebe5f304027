"""
Adapters Package - Infrastructure Implementations.

Loggers:
    - ConsoleAuditLogger: Simple console output of stage events
"""

from assignment_pipeline.adapters.console_logger import ConsoleAuditLogger

__all__ = ["ConsoleAuditLogger"]
