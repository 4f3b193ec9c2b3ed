"""
Structured operation logging for the mood-to-palette matcher.
Model loading, index precompute and per-query timings all go through here.
"""

import logging
import os
from typing import Any, Dict, Optional


def _truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class StructuredLogger:
    """Structured logger for model, index and query operations."""

    def __init__(self, name: str = "colorify"):
        self.logger = logging.getLogger(name)
        debug = os.getenv("DEBUG", "false").lower() == "true"
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_model_load(self, model_name: str, role: str, status: str = "success", error: Optional[BaseException] = None):
        """Log an embedding model load attempt (role is 'primary' or 'fallback')."""
        details = {"model": model_name, "role": role}
        if error is not None:
            details["error"] = str(error)

        level = logging.INFO
        if status == "failed":
            level = logging.WARNING if role == "primary" else logging.ERROR
        self.log_operation("embedding.load", status, details, level=level)

    def log_index_build(self, item_count: int, dimension: int, start_time: float, end_time: float, status: str = "success"):
        """Log candidate index precompute."""
        duration_ms = round((end_time - start_time) * 1000, 2)
        details = {"items": item_count, "dimension": dimension, "duration_ms": duration_ms}
        if status == "success":
            details["message"] = f"Pre-computed {item_count} color embeddings in {duration_ms}ms"

        level = logging.INFO if status == "success" else logging.ERROR
        self.log_operation("index.build", status, details, level=level)

    def log_query(self, mood_text: str, result_count: int, start_time: float, end_time: float, status: str = "success", details: Dict[str, Any] = None):
        """Log a palette query. Mood text is truncated."""
        log_details = {
            "mood": _truncate(mood_text),
            "results": result_count,
            "duration_ms": round((end_time - start_time) * 1000, 2),
        }
        if details:
            log_details.update(details)

        level = logging.DEBUG if status == "success" else logging.WARNING
        self.log_operation("matcher.generate", status, log_details, level=level)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

# Global logger instance
logger = StructuredLogger()
