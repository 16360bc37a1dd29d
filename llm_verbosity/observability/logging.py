"""
Structured logging utility for verbosity control.

Provides a consistent logging interface so every log line carries the
component name plus fields such as model and verbosity.
"""

import logging
from typing import Optional


class ComponentLogger:
    """Structured logger for a package component."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "payloads", "config")
        """
        self.component = component
        self.logger = logging.getLogger(f"llm_verbosity.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        self.logger.debug(self._format_message(message, model=model, **kwargs))

    def warning(self, message: str, model: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(self._format_message(message, model=model, **kwargs))
