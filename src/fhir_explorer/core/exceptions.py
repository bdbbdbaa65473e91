"""Core Exceptions Module.

This module defines custom exceptions used throughout FHIR Explorer.
Test execution never raises these across the engine boundary; they signal
programmer errors at the edges (bad report format, invalid store writes).
"""

from typing import Optional


class FHIRExplorerError(Exception):
    """Base exception for all FHIR Explorer errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.code = code


class ConfigurationError(FHIRExplorerError):
    """Raised when configuration is invalid or missing."""


class ResultStoreError(FHIRExplorerError):
    """Raised when an invalid result is written to the result store."""


class ReportGenerationError(FHIRExplorerError):
    """Raised when a test report cannot be produced."""

    def __init__(self, message: str = "Report generation failed"):
        """Initialize ReportGenerationError."""
        super().__init__(message, "REPORT_GENERATION_ERROR")


class UnsupportedReportFormatError(ReportGenerationError):
    """Raised when a report format is not supported."""

    def __init__(self, report_format: object):
        """Initialize UnsupportedReportFormatError."""
        super().__init__(f"Unsupported report format: {report_format}")
        self.code = "UNSUPPORTED_REPORT_FORMAT"
        self.report_format = report_format
