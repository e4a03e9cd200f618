"""Content validation: SEO checks, grading, and reporting."""

from autoblog.validation.checks import validate_content
from autoblog.validation.report import format_validation_report

__all__ = ["validate_content", "format_validation_report"]
