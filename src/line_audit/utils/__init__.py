"""Shared utilities for line_audit."""

from line_audit.utils.exit_codes import ExitCode

__all__ = ["ExitCode"]
