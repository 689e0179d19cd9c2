"""Diagnostic system for i18nkit errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import I18nError, I18nParseError, I18nPatternError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "I18nError",
    "I18nParseError",
    "I18nPatternError",
]
