"""Application layer use cases coordinating the domain."""

from .declaration import DeclareDependencyUseCase, DependencyAccessor
from .ports import DiagnosticSink
from .reporting import ReportOutcome, render_message, report

__all__ = [
    "DeclareDependencyUseCase",
    "DependencyAccessor",
    "DiagnosticSink",
    "ReportOutcome",
    "render_message",
    "report",
]
