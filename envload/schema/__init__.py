"""Schema package exports."""

from .entries import Entry, ParseOutcome, Rejection
from .report import CheckReport, RejectedLine, encode_report

__all__ = ["Entry", "ParseOutcome", "Rejection", "CheckReport", "RejectedLine", "encode_report"]
