"""Persistence boundary — reports leave the engine as plain records.

Storage itself is an external collaborator. This module fixes the record
shape it receives: only strings, numbers and enum values, so any backend can
persist it without knowing the engine's models.
"""

import logging
from typing import Protocol

from labelverify.models.schemas import Submission, VerificationReport

logger = logging.getLogger(__name__)


class ReportStore(Protocol):
    def save(self, record: dict) -> str:
        """Persist a record and return its identifier."""
        ...


def build_report_record(report: VerificationReport, submission: Submission, reviewer_id: str) -> dict:
    return {
        "reviewer_id": reviewer_id,
        "submission": submission.model_dump(mode="json"),
        "overall_status": report.overall_status.value,
        "results": [r.model_dump(mode="json") for r in report.results],
        "notes": list(report.notes),
        "detected_text": report.detected_text,
    }


def save_report(store: ReportStore, report: VerificationReport, submission: Submission, reviewer_id: str) -> str:
    record_id = store.save(build_report_record(report, submission, reviewer_id))
    logger.info("Stored %s report %s", report.overall_status.value, record_id)
    return record_id
