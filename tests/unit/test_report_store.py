"""Unit tests for the persistence boundary record shape."""

import json

from labelverify.models.schemas import ProductCategory, Submission
from labelverify.services.report_store import build_report_record, save_report
from labelverify.services.validation_service import verify

LABEL_TEXT = "OLD TOM CELLARS TABLE WINE 12.5% ALC/VOL 750 mL CONTAINS SULFITES GOVERNMENT WARNING"


class InMemoryStore:
    def __init__(self):
        self.records = {}

    def save(self, record: dict) -> str:
        record_id = f"rec-{len(self.records) + 1}"
        self.records[record_id] = record
        return record_id


def _make_submission() -> Submission:
    return Submission(
        category=ProductCategory.WINE,
        brand_name="Old Tom Cellars",
        product_type="Table Wine",
        alcohol_content="12.5",
        net_contents="750 mL",
    )


class TestBuildReportRecord:
    def test_plain_values_only(self):
        submission = _make_submission()
        record = build_report_record(verify(submission, LABEL_TEXT), submission, "reviewer-7")
        assert record["reviewer_id"] == "reviewer-7"
        assert record["overall_status"] == "rejected"
        assert record["submission"]["category"] == "wine"
        assert record["results"][0] == {
            "field": "Brand Name",
            "status": "pass",
            "message": "Brand name found on label",
            "form_text": "Old Tom Cellars",
            "label_text": "OLD TOM CELLARS",
            "confidence": 100.0,
        }
        assert record["detected_text"] == LABEL_TEXT
        # Round-trips through JSON without custom encoders.
        assert json.loads(json.dumps(record)) == record


class TestSaveReport:
    def test_returns_store_id(self):
        store = InMemoryStore()
        submission = _make_submission()
        record_id = save_report(store, verify(submission, LABEL_TEXT), submission, "reviewer-7")
        assert record_id == "rec-1"
        assert store.records["rec-1"]["submission"]["brand_name"] == "Old Tom Cellars"
