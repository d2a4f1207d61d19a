"""HTTP surface tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from labelverify.config import Settings, get_settings
from labelverify.main import app

WINE_TEXT = (
    "OLD TOM CELLARS TABLE WINE 12.5% ALC/VOL 750 mL CONTAINS SULFITES "
    "GOVERNMENT WARNING: (1) ACCORDING TO THE SURGEON GENERAL, WOMEN SHOULD NOT DRINK "
    "ALCOHOLIC BEVERAGES DURING PREGNANCY BECAUSE OF THE RISK OF BIRTH DEFECTS. "
    "(2) CONSUMPTION OF ALCOHOLIC BEVERAGES IMPAIRS YOUR ABILITY TO DRIVE A CAR OR "
    "OPERATE MACHINERY, AND MAY CAUSE HEALTH PROBLEMS."
)

WINE_SUBMISSION = {
    "productCategory": "wine",
    "brandName": "Old Tom Cellars",
    "productType": "Table Wine",
    "alcoholContent": "12.5",
    "netContents": "750 mL",
    "sulfiteDeclaration": "Contains Sulfites",
}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "rule_sets": ["wine", "beer", "distilled_spirits"],
        }


class TestRules:
    def test_wine_rules(self, client):
        body = client.get("/rules/wine").json()
        assert body["category"] == "wine"
        assert body["wine"]["table_wine_max_abv"] == "14.0"
        assert body["wine"]["sulfite_terms"] == ["sulfite", "sulphite"]
        assert "Table Wine" in body["vocabulary"]
        assert "spirits" not in body

    def test_unknown_category(self, client):
        assert client.get("/rules/sake").status_code == 422


class TestVerify:
    def test_approved(self, client):
        response = client.post("/verify", json={"submission": WINE_SUBMISSION, "extracted_text": WINE_TEXT})
        assert response.status_code == 200
        body = response.json()
        assert body["overall_status"] == "approved"
        assert len(body["results"]) == 6
        assert body["results"][2]["label_text"] == "12.5%"
        assert body["detected_text"] == WINE_TEXT

    def test_snake_case_submission(self, client):
        submission = {
            "category": "distilled_spirits",
            "brand_name": "Old Tom Distillery",
            "product_type": "Bourbon",
            "alcohol_content": "45",
        }
        response = client.post("/verify", json={"submission": submission, "extracted_text": "OLD TOM DISTILLERY"})
        assert response.status_code == 200
        assert response.json()["overall_status"] == "rejected"

    def test_empty_text_is_precondition_error(self, client):
        response = client.post("/verify", json={"submission": WINE_SUBMISSION, "extracted_text": ""})
        assert response.status_code == 422
        assert response.json()["error"] == "NoTextDetectedError"

    def test_blank_brand_is_precondition_error(self, client):
        submission = dict(WINE_SUBMISSION, brandName=" ")
        response = client.post("/verify", json={"submission": submission, "extracted_text": WINE_TEXT})
        assert response.status_code == 422
        assert response.json()["error"] == "MissingSubmissionFieldError"

    def test_unknown_category(self, client):
        submission = dict(WINE_SUBMISSION, productCategory="sake")
        response = client.post("/verify", json={"submission": submission, "extracted_text": WINE_TEXT})
        assert response.status_code == 422

    def test_text_too_long(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(
            log_level="INFO", log_json=False, max_text_length=10
        )
        response = client.post("/verify", json={"submission": WINE_SUBMISSION, "extracted_text": WINE_TEXT})
        assert response.status_code == 413
