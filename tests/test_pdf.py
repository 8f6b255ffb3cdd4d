"""
Procura - PDF Parametre Dogrulama Testleri

POST /api/pdf/generate: PDF tarayicida uretilir, sunucu parametreleri dogrular.
"""

PAYLOAD = {
    "title": "Invoice",
    "number": "INV-1700000000000",
    "clientName": "Acme Traders",
    "date": "2026-10-19",
    "items": [{"description": "Steel Rod", "quantity": 2, "rate": 50, "amount": 100}],
    "subtotal": 100,
    "tax": 18,
    "taxPercentage": 18,
    "total": 118,
    "issuedBy": "System",
    "notes": "Thank you",
}


class TestGeneratePdf:

    def test_valid_parameters(self, client):
        response = client.post("/api/pdf/generate", json=PAYLOAD)
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "PDF generation parameters validated"
        assert data["data"]["clientName"] == "Acme Traders"
        assert data["data"]["taxPercentage"] == 18
        assert data["data"]["items"][0]["amount"] == 100

    def test_optional_fields_may_be_missing(self, client):
        payload = {k: PAYLOAD[k] for k in ("title", "number", "clientName", "items")}
        response = client.post("/api/pdf/generate", json=payload)
        assert response.status_code == 200
        data = response.json()["data"]
        assert "notes" not in data
        assert "taxPercentage" not in data
        assert set(data) == {"title", "number", "clientName", "items"}

    def test_item_fields_passed_through(self, client):
        """Kalemin id ve type alanlari da aynen geri doner."""
        item = {"id": "1718000000000", "description": "Steel Rod", "quantity": 2,
                "rate": 50, "amount": 100, "type": "product"}
        response = client.post("/api/pdf/generate", json=dict(PAYLOAD, items=[item]))
        assert response.status_code == 200
        assert response.json()["data"]["items"] == [item]

    def test_missing_required_fields(self, client):
        for field in ("title", "number", "clientName", "items"):
            payload = {k: v for k, v in PAYLOAD.items() if k != field}
            response = client.post("/api/pdf/generate", json=payload)
            assert response.status_code == 400, field
            assert response.json() == {"error": "Missing required fields"}

    def test_empty_items(self, client):
        response = client.post("/api/pdf/generate", json=dict(PAYLOAD, items=[]))
        assert response.status_code == 400

    def test_malformed_body(self, client):
        response = client.post(
            "/api/pdf/generate",
            content=b"not-json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate PDF"}

    def test_body_not_an_object(self, client):
        response = client.post("/api/pdf/generate", json=["Invoice"])
        assert response.status_code == 500

    def test_wrong_item_types(self, client):
        response = client.post("/api/pdf/generate", json=dict(PAYLOAD, items="Steel Rod"))
        assert response.status_code == 500
