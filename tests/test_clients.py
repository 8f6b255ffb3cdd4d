"""
Procura - Musteri (Client) Testleri

Test edilen endpoint'ler:
    POST   /api/clients          - Musteri olusturma
    GET    /api/clients          - Musteri listeleme
    GET    /api/clients/{id}     - Musteri detay
    PUT    /api/clients          - Musteri guncelleme
    DELETE /api/clients?id=      - Musteri silme
"""


class TestCreateClient:
    """Musteri olusturma testleri."""

    def test_create_client(self, client):
        """Yeni musteri basariyla olusturulabilmeli."""
        response = client.post(
            "/api/clients",
            json={
                "name": "Globex Pvt Ltd",
                "gst_in": "27AAAPL1234C1ZV",
                "address": "Pune",
                "email_id": "accounts@globex.example",
                "discount_value": 10,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Globex Pvt Ltd"
        assert data["gst_in"] == "27AAAPL1234C1ZV"
        assert data["email_id"] == "accounts@globex.example"
        assert data["discount_value"] == 10
        assert "created_at" in data

    def test_create_client_minimal(self, client):
        """Sadece zorunlu alan (name) ile musteri olusturulabilmeli."""
        response = client.post("/api/clients", json={"name": "Minimal"})
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["gst_in"] == ""
        assert data["address"] == ""
        assert data["email_id"] == ""
        assert data["discount_value"] == 0

    def test_create_client_without_name(self, client):
        """name olmadan musteri olusturulamamali, diger alanlar ne olursa olsun."""
        response = client.post(
            "/api/clients",
            json={"gst_in": "X", "address": "Y", "discount_value": 5},
        )
        assert response.status_code == 400
        assert "name" in response.json()["error"]

    def test_create_client_empty_name(self, client):
        response = client.post("/api/clients", json={"name": ""})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_discount_upper_bound_accepted(self, client):
        response = client.post("/api/clients", json={"name": "Max", "discount_value": 15})
        assert response.status_code == 201
        assert response.json()["discount_value"] == 15

    def test_discount_above_limit_rejected(self, client):
        """%16 indirim reddedilmeli, hicbir kayit olusmamali."""
        response = client.post("/api/clients", json={"name": "Over", "discount_value": 16})
        assert response.status_code == 400
        assert "discount_value" in response.json()["error"]
        assert client.get("/api/clients").json() == []

    def test_negative_discount_rejected(self, client):
        response = client.post("/api/clients", json={"name": "Neg", "discount_value": -1})
        assert response.status_code == 400

    def test_null_optional_fields(self, client):
        response = client.post(
            "/api/clients",
            json={"name": "Nulls", "gst_in": None, "discount_value": None},
        )
        assert response.status_code == 201, response.text
        assert response.json()["gst_in"] == ""
        assert response.json()["discount_value"] == 0


class TestListClients:

    def test_list_clients(self, client, test_client_record):
        response = client.get("/api/clients")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Acme Traders"

    def test_list_clients_empty(self, client):
        response = client.get("/api/clients")
        assert response.status_code == 200
        assert response.json() == []


class TestGetClient:

    def test_get_client(self, client, test_client_record):
        response = client.get(f"/api/clients/{test_client_record.id}")
        assert response.status_code == 200
        assert response.json()["gst_in"] == "29ABCDE1234F1Z5"

    def test_client_not_found(self, client):
        response = client.get("/api/clients/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Client not found"}


class TestUpdateClient:

    def test_update_client_partial(self, client, test_client_record):
        """Sadece gonderilen alanlar degismeli."""
        response = client.put(
            "/api/clients",
            json={"id": test_client_record.id, "address": "Chennai", "discount_value": 12},
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["address"] == "Chennai"
        assert data["discount_value"] == 12
        # Gonderilmeyen alanlar degismemeli
        assert data["name"] == "Acme Traders"
        assert data["email_id"] == "billing@acme.example"

    def test_update_client_empty_name_keeps_old(self, client, test_client_record):
        response = client.put(
            "/api/clients", json={"id": test_client_record.id, "name": ""},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Acme Traders"

    def test_update_invalid_discount_leaves_record(self, client, test_client_record):
        """Gecersiz indirim 400 donmeli ve kayit degismemeli."""
        response = client.put(
            "/api/clients",
            json={"id": test_client_record.id, "name": "Changed", "discount_value": 20},
        )
        assert response.status_code == 400
        stored = client.get(f"/api/clients/{test_client_record.id}").json()
        assert stored["name"] == "Acme Traders"
        assert stored["discount_value"] == 5

    def test_update_without_id(self, client):
        response = client.put("/api/clients", json={"name": "No id"})
        assert response.status_code == 400
        assert response.json() == {"error": "Client ID is required"}

    def test_update_nonexistent_client(self, client):
        response = client.put("/api/clients", json={"id": 42, "name": "Ghost"})
        assert response.status_code == 404
        assert response.json() == {"error": "Client not found"}


class TestDeleteClient:

    def test_delete_client(self, client, test_client_record):
        response = client.delete(f"/api/clients?id={test_client_record.id}")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get(f"/api/clients/{test_client_record.id}").status_code == 404

    def test_delete_does_not_cascade(self, client, test_client_record, test_invoice):
        """Musteri silinince faturalari kalmali."""
        client.delete(f"/api/clients?id={test_client_record.id}")
        invoices = client.get("/api/invoices").json()
        assert len(invoices) == 1
        assert invoices[0]["client_id"] == test_client_record.id

    def test_delete_without_id(self, client):
        response = client.delete("/api/clients")
        assert response.status_code == 400
        assert response.json() == {"error": "ID is required"}

    def test_delete_nonexistent_client(self, client):
        response = client.delete("/api/clients?id=999")
        assert response.status_code == 404
