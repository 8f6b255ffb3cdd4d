"""
Procura - Test Yapilandirmasi (conftest.py)

Uygulama zaten bellek ici SQLite kullaniyor; testler ayni engine uzerinde
calisir. Her test fonksiyonu icin tablolar bastan olusturulur ve test
bitince silinir (function scope). Tablo silinince AUTOINCREMENT sayaci da
sifirlanir, her test id=1'den baslar.
"""

import os
from decimal import Decimal

# Testlerde log dosyasi yazilmaz (settings import edilmeden once)
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from procura.database import Base, SessionLocal, engine, utcnow
from procura.main import app
from procura.rate_limit import limiter

# Tum modelleri import et - Base.metadata.create_all icin gerekli
from procura.models import Client, Product, Service, Quotation, Invoice


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def db_session():
    """
    Her test icin temiz bir veritabani oturumu olusturur.

    - Tablolari olusturur (create_all)
    - Test bittikten sonra tablolari siler (drop_all)
    - Boylece her test izole calisir
    """
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Tablolari temizle - bir sonraki test temiz baslasin
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    FastAPI TestClient olusturur.
    Uygulamanin kendi get_db'si ayni bellek ici veritabanini kullanir.
    Rate limit sayaclari her testte sifirlanir.
    """
    limiter.reset()
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture(scope="function")
def test_client_record(db_session):
    """Test musterisi olusturur ve veritabanina kaydeder."""
    record = Client(
        name="Acme Traders",
        gst_in="29ABCDE1234F1Z5",
        address="12 MG Road, Bengaluru",
        email_id="billing@acme.example",
        discount_value=Decimal("5.00"),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture(scope="function")
def test_product(db_session):
    """Test urunu olusturur ve veritabanina kaydeder."""
    product = Product(type="Steel Rod", original_rate=Decimal("150.00"), hsn="7214")
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture(scope="function")
def test_service(db_session):
    """Test hizmeti olusturur ve veritabanina kaydeder."""
    service = Service(type="Installation", original_cost=Decimal("500.00"), hsn="9987")
    db_session.add(service)
    db_session.commit()
    db_session.refresh(service)
    return service


def _document_fields(client_id: int) -> dict:
    now = utcnow()
    return {
        "client_id": client_id,
        "items": [
            {
                "id": "1",
                "description": "Steel Rod",
                "quantity": 2,
                "rate": 50,
                "amount": 100,
                "type": "product",
            },
        ],
        "subtotal": Decimal("100.00"),
        "tax_amount": Decimal("18.00"),
        "discount_amount": Decimal("0.00"),
        "total_cost": Decimal("118.00"),
        "issued_by": "System",
        "issued_time": now,
        "status": "draft",
        "pdf_id": "",
        "created_at": now,
    }


@pytest.fixture(scope="function")
def test_quotation(db_session, test_client_record):
    """100 + %18 vergi = 118 tutarinda taslak teklif."""
    quotation = Quotation(
        quotation_number="QT-1700000000000",
        **_document_fields(test_client_record.id),
    )
    db_session.add(quotation)
    db_session.commit()
    db_session.refresh(quotation)
    return quotation


@pytest.fixture(scope="function")
def test_invoice(db_session, test_client_record):
    """100 + %18 vergi = 118 tutarinda taslak fatura."""
    invoice = Invoice(
        invoice_number="INV-1700000000000",
        **_document_fields(test_client_record.id),
    )
    db_session.add(invoice)
    db_session.commit()
    db_session.refresh(invoice)
    return invoice
