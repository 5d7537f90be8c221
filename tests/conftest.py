"""Fixtures compartidos: base SQLite en memoria y un cliente HTTP sobre la app."""

import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.main import app

API = "/api/v1"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class Seeder:
    """Crea entidades vía la API, resolviendo las dependencias que falten."""

    def __init__(self, client):
        self.client = client
        self._counter = itertools.count(1)

    def post(self, group, payload):
        response = self.client.post(f"{API}/{group}/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    def next(self):
        return next(self._counter)

    def _ensure(self, payload, field, create):
        # Solo se crea la dependencia si el test no la fijó
        if field not in payload:
            payload[field] = create()["id"]

    # ==================== PAYLOADS ====================

    def locality_payload(self, **overrides):
        payload = {
            "locality_name": f"Locality {self.next()}",
            "province_name": "Buenos Aires",
            "country_name": "Argentina",
        }
        payload.update(overrides)
        return payload

    def seller_payload(self, **overrides):
        payload = {
            "cid": self.next(),
            "company_name": "Nike",
            "address": "Avenida Paulista, 202",
            "telephone": "13997780890",
        }
        payload.update(overrides)
        self._ensure(payload, "locality_id", self.locality)
        return payload

    def carrier_payload(self, **overrides):
        payload = {
            "cid": f"CID{self.next()}",
            "company_name": "Transportes Sul",
            "address": "Rua das Flores, 45",
            "telephone": "1133224455",
        }
        payload.update(overrides)
        self._ensure(payload, "locality_id", self.locality)
        return payload

    def warehouse_payload(self, **overrides):
        payload = {
            "warehouse_code": f"WH{self.next()}",
            "address": "Rua A, 10",
            "telephone": "1140028922",
            "minimum_capacity": 10,
            "minimum_temperature": -5.0,
        }
        payload.update(overrides)
        self._ensure(payload, "locality_id", self.locality)
        return payload

    def section_payload(self, **overrides):
        payload = {
            "section_number": self.next(),
            "current_temperature": 2.0,
            "minimum_temperature": -10.0,
            "current_capacity": 10,
            "minimum_capacity": 5,
            "maximum_capacity": 100,
            "product_type_id": 1,
        }
        payload.update(overrides)
        self._ensure(payload, "warehouse_id", self.warehouse)
        return payload

    def product_payload(self, **overrides):
        payload = {
            "product_code": f"P{self.next()}",
            "description": "Yogurt",
            "width": 1.5,
            "height": 2.0,
            "length": 3.0,
            "net_weight": 0.5,
            "expiration_rate": 0.1,
            "recommended_freezing_temperature": -18.0,
            "freezing_rate": 0.2,
            "product_type_id": 1,
        }
        payload.update(overrides)
        self._ensure(payload, "seller_id", self.seller)
        return payload

    def product_record_payload(self, **overrides):
        payload = {
            "last_update_date": "2024-05-01T10:00:00",
            "purchase_price": 10.5,
            "sale_price": 15.0,
        }
        payload.update(overrides)
        self._ensure(payload, "product_id", self.product)
        return payload

    def product_batch_payload(self, **overrides):
        payload = {
            "batch_number": self.next(),
            "current_quantity": 50,
            "current_temperature": 2.0,
            "due_date": "2024-12-31",
            "initial_quantity": 100,
            "manufacturing_date": "2024-01-01",
            "manufacturing_hour": 10,
            "minimum_temperature": -5.0,
        }
        payload.update(overrides)
        self._ensure(payload, "product_id", self.product)
        self._ensure(payload, "section_id", self.section)
        return payload

    def employee_payload(self, **overrides):
        payload = {
            "card_number_id": f"EMP{self.next()}",
            "first_name": "Ana",
            "last_name": "Souza",
        }
        payload.update(overrides)
        self._ensure(payload, "warehouse_id", self.warehouse)
        return payload

    def inbound_order_payload(self, **overrides):
        payload = {
            "order_date": "2024-06-01",
            "order_number": f"IO{self.next()}",
        }
        payload.update(overrides)
        self._ensure(payload, "employee_id", self.employee)
        self._ensure(payload, "product_batch_id", self.product_batch)
        self._ensure(payload, "warehouse_id", self.warehouse)
        return payload

    def buyer_payload(self, **overrides):
        payload = {
            "card_number_id": f"B{self.next()}",
            "first_name": "Carlos",
            "last_name": "Lima",
        }
        payload.update(overrides)
        return payload

    def purchase_order_payload(self, **overrides):
        payload = {
            "order_number": f"PO{self.next()}",
            "order_date": "2024-06-02",
            "tracking_code": "TRK123",
            "order_status_id": 1,
        }
        payload.update(overrides)
        self._ensure(payload, "buyer_id", self.buyer)
        self._ensure(payload, "product_record_id", self.product_record)
        return payload

    # ==================== CREACIÓN ====================

    def locality(self, **overrides):
        return self.post("localities", self.locality_payload(**overrides))

    def seller(self, **overrides):
        return self.post("sellers", self.seller_payload(**overrides))

    def carrier(self, **overrides):
        return self.post("carriers", self.carrier_payload(**overrides))

    def warehouse(self, **overrides):
        return self.post("warehouses", self.warehouse_payload(**overrides))

    def section(self, **overrides):
        return self.post("sections", self.section_payload(**overrides))

    def product(self, **overrides):
        return self.post("products", self.product_payload(**overrides))

    def product_record(self, **overrides):
        return self.post("productRecords", self.product_record_payload(**overrides))

    def product_batch(self, **overrides):
        return self.post("productBatches", self.product_batch_payload(**overrides))

    def employee(self, **overrides):
        return self.post("employees", self.employee_payload(**overrides))

    def inbound_order(self, **overrides):
        return self.post("inboundOrders", self.inbound_order_payload(**overrides))

    def buyer(self, **overrides):
        return self.post("buyers", self.buyer_payload(**overrides))

    def purchase_order(self, **overrides):
        return self.post("purchaseOrders", self.purchase_order_payload(**overrides))


@pytest.fixture
def seed(client):
    return Seeder(client)
