"""Servicios sobre una sesión directa: merge parcial, carreras y reportes."""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from app.modules.buyers import BuyerService, BuyerRepository
from app.modules.buyers.schemas import BuyerCreate, BuyerUpdate
from app.modules.buyers.service import BuyerCardNumberAlreadyExistsError, BuyerNotFoundError
from app.modules.localities import LocalityService
from app.modules.localities.schemas import LocalityCreate
from app.modules.sellers import SellerService, SellerRepository
from app.modules.sellers.schemas import SellerCreate
from app.modules.sellers.service import SellerCidAlreadyExistsError


def make_buyer(db, card="402323"):
    return BuyerService(db).create(
        BuyerCreate(card_number_id=card, first_name="Ana", last_name="Souza")
    )


class TestPartialUpdate:

    def test_only_changed_fields_are_written(self, db):
        buyer = make_buyer(db)
        updated = BuyerService(db).update(buyer.id, BuyerUpdate(last_name="Pereira"))
        assert updated.last_name == "Pereira"
        assert updated.first_name == "Ana"
        assert updated.card_number_id == "402323"

    def test_explicit_none_keeps_value(self, db):
        buyer = make_buyer(db)
        updated = BuyerService(db).update(buyer.id, BuyerUpdate(first_name=None))
        assert updated == buyer

    def test_empty_update_is_noop(self, db):
        buyer = make_buyer(db)
        assert BuyerService(db).update(buyer.id, BuyerUpdate()) == buyer

    def test_update_missing_raises(self, db):
        with pytest.raises(BuyerNotFoundError):
            BuyerService(db).update(99, BuyerUpdate(first_name="X"))


class TestBusinessKeys:

    def test_duplicate_key_raises(self, db):
        make_buyer(db)
        with pytest.raises(BuyerCardNumberAlreadyExistsError):
            make_buyer(db)

    def test_unique_constraint_catches_race(self, db, monkeypatch):
        """Si la pre-verificación no ve al otro registro, la restricción única responde"""
        locality = LocalityService(db).create(
            LocalityCreate(locality_name="Palermo", province_name="BA", country_name="AR")
        )
        payload = SellerCreate(
            cid=10, company_name="Nike", address="Calle 1",
            telephone="123", locality_id=locality.id,
        )
        SellerService(db).create(payload)

        monkeypatch.setattr(SellerRepository, "exists_by", lambda *args, **kwargs: False)

        with pytest.raises(SellerCidAlreadyExistsError):
            SellerService(db).create(payload)

        # La sesión queda utilizable tras el rollback
        assert len(SellerService(db).get_all()) == 1


class TestReports:

    def test_single_row_when_filtered(self, db):
        buyer = make_buyer(db)
        report = BuyerService(db).report_purchase_orders(buyer.id)
        assert report.purchase_orders_count == 0
        assert report.card_number_id == "402323"

    def test_filtered_missing_raises(self, db):
        with pytest.raises(BuyerNotFoundError):
            BuyerService(db).report_purchase_orders(5)

    def test_all_rows_without_filter(self, db):
        make_buyer(db, "A")
        make_buyer(db, "B")
        reports = BuyerService(db).report_purchase_orders()
        assert [r.card_number_id for r in reports] == ["A", "B"]


class TestDelete:

    def test_delete_missing_raises(self, db):
        with pytest.raises(BuyerNotFoundError):
            BuyerService(db).delete(1)

    def test_delete_removes_row(self, db):
        buyer = make_buyer(db)
        BuyerService(db).delete(buyer.id)
        assert BuyerService(db).get_all() == []


class PgUniqueViolation(Exception):
    pgcode = "23505"


class PgForeignKeyViolation(Exception):
    pgcode = "23503"


def failing_create(orig):
    def create(self, data):
        raise IntegrityError("INSERT INTO buyers", {}, orig)
    return create


class TestIntegrityErrors:
    """Solo las violaciones de unicidad se reportan como duplicado"""

    def test_postgres_unique_violation_is_already_exists(self, db, monkeypatch):
        monkeypatch.setattr(BuyerRepository, "create", failing_create(PgUniqueViolation("duplicate key")))
        with pytest.raises(BuyerCardNumberAlreadyExistsError):
            make_buyer(db)

    def test_postgres_foreign_key_violation_propagates(self, db, monkeypatch):
        monkeypatch.setattr(BuyerRepository, "create", failing_create(PgForeignKeyViolation("fk")))
        with pytest.raises(IntegrityError):
            make_buyer(db)

    def test_sqlite_foreign_key_violation_propagates(self, db, monkeypatch):
        orig = sqlite3.IntegrityError("FOREIGN KEY constraint failed")
        monkeypatch.setattr(BuyerRepository, "create", failing_create(orig))
        with pytest.raises(IntegrityError):
            make_buyer(db)

    def test_foreign_key_violation_is_500_over_http(self, client, seed, monkeypatch):
        monkeypatch.setattr(BuyerRepository, "create", failing_create(PgForeignKeyViolation("fk")))
        response = client.post("/api/v1/buyers/", json=seed.buyer_payload())
        assert response.status_code == 500
        assert response.json()["error"] == "internal server error"
