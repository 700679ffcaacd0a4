"""Pytest configuration and fixtures."""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

import nairim.models  # noqa: F401
from nairim.database import Base
from nairim.models import (
    Address, Agency, Contact, Document, Lease, Owner, OwnerAddress, OwnerContact, Property,
    PropertyAddress, PropertyType, PropertyValue, Tenant, User,
)


@pytest.fixture
def engine(tmp_path):
    """SQLite в файле: загрузки дашборда идут из разных потоков."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'nairim.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


class Factory:
    """Создает записи и сразу коммитит, чтобы значения читались из БД."""

    def __init__(self, db: Session):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        return obj

    def property_type(self, description: str = "Apartamento", **kwargs) -> PropertyType:
        return self._save(PropertyType(description=description, **kwargs))

    def owner(self, name: str = "Owner", city: Optional[str] = None, email: Optional[str] = None, **kwargs) -> Owner:
        owner = self._save(Owner(name=name, **kwargs))
        if city:
            self._save(OwnerAddress(owner_id=owner.id, address=Address(city=city, state="SP")))
        if email:
            self._save(OwnerContact(owner_id=owner.id, contact=Contact(email=email)))
        return owner

    def tenant(self, name: str = "Tenant", **kwargs) -> Tenant:
        return self._save(Tenant(name=name, **kwargs))

    def agency(self, trade_name: str = "Agency", legal_name: str = "Agency Ltda", cnpj: str = "00.000.000/0001-00", **kwargs) -> Agency:
        return self._save(Agency(trade_name=trade_name, legal_name=legal_name, cnpj=cnpj, **kwargs))

    def property(
        self,
        owner: Owner,
        property_type: PropertyType,
        title: str = "Imóvel",
        rental_value=None,
        status: str = "AVAILABLE",
        purchase_value=None,
        sale_value=None,
        address: Optional[dict] = None,
        created_at: Optional[datetime] = None,
        **kwargs,
    ) -> Property:
        extra = {"created_at": created_at} if created_at else {}
        prop = self._save(Property(owner_id=owner.id, type_id=property_type.id, title=title, **extra, **kwargs))
        if rental_value is not None or purchase_value is not None or sale_value is not None:
            self._save(PropertyValue(
                property_id=prop.id,
                rental_value=Decimal(str(rental_value)) if rental_value is not None else None,
                purchase_value=Decimal(str(purchase_value)) if purchase_value is not None else None,
                sale_value=Decimal(str(sale_value)) if sale_value is not None else None,
                status=status,
            ))
        if address:
            self._save(PropertyAddress(property_id=prop.id, address=Address(**address)))
        return prop

    def document(self, prop: Property, doc_type: str = "OTHER") -> Document:
        return self._save(Document(property_id=prop.id, file_path=f"/files/{prop.id}/{doc_type}.pdf", type=doc_type))

    def lease(
        self,
        prop: Property,
        tenant: Tenant,
        contract_number: str,
        end_date: Optional[date] = None,
        start_date: date = date(2023, 1, 1),
        lease_type: Optional[PropertyType] = None,
    ) -> Lease:
        return self._save(Lease(
            property_id=prop.id,
            type_id=lease_type.id if lease_type else prop.type_id,
            owner_id=prop.owner_id,
            tenant_id=tenant.id,
            contract_number=contract_number,
            start_date=start_date,
            end_date=end_date,
            rent_amount=Decimal("1000.00"),
            rent_due_day=5,
        ))

    def user(self, name: str = "User", email: str = "user@example.com", **kwargs) -> User:
        return self._save(User(name=name, email=email, password="hash", **kwargs))


@pytest.fixture
def factory(db) -> Factory:
    return Factory(db)
