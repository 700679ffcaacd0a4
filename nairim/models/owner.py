from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Owner(SoftDeleteMixin, Base):
    """Собственник недвижимости (физическое или юридическое лицо)"""
    __tablename__ = "owners"

    name = Column(String(255), nullable=False, index=True)
    internal_code = Column(String(50), nullable=True, unique=True)
    occupation = Column(String(255), nullable=True)
    marital_status = Column(String(50), nullable=True)
    cpf = Column(String(14), nullable=True, index=True)
    cnpj = Column(String(18), nullable=True, index=True)

    addresses = relationship(
        "OwnerAddress",
        primaryjoin="and_(OwnerAddress.owner_id == Owner.id, OwnerAddress.deleted_at.is_(None))",
        order_by="OwnerAddress.created_at",
        viewonly=True,
    )
    contacts = relationship(
        "OwnerContact",
        primaryjoin="and_(OwnerContact.owner_id == Owner.id, OwnerContact.deleted_at.is_(None))",
        order_by="OwnerContact.created_at",
        viewonly=True,
    )
    properties = relationship(
        "Property",
        primaryjoin="and_(Property.owner_id == Owner.id, Property.deleted_at.is_(None))",
        viewonly=True,
    )

    def __repr__(self):
        return f"<Owner(id={self.id}, name={self.name})>"


class OwnerAddress(SoftDeleteMixin, Base):
    __tablename__ = "owner_addresses"

    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, index=True)
    address_id = Column(String(36), ForeignKey("addresses.id"), nullable=False)

    address = relationship("Address")


class OwnerContact(SoftDeleteMixin, Base):
    __tablename__ = "owner_contacts"

    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)

    contact = relationship("Contact")
