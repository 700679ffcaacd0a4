from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Agency(SoftDeleteMixin, Base):
    """Агентство недвижимости, которое ведет объекты"""
    __tablename__ = "agencies"

    trade_name = Column(String(255), nullable=False, index=True)
    legal_name = Column(String(255), nullable=False)
    cnpj = Column(String(18), nullable=False, index=True)
    state_registration = Column(String(50), nullable=True)
    municipal_registration = Column(String(50), nullable=True)
    license_number = Column(String(50), nullable=True)

    addresses = relationship(
        "AgencyAddress",
        primaryjoin="and_(AgencyAddress.agency_id == Agency.id, AgencyAddress.deleted_at.is_(None))",
        order_by="AgencyAddress.created_at",
        viewonly=True,
    )
    contacts = relationship(
        "AgencyContact",
        primaryjoin="and_(AgencyContact.agency_id == Agency.id, AgencyContact.deleted_at.is_(None))",
        order_by="AgencyContact.created_at",
        viewonly=True,
    )
    properties = relationship(
        "Property",
        primaryjoin="and_(Property.agency_id == Agency.id, Property.deleted_at.is_(None))",
        viewonly=True,
    )

    def __repr__(self):
        return f"<Agency(id={self.id}, trade_name={self.trade_name})>"


class AgencyAddress(SoftDeleteMixin, Base):
    __tablename__ = "agency_addresses"

    agency_id = Column(String(36), ForeignKey("agencies.id"), nullable=False, index=True)
    address_id = Column(String(36), ForeignKey("addresses.id"), nullable=False)

    address = relationship("Address")


class AgencyContact(SoftDeleteMixin, Base):
    __tablename__ = "agency_contacts"

    agency_id = Column(String(36), ForeignKey("agencies.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)

    contact = relationship("Contact")
