import enum

from sqlalchemy import Column, Integer, String, Float, Numeric, Boolean, Date, Text, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class PropertyStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"


class Property(SoftDeleteMixin, Base):
    """
    Объект недвижимости.
    Финансовые показатели хранятся снимками в PropertyValue
    """
    __tablename__ = "properties"

    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, index=True)
    type_id = Column(String(36), ForeignKey("property_types.id"), nullable=False, index=True)
    agency_id = Column(String(36), ForeignKey("agencies.id"), nullable=True, index=True)

    title = Column(String(255), nullable=False)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)
    half_bathrooms = Column(Integer, nullable=True)
    garage_spaces = Column(Integer, nullable=True)
    area_total = Column(Float, nullable=True)
    area_built = Column(Float, nullable=True)
    frontage = Column(Float, nullable=True)
    furnished = Column(Boolean, nullable=True)
    floor_number = Column(Integer, nullable=True)
    tax_registration = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)

    owner = relationship("Owner")
    type = relationship("PropertyType")
    agency = relationship("Agency")

    addresses = relationship(
        "PropertyAddress",
        primaryjoin="and_(PropertyAddress.property_id == Property.id, PropertyAddress.deleted_at.is_(None))",
        order_by="PropertyAddress.created_at",
        viewonly=True,
    )
    values = relationship(
        "PropertyValue",
        primaryjoin="and_(PropertyValue.property_id == Property.id, PropertyValue.deleted_at.is_(None))",
        order_by="PropertyValue.created_at.desc()",
        viewonly=True,
    )
    documents = relationship(
        "Document",
        primaryjoin="and_(Document.property_id == Property.id, Document.deleted_at.is_(None))",
        viewonly=True,
    )
    leases = relationship(
        "Lease",
        primaryjoin="and_(Lease.property_id == Property.id, Lease.deleted_at.is_(None))",
        order_by="Lease.end_date.desc()",
        viewonly=True,
    )

    @property
    def latest_value(self):
        """Актуальный снимок стоимости (самый свежий)"""
        return self.values[0] if self.values else None

    def __repr__(self):
        return f"<Property(id={self.id}, title={self.title})>"


class PropertyAddress(SoftDeleteMixin, Base):
    __tablename__ = "property_addresses"

    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    address_id = Column(String(36), ForeignKey("addresses.id"), nullable=False)

    address = relationship("Address")


class PropertyValue(SoftDeleteMixin, Base):
    """
    Снимок финансовых показателей объекта на дату.
    Записи только добавляются, актуальной считается последняя
    """
    __tablename__ = "property_values"

    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    reference_date = Column(Date, nullable=True)
    purchase_value = Column(Numeric(14, 2), nullable=True)
    rental_value = Column(Numeric(14, 2), nullable=True)
    condo_fee = Column(Numeric(14, 2), nullable=True)
    property_tax = Column(Numeric(14, 2), nullable=True)
    sale_value = Column(Numeric(14, 2), nullable=True)
    extra_charges = Column(Numeric(14, 2), nullable=True)
    sale_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=PropertyStatus.AVAILABLE.value)
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<PropertyValue(id={self.id}, property_id={self.property_id}, status={self.status})>"
