from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class PropertyType(SoftDeleteMixin, Base):
    """Тип объекта недвижимости (квартира, дом, офис...)"""
    __tablename__ = "property_types"

    description = Column(String(255), nullable=False, index=True)

    properties = relationship(
        "Property",
        primaryjoin="and_(Property.type_id == PropertyType.id, Property.deleted_at.is_(None))",
        viewonly=True,
    )

    def __repr__(self):
        return f"<PropertyType(id={self.id}, description={self.description})>"
