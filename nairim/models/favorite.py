from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Favorite(SoftDeleteMixin, Base):
    """Объект в избранном пользователя. Живая пара (user_id, property_id) одна"""
    __tablename__ = "favorites"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)

    user = relationship("User")
    property = relationship("Property")

    def __repr__(self):
        return f"<Favorite(id={self.id}, user_id={self.user_id}, property_id={self.property_id})>"
