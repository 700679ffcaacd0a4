import enum

from sqlalchemy import Column, String, Text, ForeignKey

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class DocumentType(str, enum.Enum):
    TITLE_DEED = "TITLE_DEED"
    REGISTRATION = "REGISTRATION"
    PROPERTY_RECORD = "PROPERTY_RECORD"
    IMAGE = "IMAGE"
    OTHER = "OTHER"


class Document(SoftDeleteMixin, Base):
    """Метаданные файла, прикрепленного к объекту (сам файл хранится вне БД)"""
    __tablename__ = "documents"

    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    file_path = Column(String(500), nullable=False)
    file_type = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    type = Column(String(30), nullable=False, default=DocumentType.OTHER.value)

    def __repr__(self):
        return f"<Document(id={self.id}, property_id={self.property_id}, type={self.type})>"
