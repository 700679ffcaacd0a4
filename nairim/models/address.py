from sqlalchemy import Column, String

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Address(SoftDeleteMixin, Base):
    """
    Адрес. Общая таблица, к которой объекты, собственники,
    арендаторы и агентства привязываются через связующие таблицы
    """
    __tablename__ = "addresses"

    zip_code = Column(String(20), nullable=True)
    street = Column(String(255), nullable=True)
    number = Column(String(20), nullable=True)
    complement = Column(String(255), nullable=True)
    block = Column(String(50), nullable=True)
    lot = Column(String(50), nullable=True)
    district = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    country = Column(String(100), nullable=False, default="Brasil", server_default="Brasil")

    def __repr__(self):
        return f"<Address(id={self.id}, street={self.street}, city={self.city})>"


class Contact(SoftDeleteMixin, Base):
    """Контакт (имя контактного лица, телефоны, email)"""
    __tablename__ = "contacts"

    contact = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    cellphone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    whatsapp = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<Contact(id={self.id}, contact={self.contact}, email={self.email})>"
