import enum

from sqlalchemy import Column, String, Date

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Role(str, enum.Enum):
    DEFAULT = "DEFAULT"
    ADMIN = "ADMIN"


class User(SoftDeleteMixin, Base):
    """Пользователь системы. Хеш пароля формирует модуль аутентификации"""
    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    birth_date = Column(Date, nullable=True)
    gender = Column(String(10), nullable=True)
    role = Column(String(10), nullable=False, default=Role.DEFAULT.value)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
