from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Tenant(SoftDeleteMixin, Base):
    """Арендатор (физическое или юридическое лицо)"""
    __tablename__ = "tenants"

    name = Column(String(255), nullable=False, index=True)
    internal_code = Column(String(50), nullable=True, unique=True)
    occupation = Column(String(255), nullable=True)
    marital_status = Column(String(50), nullable=True)
    cpf = Column(String(14), nullable=True, index=True)
    cnpj = Column(String(18), nullable=True, index=True)

    addresses = relationship(
        "TenantAddress",
        primaryjoin="and_(TenantAddress.tenant_id == Tenant.id, TenantAddress.deleted_at.is_(None))",
        order_by="TenantAddress.created_at",
        viewonly=True,
    )
    contacts = relationship(
        "TenantContact",
        primaryjoin="and_(TenantContact.tenant_id == Tenant.id, TenantContact.deleted_at.is_(None))",
        order_by="TenantContact.created_at",
        viewonly=True,
    )
    leases = relationship(
        "Lease",
        primaryjoin="and_(Lease.tenant_id == Tenant.id, Lease.deleted_at.is_(None))",
        viewonly=True,
    )

    def __repr__(self):
        return f"<Tenant(id={self.id}, name={self.name})>"


class TenantAddress(SoftDeleteMixin, Base):
    __tablename__ = "tenant_addresses"

    tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=False, index=True)
    address_id = Column(String(36), ForeignKey("addresses.id"), nullable=False)

    address = relationship("Address")


class TenantContact(SoftDeleteMixin, Base):
    __tablename__ = "tenant_contacts"

    tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)

    contact = relationship("Contact")
