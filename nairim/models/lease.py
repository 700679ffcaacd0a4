from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship

from nairim.database import Base
from nairim.models.mixins import SoftDeleteMixin


class Lease(SoftDeleteMixin, Base):
    """Договор аренды: объект, собственник, арендатор и условия"""
    __tablename__ = "leases"

    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False, index=True)
    type_id = Column(String(36), ForeignKey("property_types.id"), nullable=False, index=True)
    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, index=True)
    tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=False, index=True)

    contract_number = Column(String(100), nullable=False, unique=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)

    rent_amount = Column(Numeric(14, 2), nullable=False)
    condo_fee = Column(Numeric(14, 2), nullable=True)
    property_tax = Column(Numeric(14, 2), nullable=True)
    extra_charges = Column(Numeric(14, 2), nullable=True)
    commission_amount = Column(Numeric(14, 2), nullable=True)

    rent_due_day = Column(Integer, nullable=False)
    tax_due_day = Column(Integer, nullable=True)
    condo_due_day = Column(Integer, nullable=True)

    property = relationship("Property")
    type = relationship("PropertyType")
    owner = relationship("Owner")
    tenant = relationship("Tenant")

    def __repr__(self):
        return f"<Lease(id={self.id}, contract_number={self.contract_number})>"
