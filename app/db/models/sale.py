from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class Sale(Base):
    __tablename__ = 'ventas'

    id = Column('id_venta', Integer, primary_key=True, autoincrement=True)
    # Store-local "MM/DD/YYYY, HH:MM:SS", see app.services.analytics.date_normalizer
    sale_date = Column('fecha_venta', Text, nullable=False)

    lines = relationship("SaleLine", back_populates="sale", cascade="all, delete-orphan")
