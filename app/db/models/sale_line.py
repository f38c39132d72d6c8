from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.db.base import Base


class SaleLine(Base):
    __tablename__ = 'productos_vendidos'

    id = Column(Integer, primary_key=True, autoincrement=True)
    sale_id = Column('venta_id', Integer, ForeignKey('ventas.id_venta'), nullable=False, index=True)
    product_id = Column('producto_id', Integer, ForeignKey('productos.id_producto'), nullable=False, index=True)
    quantity = Column('cantidad', Integer, nullable=False)

    sale = relationship("Sale", back_populates="lines")
    product = relationship("Product", back_populates="sale_lines")
