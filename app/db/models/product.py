from sqlalchemy import Column, ForeignKey, Integer, Numeric, Text, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship

from app.db.base import Base


class Product(Base):
    __tablename__ = 'productos'

    id = Column('id_producto', Integer, primary_key=True, autoincrement=True)
    name = Column('nombre', Text, nullable=False)
    sale_price = Column('precio_venta', Numeric(10, 2), nullable=False)
    # 0 means the purchase price was never recorded
    cost_price = Column('precio_compra', Numeric(10, 2), nullable=False, default=0, server_default=text('0'))
    codes = Column('codigos', ARRAY(Text), nullable=False, default=list, server_default=text("'{}'"))
    category_id = Column('categoria_id', Integer, ForeignKey('categorias.id_categoria'), nullable=False)

    category = relationship("Category", back_populates="products")
    sale_lines = relationship("SaleLine", back_populates="product")

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name!r})>"
