from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class Category(Base):
    __tablename__ = 'categorias'

    id = Column('id_categoria', Integer, primary_key=True, autoincrement=True)
    name = Column('nombre', Text, nullable=False)

    products = relationship("Product", back_populates="category", order_by="Product.sale_price")
