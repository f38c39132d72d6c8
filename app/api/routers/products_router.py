import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import products as products_crud
from app.crud.products import ProductNotFound
from app.db.base import get_db
from app.schemas.product import (CategoryRead, CodeAssignment, CodeAssignmentResult,
                                 ProductsByCategory)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/productos", response_model=List[CategoryRead])
async def list_products(db: AsyncSession = Depends(get_db)):
    """
    Every category with its products, cheapest first.
    """
    return await products_crud.list_categories_with_products(db)

@router.get("/productos/sin-codigo", response_model=ProductsByCategory)
async def list_products_without_code(db: AsyncSession = Depends(get_db)):
    """
    Products that still have no scan code, grouped by category.
    """
    try:
        return await products_crud.list_products_without_codes(db)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products without codes: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

@router.post("/agregar_codigo", response_model=CodeAssignmentResult)
async def add_code(
    assignment: CodeAssignment,
    db: AsyncSession = Depends(get_db)
):
    """
    Attach a scan code to a product.
    """
    if not assignment.code or assignment.product in (None, ""):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: code and product"
        )

    try:
        product_id = int(assignment.product)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="product must be a numeric id")

    try:
        codes = await products_crud.add_product_code(db, product_id, assignment.code)
    except ProductNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    except SQLAlchemyError as e:
        logger.error(f"Error adding code to product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return CodeAssignmentResult(message="Code added", codes=codes)
