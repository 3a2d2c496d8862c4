"""Product inventory endpoints."""

from fastapi import APIRouter, Depends

from salon_admin.api.v1.endpoints._crud import delete_or_404, get_or_404
from salon_admin.core.deps import get_store
from salon_admin.schemas.common import DataResponse, MessageResponse
from salon_admin.schemas.product import ProductCreate, ProductOut, ProductUpdate
from salon_admin.services.stats import low_stock_products
from salon_admin.services.store import EntityStore

router = APIRouter()


@router.get("", response_model=DataResponse[list[ProductOut]])
async def list_products(store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.products.list())


@router.get("/low-stock", response_model=DataResponse[list[ProductOut]])
async def list_low_stock(store: EntityStore = Depends(get_store)):
    """Products that are out of stock or at/below their minimum stock."""
    return DataResponse(data=low_stock_products(await store.products.list()))


@router.post("", response_model=DataResponse[ProductOut], status_code=201)
async def create_product(product: ProductCreate, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.products.create(product))


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(product_id: int, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await get_or_404(store.products, product_id))


@router.put("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(product_id: int, changes: ProductUpdate, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.products.update(product_id, changes))


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, store: EntityStore = Depends(get_store)):
    await delete_or_404(store.products, product_id)
    return MessageResponse(message="Product deleted")
