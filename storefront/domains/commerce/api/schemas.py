"""
Commerce API Schemas

Pydantic schemas for request validation and response serialization.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from storefront.domains.commerce.domain.value_objects import Role


# Stores


class StoreRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=32)


class StoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int
    created_at: datetime


# Memberships


class MembershipCreateRequest(BaseModel):
    """Invite a registered user by email."""

    email: EmailStr
    role: Role


class MembershipUpdateRequest(BaseModel):
    role: Role


class MembershipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    user_id: int
    name: str
    email: str
    role: Role


# Catalog


class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    name: str


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    sku: str = Field(..., min_length=1, max_length=128)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    stock: int = Field(0, ge=0)


class ProductUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=64)
    sku: str | None = Field(None, min_length=1, max_length=128)
    price: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    stock: int | None = Field(None, ge=0)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    name: str
    sku: str
    price: Decimal
    stock: int


# Cart


class CartAddRequest(BaseModel):
    product_id: int
    quantity: int = Field(..., ge=1)


class CartUpdateRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CartLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    product_id: int
    name: str
    sku: str
    price: Decimal
    quantity: int
    line_total: Decimal


# Orders


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int | None
    name: str
    sku: str
    price: Decimal
    quantity: int
    line_total: Decimal


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: int
    store_name: str
    purchaser_name: str
    created_at: datetime
    total: Decimal
    items: list[OrderItemResponse]


class PagingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_page: int
    size: int
    total_page: int


class OrderListResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    orders: list[OrderResponse]
    paging: PagingResponse
