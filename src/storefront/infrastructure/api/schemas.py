"""Pydantic request/response schemas for the HTTP API.

These are external contracts — separate from the application DTOs.
Fields are snake_case in Python and camelCase on the wire.

Request fields are all optional at this level: a missing required field is
reported by the application layer as ``MissingFieldError`` so every
surface rejects it the same way.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from storefront.application.dto import (
    CategoryDTO,
    LineItemSpec,
    OrderDTO,
    ProductDTO,
    UserDTO,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CreateUserRequest(CamelModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class UpdateUserRequest(CamelModel):
    name: str | None = None
    email: str | None = None


class CategoryRequest(CamelModel):
    name: str | None = None


class ProductRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    price: float | str | None = None
    category_id: int | None = None


class LineItemSchema(CamelModel):
    product_id: int | None = None
    quantity: int | None = None

    def to_spec(self) -> LineItemSpec:
        return LineItemSpec(product_id=self.product_id, quantity=self.quantity)


class OrderRequest(CamelModel):
    user_id: int | None = None
    products: list[LineItemSchema] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "userId": 1,
                    "products": [
                        {"productId": 1, "quantity": 2},
                        {"productId": 2, "quantity": 3},
                    ],
                }
            ]
        }
    )

    def product_specs(self) -> list[LineItemSpec] | None:
        if self.products is None:
            return None
        return [item.to_spec() for item in self.products]


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class UserResponse(CamelModel):
    id: int
    name: str
    email: str

    @staticmethod
    def from_dto(dto: UserDTO) -> UserResponse:
        return UserResponse(id=dto.id, name=dto.name, email=dto.email)


class CategoryResponse(CamelModel):
    id: int
    name: str

    @staticmethod
    def from_dto(dto: CategoryDTO) -> CategoryResponse:
        return CategoryResponse(id=dto.id, name=dto.name)


class ProductResponse(CamelModel):
    id: int
    name: str
    description: str
    price: float
    category_id: int

    @staticmethod
    def from_dto(dto: ProductDTO) -> ProductResponse:
        return ProductResponse(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=float(dto.price),
            category_id=dto.category_id,
        )


class LineItemResponse(CamelModel):
    product_id: int
    quantity: int


class OrderResponse(CamelModel):
    id: int
    user_id: int
    products: list[LineItemResponse]
    total: float

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderResponse:
        return OrderResponse(
            id=dto.id,
            user_id=dto.user_id,
            products=[
                LineItemResponse(product_id=i.product_id, quantity=i.quantity)
                for i in dto.products
            ],
            total=float(dto.total),
        )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
