"""FastAPI routes for users, categories, products and orders.

Routes only translate between wire schemas and application handlers.
Domain errors propagate to the exception handlers registered in
``storefront.infrastructure.api.app``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.application.add_category import AddCategoryHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_category import DeleteCategoryHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.delete_user import DeleteUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.show_category import ListCategoriesHandler, ShowCategoryHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.show_product import ListProductsHandler, ShowProductHandler
from storefront.application.show_user import ListUsersHandler, ShowUserHandler
from storefront.application.update_category import UpdateCategoryHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.api.dependencies import (
    get_category_repo,
    get_order_repo,
    get_product_repo,
    get_user_repo,
)
from storefront.infrastructure.api.schemas import (
    CategoryRequest,
    CategoryResponse,
    CreateUserRequest,
    ErrorResponse,
    MessageResponse,
    OrderRequest,
    OrderResponse,
    ProductRequest,
    ProductResponse,
    UpdateUserRequest,
    UserResponse,
)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing field or unknown reference"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}

# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(
    prefix="/users", tags=["users"], responses=_ERROR_RESPONSES
)


@user_router.get("", response_model=list[UserResponse])
def list_users(users: UserRepository = Depends(get_user_repo)) -> list[UserResponse]:
    return [UserResponse.from_dto(dto) for dto in ListUsersHandler(users).handle()]


@user_router.post("", status_code=201, response_model=UserResponse)
def create_user(
    body: CreateUserRequest,
    users: UserRepository = Depends(get_user_repo),
) -> UserResponse:
    dto = RegisterUserHandler(users).handle(
        name=body.name, email=body.email, password=body.password
    )
    return UserResponse.from_dto(dto)


@user_router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: UserRepository = Depends(get_user_repo)) -> UserResponse:
    return UserResponse.from_dto(ShowUserHandler(users).handle(user_id))


@user_router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UpdateUserRequest,
    users: UserRepository = Depends(get_user_repo),
) -> UserResponse:
    dto = UpdateUserHandler(users).handle(user_id, name=body.name, email=body.email)
    return UserResponse.from_dto(dto)


@user_router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, users: UserRepository = Depends(get_user_repo)) -> MessageResponse:
    DeleteUserHandler(users).handle(user_id)
    return MessageResponse(message="User deleted successfully")


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(
    prefix="/categories", tags=["categories"], responses=_ERROR_RESPONSES
)


@category_router.get("", response_model=list[CategoryResponse])
def list_categories(
    categories: CategoryRepository = Depends(get_category_repo),
) -> list[CategoryResponse]:
    return [CategoryResponse.from_dto(dto) for dto in ListCategoriesHandler(categories).handle()]


@category_router.post("", status_code=201, response_model=CategoryResponse)
def create_category(
    body: CategoryRequest,
    categories: CategoryRepository = Depends(get_category_repo),
) -> CategoryResponse:
    return CategoryResponse.from_dto(AddCategoryHandler(categories).handle(body.name))


@category_router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    categories: CategoryRepository = Depends(get_category_repo),
) -> CategoryResponse:
    return CategoryResponse.from_dto(ShowCategoryHandler(categories).handle(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryRequest,
    categories: CategoryRepository = Depends(get_category_repo),
) -> CategoryResponse:
    dto = UpdateCategoryHandler(categories).handle(category_id, name=body.name)
    return CategoryResponse.from_dto(dto)


@category_router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    categories: CategoryRepository = Depends(get_category_repo),
) -> MessageResponse:
    DeleteCategoryHandler(categories).handle(category_id)
    return MessageResponse(message="Category deleted successfully")


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(
    prefix="/products", tags=["products"], responses=_ERROR_RESPONSES
)


@product_router.get("", response_model=list[ProductResponse])
def list_products(
    category_id: int | None = Query(default=None, alias="categoryId"),
    products: ProductRepository = Depends(get_product_repo),
) -> list[ProductResponse]:
    dtos = ListProductsHandler(products).handle(category_id=category_id)
    return [ProductResponse.from_dto(dto) for dto in dtos]


@product_router.post("", status_code=201, response_model=ProductResponse)
def create_product(
    body: ProductRequest,
    products: ProductRepository = Depends(get_product_repo),
    categories: CategoryRepository = Depends(get_category_repo),
) -> ProductResponse:
    dto = AddProductHandler(products, categories).handle(
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
    )
    return ProductResponse.from_dto(dto)


@product_router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    products: ProductRepository = Depends(get_product_repo),
) -> ProductResponse:
    return ProductResponse.from_dto(ShowProductHandler(products).handle(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    body: ProductRequest,
    products: ProductRepository = Depends(get_product_repo),
    categories: CategoryRepository = Depends(get_category_repo),
) -> ProductResponse:
    dto = UpdateProductHandler(products, categories).handle(
        product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
    )
    return ProductResponse.from_dto(dto)


@product_router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    products: ProductRepository = Depends(get_product_repo),
) -> MessageResponse:
    DeleteProductHandler(products).handle(product_id)
    return MessageResponse(message="Product deleted successfully")


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(
    prefix="/orders", tags=["orders"], responses=_ERROR_RESPONSES
)


@order_router.get("", response_model=list[OrderResponse])
def list_orders(orders: OrderRepository = Depends(get_order_repo)) -> list[OrderResponse]:
    return [OrderResponse.from_dto(dto) for dto in ListOrdersHandler(orders).handle()]


@order_router.post("", status_code=201, response_model=OrderResponse)
def create_order(
    body: OrderRequest,
    orders: OrderRepository = Depends(get_order_repo),
    users: UserRepository = Depends(get_user_repo),
    products: ProductRepository = Depends(get_product_repo),
) -> OrderResponse:
    dto = CreateOrderHandler(orders, users, products).handle(
        user_id=body.user_id, products=body.product_specs()
    )
    return OrderResponse.from_dto(dto)


@order_router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, orders: OrderRepository = Depends(get_order_repo)) -> OrderResponse:
    return OrderResponse.from_dto(ShowOrderHandler(orders).handle(order_id))


@order_router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    body: OrderRequest,
    orders: OrderRepository = Depends(get_order_repo),
    users: UserRepository = Depends(get_user_repo),
    products: ProductRepository = Depends(get_product_repo),
) -> OrderResponse:
    dto = UpdateOrderHandler(orders, users, products).handle(
        order_id, user_id=body.user_id, products=body.product_specs()
    )
    return OrderResponse.from_dto(dto)


@order_router.delete("/{order_id}", response_model=MessageResponse)
def delete_order(order_id: int, orders: OrderRepository = Depends(get_order_repo)) -> MessageResponse:
    DeleteOrderHandler(orders).handle(order_id)
    return MessageResponse(message="Order deleted successfully")
