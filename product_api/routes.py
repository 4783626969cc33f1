# product_api/routes.py
from fastapi import APIRouter, Request

from .logic import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, update_product_logic,
    welcome_logic,
)
from .pipeline import (
    Pipeline, build_context, log_request, require_api_key,
    validate_product, validate_product_update,
)

# ---------------------------
# Pipelines: stages run in order, then the handler
# ---------------------------
WELCOME = Pipeline([log_request], welcome_logic)
LIST_PRODUCTS = Pipeline([log_request], list_products_logic)
PRODUCT_STATS = Pipeline([log_request], product_stats_logic)
GET_PRODUCT = Pipeline([log_request], get_product_logic)
CREATE_PRODUCT = Pipeline([log_request, require_api_key, validate_product], create_product_logic)
UPDATE_PRODUCT = Pipeline([log_request, require_api_key, validate_product_update], update_product_logic)
DELETE_PRODUCT = Pipeline([log_request, require_api_key], delete_product_logic)

router = APIRouter()


@router.get("/")
async def welcome(request: Request):
    return WELCOME.run(await build_context(request))


@router.get("/api/products")
async def list_products(request: Request):
    return LIST_PRODUCTS.run(await build_context(request))


# Registered before /api/products/{product_id} so "stats" is never read as an id.
@router.get("/api/products/stats")
async def product_stats(request: Request):
    return PRODUCT_STATS.run(await build_context(request))


@router.get("/api/products/{product_id}")
async def get_product(request: Request):
    return GET_PRODUCT.run(await build_context(request))


@router.post("/api/products", status_code=201)
async def create_product(request: Request):
    return CREATE_PRODUCT.run(await build_context(request))


@router.put("/api/products/{product_id}")
async def update_product(request: Request):
    return UPDATE_PRODUCT.run(await build_context(request))


@router.delete("/api/products/{product_id}")
async def delete_product(request: Request):
    return DELETE_PRODUCT.run(await build_context(request))
