from typing import Any, Dict

from .errors import AppError
from .pipeline import Outcome, RequestContext
from .query import ListQuery, category_stats, evaluate

# Route handlers.  Each one runs after its route's stages have passed and
# returns (status, body); failures are raised as AppError.

WELCOME = "Welcome to the Product API! Use /api/products to interact with resources."


def welcome_logic(ctx: RequestContext) -> Outcome:
    return 200, WELCOME


def list_products_logic(ctx: RequestContext) -> Outcome:
    query = ListQuery.from_params(ctx.query)
    return 200, evaluate(ctx.store.find_all(), query)


def product_stats_logic(ctx: RequestContext) -> Outcome:
    return 200, category_stats(ctx.store.find_all())


def get_product_logic(ctx: RequestContext) -> Outcome:
    product = ctx.store.find_by_id(ctx.path_params["product_id"])
    if product is None:
        raise AppError.not_found("Product not found")
    return 200, product.to_json()


def create_product_logic(ctx: RequestContext) -> Outcome:
    product = ctx.store.insert(ctx.payload.model_dump())
    return 201, product.to_json()


def update_product_logic(ctx: RequestContext) -> Outcome:
    changes: Dict[str, Any] = ctx.payload.changes()
    product = ctx.store.update(ctx.path_params["product_id"], changes)
    if product is None:
        raise AppError.not_found("Product not found")
    return 200, product.to_json()


def delete_product_logic(ctx: RequestContext) -> Outcome:
    removed = ctx.store.delete(ctx.path_params["product_id"])
    if removed is None:
        raise AppError.not_found("Product not found")
    return 200, {"deleted": removed.to_json()}
