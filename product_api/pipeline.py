"""
Per-route request pipeline.

A route is an ordered list of stages followed by a handler.  Each stage
gets the request context and returns ``None`` to continue or an
``AppError`` to stop; a stage may also raise one, as the validation
stages do when pydantic rejects the body.  The driver in ``Pipeline.run`` walks the stages,
calls the handler, and funnels every failure (returned or raised) into
``render_error``.  Stages and handlers never build error responses
themselves.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .auth import authenticate, read_api_key
from .config import Settings
from .database import ProductStore
from .errors import AppError, classify, render_error
from .validation import validate_create, validate_update

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass
class RequestContext:
    method: str
    path: str
    target: str
    headers: Mapping[str, str]
    query: Mapping[str, str]
    path_params: Dict[str, str]
    raw_body: bytes
    settings: Settings
    store: ProductStore
    _json: Any = field(default=_UNSET, repr=False)
    # validated request model, set by the validation stage
    payload: Any = None

    def json(self) -> Dict[str, Any]:
        """Decoded request body; an empty body reads as ``{}``."""
        if self._json is _UNSET:
            self._json = _decode_body(self.raw_body)
        return self._json


def _decode_body(raw: bytes) -> Dict[str, Any]:
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        raise AppError.validation("Request body must be a JSON object")
    if not isinstance(payload, dict):
        raise AppError.validation("Request body must be a JSON object")
    return payload


Stage = Callable[[RequestContext], Optional[AppError]]
# (status code, body); a str body is sent as text/plain, anything else as JSON
Outcome = Tuple[int, Any]
Handler = Callable[[RequestContext], Outcome]


# ---------------------------
# Stages
# ---------------------------
def log_request(ctx: RequestContext) -> Optional[AppError]:
    logger.info("%s %s", ctx.method, ctx.target)
    return None


def require_api_key(ctx: RequestContext) -> Optional[AppError]:
    return authenticate(read_api_key(ctx.headers), ctx.settings.api_key)


def validate_product(ctx: RequestContext) -> Optional[AppError]:
    ctx.payload = validate_create(ctx.json())
    return None


def validate_product_update(ctx: RequestContext) -> Optional[AppError]:
    ctx.payload = validate_update(ctx.json())
    return None


# ---------------------------
# Driver
# ---------------------------
@dataclass
class Pipeline:
    stages: Sequence[Stage]
    handler: Handler

    def run(self, ctx: RequestContext) -> Response:
        try:
            for stage in self.stages:
                err = stage(ctx)
                if err is not None:
                    return render_error(err)
            status, body = self.handler(ctx)
        except AppError as err:
            return render_error(err)
        except Exception as exc:
            logger.exception("unhandled error in %s %s", ctx.method, ctx.path)
            return render_error(classify(exc))
        if isinstance(body, str):
            return PlainTextResponse(body, status_code=status)
        return JSONResponse(body, status_code=status)


async def build_context(request: Request) -> RequestContext:
    return RequestContext(
        method=request.method,
        path=request.url.path,
        target=str(request.url.path) + (f"?{request.url.query}" if request.url.query else ""),
        headers=request.headers,
        query=request.query_params,
        path_params=dict(request.path_params),
        raw_body=await request.body(),
        settings=request.app.state.settings,
        store=request.app.state.store,
    )
