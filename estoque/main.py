# estoque/main.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .config import Settings
from .core import first_error_message, merge_for_update, parse_product_id
from .database import ProductStore, demo_products
from .errors import ROUTE_NOT_FOUND, ApiError, InternalError, NotFoundError, ValidationError
from .logs import LOGGER_NAME, configure_logging
from .models import Product, ProductDraft, ProductPatch

log = logging.getLogger(f"{LOGGER_NAME}.api")

API_PREFIX = "/api/produtos"


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


router = APIRouter(prefix=API_PREFIX, tags=["produtos"])

# ---------------------------
# Product endpoints
# ---------------------------
# Handlers are coroutines with no await between lookup and mutation, so each
# request runs to completion on the event loop without interleaving.


@router.get("")
async def list_products(store: ProductStore = Depends(get_store)):
    return [p.to_json() for p in store.list()]


@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    try:
        p = store.get(parse_product_id(product_id))
    except NotFoundError as e:
        return JSONResponse(status_code=404, content={"success": False, "error": e.message})
    return {"success": True, "data": p.to_json()}


@router.post("", status_code=201)
async def create_product(payload: ProductDraft, store: ProductStore = Depends(get_store)):
    p = store.create(payload)
    log.info("created product %d (%s)", p.id, p.name)
    return p.to_json()


async def get_existing_product(product_id: str, store: ProductStore = Depends(get_store)) -> Product:
    # resolved before the body is validated, so a missing id answers 404 first
    return store.get(parse_product_id(product_id))


@router.put("/{product_id}")
async def update_product(
    payload: Optional[ProductPatch] = None,
    current: Product = Depends(get_existing_product),
    store: ProductStore = Depends(get_store),
):
    try:
        draft = merge_for_update(current, payload if payload is not None else ProductPatch())
    except ValidationError as e:
        log.warning("rejected update of product %d: %s", current.id, e.message)
        raise
    p = store.update(current.id, draft.model_dump())
    log.info("updated product %d", p.id)
    return p.to_json()


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    pid = parse_product_id(product_id)
    store.delete(pid)
    log.info("deleted product %d", pid)
    return Response(status_code=204)


# ---------------------------
# Static client
# ---------------------------
def _static_response(static_dir: Path, path: str):
    root = static_dir.resolve()
    candidate = (root / path).resolve()
    if path and candidate.is_file() and root in candidate.parents:
        return FileResponse(candidate)
    index = root / "index.html"
    if index.is_file():
        return FileResponse(index)
    return JSONResponse(status_code=404, content={"error": ROUTE_NOT_FOUND})


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)
    if store is None:
        store = ProductStore(demo_products() if settings.seed_demo else None)

    app = FastAPI(title="estoque (in-memory inventory)")
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = first_error_message(exc.errors())
        log.warning("rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.middleware("http")
    async def api_boundary(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            err = InternalError()
            response = JSONResponse(status_code=err.status_code, content={"error": err.message})
        if request.url.path.startswith("/api") and "content-type" not in response.headers:
            response.headers["content-type"] = "application/json"
        return response

    app.include_router(router)

    @app.api_route("/api/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    async def unknown_api_route(path: str):
        return JSONResponse(status_code=404, content={"error": ROUTE_NOT_FOUND})

    static_dir = Path(settings.static_dir)

    @app.get("/{path:path}", include_in_schema=False)
    async def client_fallback(path: str):
        return _static_response(static_dir, path)

    return app


app = create_app()
