"""
main.py – FastAPI app entry point (slim wire-up only).
Connects routes, static files and lifespan. No business logic here.
"""
import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .routes import menu, orders, pages, system
from .routes.pages import STATIC_DIR
from .deps import get_store, SEED_DATABASE
from .db.session import dispose_all
from .models import ErrorResponse

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_store()
    logger.info(f"🚀 Initialising schema at {store.database_url}…")
    if store.init_schema(seed=SEED_DATABASE):
        logger.info("Reference data seeded.")
    logger.info("✅ Ready.")
    yield
    dispose_all()
    logger.info("Shutdown.")


app = FastAPI(
    title="Restaurant Menu API",
    description="Menu items, orders and order details for a small restaurant.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed body / path → 400 {"error": ...} instead of FastAPI's 422."""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "path", "query"))
    detail = first.get("msg", "invalid request")
    message = f"Invalid {field}: {detail}" if field else f"Invalid request: {detail}"
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

app.include_router(system.router)
app.include_router(menu.router)
app.include_router(orders.router)
app.include_router(pages.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
