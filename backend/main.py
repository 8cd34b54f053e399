# backend/main.py
import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from config import settings
from database import SessionLocal, init_db
from utils.audit import write_log, client_ip
from utils.seed import seed_defaults
from utils.workflow import validate_workflow_tables

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("symi")

# Router imports
from routes.auth import router as auth_router
from routes.company import router as company_router
from routes.customers import router as customers_router
from routes.logs import router as logs_router
from routes.maintenance import router as maintenance_router
from routes.messages import router as messages_router
from routes.molds import router as molds_router
from routes.orders import router as orders_router
from routes.personnel import router as personnel_router
from routes.planning import router as planning_router
from routes.products import router as products_router
from routes.reports import router as reports_router
from routes.stock import router as stock_router
from routes.uploads import router as uploads_router
from routes.users import router as users_router

API_PREFIX = "/api"


def bootstrap():
    """Migrate the schema, check the workflow tables and load default data."""
    init_db()
    validate_workflow_tables()
    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()


# Initialization
bootstrap()

app = FastAPI(title="Symi ERP API", version="1.0.0")

# Uploaded assets - make sure the folders exist before mounting
settings.image_dir.mkdir(parents=True, exist_ok=True)
settings.document_dir.mkdir(parents=True, exist_ok=True)
app.mount("/img", StaticFiles(directory=settings.image_dir), name="img")
app.mount("/doc", StaticFiles(directory=settings.document_dir), name="doc")

# CORS Configuration
origins = ["*"]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================
# ERROR HANDLING
# =========================
def _conflict_detail(exc: IntegrityError) -> str:
    message = str(exc.orig).lower()
    if "foreign key" in message:
        return "Record is referenced by other data or points to a missing record"
    if "unique" in message or "duplicate" in message:
        return "A record with the same key already exists"
    if "not null" in message:
        return "A required field is missing"
    return "Request conflicts with existing data"


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.info("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": _conflict_detail(exc)})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    db = SessionLocal()
    try:
        write_log(db, user_id=None, action="DB_ERROR", resource=request.url.path[:50], status="ERROR",
                  ip=client_ip(request), meta={"method": request.method, "error": str(exc)[:500]})
    finally:
        db.close()
    return JSONResponse(status_code=500, content={"detail": "Internal database error"})


# Router registration
for router in (
    auth_router,
    customers_router,
    products_router,
    orders_router,
    stock_router,
    personnel_router,
    users_router,
    messages_router,
    molds_router,
    planning_router,
    company_router,
    uploads_router,
    maintenance_router,
    logs_router,
    reports_router,
):
    app.include_router(router, prefix=API_PREFIX)


@app.get("/")
def read_root():
    return {"message": "Symi ERP API is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
