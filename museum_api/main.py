from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
from museum_api.routes import auth_router, museum_hours, special_events, tickets
from museum_api.models import Base
from museum_api.database import engine, AsyncSessionLocal
from museum_api.config import settings
from museum_api.errors import DomainError, ErrorCode
from museum_api.seed import seed_database
import logging
import sys

LOG_LEVEL = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logging.basicConfig(level=LOG_LEVEL, handlers=[stream_handler], force=True)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFLICT: status.HTTP_400_BAD_REQUEST,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    if settings.SEED_DATABASE:
        async with AsyncSessionLocal() as db:
            await seed_database(db)
    yield
    await engine.dispose()


app = FastAPI(
    title="Museum API",
    version="1.0.0",
    description="API for querying museum hours, special events, and purchasing tickets",
    lifespan=lifespan,
)

app.include_router(auth_router.router, tags=["Authentication"])
app.include_router(museum_hours.router, tags=["Museum Hours"])
app.include_router(museum_hours.admin_router, tags=["Admin Museum Hours"])
app.include_router(special_events.router, tags=["Special Events"])
app.include_router(special_events.admin_router, tags=["Admin Special Events"])
app.include_router(tickets.router, tags=["Ticket Purchase"])


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
        content={"message": exc.message, "code": exc.code.value},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'Invalid request')}" if location else first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": message,
            "code": ErrorCode.VALIDATION_ERROR.value,
            "errors": [
                {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg")}
                for error in errors
            ],
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/")
def root():
    return "Museum API"

if __name__ == "__main__":
    uvicorn.run("museum_api.main:app", reload=True)
