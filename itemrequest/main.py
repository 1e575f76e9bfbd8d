import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from itemrequest.core.config import settings
from itemrequest.core.exceptions import ItemRequestError
from itemrequest.core.rate_limit import limiter
from itemrequest.api.v1.api import api_router
from itemrequest.middleware.error_middleware import ErrorHandlingMiddleware

logging.basicConfig(
    level=settings.log_level or "INFO",
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Requests for copies of restricted bitstreams",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return Response(status_code=200)


@app.exception_handler(ItemRequestError)
async def item_request_exception_handler(request: Request, exc: ItemRequestError):
    """Render domain errors with the status code they carry."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "itemrequest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
