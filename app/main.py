from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.hello.routes import router as hello_router
from app.hello.schemas import ErrorResponse
from app.hello.services import METHOD_NOT_ALLOWED
from config import settings
import argparse
import logging
import uvicorn

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hello World API",
    description="Greets callers whose name starts with a letter between A and M",
    version="1.0.0",
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
    redirect_slashes=False,
)

# Include routers
app.include_router(hello_router)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render every HTTP error as {"error": ...}
    """
    if exc.status_code == 405:
        logger.warning(f"Rejected {request.method} request to {request.url.path}")
        detail = METHOD_NOT_ALLOWED
    else:
        detail = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=detail).model_dump(),
        headers=getattr(exc, "headers", None),
    )

def main():
    parser = argparse.ArgumentParser(description="Start the Hello World API server")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG level logging")
    parser.add_argument("--host", type=str, default=settings.HOST, help="Address to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (development)")
    args = parser.parse_args()

    server_config = settings.get_server_config()
    server_config.update(host=args.host, port=args.port)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        server_config["log_level"] = "debug"

    logger.info(f"Server starting on {args.host}:{args.port} ({settings.APP_ENV})")

    try:
        uvicorn.run("app.main:app", reload=args.reload, **server_config)
    except Exception as e:
        logger.critical(f"Server failed to start: {str(e)}")
        raise

if __name__ == "__main__":
    main()
