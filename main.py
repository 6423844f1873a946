from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi import status
import logging
from app.database.connections import lifespan
from app.includes import get_all_routers
from app.utilities.errors import BodyTooLarge, RatingError
from app.utilities.middleware import BodySizeLimitMiddleware
from config import API_PREFIX, CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from tools.routers import gather_routers


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.info("🚀 Starting FastAPI application")

app = FastAPI(
    title="Ratings API",
    description="API for storing and retrieving ratings",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
)
routers = get_all_routers()
app = gather_routers(app, routers, prefix=API_PREFIX)

# added first so CORS wraps the 413 responses as well
app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BodyTooLarge)
async def body_too_large_exception_handler(request: Request, exc: BodyTooLarge):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.exception_handler(RatingError)
async def rating_exception_handler(request: Request, exc: RatingError):
    logger.error(f"Unhandled rating error on {request.url.path}: {exc.message} {exc.details or ''}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message, "details": exc.details},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred."},
    )


@app.get("/", response_class=PlainTextResponse)
async def index():
    return "API is running..."


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
