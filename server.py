"""
FastAPI server for the TeamRAW site backend
Contact message API, admin session API and dashboard, and the chat proxy
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import CORS_ORIGINS, HOST, JWT_SECRET_KEY, PORT, USE_CLOUD_LLM
from dependencies import bot
from errors import AuthenticationError, NotFoundError, PersistenceError, ValidationError
from middleware import AdminSessionMiddleware
from routes import admin, chat, contact

logger = logging.getLogger(__name__)

VERSION = "1.2.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the chat mode on startup and close the upstream client on shutdown."""
    mode = "Cloud (OpenRouter)" if USE_CLOUD_LLM else "Demo"
    logger.info("Starting TeamRAW backend (chat mode: %s)...", mode)
    yield
    logger.info("Shutting down...")
    await bot.close()


app = FastAPI(
    title="TeamRAW Site API",
    description="Contact messages, admin panel and chatbot for TeamRAW",
    version=VERSION,
    lifespan=lifespan
)

# Session gate runs inside CORS so preflight requests never hit it
app.add_middleware(AdminSessionMiddleware, secret=JWT_SECRET_KEY)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ============================================
# Error handlers
# ============================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed", "errors": exc.errors}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{field}: {error.get('msg')}" if field else error.get("msg", "Invalid request"))
    logger.info("Malformed request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed", "errors": errors}
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=404,
        content={"success": False, "message": "Contact message not found"}
    )


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=401,
        content={"success": False, "message": "Invalid email or password"}
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"}
    )


# ============================================
# Routes
# ============================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "online",
        "service": "TeamRAW Site API",
        "version": VERSION,
        "chat_mode": "cloud" if USE_CLOUD_LLM else "demo",
    }


app.include_router(contact.router)
app.include_router(admin.router)
app.include_router(chat.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "server:app",
        host=HOST,
        port=PORT,
        reload=False,
        workers=1
    )
