import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import CORS_ORIGINS
from app.core.errors import register_exception_handlers
from app.core.logging_middleware import LoggingMiddleware
from app.db.init_db import close_db, init_db

from app.routers.auth import router as auth_router
from app.routers.bookings import router as bookings_router
from app.routers.classes import router as classes_router
from app.routers.instructors import router as instructors_router
from app.routers.payments import router as payments_router
from app.routers.reviews import router as reviews_router
from app.routers.users import router as users_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Language Classes API")

# Middleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Server is running.."


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


@app.on_event("startup")
def on_startup():
    init_db()


@app.on_event("shutdown")
def on_shutdown():
    close_db()


# Include routers
app.include_router(auth_router, tags=["auth"])
app.include_router(users_router, prefix="/users", tags=["users"])
app.include_router(classes_router, tags=["classes"])
app.include_router(instructors_router, tags=["instructors"])
app.include_router(reviews_router, prefix="/reviews", tags=["reviews"])
app.include_router(bookings_router, prefix="/bookings", tags=["bookings"])
app.include_router(payments_router, tags=["payments"])
