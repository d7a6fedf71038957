# File: app\main.py
# Project: eco-report-backend
# Auto-added for reference

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler

from app.core.config import cors_origins_list, settings
from app.core.errors import LoginRequired, Unauthorized
from app.core.ratelimit import limiter
from app.db.session import Database
from app.routers import auth, actions, reports, locations, pages, admin

def _login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(url=exc.location, status_code=303)

def _unauthorized_handler(request: Request, exc: Unauthorized):
    return JSONResponse(status_code=401, content={"success": False, "message": exc.message})

def create_app(database: Database | None = None) -> FastAPI:
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.auto_create_tables:
            database.create_all()
        yield
        database.dispose()

    app = FastAPI(title="Eco Report API", lifespan=lifespan)
    app.state.database = database
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(LoginRequired, _login_required_handler)
    app.add_exception_handler(Unauthorized, _unauthorized_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins_list(),
        allow_credentials=True,  # session cookie
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(auth.router)
    app.include_router(actions.router)
    app.include_router(reports.router)
    app.include_router(locations.router)
    app.include_router(pages.router)
    app.include_router(admin.router)
    return app

app = create_app()
