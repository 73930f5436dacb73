from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from clarity.core.config import get_settings
from clarity.core.errors import register_error_handlers
from clarity.core.logging import setup_logging
from clarity.routers import auth, courses, system
from clarity.services.session import SessionService
from clarity.services.store import UserStore


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Analyse de syllabus (PDF) : charge de travail et difficulté par cours",
    )

    # Stockage en mémoire, vit le temps du process
    app.state.sessions = SessionService(UserStore())

    # Middleware CORS
    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],  # fallback si mal configuré
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routers
    app.include_router(system.router)
    app.include_router(auth.router)
    app.include_router(courses.router)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("clarity.main:app", host="0.0.0.0", port=8000, reload=False)
