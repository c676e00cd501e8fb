from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.config import settings
from core.errors import register_error_handlers
from core.log_config import configure_logging
from routers import (
    ai as ai_router,
    auth as auth_router,
    shared_lists as shared_lists_router,
    vocabulary as vocabulary_router,
)
from routers.auth import security


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="LexiShare")
    security.handle_errors(app)
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router.router)
    app.include_router(vocabulary_router.router)
    app.include_router(shared_lists_router.router)
    app.include_router(ai_router.router)

    @app.get("/status")
    async def status():
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
