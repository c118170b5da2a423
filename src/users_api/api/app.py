from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.dependencies import lifespan
from users_api.api.errors import register_exception_handlers
from users_api.api.routes import health_router, router
from users_api.config import settings
from users_api.protocols import UserStore

API_PREFIX = "/api"


def create_app(store: UserStore | None = None) -> FastAPI:
    """Create the Users API application.

    Args:
        store: User store to serve from. If None, the lifespan builds one
            from settings.

    Returns:
        The configured FastAPI application
    """
    app = FastAPI(
        title="Users API",
        description="CRUD, upsert and JSON Patch over a paginated users resource",
        version="0.1.0",
        lifespan=lifespan,
    )

    if store is not None:
        app.state.user_store = store

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(router, prefix=API_PREFIX)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Users API",
            "version": "0.1.0",
            "endpoints": {
                "users": f"{API_PREFIX}/users",
                "health": "/health",
                "docs": "/docs",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "users_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
