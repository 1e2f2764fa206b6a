from fastapi import FastAPI

from tool_rental.entrypoints.http.exception_handlers import register_exception_handlers
from tool_rental.entrypoints.http.routes.checkouts import router as checkouts_router
from tool_rental.entrypoints.http.routes.health import router as health_router
from tool_rental.entrypoints.http.routes.tools import router as tools_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Tool Rental API",
        description="""
        Tool rental store API: browse tools and check them out.

        ## Features
        - List the tool catalog and look up a tool by code
        - Check out a tool and receive the rental agreement

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(tools_router, prefix="/v1")
    app.include_router(checkouts_router, prefix="/v1")

    return app


app = build_app()
