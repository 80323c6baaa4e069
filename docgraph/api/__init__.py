from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docgraph.api.endpoints import get_endpoints_router
from docgraph.config import settings
from docgraph.layout import DocumentGraphBuilder


def create_app(*, builder: DocumentGraphBuilder) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(builder=builder))

    return app
