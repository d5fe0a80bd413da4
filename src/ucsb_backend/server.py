import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ucsb_backend.api.exceptions import repository_exception_handler
from ucsb_backend.api.organizations import organization_router
from ucsb_backend.database import create_tables
from ucsb_backend.interface.organizations import UCSBOrganizationInterface
from ucsb_backend.repositories.base import RepositoryError
from ucsb_backend.settings import settings

logger = logging.getLogger(__name__)

def setup_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()

    if not settings.is_production:
        # Development databases are created on the fly, production uses managed schemas
        create_tables()

    logger.info(f"UCSB backend started in {settings.DEBUG_MODE} mode")

    yield

def create_app(lifespan=lifespan) -> FastAPI:

    app = FastAPI(title="UCSB Backend", lifespan=lifespan)

    origins = [
        "*"
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RepositoryError, repository_exception_handler)

    app.include_router(
        organization_router,
        prefix=f"{settings.API_PREFIX}/{UCSBOrganizationInterface.endpoint}",
        tags=["UCSBOrganizations"]
    )

    @app.head("/", status_code=204)
    def get_status_head():
        return

    return app

app = create_app()
