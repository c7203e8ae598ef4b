import logging
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.interfaces.clock import Clock, SystemClock
from app.application.interfaces.object_storage import ObjectStorage
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.tracking_number_generator import (
    RandomTrackingNumberGenerator,
    TrackingNumberGenerator,
)
from app.application.use_cases.create_reservation import CreateReservationUseCase
from app.application.use_cases.list_reservations import ListReservationsUseCase
from app.application.use_cases.reject_reservation import RejectReservationUseCase
from app.config import Settings, StoreConfig, get_settings
from app.domain.constants import ID_DOCUMENT_BUCKET
from app.infrastructure.db.engine import build_engine, build_sessionmaker
from app.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from app.infrastructure.in_memory.object_storage import InMemoryObjectStorage
from app.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from app.infrastructure.storage.s3_object_storage import S3ObjectStorage

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Collaborators shared by the reservation use cases."""

    reservation_repo: ReservationRepo
    object_storage: ObjectStorage
    tracking_number_generator: TrackingNumberGenerator
    clock: Clock
    bucket: str = ID_DOCUMENT_BUCKET
    enrichment_concurrency: int = 10
    engine: AsyncEngine | None = None


def build_container(settings: Settings) -> ServiceContainer:
    """Wire the collaborators; raises ConfigurationError when store credentials are missing."""
    if settings.use_in_memory:
        logger.info("Using in-memory reservation store and object storage")
        return ServiceContainer(
            reservation_repo=InMemoryReservationRepo(),
            object_storage=InMemoryObjectStorage(),
            tracking_number_generator=RandomTrackingNumberGenerator(),
            clock=SystemClock(),
            bucket=settings.storage_bucket,
            enrichment_concurrency=settings.enrichment_concurrency,
        )

    config = StoreConfig.from_settings(settings)
    engine = build_engine(config, echo=settings.sql_echo)
    return ServiceContainer(
        reservation_repo=ReservationRepoSQL(build_sessionmaker(engine)),
        object_storage=S3ObjectStorage(
            access_key=config.s3_access_key,
            secret_key=config.s3_secret_key,
            endpoint=config.s3_endpoint,
            region=config.s3_region,
            public_base_url=config.storage_public_base_url,
        ),
        tracking_number_generator=RandomTrackingNumberGenerator(),
        clock=SystemClock(),
        bucket=config.storage_bucket,
        enrichment_concurrency=settings.enrichment_concurrency,
        engine=engine,
    )


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    return build_container(get_settings())


def get_use_cases(container: ServiceContainer = Depends(get_container)):
    return {
        "create_reservation": CreateReservationUseCase(
            reservation_repo=container.reservation_repo,
            object_storage=container.object_storage,
            tracking_number_generator=container.tracking_number_generator,
            clock=container.clock,
            bucket=container.bucket,
        ),
        "reject_reservation": RejectReservationUseCase(
            reservation_repo=container.reservation_repo,
            clock=container.clock,
        ),
        "list_reservations": ListReservationsUseCase(
            reservation_repo=container.reservation_repo,
            max_concurrency=container.enrichment_concurrency,
        ),
    }
