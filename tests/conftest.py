"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Repositorio y almacenamiento in-memory
- Reloj y generador de números de seguimiento deterministas
- Cliente HTTP de prueba (FastAPI TestClient) con el contenedor sustituido
- Base de datos SQLite (aiosqlite) para pruebas del repositorio SQL
"""

from datetime import datetime, timezone
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.api.dependencies import ServiceContainer, get_container
from app.application.interfaces.clock import FakeClock
from app.application.interfaces.object_storage import UploadedFile
from app.application.interfaces.tracking_number_generator import FakeTrackingNumberGenerator
from app.config import StoreConfig
from app.infrastructure.db.engine import build_engine, build_sessionmaker, create_tables
from app.infrastructure.in_memory.object_storage import InMemoryObjectStorage
from app.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from app.main import app

# ============================================================================
# DATOS DE PRUEBA
# ============================================================================


@pytest.fixture
def valid_payload() -> dict:
    return {
        "property_id": "PROP-001",
        "property_title": "Futura Homes - Unit 12",
        "reservation_fee": "5000.00",
        "user_id": "user-123",
        "client_name": "Maria Santos",
        "client_email": "maria@example.com",
        "client_phone": "  +639171234567  ",
        "client_address": "  12 Mabini St, Quezon City ",
        "occupation": " Engineer ",
        "employer": " Acme Corp  ",
        "employment_status": "regular",
        "years_employed": 4,
        "monthly_income": "85000.00",
        "other_income_source": "Rental",
        "other_income_amount": "10000.00",
        "total_monthly_income": "95000.00",
        "message": "Looking forward to it",
    }


@pytest.fixture
def pdf_file() -> UploadedFile:
    return UploadedFile(
        filename="passport.pdf",
        content_type="application/pdf",
        data=b"%PDF-1.4 test document",
    )


# ============================================================================
# COLABORADORES IN-MEMORY
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def repo() -> InMemoryReservationRepo:
    return InMemoryReservationRepo()


@pytest.fixture
def storage() -> InMemoryObjectStorage:
    return InMemoryObjectStorage()


@pytest.fixture
def tracking_numbers() -> FakeTrackingNumberGenerator:
    return FakeTrackingNumberGenerator()


@pytest.fixture
def container(repo, storage, tracking_numbers, clock) -> ServiceContainer:
    return ServiceContainer(
        reservation_repo=repo,
        object_storage=storage,
        tracking_number_generator=tracking_numbers,
        clock=clock,
    )


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================


@pytest.fixture
def client(container: ServiceContainer) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con override del contenedor de servicios.
    """
    app.dependency_overrides[get_container] = lambda: container

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================


@pytest_asyncio.fixture
async def sql_session_maker(tmp_path) -> AsyncGenerator:
    """
    SQLite en archivo temporal: cada operación del repositorio abre su propia
    conexión, por lo que una base ``:memory:`` no compartiría las tablas.
    """
    config = StoreConfig(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'reservations.db'}",
        s3_access_key="test",
        s3_secret_key="test",
    )
    engine = build_engine(config)
    await create_tables(engine)
    yield build_sessionmaker(engine)
    await engine.dispose()
