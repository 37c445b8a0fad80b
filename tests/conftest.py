"""Pytest configuration and shared fixtures.

Settings are read at import time, so the environment is prepared before any
``edumanage`` module is imported. Every test gets its own in-memory SQLite
database, substituted for the real engine through ``get_db``.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["REDIS_URL"] = ""
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator
from datetime import date

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from edumanage.core.database import get_db
from edumanage.main import create_app
from edumanage.models import Attendance, Base, Course, Event, Program, Student


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(session_factory):
    """API app wired to the test database."""
    app = create_app(production=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
async def program(db_session: AsyncSession) -> Program:
    program = Program(
        name="Islamitische Studies",
        code="IS-101",
        description="Basisprogramma",
        duration=4,
        department_name="Religie",
    )
    db_session.add(program)
    await db_session.commit()
    await db_session.refresh(program)
    return program


@pytest.fixture
async def student(db_session: AsyncSession, program: Program) -> Student:
    student = Student(
        student_id="ST-0001",
        first_name="Ahmed",
        last_name="Youssef",
        email="ahmed@example.com",
        date_of_birth=date(2012, 6, 15),
        program_id=program.id,
        enrollment_year=2023,
        current_year=2,
    )
    db_session.add(student)
    await db_session.commit()
    await db_session.refresh(student)
    return student


@pytest.fixture
def make_course(db_session: AsyncSession):
    async def _make(code: str, enrolled: int = 0, program_id: int = None) -> Course:
        course = Course(
            name=f"Course {code}",
            code=code,
            credits=5,
            capacity=30,
            enrolled=enrolled,
            program_id=program_id,
        )
        db_session.add(course)
        await db_session.commit()
        await db_session.refresh(course)
        return course

    return _make


@pytest.fixture
def make_event(db_session: AsyncSession):
    async def _make(title: str, start_date: date, event_type: str = "academic", **kwargs) -> Event:
        event = Event(
            title=title,
            start_date=start_date,
            end_date=kwargs.pop("end_date", start_date),
            event_type=event_type,
            **kwargs,
        )
        db_session.add(event)
        await db_session.commit()
        await db_session.refresh(event)
        return event

    return _make


@pytest.fixture
def record_attendance(db_session: AsyncSession):
    async def _record(student_id: int, course_id: int, *statuses: str):
        for status in statuses:
            db_session.add(Attendance(
                student_id=student_id,
                course_id=course_id,
                date=date(2024, 3, 1),
                status=status,
            ))
        await db_session.commit()

    return _record
