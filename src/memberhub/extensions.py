"""Database and repository wiring for the Flask application."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import (
    DivisionRepository,
    EventRepository,
    LatePaymentRepository,
    PersonRepository,
)
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import (
    SQLModelDivisionRepository,
    SQLModelEventRepository,
    SQLModelLatePaymentRepository,
    SQLModelPersonRepository,
)

EXTENSION_KEY = "memberhub"


@dataclass(slots=True)
class Repositories:
    """Data-access providers consumed by the report services."""

    divisions: DivisionRepository
    persons: PersonRepository
    events: EventRepository
    late_payments: LatePaymentRepository

    @classmethod
    def from_session_factory(cls, session_factory: SessionFactory) -> "Repositories":
        return cls(
            divisions=SQLModelDivisionRepository(session_factory),
            persons=SQLModelPersonRepository(session_factory),
            events=SQLModelEventRepository(session_factory),
            late_payments=SQLModelLatePaymentRepository(session_factory),
        )


def init_db(app: Flask) -> None:
    """Create the engine and schema, then expose repositories on the app."""

    config: BaseConfig = app.config["MEMBERHUB_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
        "repositories": Repositories.from_session_factory(session_factory),
    }


def _state() -> dict:
    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - exercised only on misconfigured apps
        raise RuntimeError("Database not initialized; call init_db(app) first")
    return state


def get_session_factory() -> SessionFactory:
    """Return the session factory of the current app."""

    return _state()["session_factory"]


def get_repositories() -> Repositories:
    """Return the repositories of the current app."""

    return _state()["repositories"]


__all__ = ["Repositories", "get_repositories", "get_session_factory", "init_db"]
