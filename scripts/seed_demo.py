"""Demo data seeding script."""

from __future__ import annotations

from memberhub.config import BaseConfig
from memberhub.infra.database import bootstrap_database
from memberhub.services.seed import run_demo_seed


def seed_demo() -> None:
    """Populate the configured database with a demo division."""

    _, session_factory = bootstrap_database(BaseConfig())
    summary = run_demo_seed(session_factory)
    print(
        f"Seeded {summary.persons} persons, {summary.events} events, "
        f"{summary.late_payments} late payments"
    )


if __name__ == "__main__":
    seed_demo()
