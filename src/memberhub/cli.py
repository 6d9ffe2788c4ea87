"""Flask CLI commands for MemberHub."""

from __future__ import annotations

import json

import click

from .exceptions import InvalidReportDateError


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("memberhub-init-db")
    def memberhub_init_db() -> None:
        """Create database tables."""

        from .extensions import get_session_factory

        # schema is created by init_db during create_app
        get_session_factory()
        click.echo(f"Database ready: {app.config['MEMBERHUB_CONFIG'].DATABASE_URL}")

    @app.cli.command("memberhub-seed")
    @click.option("--force", is_flag=True, default=False, help="Add demo events even if seeded")
    def memberhub_seed(force: bool) -> None:
        """Seed demo hierarchy, members, events and late payments."""

        from .extensions import get_session_factory
        from .services.seed import run_demo_seed

        summary = run_demo_seed(get_session_factory(), force=force)
        click.echo(
            f"Seed complete: {summary.divisions} divisions, {summary.persons} persons, "
            f"{summary.events} events, {summary.late_payments} late payments"
        )

    @app.cli.command("memberhub-graduation")
    @click.option("--division-id", type=int, required=True, help="Division to score")
    @click.option("--start", "start_text", required=True, help="First day (dd/MM/yyyy)")
    @click.option("--end", "end_text", required=True, help="Last day (dd/MM/yyyy)")
    def memberhub_graduation(division_id: int, start_text: str, end_text: str) -> None:
        """Print the graduation report of a division as JSON."""

        from .domain.records import DivisionNotFound
        from .extensions import get_repositories
        from .services.dates import report_window
        from .services.graduation import generate_graduation_report

        try:
            start, end = report_window(start_text, end_text)
        except InvalidReportDateError as exc:
            raise click.BadParameter(str(exc)) from exc

        repositories = get_repositories()
        result = generate_graduation_report(
            division_id,
            start,
            end,
            divisions=repositories.divisions,
            persons=repositories.persons,
            events=repositories.events,
            late_payments=repositories.late_payments,
            locale=app.config["MEMBERHUB_CONFIG"].COLLATION_LOCALE,
            period_start=start_text,
            period_end=end_text,
        )
        if isinstance(result, DivisionNotFound):
            raise click.ClickException(f"Divisão {division_id} não encontrada")
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
