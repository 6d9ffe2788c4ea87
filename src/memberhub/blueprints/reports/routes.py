"""Report routes."""

from __future__ import annotations

import logging

from flask import current_app, jsonify, request
from pydantic import ValidationError

from ...domain.records import DivisionNotFound
from ...extensions import get_repositories
from ...services.charts import action_type_chart, event_count_chart, participation_chart
from ...services.division_report import generate_division_report
from ...services.graduation import generate_graduation_report
from . import bp
from .forms import (
    DivisionReportQuery,
    GraduationQuery,
    ParticipationChartQuery,
    RegionalChartQuery,
    structured_errors,
)

logger = logging.getLogger("memberhub.blueprints.reports")


def _validation_failure(exc: ValidationError):
    return jsonify({"error": "validation_error", "details": structured_errors(exc)}), 400


def _collation_locale() -> str:
    return current_app.config["MEMBERHUB_CONFIG"].COLLATION_LOCALE


@bp.get("/graduation-scores")
def graduation_scores():
    """Return the graduation score of every active member of a division."""

    try:
        query = GraduationQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failure(exc)

    start, end = query.window()
    repositories = get_repositories()
    try:
        result = generate_graduation_report(
            query.division_id,
            start,
            end,
            divisions=repositories.divisions,
            persons=repositories.persons,
            events=repositories.events,
            late_payments=repositories.late_payments,
            locale=_collation_locale(),
            period_start=query.start_date,
            period_end=query.end_date,
        )
    except Exception as exc:
        logger.exception("Graduation report failed for division %s", query.division_id)
        return jsonify({"message": "Erro ao calcular pontuação.", "details": str(exc)}), 500

    if isinstance(result, DivisionNotFound):
        return jsonify({"error": "Divisão não encontrada"}), 404
    return jsonify(result.to_dict())


@bp.get("/divisions")
def division_report():
    """List social actions grouped by division and action type."""

    try:
        query = DivisionReportQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failure(exc)

    start, end = query.bounds()
    try:
        report = generate_division_report(
            get_repositories().events,
            regional_id=query.regional_id,
            start=start,
            end=end,
        )
    except Exception as exc:
        logger.exception("Division report failed")
        return jsonify({"error": str(exc)}), 500
    return jsonify(report)


def _chart_failure(name: str, exc: Exception):
    logger.exception("Chart %s failed", name)
    return jsonify({"message": "Erro interno do servidor.", "details": str(exc)}), 500


@bp.get("/charts/events")
def event_count():
    """Events per division of a regional."""

    try:
        query = RegionalChartQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failure(exc)

    start, end = query.bounds()
    repositories = get_repositories()
    try:
        bars = event_count_chart(
            query.regional_id,
            start,
            end,
            divisions=repositories.divisions,
            events=repositories.events,
            locale=_collation_locale(),
        )
    except Exception as exc:
        return _chart_failure("events", exc)
    return jsonify(bars)


@bp.get("/charts/action-types")
def action_type_count():
    """Social actions per division of a regional, split by action type."""

    try:
        query = RegionalChartQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failure(exc)

    start, end = query.bounds()
    repositories = get_repositories()
    try:
        entries = action_type_chart(
            query.regional_id,
            start,
            end,
            divisions=repositories.divisions,
            events=repositories.events,
            locale=_collation_locale(),
        )
    except Exception as exc:
        return _chart_failure("action-types", exc)
    return jsonify(entries)


@bp.get("/charts/participants")
def participant_count():
    """Events joined per participant of a division."""

    try:
        query = ParticipationChartQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failure(exc)

    start, end = query.bounds()
    try:
        rows = participation_chart(
            query.division_id,
            start,
            end,
            events=get_repositories().events,
            locale=_collation_locale(),
        )
    except Exception as exc:
        return _chart_failure("participants", exc)
    return jsonify(rows)
