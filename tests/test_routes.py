"""Tests for the report endpoints."""

from __future__ import annotations

import dataclasses

import pytest
from sqlmodel import select

from memberhub import create_app
from memberhub.extensions import get_session_factory
from memberhub.models import Division
from memberhub.services.seed import DEMO_DIVISION_NAME, run_demo_seed


@pytest.fixture
def app(app_env):
    app = create_app("testing")
    with app.app_context():
        run_demo_seed(get_session_factory())
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def demo_division_id(app):
    with app.app_context(), get_session_factory()() as session:
        return session.exec(select(Division.id).where(Division.name == DEMO_DIVISION_NAME)).one()


def _graduation(client, **params):
    return client.get("/reports/graduation-scores", query_string=params)


def test_graduation_scores_for_demo_division(client, demo_division_id):
    response = _graduation(
        client, divisionId=demo_division_id, startDate="01/06/2025", endDate="31/07/2025"
    )

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["period"] == {"start": "01/06/2025", "end": "31/07/2025"}
    assert [row["shortName"] for row in payload["data"]] == ["Ana", "Ângela", "Bruno", "Édson"]

    by_name = {row["shortName"]: row for row in payload["data"]}
    assert by_name["Ana"]["scores"] == {
        "socialAction": 1,
        "poll": 1,
        "otherEvents": 1,
        "payments": 1,
    }
    assert by_name["Ana"]["totalScore"] == 4
    assert by_name["Bruno"]["scores"]["payments"] == 0
    assert by_name["Bruno"]["latePayments"][0]["month"] == 6
    assert by_name["Ângela"]["totalScore"] == 2
    assert by_name["Édson"]["scores"]["socialAction"] == 0
    assert len(by_name["Édson"]["events"]) == 4


def test_window_boundaries_include_whole_days(client, demo_division_id):
    # the poll happened on 05/07/2025 at 19:00
    response = _graduation(
        client, divisionId=demo_division_id, startDate="05/07/2025", endDate="05/07/2025"
    )

    rows = response.get_json()["data"]
    assert all(len(row["events"]) == 1 for row in rows)
    assert {row["shortName"]: row["scores"]["poll"] for row in rows} == {
        "Ana": 1,
        "Ângela": 0,
        "Bruno": 1,
        "Édson": 1,
    }


@pytest.mark.parametrize("division_id", [999, 0, -3])
def test_unknown_division_is_404(client, division_id):
    response = _graduation(client, divisionId=division_id, startDate="01/06/2025", endDate="30/06/2025")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Divisão não encontrada"}


@pytest.mark.parametrize(
    "params",
    [
        {"startDate": "01/06/2025", "endDate": "30/06/2025"},
        {"divisionId": "abc", "startDate": "01/06/2025", "endDate": "30/06/2025"},
        {"divisionId": "1", "startDate": "2025-06-01", "endDate": "30/06/2025"},
        {"divisionId": "1", "startDate": "01/06/2025"},
    ],
)
def test_invalid_query_is_400(client, params):
    response = client.get("/reports/graduation-scores", query_string=params)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"


def test_provider_failure_is_500(app, client, demo_division_id):
    class _Broken:
        def find_events(self, *args, **kwargs):
            raise RuntimeError("query failed")

    state = app.extensions["memberhub"]
    state["repositories"] = dataclasses.replace(state["repositories"], events=_Broken())

    response = _graduation(
        client, divisionId=demo_division_id, startDate="01/06/2025", endDate="30/06/2025"
    )

    assert response.status_code == 500
    assert response.get_json() == {
        "message": "Erro ao calcular pontuação.",
        "details": "query failed",
    }


def test_division_listing_groups_social_actions(client, demo_division_id):
    response = client.get("/reports/divisions")

    assert response.status_code == 200
    [entry] = response.get_json()
    assert entry["divisionId"] == demo_division_id
    actions = entry["socialActions"]
    assert [a["name"] for a in actions["fundraising"]] == ["Arrecadação de agasalhos"]
    assert [a["name"] for a in actions["external"]] == ["Visita ao abrigo"]
    assert actions["internal"] == []


def test_division_listing_date_filter(client):
    response = client.get("/reports/divisions", query_string={"startDate": "2025-06-15"})

    [entry] = response.get_json()
    assert entry["socialActions"]["fundraising"] == []
    assert len(entry["socialActions"]["external"]) == 1


def test_division_listing_rejects_bad_regional(client):
    response = client.get("/reports/divisions", query_string={"regionalId": "x"})

    assert response.status_code == 400


@pytest.fixture
def demo_regional_id(app, demo_division_id):
    with app.app_context(), get_session_factory()() as session:
        return session.get(Division, demo_division_id).regional_id


def test_event_count_chart(client, demo_division_id, demo_regional_id):
    response = client.get(
        "/reports/charts/events",
        query_string={"regionalId": demo_regional_id, "startDate": "2025-06-01", "endDate": "2025-07-31"},
    )

    assert response.status_code == 200
    assert response.get_json() == [{"id": demo_division_id, "name": DEMO_DIVISION_NAME, "value": 4}]


def test_event_count_chart_lists_idle_divisions(client, demo_regional_id):
    response = client.get(
        "/reports/charts/events",
        query_string={"regionalId": demo_regional_id, "startDate": "2024-01-01", "endDate": "2024-01-31"},
    )

    assert [bar["value"] for bar in response.get_json()] == [0]


def test_action_type_chart_splits_social_actions(client, demo_regional_id):
    response = client.get(
        "/reports/charts/action-types",
        query_string={"regionalId": demo_regional_id, "startDate": "2025-06-01", "endDate": "2025-06-30"},
    )

    [entry] = response.get_json()
    assert entry["series"] == [
        {"name": "Interna", "value": 0},
        {"name": "Externa", "value": 1},
        {"name": "Arrecadação", "value": 1},
    ]


def test_participation_chart_orders_by_count_then_name(client, demo_division_id):
    response = client.get(
        "/reports/charts/participants",
        query_string={"divisionId": demo_division_id, "startDate": "2025-06-01", "endDate": "2025-07-31"},
    )

    rows = response.get_json()
    assert [(row["name"], row["value"]) for row in rows] == [
        ("Édson", 1),
        ("Ângela", 2),
        ("Bruno", 2),
        ("Ana", 3),
    ]
    assert {row["divisionName"] for row in rows} == {DEMO_DIVISION_NAME}


@pytest.mark.parametrize(
    "path,params",
    [
        ("/reports/charts/events", {"startDate": "2025-06-01", "endDate": "2025-06-30"}),
        ("/reports/charts/action-types", {"regionalId": "1", "startDate": "01/06/2025", "endDate": "2025-06-30"}),
        ("/reports/charts/participants", {"startDate": "2025-06-01", "endDate": "2025-06-30"}),
    ],
)
def test_chart_query_validation(client, path, params):
    response = client.get(path, query_string=params)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
