import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

PROFILE = {
    "currentSkills": "Python",
    "desiredSkills": "Kubernetes, Docker",
    "careerGoals": "Move into platform engineering",
    "industryInterests": "Cloud",
}


def _fields(response):
    return [err["field"] for err in response.json()["errors"]]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"]


def test_demo_mentors():
    response = client.get("/mentors/demo")
    assert response.status_code == 200
    mentors = response.json()["mentors"]
    assert len(mentors) == 10
    assert all(m["availability"] for m in mentors)


def test_matchmaking_ranks_and_explains():
    mentors = [
        {"name": "Sam", "title": "Designer", "company": "Studio", "expertise": ["Figma"]},
        {
            "name": "Jen",
            "title": "DevOps Engineer",
            "company": "Amazon",
            "expertise": ["Kubernetes", "Docker", "AWS"],
            "bio": "Cloud infrastructure specialist",
            "availability": {"2024-01-02": ["9am", "1pm"]},
            "email": "jen@example.com",
        },
    ]
    response = client.post("/matchmaking", json={"profile": PROFILE, "mentors": mentors})
    assert response.status_code == 200
    result = response.json()["mentors"]
    assert [m["name"] for m in result] == ["Jen"]
    assert result[0]["email"] == "jen@example.com"
    assert result[0]["matchReasoning"] == (
        "Expert in Kubernetes, Docker. Works closely with Cloud. Has 2 upcoming time slots available."
    )


def test_matchmaking_against_demo_catalogue():
    mentors = client.get("/mentors/demo").json()["mentors"]
    response = client.post("/matchmaking", json={"profile": PROFILE, "mentors": mentors})
    assert response.status_code == 200
    result = response.json()["mentors"]
    assert 1 <= len(result) <= 4
    assert result[0]["name"] == "Jennifer Kim"


def test_empty_mentor_list_is_rejected():
    response = client.post("/matchmaking", json={"profile": PROFILE, "mentors": []})
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Invalid request payload"
    assert _fields(response) == ["mentors"]


def test_whitespace_profile_field_is_rejected():
    response = client.post(
        "/matchmaking",
        json={"profile": {**PROFILE, "currentSkills": "   "}, "mentors": [{"name": "A", "title": "B", "company": "C"}]},
    )
    assert response.status_code == 400
    assert _fields(response) == ["profile.currentSkills"]
    assert response.json()["errors"][0]["message"]


def test_all_violations_are_reported_together():
    response = client.post(
        "/matchmaking",
        json={
            "profile": {**PROFILE, "careerGoals": ""},
            "mentors": [
                {"name": "A", "title": "B", "company": "C", "availability": ["9am"]},
                {"title": "B", "company": "C", "expertise": "React"},
            ],
        },
    )
    assert response.status_code == 400
    assert set(_fields(response)) == {
        "profile.careerGoals",
        "mentors[0].availability",
        "mentors[1].name",
        "mentors[1].expertise",
    }


def test_missing_body_is_rejected():
    response = client.post("/matchmaking")
    assert response.status_code == 400
    assert _fields(response) == ["body"]


def test_malformed_json_is_rejected():
    response = client.post(
        "/matchmaking",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert _fields(response) == ["body"]


@pytest.mark.asyncio
async def test_health_handler_reports_configured_service():
    from api.router import health
    from config import settings

    result = await health()
    assert result.service == settings.app_name
    assert result.version == settings.version


def test_matchmaking_rate_limit_returns_429():
    from api.router import limiter
    from config import settings

    allowed = int(settings.matchmaking_rate_limit.split("/")[0])
    payload = {"profile": PROFILE, "mentors": [{"name": "A", "title": "B", "company": "C"}]}
    limiter.reset()
    try:
        statuses = [client.post("/matchmaking", json=payload).status_code for _ in range(allowed + 1)]
    finally:
        limiter.reset()
    assert statuses[:allowed] == [200] * allowed
    assert statuses[-1] == 429
