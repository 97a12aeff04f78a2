"""API tests for resume optimisation and chat, with and without a working provider."""

import json

import pytest

from aspiro.core.llm import CompletionError
from aspiro.schemas.resume import ResumeAnalysis
from aspiro.services.chat_service import FALLBACK_REPLY
from tests.factories import API, auth_headers, create_career, create_skills, create_user

RESUME = "Managed a team and increased revenue by 20%"

MODEL_ANALYSIS = {
    "overall_score": 91,
    "skill_coverage_percentage": 75,
    "feedback": [
        {
            "category": "Formatting",
            "priority": "Low",
            "issue": "Dates use two styles",
            "suggestion": "Pick one date style",
        }
    ],
    "missing_keywords": ["statistics"],
    "relevant_skills_found": ["sql"],
    "analysis_summary": {
        "word_count": 8,
        "has_quantifiable_achievements": True,
        "uses_action_verbs": True,
        "formatting_consistent": False,
    },
}


@pytest.fixture
async def user(db):
    skills = await create_skills(db, "SQL", "Statistics")
    await create_career(
        db,
        "Data Analyst",
        [(skills["SQL"], True, "Advanced"), (skills["Statistics"], True, "Intermediate")],
    )
    return await create_user(db)


async def optimize(client, user, **overrides):
    payload = {"resume_text": RESUME, "target_job_title": "Data Analyst", **overrides}
    return await client.post(f"{API}/resume-optimization", headers=auth_headers(user), json=payload)


def assert_deterministic(body):
    analysis = ResumeAnalysis.model_validate(body)
    assert analysis.missing_keywords == ["sql", "statistics"]
    assert analysis.skill_coverage_percentage == 0
    assert analysis.analysis_summary.word_count == 8
    # Keywords/High, Content/Medium (brief), Formatting/Low
    assert [(f.category.value, f.priority.value) for f in analysis.feedback] == [
        ("Keywords", "High"),
        ("Content", "Medium"),
        ("Formatting", "Low"),
    ]
    assert analysis.overall_score == 60


async def test_provider_failure_falls_back_to_keyword_analysis(client, user, stub_provider):
    stub_provider.error = CompletionError("connection reset")

    response = await optimize(client, user)
    assert response.status_code == 200
    assert_deterministic(response.json())
    assert len(stub_provider.calls) == 1
    assert stub_provider.calls[0]["json_mode"] is True


async def test_disabled_provider_is_not_called(client, user, stub_provider):
    stub_provider.enabled = False

    response = await optimize(client, user)
    assert response.status_code == 200
    assert_deterministic(response.json())
    assert stub_provider.calls == []


@pytest.mark.parametrize(
    "reply",
    [
        "Sorry, I cannot help with that.",
        "{not json at all}",
        json.dumps({**MODEL_ANALYSIS, "overall_score": 140}),
        json.dumps({**MODEL_ANALYSIS, "feedback": [{"category": "Vibes", "priority": "High", "issue": "x", "suggestion": "y"}]}),
        json.dumps({key: value for key, value in MODEL_ANALYSIS.items() if key != "analysis_summary"}),
    ],
)
async def test_unusable_model_output_is_discarded(client, user, stub_provider, reply):
    stub_provider.error = None
    stub_provider.reply = reply

    response = await optimize(client, user)
    assert response.status_code == 200
    assert_deterministic(response.json())


async def test_valid_model_output_is_returned(client, user, stub_provider):
    stub_provider.error = None
    stub_provider.reply = "```json\n" + json.dumps(MODEL_ANALYSIS) + "\n```"

    response = await optimize(client, user)
    assert response.status_code == 200
    body = response.json()
    assert body["overall_score"] == 91
    assert body["feedback"][0]["issue"] == "Dates use two styles"

    prompt = stub_provider.calls[0]["prompt"]
    assert "Data Analyst" in prompt
    assert RESUME in prompt


async def test_blank_resume_fields_rejected(client, user, stub_provider):
    for overrides in ({"resume_text": "  "}, {"target_job_title": ""}):
        response = await optimize(client, user, **overrides)
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"
    assert stub_provider.calls == []


async def test_resume_optimization_requires_identity(client):
    response = await client.post(
        f"{API}/resume-optimization",
        json={"resume_text": RESUME, "target_job_title": "Data Analyst"},
    )
    assert response.status_code == 401


async def test_chat_returns_model_reply(client, user, stub_provider):
    stub_provider.error = None
    stub_provider.reply = "  Start by learning SQL.  "

    response = await client.post(
        f"{API}/chat",
        headers=auth_headers(user),
        json={"message": "How do I become a data analyst?", "context": "I know Excel"},
    )
    assert response.status_code == 200
    assert response.json() == {"reply": "Start by learning SQL."}
    assert "Context: I know Excel" in stub_provider.calls[0]["prompt"]
    assert "career guidance" in stub_provider.calls[0]["system"]


async def test_chat_apologises_when_provider_fails(client, user):
    response = await client.post(
        f"{API}/chat",
        headers=auth_headers(user),
        json={"message": "Hello"},
    )
    assert response.status_code == 200
    assert response.json()["reply"] == FALLBACK_REPLY


async def test_chat_message_required(client, user):
    response = await client.post(f"{API}/chat", headers=auth_headers(user), json={"message": " "})
    assert response.status_code == 400
