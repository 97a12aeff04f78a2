"""API tests for career recommendations, feedback and skill gap analysis."""

from uuid import uuid4

from sqlalchemy import select

from aspiro.models import CareerRecommendation, SkillGapAnalysis
from tests.factories import (
    API,
    auth_headers,
    create_career,
    create_resource,
    create_skills,
    create_user,
    give_skill,
)


async def seed_catalog(db):
    skills = await create_skills(db, "SQL", "Python", "Excel", "Statistics", "React")
    analyst = await create_career(
        db,
        "Data Analyst",
        [
            (skills["SQL"], True, "Advanced"),
            (skills["Python"], False, "Advanced"),
            (skills["Excel"], False, "Beginner"),
            (skills["Statistics"], True, "Intermediate"),
        ],
    )
    frontend = await create_career(db, "Frontend Developer", [(skills["React"], True, "Intermediate")])
    return skills, analyst, frontend


async def test_recommendations_require_identity(client):
    response = await client.post(f"{API}/career-recommendations")
    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"
    assert response.headers["access-control-allow-origin"] == "*"


async def test_invalid_token_rejected(client):
    response = await client.post(
        f"{API}/career-recommendations",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_TOKEN"


async def test_recommendations_ranked_and_cached(client, db, session_maker):
    skills, analyst, frontend = await seed_catalog(db)
    user = await create_user(db)
    await give_skill(db, user, skills["SQL"], "Intermediate")
    await give_skill(db, user, skills["Statistics"], "Advanced")

    response = await client.post(f"{API}/career-recommendations", headers=auth_headers(user))
    assert response.status_code == 200

    recommendations = response.json()["recommendations"]
    assert [r["career_name"] for r in recommendations] == ["Data Analyst", "Frontend Developer"]

    top = recommendations[0]
    # (3 * 0.7 + 3 * 1.0) / 8
    assert top["match_score"] == 63.75
    assert top["explanation"].startswith("Good match! You have 2/2 essential skills")
    assert top["salary_range"] == {"min": 50000, "max": 90000}
    assert top["growth_outlook"] == "High"
    assert [(s["skill_name"], s["user_has"]) for s in top["required_skills"]] == [
        ("SQL", True),
        ("Python", False),
        ("Excel", False),
        ("Statistics", True),
    ]
    assert recommendations[1]["match_score"] == 0

    async with session_maker() as session:
        rows = (
            await session.execute(
                select(
                    CareerRecommendation.career_id,
                    CareerRecommendation.match_score,
                    CareerRecommendation.is_current,
                    CareerRecommendation.recommendation_factors,
                ).where(CareerRecommendation.user_id == user.id)
            )
        ).all()
    assert len(rows) == 2
    cached = {row.career_id: row for row in rows}
    assert cached[analyst.id].match_score == 63.75
    assert cached[analyst.id].is_current is True
    assert cached[analyst.id].recommendation_factors["salary_range"] == {"min": 50000, "max": 90000}


async def test_recomputation_overwrites_cache(client, db, session_maker):
    skills, analyst, _ = await seed_catalog(db)
    user = await create_user(db)
    headers = auth_headers(user)

    await client.post(f"{API}/career-recommendations", headers=headers)
    await client.put(
        f"{API}/users/me/skills",
        headers=headers,
        json={"skill_id": str(skills["SQL"].id), "proficiency_level": "Advanced"},
    )
    response = await client.post(f"{API}/career-recommendations", headers=headers)
    assert response.json()["recommendations"][0]["match_score"] == 37.5

    async with session_maker() as session:
        scores = (
            await session.execute(
                select(CareerRecommendation.match_score).where(
                    CareerRecommendation.user_id == user.id,
                    CareerRecommendation.career_id == analyst.id,
                )
            )
        ).scalars().all()
    assert scores == [37.5]


async def test_dismiss_feedback_marks_recommendation_stale(client, db, session_maker):
    _, analyst, frontend = await seed_catalog(db)
    user = await create_user(db)
    headers = auth_headers(user)
    await client.post(f"{API}/career-recommendations", headers=headers)

    response = await client.post(
        f"{API}/career-recommendations/{analyst.id}/feedback",
        headers=headers,
        json={"feedback_type": "dismiss"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "career_id": str(analyst.id),
        "feedback_type": "dismiss",
        "is_current": False,
    }

    response = await client.post(
        f"{API}/career-recommendations/{frontend.id}/feedback",
        headers=headers,
        json={"feedback_type": "like"},
    )
    assert response.json()["is_current"] is True

    async with session_maker() as session:
        feedback = dict(
            (
                await session.execute(
                    select(CareerRecommendation.career_id, CareerRecommendation.user_feedback)
                )
            ).all()
        )
    assert feedback == {analyst.id: "dismiss", frontend.id: "like"}


async def test_feedback_needs_cached_recommendation(client, db):
    _, analyst, _ = await seed_catalog(db)
    user = await create_user(db)

    response = await client.post(
        f"{API}/career-recommendations/{analyst.id}/feedback",
        headers=auth_headers(user),
        json={"feedback_type": "interested"},
    )
    assert response.status_code == 404
    assert response.json()["error"] == "RECOMMENDATION_NOT_FOUND"


async def test_feedback_type_is_validated(client, db):
    _, analyst, _ = await seed_catalog(db)
    user = await create_user(db)

    response = await client.post(
        f"{API}/career-recommendations/{analyst.id}/feedback",
        headers=auth_headers(user),
        json={"feedback_type": "love"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


async def test_skill_gap_analysis(client, db, session_maker):
    skills, analyst, _ = await seed_catalog(db)
    user = await create_user(db)
    await give_skill(db, user, skills["SQL"], "Intermediate")
    await give_skill(db, user, skills["Excel"], "Beginner")
    for i in range(6):
        await create_resource(db, skills["SQL"], f"SQL course {i}", rating=4.0 + i / 10, hours=10)
    await create_resource(db, skills["Python"], "Python unrated", rating=None, hours=20)
    await create_resource(db, skills["Python"], "Python rated", rating=3.0, hours=10)

    response = await client.post(
        f"{API}/skill-gap-analysis",
        headers=auth_headers(user),
        json={"target_career_id": str(analyst.id)},
    )
    assert response.status_code == 200
    body = response.json()

    assert body["career"] == {
        "id": str(analyst.id),
        "name": "Data Analyst",
        "description": "Data Analyst description",
    }

    gaps = body["skill_gaps"]
    assert [(g["skill_name"], g["gap_severity"]) for g in gaps] == [
        ("SQL", "Critical"),
        ("Statistics", "Critical"),
        ("Python", "Important"),
    ]
    assert gaps[0]["current_proficiency"] == "Intermediate"
    assert gaps[1]["current_proficiency"] is None

    sql_resources = gaps[0]["learning_resources"]
    assert len(sql_resources) == 5
    assert sql_resources[0]["title"] == "SQL course 5"
    assert [r["title"] for r in gaps[2]["learning_resources"]] == ["Python rated", "Python unrated"]

    assert body["summary"] == {
        "total_skills_required": 4,
        "skills_you_have": 1,
        "critical_gaps": 2,
        "important_gaps": 1,
        "nice_to_have_gaps": 0,
        "estimated_learning_time": 25.0,
    }

    async with session_maker() as session:
        cached = (
            await session.execute(
                select(SkillGapAnalysis.skill_gaps, SkillGapAnalysis.recommended_resources)
                .where(SkillGapAnalysis.user_id == user.id)
            )
        ).one()
    assert len(cached.skill_gaps) == 3
    assert [len(entry["resources"]) for entry in cached.recommended_resources] == [3, 0, 2]


async def test_skill_gap_unknown_career_is_404(client, db):
    user = await create_user(db)

    response = await client.post(
        f"{API}/skill-gap-analysis",
        headers=auth_headers(user),
        json={"target_career_id": str(uuid4())},
    )
    assert response.status_code == 404
    assert response.json()["error"] == "CAREER_NOT_FOUND"
    assert "skill_gaps" not in response.json()

    response = await client.post(
        f"{API}/skill-gap-analysis",
        headers=auth_headers(user),
        json={"target_career_id": "not-a-uuid"},
    )
    assert response.status_code == 404


async def test_skill_gap_requires_career_id(client, db):
    user = await create_user(db)

    for payload in ({}, {"target_career_id": "   "}):
        response = await client.post(
            f"{API}/skill-gap-analysis",
            headers=auth_headers(user),
            json=payload,
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INVALID_INPUT"
        assert body["details"][0]["loc"][-1] == "target_career_id"
        assert response.headers["access-control-allow-origin"] == "*"
