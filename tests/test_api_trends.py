"""API tests for the industry trends feed."""

from tests.factories import API, auth_headers, create_insight, create_skills, create_user, give_skill


async def seed_insights(db):
    await create_insight(db, "Cloud surge", "Skill Demand", careers=["DevOps Engineer"], skills=["Docker", "Linux"], age_days=1)
    await create_insight(db, "AI ethics", "Emerging Role", careers=["Data Analyst"], skills=["Python", "Statistics"], age_days=2)
    await create_insight(db, "Remote work", "Industry Shift", careers=["Software Engineer"], skills=["Python", "Docker"], age_days=3)
    await create_insight(db, "AI adoption", "Market Trend", careers=["Data Analyst"], skills=["Python"], age_days=4)
    await create_insight(db, "Retired", "Market Trend", skills=["Python"], is_active=False)


async def test_anonymous_trends(client, db):
    await seed_insights(db)

    response = await client.get(f"{API}/industry-trends")
    assert response.status_code == 200
    body = response.json()

    assert body["total_insights"] == 4
    assert [i["title"] for i in body["insights"]["skill_demand"]] == ["Cloud surge"]
    assert [i["title"] for i in body["insights"]["emerging_roles"]] == ["AI ethics"]
    assert [i["title"] for i in body["insights"]["industry_shifts"]] == ["Remote work"]
    assert [i["title"] for i in body["insights"]["market_trends"]] == ["AI adoption"]
    assert body["trending_skills"] == [
        {"skill": "Python", "mentions": 3},
        {"skill": "Docker", "mentions": 2},
        {"skill": "Linux", "mentions": 1},
        {"skill": "Statistics", "mentions": 1},
    ]
    assert body["personalized_insights"] == []
    assert body["user_subscriptions"] == []
    assert body["last_updated"] is not None


async def test_filters_and_limit(client, db):
    await seed_insights(db)

    response = await client.get(f"{API}/industry-trends", params={"industry": "Data Analyst"})
    assert response.json()["total_insights"] == 2

    response = await client.get(f"{API}/industry-trends", params={"skill": "Docker", "limit": 1})
    body = response.json()
    assert body["total_insights"] == 1
    assert body["insights"]["skill_demand"][0]["title"] == "Cloud surge"

    response = await client.get(f"{API}/industry-trends", params={"skill": "COBOL"})
    body = response.json()
    assert body["total_insights"] == 0
    assert body["trending_skills"] == []
    assert body["last_updated"] is None


async def test_limit_bounds(client):
    for limit in (0, 101):
        response = await client.get(f"{API}/industry-trends", params={"limit": limit})
        assert response.status_code == 400


async def test_personalized_insights_and_subscriptions(client, db):
    await seed_insights(db)
    skills = await create_skills(db, "Docker")
    user = await create_user(db)
    await give_skill(db, user, skills["Docker"], "Intermediate")
    headers = auth_headers(user)

    await client.post(
        f"{API}/users/me/subscriptions",
        headers=headers,
        json={"subscription_type": "industry", "target": "Data Analyst"},
    )

    response = await client.get(f"{API}/industry-trends", headers=headers)
    body = response.json()
    assert [i["title"] for i in body["personalized_insights"]] == ["Cloud surge", "Remote work"]
    assert [s["target"] for s in body["user_subscriptions"]] == ["Data Analyst"]


async def test_invalid_token_is_treated_as_anonymous(client, db):
    await seed_insights(db)

    response = await client.get(
        f"{API}/industry-trends",
        headers={"Authorization": "Bearer garbage"},
    )
    assert response.status_code == 200
    assert response.json()["personalized_insights"] == []


async def test_unknown_insight_type_left_out_of_feed(client, db):
    await seed_insights(db)
    await create_insight(db, "Hiring freeze", "Rumour", skills=["Python"])

    response = await client.get(f"{API}/industry-trends")
    assert response.status_code == 200
    body = response.json()
    assert body["total_insights"] == 4
    titles = [i["title"] for group in body["insights"].values() for i in group]
    assert "Hiring freeze" not in titles
    assert body["trending_skills"][0] == {"skill": "Python", "mentions": 3}
