"""
Seed script - populates the reference catalog and a development user.

Usage:
    python -m scripts.seed

Skills, careers with their requirements, learning resources and industry
insights are reference data: request handlers only read them, so this
script is the only thing that writes them.

This script is IDEMPOTENT - running it twice won't create duplicates.
Every section checks for existing data before inserting.
"""
import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.database import async_session_maker, init_db
from aspiro.core.security import hash_password
from aspiro.models.career import Career, CareerSkill
from aspiro.models.industry_insight import IndustryInsight
from aspiro.models.learning_resource import LearningResource
from aspiro.models.skill import Skill
from aspiro.models.user import User
from aspiro.models.user_skill import UserSkill


# ─── Development User ──────────────────────────────────────────

DEV_USER = {
    "email": "dev@aspiro.app",
    "password": "password123",
    "full_name": "Dev User",
    "experience_level": "mid",
}

# (skill, proficiency, years)
DEV_USER_SKILLS = [
    ("JavaScript", "Advanced", 4.0),
    ("Python", "Intermediate", 2.0),
    ("SQL", "Intermediate", 3.0),
    ("Git", "Advanced", 4.0),
    ("Communication", "Intermediate", None),
]


# ─── Skill Catalog ─────────────────────────────────────────────

SKILLS = [
    ("JavaScript", "Technical", "Programming language of the web"),
    ("Python", "Technical", "General-purpose programming language"),
    ("SQL", "Technical", "Querying relational databases"),
    ("React", "Technical", "Component-based UI library"),
    ("HTML", "Technical", "Markup for web documents"),
    ("CSS", "Technical", "Styling for web documents"),
    ("Testing", "Technical", "Unit, integration and end-to-end testing"),
    ("Statistics", "Technical", "Descriptive and inferential statistics"),
    ("Data Visualization", "Technical", "Charts and dashboards that explain data"),
    ("Cloud Platforms", "Technical", "AWS, Azure or Google Cloud"),
    ("Docker", "Tool", "Container images and runtimes"),
    ("CI/CD", "Tool", "Automated build, test and deploy pipelines"),
    ("Linux", "Tool", "Linux administration and the shell"),
    ("Git", "Tool", "Distributed version control"),
    ("Excel", "Tool", "Spreadsheets and pivot tables"),
    ("UI/UX Design", "Domain", "Interaction and visual design"),
    ("Product Strategy", "Domain", "Vision, roadmap and prioritisation"),
    ("User Research", "Domain", "Interviews, surveys and usability studies"),
    ("Analytics", "Domain", "Product and business metrics"),
    ("Problem Solving", "Soft", "Breaking down ambiguous problems"),
    ("Communication", "Soft", "Clear written and spoken communication"),
]


# ─── Careers ───────────────────────────────────────────────────
# Requirements are (skill, is_essential, required proficiency), in display order.

CAREERS = [
    {
        "name": "Software Engineer",
        "description": "Design, develop, and maintain software applications and systems",
        "industry": "Technology",
        "average_salary_min": 75000,
        "average_salary_max": 150000,
        "growth_outlook": "High",
        "requirements": [
            ("JavaScript", True, "Intermediate"),
            ("Python", False, "Intermediate"),
            ("Problem Solving", True, "Advanced"),
            ("Git", True, "Intermediate"),
            ("Testing", True, "Intermediate"),
        ],
    },
    {
        "name": "Frontend Developer",
        "description": "Create user interfaces and experiences for web applications",
        "industry": "Technology",
        "average_salary_min": 65000,
        "average_salary_max": 130000,
        "growth_outlook": "High",
        "requirements": [
            ("React", True, "Intermediate"),
            ("JavaScript", True, "Advanced"),
            ("CSS", True, "Intermediate"),
            ("HTML", True, "Intermediate"),
            ("UI/UX Design", False, "Beginner"),
        ],
    },
    {
        "name": "Data Analyst",
        "description": "Analyze data to help organizations make informed business decisions",
        "industry": "Data",
        "average_salary_min": 60000,
        "average_salary_max": 120000,
        "growth_outlook": "High",
        "requirements": [
            ("SQL", True, "Advanced"),
            ("Python", True, "Intermediate"),
            ("Excel", True, "Intermediate"),
            ("Statistics", True, "Intermediate"),
            ("Data Visualization", True, "Intermediate"),
        ],
    },
    {
        "name": "Product Manager",
        "description": "Guide product development from conception to launch",
        "industry": "Technology",
        "average_salary_min": 80000,
        "average_salary_max": 160000,
        "growth_outlook": "Medium",
        "requirements": [
            ("Product Strategy", True, "Advanced"),
            ("User Research", True, "Intermediate"),
            ("Communication", True, "Advanced"),
            ("Analytics", True, "Intermediate"),
            ("SQL", False, "Beginner"),
        ],
    },
    {
        "name": "DevOps Engineer",
        "description": "Streamline development and deployment processes",
        "industry": "Technology",
        "average_salary_min": 85000,
        "average_salary_max": 155000,
        "growth_outlook": "High",
        "requirements": [
            ("Cloud Platforms", True, "Intermediate"),
            ("Docker", True, "Intermediate"),
            ("CI/CD", True, "Intermediate"),
            ("Linux", True, "Advanced"),
            ("Python", False, "Advanced"),
        ],
    },
]


# ─── Learning Resources ────────────────────────────────────────
# (skill, title, type, provider, hours, difficulty, rating, price)

LEARNING_RESOURCES = [
    ("Testing", "Test-Driven Development in Practice", "Course", "Coursera", 20, "Intermediate", 4.6, 49.0),
    ("Testing", "Unit Testing Principles", "Book", "Manning", 15, "Intermediate", 4.7, 39.99),
    ("React", "React - The Complete Guide", "Course", "Udemy", 48, "Beginner", 4.7, 19.99),
    ("React", "Official React Tutorial", "Tutorial", "react.dev", 6, "Beginner", 4.5, 0.0),
    ("CSS", "CSS for JavaScript Developers", "Course", "Josh Comeau", 30, "Intermediate", 4.9, 299.0),
    ("HTML", "HTML Fundamentals", "Tutorial", "MDN", 5, "Beginner", 4.4, 0.0),
    ("SQL", "Advanced SQL for Data Analysis", "Course", "DataCamp", 16, "Advanced", 4.5, 25.0),
    ("SQL", "SQL Performance Explained", "Book", "Markus Winand", 12, "Advanced", 4.6, 29.0),
    ("Statistics", "Statistics with Python", "Course", "Coursera", 40, "Intermediate", 4.6, 49.0),
    ("Excel", "Excel Skills for Business", "Course", "Coursera", 24, "Beginner", 4.8, 49.0),
    ("Data Visualization", "Storytelling with Data", "Book", "Wiley", 10, "Beginner", 4.7, 27.0),
    ("Cloud Platforms", "AWS Certified Cloud Practitioner", "Certification", "AWS", 30, "Beginner", 4.6, 100.0),
    ("Docker", "Docker Deep Dive", "Book", "Nigel Poulton", 12, "Intermediate", 4.7, 29.99),
    ("CI/CD", "Continuous Delivery Pipelines", "Course", "Pluralsight", 8, "Intermediate", 4.3, 29.0),
    ("Linux", "Linux Administration Bootcamp", "Course", "Udemy", 22, "Intermediate", 4.6, 19.99),
    ("Product Strategy", "Product Strategy Fundamentals", "Course", "Reforge", 18, "Advanced", 4.5, 199.0),
    ("User Research", "Just Enough Research", "Book", "A Book Apart", 6, "Beginner", 4.4, 19.0),
    ("Analytics", "Product Analytics", "Course", "Amplitude Academy", 10, "Intermediate", 4.2, 0.0),
    ("Problem Solving", "Think Like a Programmer", "Book", "No Starch Press", 14, "Intermediate", 4.5, 34.95),
]


# ─── Industry Insights ─────────────────────────────────────────
# (title, summary, type, careers, skills, age in days)

INSIGHTS = [
    (
        "AI Ethics Specialist",
        "Professionals who ensure AI systems are developed and deployed ethically, "
        "addressing bias, fairness, and transparency in AI applications",
        "Emerging Role",
        ["Data Analyst", "Product Manager"],
        ["Python", "Statistics", "Communication"],
        1,
    ),
    (
        "Sustainability Data Analyst",
        "Specialists who analyze environmental data to help organizations meet "
        "sustainability goals and comply with environmental regulations",
        "Emerging Role",
        ["Data Analyst"],
        ["SQL", "Python", "Data Visualization"],
        2,
    ),
    (
        "Cloud Computing Skills Surge",
        "Demand for cloud computing skills continues to grow across industries as "
        "organizations accelerate digital transformation",
        "Skill Demand",
        ["DevOps Engineer", "Software Engineer"],
        ["Cloud Platforms", "Docker", "Linux"],
        3,
    ),
    (
        "Frontend Frameworks Consolidate",
        "Hiring for frontend roles increasingly centres on React and TypeScript experience",
        "Skill Demand",
        ["Frontend Developer", "Software Engineer"],
        ["React", "JavaScript", "CSS"],
        5,
    ),
    (
        "Remote Work Transformation",
        "Organizations are adapting to permanent remote and hybrid work models, "
        "changing how teams collaborate",
        "Industry Shift",
        ["Software Engineer", "Product Manager"],
        ["Communication", "Git"],
        7,
    ),
    (
        "AI Integration Accelerating",
        "Companies across industries are integrating AI tools to improve efficiency "
        "and decision-making",
        "Market Trend",
        ["Software Engineer", "Data Analyst", "Product Manager"],
        ["Python", "Analytics"],
        10,
    ),
]


async def seed_database(db: AsyncSession) -> None:
    """Insert any missing reference data and the development user, then commit."""

    # ── Skills ─────────────────────────────────────────────
    result = await db.execute(select(Skill))
    skill_map: Dict[str, Skill] = {s.name: s for s in result.scalars().all()}
    created = 0
    for name, category, description in SKILLS:
        if name in skill_map:
            continue
        skill = Skill(name=name, category=category, description=description)
        db.add(skill)
        skill_map[name] = skill
        created += 1
    await db.flush()
    print(f"  Skills: {created} created, {len(SKILLS) - created} existing")

    # ── Careers ────────────────────────────────────────────
    result = await db.execute(select(Career))
    existing_careers = {c.name for c in result.scalars().all()}
    created = 0
    for data in CAREERS:
        if data["name"] in existing_careers:
            continue
        fields = {k: v for k, v in data.items() if k != "requirements"}
        career = Career(**fields)
        db.add(career)
        await db.flush()

        for position, (skill_name, essential, level) in enumerate(data["requirements"]):
            db.add(
                CareerSkill(
                    career_id=career.id,
                    skill_id=skill_map[skill_name].id,
                    is_essential=essential,
                    proficiency_level=level,
                    position=position,
                )
            )
        created += 1
    await db.flush()
    print(f"  Careers: {created} created")

    # ── Learning Resources ─────────────────────────────────
    existing = await db.execute(select(LearningResource).limit(1))
    if existing.scalar_one_or_none():
        print("  Learning resources already exist, skipping...")
    else:
        for skill_name, title, kind, provider, hours, difficulty, rating, price in LEARNING_RESOURCES:
            db.add(
                LearningResource(
                    skill_id=skill_map[skill_name].id,
                    title=title,
                    description=f"{kind} on {skill_name} from {provider}",
                    resource_type=kind,
                    provider=provider,
                    duration_hours=hours,
                    difficulty_level=difficulty,
                    rating=rating,
                    price_usd=price,
                )
            )
        await db.flush()
        print(f"  Created {len(LEARNING_RESOURCES)} learning resources")

    # ── Industry Insights ──────────────────────────────────
    existing = await db.execute(select(IndustryInsight).limit(1))
    if existing.scalar_one_or_none():
        print("  Industry insights already exist, skipping...")
    else:
        now = datetime.now(timezone.utc)
        for title, summary, kind, careers, skills, age_days in INSIGHTS:
            db.add(
                IndustryInsight(
                    title=title,
                    summary=summary,
                    insight_type=kind,
                    relevant_careers=careers,
                    relevant_skills=skills,
                    generated_date=now - timedelta(days=age_days),
                )
            )
        await db.flush()
        print(f"  Created {len(INSIGHTS)} industry insights")

    # ── Development User ───────────────────────────────────
    existing = await db.execute(select(User).where(User.email == DEV_USER["email"]))
    if existing.scalar_one_or_none():
        print("  Dev user already exists, skipping...")
    else:
        user = User(
            email=DEV_USER["email"],
            password_hash=hash_password(DEV_USER["password"]),
            full_name=DEV_USER["full_name"],
            experience_level=DEV_USER["experience_level"],
        )
        db.add(user)
        await db.flush()

        for skill_name, level, years in DEV_USER_SKILLS:
            db.add(
                UserSkill(
                    user_id=user.id,
                    skill_id=skill_map[skill_name].id,
                    proficiency_level=level,
                    years_experience=years,
                )
            )
        await db.flush()
        print(f"  Created {DEV_USER['email']} with {len(DEV_USER_SKILLS)} skills")

    await db.commit()


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        await seed_database(db)

    print()
    print("Seed complete!")
    print(f"  Login: {DEV_USER['email']} / {DEV_USER['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
