"""
Skill catalog and career routes. Public reference data.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.database import get_db
from aspiro.schemas.catalog import CareerDetail, CareerSummary, SkillResponse
from aspiro.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])

catalog_service = CatalogService()


@router.get("/skills", response_model=List[SkillResponse])
async def list_skills(
    category: Optional[str] = Query(None, description="e.g. Technical, Soft"),
    db: AsyncSession = Depends(get_db),
):
    return await catalog_service.list_skills(db, category=category)


@router.get("/careers", response_model=List[CareerSummary])
async def list_careers(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_careers(db)


@router.get("/careers/{career_id}", response_model=CareerDetail)
async def get_career(
    career_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Career detail with required skills in display order."""
    return await catalog_service.get_career(db, career_id)
