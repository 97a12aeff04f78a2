"""
Routes backed by the text completion provider: resume optimisation and
career chat. Both are rate limited per user and never fail because the
provider did.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.api.deps import get_current_user
from aspiro.core.database import get_db
from aspiro.core.llm import TextCompletionProvider, get_completion_provider
from aspiro.core.rate_limit import RATE_AI, limiter
from aspiro.models.user import User
from aspiro.schemas.chat import ChatRequest, ChatResponse
from aspiro.schemas.resume import ResumeAnalysis, ResumeOptimizationRequest
from aspiro.services.chat_service import ChatService
from aspiro.services.resume_service import ResumeService

router = APIRouter(tags=["assistant"])

resume_service = ResumeService()
chat_service = ChatService()


@router.post("/resume-optimization", response_model=ResumeAnalysis)
@limiter.limit(RATE_AI)
async def resume_optimization(
    request: Request,
    body: ResumeOptimizationRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    provider: TextCompletionProvider = Depends(get_completion_provider),
):
    """Score a resume against the skills of careers matching the job title."""
    return await resume_service.optimize(
        db,
        provider,
        resume_text=body.resume_text,
        target_job_title=body.target_job_title,
    )


@router.post("/chat", response_model=ChatResponse)
@limiter.limit(RATE_AI)
async def chat(
    request: Request,
    body: ChatRequest,
    current_user: User = Depends(get_current_user),
    provider: TextCompletionProvider = Depends(get_completion_provider),
):
    return await chat_service.reply(provider, message=body.message, context=body.context)
