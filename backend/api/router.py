from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from data.demo_mentors import get_demo_mentors
from models.requests import MatchmakingRequest
from models.responses import DemoMentorsResponse, HealthResponse, MatchmakingResponse
from services import matchmaking

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", service=settings.app_name, version=settings.version)


@router.get("/mentors/demo", response_model=DemoMentorsResponse)
async def demo_mentors():
    return DemoMentorsResponse(mentors=get_demo_mentors())


@router.post("/matchmaking", response_model=MatchmakingResponse)
@limiter.limit(settings.matchmaking_rate_limit)
async def match_mentors(request: Request, body: MatchmakingRequest):
    return matchmaking.match(body)
