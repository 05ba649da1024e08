from fastapi import APIRouter

from discography.schemas.health import PingResponse

router = APIRouter()

@router.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    return PingResponse()
