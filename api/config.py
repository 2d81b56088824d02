from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from api.dependencies import get_settings
from models.errors import MethodNotAllowedError
from models.settings import Settings

router = APIRouter()

PATH = "/config"
ALLOW = "GET"


# HEAD は Starlette が自動で受け付けるため、ここで明示的に弾く
@router.api_route(PATH, methods=["GET", "HEAD"], tags=["config"])
async def get_config(request: Request, settings: Settings = Depends(get_settings)):
    """決済の公開設定を取得する"""
    if request.method != "GET":
        raise MethodNotAllowedError(request.method, allow=ALLOW)
    return JSONResponse(
        status_code=200,
        content=settings.public_config(),
        headers={"Access-Control-Allow-Origin": settings.allowed_origin},
    )
