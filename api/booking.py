from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from typing import Dict, Optional
from api.dependencies import get_notifier, get_payment_gateway, get_settings
from api.errors import error_response
from managers.email_manager import EmailManager
from managers.payment_manager import PaymentGateway
from models.errors import BookingError
from models.settings import Settings
from services import booking as booking_service

router = APIRouter()

PATH = "/booking"
ALLOW = "POST"


def cors_headers(settings: Settings) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


@router.options(PATH, tags=["booking"])
async def booking_preflight(settings: Settings = Depends(get_settings)):
    return Response(status_code=204, headers=cors_headers(settings))


@router.post(PATH, tags=["booking"])
async def post_booking(
    request: Request,
    settings: Settings = Depends(get_settings),
    gateway: Optional[PaymentGateway] = Depends(get_payment_gateway),
    notifier: Optional[EmailManager] = Depends(get_notifier),
):
    """予約問い合わせを受け付ける。action=confirm の場合は支払い確認と通知を行う"""
    headers = cors_headers(settings)
    try:
        body = await booking_service.read_json_body(request.stream())
        payload = booking_service.parse_payload(body)

        if payload.resolved_action == "confirm":
            result = await booking_service.confirm_booking(payload, settings, gateway, notifier)
            content = result.model_dump(by_alias=True, exclude_none=True)
        else:
            result = await booking_service.submit_booking(payload, settings, gateway)
            content = result.model_dump(by_alias=True)
    except BookingError as e:
        return error_response(request, e, headers)

    return JSONResponse(status_code=200, content=content, headers=headers)
