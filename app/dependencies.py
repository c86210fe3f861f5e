import logging

from fastapi import HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import GlobalConfig

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

MISSING_SECRET_DETAIL = "Missing APP_SECRET in environment."


def get_settings(request: Request) -> GlobalConfig:
    """Get GlobalConfig from app state"""
    return request.app.state.settings


def get_app_secret(request: Request) -> str:
    """쿠키 서명 키. 미설정 시 500 (기본 키로 대체하지 않음)."""
    secret = get_settings(request).app_secret
    if not secret:
        logger.error("APP_SECRET is not configured; refusing %s %s", request.method, request.url.path)
        raise HTTPException(status_code=500, detail=MISSING_SECRET_DETAIL)
    return secret
