"""
FastAPI dependencies

引擎與設定都在 main.py 的 lifespan 建立並掛在 app.state 上，
endpoint 透過這裡取得，不直接 import 全域物件。
"""
from typing import Optional
import hmac
import logging

from fastapi import Depends, Header, HTTPException, Request

from settings import Settings
from core.exceptions import AdminUnauthorized
from core.progression_engine import ProgressionEngine

logger = logging.getLogger(__name__)


def get_engine(request: Request) -> ProgressionEngine:
    return request.app.state.engine


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def check_admin_key(presented: Optional[str], settings: Settings) -> None:
    """
    比對管理員金鑰

    異常：
        AdminUnauthorized: 金鑰缺少或不符
    """
    if not presented or not hmac.compare_digest(
        presented.encode("utf-8"), settings.admin_key.encode("utf-8")
    ):
        raise AdminUnauthorized()


def require_admin(
    x_admin_key: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """所有 /api/admin endpoint 的守門員"""
    try:
        check_admin_key(x_admin_key, settings)
    except AdminUnauthorized as e:
        logger.warning("[ADMIN] Rejected request with invalid admin key")
        raise HTTPException(status_code=401, detail=str(e))
