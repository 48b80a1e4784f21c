"""
Auth API Endpoints

職責：
1. 節點登入（teamId + nodeId + accessKey）
2. 頁面重新整理後恢復 session
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from schemas import LoginRequest, LoginResponse, NodeIdentity, RestoreResponse
from core.progression_engine import ProgressionEngine
from api.deps import get_engine

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
def login(req: LoginRequest, engine: ProgressionEngine = Depends(get_engine)):
    """
    驗證節點憑證

    返回：
        - status: OK | FAIL
        - teamId / nodeId: 正規化後的識別碼（僅 OK 時）
    """
    try:
        return engine.login(req.team_id, req.node_id, req.access_key)
    except Exception as e:
        logger.error(f"Failed to login: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/restore", response_model=RestoreResponse, response_model_exclude_none=True)
def restore(req: NodeIdentity, engine: ProgressionEngine = Depends(get_engine)):
    """
    恢復 session（不需重新輸入憑證）

    返回：
        - status: OK | FAIL
        - attemptsRemaining / eventActive / level（僅 OK 時）
    """
    try:
        return engine.restore(req.team_id, req.node_id)
    except Exception as e:
        logger.error(f"Failed to restore session: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
