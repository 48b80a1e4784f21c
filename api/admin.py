"""
Admin API Endpoints

所有 endpoint 都需要 X-Admin-Key header，錯誤時回 401

POST /api/admin/start       開始活動（開啟解密視窗）
POST /api/admin/end         提前結束活動
GET  /api/admin/status      所有節點的進度
POST /api/admin/reset-node  重設單一節點（解除鎖定，保持登入）
GET  /api/admin/credentials 憑證表（所有隊伍 + 金鑰）
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
import logging

from schemas import (
    AdminStatusResponse,
    CredentialRow,
    EndEventResponse,
    NodeIdentity,
    ResetNodeResponse,
    StartEventResponse,
)
from core.progression_engine import ProgressionEngine
from api.deps import get_engine, require_admin

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)
logger = logging.getLogger(__name__)


@router.post("/start", response_model=StartEventResponse, response_model_exclude_none=True)
def start_event(engine: ProgressionEngine = Depends(get_engine)):
    """
    開始活動

    冪等：進行中再呼叫會回 ALREADY_RUNNING 與剩餘秒數，不會重設倒數
    """
    try:
        return engine.start_event()
    except Exception as e:
        logger.error(f"Failed to start event: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/end", response_model=EndEventResponse)
def end_event(engine: ProgressionEngine = Depends(get_engine)):
    """結束活動（冪等）"""
    try:
        engine.end_event()
        return EndEventResponse()
    except Exception as e:
        logger.error(f"Failed to end event: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/status", response_model=AdminStatusResponse)
def admin_status(engine: ProgressionEngine = Depends(get_engine)):
    """活動狀態 + 所有節點進度（依 team、node 排序）"""
    try:
        return engine.admin_status()
    except Exception as e:
        logger.error(f"Failed to get admin status: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/reset-node", response_model=ResetNodeResponse)
def reset_node(req: NodeIdentity, engine: ProgressionEngine = Depends(get_engine)):
    """
    重設節點

    效果：
        level 1、0 次嘗試、解除鎖定 / 解鎖狀態，維持已登入
    """
    try:
        session = engine.reset_node(req.team_id, req.node_id)
        return ResetNodeResponse(team_id=session.team_id, node_id=session.node_id)
    except Exception as e:
        logger.error(f"Failed to reset node: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/credentials", response_model=List[CredentialRow])
def credentials_sheet(engine: ProgressionEngine = Depends(get_engine)):
    """憑證表：teamId、nodeId、accessKey、cipher、keyword、checksum"""
    try:
        return engine.credentials_sheet()
    except Exception as e:
        logger.error(f"Failed to build credentials sheet: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
