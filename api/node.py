"""
Node API Endpoints - 短輪詢版

重點：
1. 終端機每 2-3 秒輪詢 /status
2. 所有業務邏輯集中在 ProgressionEngine
3. 答錯、鎖定、活動未開始都是正常回應（status 欄位），不是 HTTP 錯誤
"""
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from schemas import NodeStatusResponse, SubmitRequest, SubmitResponse
from core.progression_engine import ProgressionEngine
from api.deps import get_engine

router = APIRouter(prefix="/api/node", tags=["node"])
logger = logging.getLogger(__name__)


@router.get("/status", response_model=NodeStatusResponse, response_model_exclude_none=True)
def node_status(
    team_id: str = Query(..., alias="teamId"),
    node_id: str = Query(..., alias="nodeId"),
    engine: ProgressionEngine = Depends(get_engine)
):
    """
    取得節點狀態

    參數：
        teamId: 隊伍識別碼（query parameter，大小寫不敏感）
        nodeId: 節點識別碼（query parameter，大小寫不敏感）

    返回：
        - eventActive、authenticated
        - 有 session 時：進度、鎖定、partner 狀態
        - 活動進行中時：cipher / cipherType / hints / timeRemainingSeconds
    """
    try:
        return engine.status(team_id, node_id)
    except Exception as e:
        logger.error(f"Failed to get node status: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/submit", response_model=SubmitResponse, response_model_exclude_none=True)
def submit(req: SubmitRequest, engine: ProgressionEngine = Depends(get_engine)):
    """
    提交答案

    Body: { teamId, nodeId, payload }，payload 例如 "victory-112"

    返回：
        - status: LEVEL_UP | UNLOCK | FAIL | LOCKED
        - LEVEL_UP：nextLevel、下一關密文與提示、attemptsRemaining
        - UNLOCK：formLink、nodeRole
        - FAIL：attemptsRemaining 或 message
    """
    try:
        return engine.submit(req.team_id, req.node_id, req.payload)
    except Exception as e:
        logger.error(f"Failed to submit payload: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
