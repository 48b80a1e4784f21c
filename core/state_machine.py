"""
NodeSession 狀態機：集中管理所有節點狀態轉換

狀態圖：

    (未登入) --authenticate--> PLAYING(level 1)
    PLAYING(level n) --advance_level--> PLAYING(level n+1)     n < 3
    PLAYING(level 3) --unlock--> UNLOCKED                        終局
    PLAYING --record_failure x3--> LOCKED                        終局
    任何狀態 --fresh (admin reset)--> PLAYING(level 1)

所有方法直接修改傳入的 session，呼叫者必須持有該 session 的 key lock。
非法轉換一律丟 InvalidStateTransition，不做靜默忽略。
"""
from models import NodeSession, MAX_LEVEL
from core.exceptions import InvalidStateTransition


class NodeStateMachine:
    """NodeSession 的狀態轉換"""

    @staticmethod
    def fresh(team_id: str, node_id: str, authenticated: bool = False) -> NodeSession:
        """建立全新的 session（level 1、0 次嘗試、未鎖定）"""
        return NodeSession(team_id=team_id, node_id=node_id, authenticated=authenticated)

    @staticmethod
    def authenticate(session: NodeSession) -> NodeSession:
        """標記為已登入（冪等，不影響進度）"""
        session.authenticated = True
        return session

    @staticmethod
    def advance_level(session: NodeSession) -> NodeSession:
        """
        答對非最終關：升級並重設本關嘗試次數

        異常：
            InvalidStateTransition: session 已凍結或已在最終關
        """
        NodeStateMachine._ensure_playing(session, "advance level")
        if session.current_level >= MAX_LEVEL:
            raise InvalidStateTransition(
                f"{session.key}: cannot advance past level {MAX_LEVEL}"
            )
        session.current_level += 1
        session.level_attempts = 0
        return session

    @staticmethod
    def unlock(session: NodeSession) -> NodeSession:
        """
        答對最終關：進入 UNLOCKED 終局

        異常：
            InvalidStateTransition: session 已凍結或尚未到最終關
        """
        NodeStateMachine._ensure_playing(session, "unlock")
        if session.current_level != MAX_LEVEL:
            raise InvalidStateTransition(
                f"{session.key}: cannot unlock at level {session.current_level}"
            )
        session.unlocked = True
        return session

    @staticmethod
    def record_failure(session: NodeSession) -> NodeSession:
        """
        答錯：累計一次嘗試，用完額度時同步鎖定

        返回：
            更新後的 session（呼叫者看 permanently_locked 決定回 FAIL 或 LOCKED）
        """
        NodeStateMachine._ensure_playing(session, "record failure")
        session.level_attempts += 1
        if session.attempts_remaining == 0:
            session.permanently_locked = True
        return session

    @staticmethod
    def force_lock(session: NodeSession) -> NodeSession:
        """
        額度已用完卻仍在 PLAYING 時強制鎖定

        異常：
            InvalidStateTransition: session 已解鎖（兩個終局互斥）
        """
        if session.unlocked:
            raise InvalidStateTransition(f"{session.key}: cannot lock an unlocked node")
        session.permanently_locked = True
        return session

    @staticmethod
    def _ensure_playing(session: NodeSession, action: str) -> None:
        if session.frozen:
            state = "UNLOCKED" if session.unlocked else "LOCKED"
            raise InvalidStateTransition(f"{session.key}: cannot {action} in state {state}")
