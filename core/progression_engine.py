"""
Progression Engine：節點進度的所有業務邏輯

職責：
1. 登入 / 恢復 session
2. 節點狀態查詢（含 partner 狀態）
3. 答案提交（升級、解鎖、扣次數、鎖定）
4. 管理員操作（開始 / 結束活動、重設節點、儀表板、憑證表）

原則：
- 唯一有業務邏輯的地方；EventWindow、PuzzleCatalog 只讀
- 所有 session 修改都在 SessionStore.locked() 內，透過 NodeStateMachine
- 玩家端的拒絕一律以 status=FAIL / LOCKED 回應，不丟異常
"""
from typing import Callable, List, Optional
import logging
import time

from models import AuthStatus, NodeSession, StartStatus, SubmitStatus, MAX_LEVEL
from schemas import (
    AdminNodeEntry,
    AdminStatusResponse,
    CredentialRow,
    LoginResponse,
    NodeStatusResponse,
    RestoreResponse,
    StartEventResponse,
    SubmitResponse,
)
from settings import Settings
from core.event_window import EventWindow
from core.session_store import SessionStore
from core.state_machine import NodeStateMachine
from services.credential_service import CredentialTable, build_credentials
from services.naming_service import is_node1, node_role, normalize_id
from services.puzzle_catalog import PuzzleCatalog

logger = logging.getLogger(__name__)


def parse_payload(payload: str):
    """
    拆解 keyword-checksum

    規則：
    - 先轉小寫，只在第一個 '-' 切開
    - 沒有 checksum 段時視為空字串（會被當成答錯，照樣扣次數）

    範例：
        parse_payload("Victory-112") -> ("victory", "112")
        parse_payload("victory") -> ("victory", "")
        parse_payload("a-b-c") -> ("a", "b-c")
    """
    parts = payload.lower().split("-", 1)
    keyword = parts[0]
    checksum = parts[1] if len(parts) > 1 else ""
    return keyword, checksum


class ProgressionEngine:
    """節點進度引擎；所有依賴由建構子注入"""

    def __init__(
        self,
        window: EventWindow,
        catalog: PuzzleCatalog,
        store: SessionStore,
        credentials: CredentialTable,
        settings: Settings,
    ):
        self.window = window
        self.catalog = catalog
        self.store = store
        self.credentials = credentials
        self.settings = settings

    @classmethod
    def from_settings(
        cls, settings: Settings, clock: Callable[[], float] = time.time
    ) -> "ProgressionEngine":
        """
        依設定建立完整的引擎（main.py lifespan 使用）

        參數：
            settings: Settings
            clock: 時鐘函式，測試時可注入假時鐘
        """
        engine = cls(
            window=EventWindow(settings.event_duration_seconds, clock=clock),
            catalog=PuzzleCatalog(),
            store=SessionStore(),
            credentials=build_credentials(settings),
            settings=settings,
        )
        logger.info(
            f"[INIT] TwinLock ready. {len(engine.credentials)} credentials, "
            f"{len(engine.catalog)} puzzles."
        )
        return engine

    # ============ Auth ============

    def login(self, team_id: str, node_id: str, access_key: str) -> LoginResponse:
        """
        驗證節點憑證

        流程：
        1. 比對憑證（未發放或不符 -> FAIL，不建立 session）
        2. 取得或建立 session，標記為已登入（重複登入不影響進度）

        返回：
            LoginResponse(status=OK|FAIL)
        """
        team_id, node_id = normalize_id(team_id), normalize_id(node_id)
        access_key = (access_key or "").strip()

        if not self.credentials.verify(team_id, node_id, access_key):
            logger.info(f"[AUTH] Rejected {team_id} / {node_id}")
            return LoginResponse(status=AuthStatus.FAIL)

        self.store.get_or_create(team_id, node_id)
        with self.store.locked(team_id, node_id) as session:
            NodeStateMachine.authenticate(session)

        logger.info(f"[AUTH] {team_id} / {node_id}")
        return LoginResponse(status=AuthStatus.OK, team_id=team_id, node_id=node_id)

    def restore(self, team_id: str, node_id: str) -> RestoreResponse:
        """
        頁面重新整理後恢復 session（不需重新輸入憑證）

        只讀操作；沒有已登入的 session 時回 FAIL
        """
        team_id, node_id = normalize_id(team_id), normalize_id(node_id)
        session = self.store.snapshot(team_id, node_id)
        if session is None or not session.authenticated:
            return RestoreResponse(status=AuthStatus.FAIL)

        return RestoreResponse(
            status=AuthStatus.OK,
            team_id=team_id,
            node_id=node_id,
            attempts_remaining=session.attempts_remaining,
            event_active=self.window.is_active(),
            level=session.current_level,
        )

    # ============ Node status ============

    def status(self, team_id: str, node_id: str) -> NodeStatusResponse:
        """
        節點狀態（前端每 2-3 秒輪詢一次）

        返回：
            - 永遠包含 eventActive
            - 沒有 session：只回 authenticated=False
            - 有 session：進度、鎖定狀態、partner 狀態
            - 活動進行中才附上密文、提示與剩餘時間
        """
        team_id, node_id = normalize_id(team_id), normalize_id(node_id)
        active = self.window.is_active()
        session = self.store.snapshot(team_id, node_id)
        if session is None:
            return NodeStatusResponse(event_active=active, authenticated=False)

        partner = self._find_partner(team_id, node_id)
        response = NodeStatusResponse(
            event_active=active,
            authenticated=True,
            attempts_remaining=session.attempts_remaining,
            node_locked=session.permanently_locked,
            unlocked=session.unlocked,
            level=session.current_level,
            partner_connected=partner is not None,
            partner_unlocked=partner.unlocked if partner is not None else False,
            partner_node_id=partner.node_id if partner is not None else None,
        )

        if active:
            level = self.catalog.level_for_session(session)
            response.time_remaining_seconds = self.window.remaining_seconds()
            response.cipher = level.cipher_text
            response.cipher_type = level.cipher_type
            response.hints = list(level.hints)
        return response

    # ============ Submit ============

    def submit(self, team_id: str, node_id: str, payload: str) -> SubmitResponse:
        """
        提交答案（核心狀態轉換）

        流程（整段持有 session 的 key lock）：
        1. 未登入 -> FAIL
        2. 已解鎖或已鎖定 -> LOCKED（終局不可逆）
        3. 活動未進行 -> FAIL，不扣次數
        4. 額度已用完 -> 強制鎖定，LOCKED
        5. 答對：未到最終關 -> LEVEL_UP；最終關 -> UNLOCK
        6. 答錯：扣一次，用完 -> LOCKED，否則 FAIL

        並發安全：
            同一節點的兩個提交不會交錯，不可能兩個都越過次數上限
        """
        team_id, node_id = normalize_id(team_id), normalize_id(node_id)
        payload = (payload or "").strip()

        with self.store.locked(team_id, node_id) as session:
            if session is None or not session.authenticated:
                return SubmitResponse(status=SubmitStatus.FAIL, message="Not authenticated")

            if session.frozen:
                return SubmitResponse(status=SubmitStatus.LOCKED)

            if not self.window.is_active():
                return SubmitResponse(status=SubmitStatus.FAIL, message="Event not active")

            if session.attempts_remaining <= 0:
                NodeStateMachine.force_lock(session)
                logger.warning(f"[LOCK] {team_id} / {node_id} (no attempts left)")
                return SubmitResponse(status=SubmitStatus.LOCKED)

            level = self.catalog.level_for_session(session)
            keyword, checksum = parse_payload(payload)

            if keyword == level.keyword and checksum == str(level.checksum):
                return self._on_correct(session)
            return self._on_wrong(session)

    def _on_correct(self, session: NodeSession) -> SubmitResponse:
        team_id, node_id = session.team_id, session.node_id

        if session.current_level < MAX_LEVEL:
            NodeStateMachine.advance_level(session)
            next_level = self.catalog.level_for_session(session)
            logger.info(f"[LEVEL_UP] {team_id} / {node_id} -> Level {session.current_level}")
            return SubmitResponse(
                status=SubmitStatus.LEVEL_UP,
                next_level=session.current_level,
                cipher=next_level.cipher_text,
                cipher_type=next_level.cipher_type,
                hints=list(next_level.hints),
                attempts_remaining=session.attempts_remaining,
            )

        NodeStateMachine.unlock(session)
        logger.info(f"[UNLOCK] {team_id} / {node_id}")
        return SubmitResponse(
            status=SubmitStatus.UNLOCK,
            form_link=self._form_link(node_id),
            node_role=node_role(node_id),
        )

    def _on_wrong(self, session: NodeSession) -> SubmitResponse:
        NodeStateMachine.record_failure(session)
        logger.info(
            f"[FAIL] {session.team_id} / {session.node_id} "
            f"level {session.current_level} attempt {session.level_attempts}"
        )
        if session.permanently_locked:
            logger.warning(f"[LOCK] {session.team_id} / {session.node_id}")
            return SubmitResponse(status=SubmitStatus.LOCKED)
        return SubmitResponse(
            status=SubmitStatus.FAIL,
            attempts_remaining=session.attempts_remaining,
        )

    # ============ Admin ============

    def start_event(self) -> StartEventResponse:
        """開始活動；已在進行中時回 ALREADY_RUNNING，不重設倒數"""
        result = self.window.start()
        if result.status == StartStatus.ALREADY_RUNNING:
            return StartEventResponse(
                status=result.status,
                message="Already running.",
                time_remaining_seconds=result.remaining_seconds,
            )
        return StartEventResponse(status=result.status, message="Event started.")

    def end_event(self) -> None:
        self.window.end()

    def reset_node(self, team_id: str, node_id: str) -> NodeSession:
        """
        重設節點（硬體故障時使用）

        效果：
            以全新且已登入的 session 取代原本的 session
            （level 1、0 次嘗試、未解鎖、未鎖定），不需重新登入
        """
        team_id, node_id = normalize_id(team_id), normalize_id(node_id)
        with self.store.locked(team_id, node_id):
            fresh = NodeStateMachine.fresh(team_id, node_id, authenticated=True)
            self.store.put(fresh)
        logger.info(f"[ADMIN] Reset: {team_id} / {node_id}")
        return fresh

    def admin_status(self) -> AdminStatusResponse:
        """所有節點的進度快照，依 team + node 排序"""
        active, started, remaining = self.window.snapshot()
        nodes = []
        for session in self.store.all_sessions():
            puzzle_set = self.catalog.resolve(session.team_id)
            nodes.append(AdminNodeEntry(
                team_id=session.team_id,
                node_id=session.node_id,
                authenticated=session.authenticated,
                level=session.current_level,
                attempts_used=session.level_attempts,
                attempts_remaining=session.attempts_remaining,
                unlocked=session.unlocked,
                locked=session.permanently_locked,
                keyword=puzzle_set.keyword,
                checksum=puzzle_set.checksum,
            ))
        nodes.sort(key=lambda n: n.team_id + n.node_id)

        return AdminStatusResponse(
            event_active=active,
            event_started=started,
            time_remaining_seconds=remaining,
            duration_minutes=self.settings.duration_minutes,
            nodes=nodes,
        )

    def credentials_sheet(self) -> List[CredentialRow]:
        """所有憑證 + 謎題資訊，給工作人員列印發放"""
        sheet = []
        for (team_id, node_id), access_key in self.credentials.items():
            puzzle_set = self.catalog.resolve(team_id)
            sheet.append(CredentialRow(
                team_id=team_id,
                node_id=node_id,
                access_key=access_key,
                cipher=self.catalog.cipher_type_for(team_id, node_id),
                keyword=puzzle_set.keyword,
                checksum=str(puzzle_set.checksum),
            ))
        sheet.sort(key=lambda row: f"{row.team_id}_{row.node_id}")
        return sheet

    # ============ Helpers ============

    def _find_partner(self, team_id: str, node_id: str) -> Optional[NodeSession]:
        """同隊、不同節點、已登入的第一個 session（複本）"""
        for other in self.store.team_sessions(team_id):
            if other.node_id != node_id and other.authenticated:
                return other
        return None

    def _form_link(self, node_id: str) -> str:
        if is_node1(node_id):
            return self.settings.form_link_node1
        return self.settings.form_link_node2
