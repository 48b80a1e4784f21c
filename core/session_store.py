"""
SessionStore：(team, node) -> NodeSession 的 process 內儲存

職責：
1. get_or_create 的原子性（同一個 key 只會有一個 session）
2. 提供 per-key 的獨佔區塊（locked），所有狀態修改都在裡面進行
3. 依隊伍建立索引，讓 partner 查詢不需要掃全表

不負責：
- 業務判斷（交給 ProgressionEngine）
- 持久化（process 重啟後 session 全部消失）
"""
from contextlib import contextmanager
from dataclasses import replace
from typing import Dict, Iterator, List, Optional
import logging
import threading

from models import NodeSession
from core.locks import KeyedLock
from core.state_machine import NodeStateMachine
from services.naming_service import session_key

logger = logging.getLogger(__name__)


class SessionStore:
    """並發安全的 session 表；session 永不回收"""

    def __init__(self):
        # _guard 只保護 dict 結構，持有時間極短
        self._guard = threading.Lock()
        self._sessions: Dict[str, NodeSession] = {}
        self._team_index: Dict[str, List[str]] = {}
        self._locks = KeyedLock()

    def __len__(self) -> int:
        with self._guard:
            return len(self._sessions)

    def get(self, team_id: str, node_id: str) -> Optional[NodeSession]:
        """取得 session；不存在時回傳 None（不會建立）"""
        with self._guard:
            return self._sessions.get(session_key(team_id, node_id))

    def get_or_create(self, team_id: str, node_id: str) -> NodeSession:
        """
        取得或建立 session（原子操作）

        多個 thread 同時對同一個 key 呼叫時，只會建立一個 instance，
        所有呼叫者拿到同一個物件
        """
        key = session_key(team_id, node_id)
        with self._guard:
            session = self._sessions.get(key)
            if session is None:
                session = NodeStateMachine.fresh(team_id, node_id)
                self._insert(key, session)
                logger.debug(f"Created session {key}")
            return session

    def put(self, session: NodeSession) -> None:
        """無條件取代 session（只給 admin reset 使用）"""
        with self._guard:
            self._insert(session.key, session)

    @contextmanager
    def locked(self, team_id: str, node_id: str) -> Iterator[Optional[NodeSession]]:
        """
        持有 session 的獨佔鎖，yield 目前的 session（可能是 None）

        範例：
            with store.locked(team_id, node_id) as session:
                if session is not None:
                    NodeStateMachine.record_failure(session)

        注意：
            - 同一個 key 的 read-modify-write 必須整段在 with 裡完成
            - 區塊內要改用 put() 取代 session 時，yield 出來的物件即失效
            - session 不存在時直接 yield None，不持有任何鎖也不建立鎖；
              要建立 session 請先呼叫 get_or_create()
        """
        if self.get(team_id, node_id) is None:
            yield None
            return
        with self._locks.hold(session_key(team_id, node_id)):
            yield self.get(team_id, node_id)

    def snapshot(self, team_id: str, node_id: str) -> Optional[NodeSession]:
        """在 key lock 下複製一份 session，讀取時不會看到改到一半的狀態"""
        with self.locked(team_id, node_id) as session:
            return replace(session) if session is not None else None

    def team_sessions(self, team_id: str) -> List[NodeSession]:
        """同一隊所有 session 的複本（依首次建立順序，各自在 key lock 下複製）"""
        with self._guard:
            sessions = [self._sessions[k] for k in self._team_index.get(team_id, ())]
        return [self.snapshot(s.team_id, s.node_id) for s in sessions]

    def all_sessions(self) -> List[NodeSession]:
        """所有 session 的複本（管理員儀表板用）"""
        with self._guard:
            sessions = list(self._sessions.values())
        return [self.snapshot(s.team_id, s.node_id) for s in sessions]

    def _insert(self, key: str, session: NodeSession) -> None:
        # 呼叫者需持有 self._guard
        if key not in self._sessions:
            self._locks.add(key)
            self._team_index.setdefault(session.team_id, []).append(key)
        self._sessions[key] = session
