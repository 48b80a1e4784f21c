"""
並發控制工具

提供 process 內的 per-key 鎖定機制，防止競態條件（Race Condition）

FastAPI 的同步 endpoint 跑在 thread pool 上，同一個節點的兩個請求
可能同時進來。每個 session key 對應一把 threading.Lock：
- 同一個 key 的 read-modify-write 會被串行化
- 不同 key 之間互不阻塞
"""
from contextlib import contextmanager
from typing import Dict, Iterator, Optional
import threading


class KeyedLock:
    """
    以字串 key 區分的鎖集合

    範例：
        locks = KeyedLock()
        locks.add("ALPHA_SYS-01")
        with locks.hold("ALPHA_SYS-01"):
            session.level_attempts += 1

    注意：
        - 鎖只由 add() 建立，查詢與 hold() 不會建立新鎖
        - 鎖不會被回收；SessionStore 只在建立 session 時 add()，
          因此鎖的數量等於 session 數量
        - 使用 threading.Lock（不可重入），持有期間不要再對同一 key 呼叫 hold()
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def add(self, key: str) -> threading.Lock:
        """註冊 key 的鎖（已存在時沿用原本那一把）"""
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def lock_for(self, key: str) -> Optional[threading.Lock]:
        """取得 key 對應的鎖；未註冊時回傳 None"""
        with self._guard:
            return self._locks.get(key)

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """
        持有 key 的鎖直到離開 with 區塊

        nowait 語意不提供：鎖被佔用時會等待，所有臨界區都很短

        異常：
            KeyError: key 尚未以 add() 註冊
        """
        lock = self.lock_for(key)
        if lock is None:
            raise KeyError(key)
        with lock:
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
