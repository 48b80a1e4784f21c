"""
EventWindow：活動倒數視窗

全場只有一個 instance（由 main.py 的 lifespan 建立），
所有「謎題是否可見」「答案是否受理」都以 is_active() 為準。

狀態：
- 建立時 inactive
- start()：未進行中才會開始並記錄 start_time；進行中則回報剩餘秒數，不重設
- end()：關閉 started，但保留 start_time
- active = started and now < start_time + duration

時間一律在呼叫當下讀取，不做快取。
"""
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging
import threading
import time

from models import StartStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartResult:
    status: StartStatus
    remaining_seconds: int


class EventWindow:
    """活動視窗；clock 可注入以便測試"""

    def __init__(self, duration_seconds: int, clock: Callable[[], float] = time.time):
        if duration_seconds <= 0:
            raise ValueError(f"duration_seconds must be positive, got {duration_seconds}")
        self._duration_seconds = duration_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._started = False
        self._start_time: Optional[float] = None

    @property
    def duration_seconds(self) -> int:
        return self._duration_seconds

    @property
    def started(self) -> bool:
        with self._lock:
            return self._started

    @property
    def start_time(self) -> Optional[float]:
        with self._lock:
            return self._start_time

    def start(self) -> StartResult:
        """
        開始活動

        返回：
            StartResult
            - STARTED：剛開始，remaining_seconds = 完整長度
            - ALREADY_RUNNING：已在進行中，remaining_seconds = 目前剩餘
        """
        with self._lock:
            now = self._clock()
            if self._active_at(now):
                remaining = self._remaining_at(now)
                logger.info(f"[ADMIN] Start ignored, event already running ({remaining}s left)")
                return StartResult(StartStatus.ALREADY_RUNNING, remaining)

            self._started = True
            self._start_time = now

        logger.info(f"[ADMIN] Event STARTED ({self._duration_seconds}s window)")
        return StartResult(StartStatus.STARTED, self._duration_seconds)

    def end(self) -> None:
        """結束活動（冪等）"""
        with self._lock:
            self._started = False
        logger.info("[ADMIN] Event ENDED")

    def is_active(self) -> bool:
        with self._lock:
            return self._active_at(self._clock())

    def remaining_seconds(self) -> int:
        with self._lock:
            return self._remaining_at(self._clock())

    def snapshot(self) -> Tuple[bool, bool, int]:
        """(active, started, remaining_seconds)，同一次讀取時鐘"""
        with self._lock:
            now = self._clock()
            return self._active_at(now), self._started, self._remaining_at(now)

    # ---- 以下必須在持有 self._lock 時呼叫 ----

    def _end_time(self) -> Optional[float]:
        if self._start_time is None:
            return None
        return self._start_time + self._duration_seconds

    def _active_at(self, now: float) -> bool:
        end_time = self._end_time()
        return self._started and end_time is not None and now < end_time

    def _remaining_at(self, now: float) -> int:
        if not self._active_at(now):
            return 0
        return max(0, int(self._end_time() - now))
