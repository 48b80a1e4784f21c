"""
資料模型

- NodeSession：單一節點的進度狀態（唯一可變的共享資料）
- Level / PuzzleSet：靜態謎題資料（不可變）
- 各種狀態 Enum：對外回應使用的 status 值
"""
import enum
from dataclasses import dataclass
from typing import Tuple

MAX_LEVEL = 3
MAX_ATTEMPTS_PER_LEVEL = 3


class AuthStatus(str, enum.Enum):
    """login / restore 的結果"""
    OK = "OK"
    FAIL = "FAIL"


class SubmitStatus(str, enum.Enum):
    """submit 的結果"""
    LEVEL_UP = "LEVEL_UP"
    UNLOCK = "UNLOCK"
    FAIL = "FAIL"
    LOCKED = "LOCKED"


class StartStatus(str, enum.Enum):
    """活動開始的結果"""
    STARTED = "STARTED"
    ALREADY_RUNNING = "ALREADY_RUNNING"


class NodeRole(str, enum.Enum):
    """解鎖後回報的節點角色"""
    PARTNER_A = "PARTNER-A"
    PARTNER_B = "PARTNER-B"


@dataclass(frozen=True)
class Level:
    """一個關卡：密文、答案（keyword + checksum）、分段提示"""
    keyword: str
    checksum: int
    cipher_type: str
    cipher_text: str
    hints: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PuzzleSet:
    """
    一組謎題：兩條節點軌道，各三關

    keyword / checksum / node*_type 只給管理員核對用，
    取自最後一關（node2 的答案與 node1 相同）。
    """
    node1_levels: Tuple[Level, ...]
    node2_levels: Tuple[Level, ...]

    @property
    def keyword(self) -> str:
        return self.node2_levels[-1].keyword

    @property
    def checksum(self) -> int:
        return self.node2_levels[-1].checksum

    @property
    def node1_type(self) -> str:
        return self.node1_levels[-1].cipher_type

    @property
    def node2_type(self) -> str:
        return self.node2_levels[-1].cipher_type


@dataclass
class NodeSession:
    """
    單一節點的進度狀態

    狀態轉換只能透過 core.state_machine.NodeStateMachine，
    並且必須在 SessionStore.locked() 內進行。

    不變條件：
        - unlocked 與 permanently_locked 不會同時為 True
        - 任一為 True 後 session 即凍結，不再升級也不再累計嘗試
    """
    team_id: str
    node_id: str
    authenticated: bool = False
    current_level: int = 1
    level_attempts: int = 0
    unlocked: bool = False
    permanently_locked: bool = False

    @property
    def key(self) -> str:
        return f"{self.team_id}_{self.node_id}"

    @property
    def attempts_remaining(self) -> int:
        return max(0, MAX_ATTEMPTS_PER_LEVEL - self.level_attempts)

    @property
    def frozen(self) -> bool:
        return self.unlocked or self.permanently_locked
