"""
命名服務：隊伍 / 節點識別碼的正規化與推導

純計算邏輯，不涉及狀態轉換
"""
import re
from typing import List, Optional

from models import NodeRole

NODE1_SUFFIX = "01"

# 隊伍編號上限（32-bit 有號整數）
MAX_TEAM_NUMBER = 2**31 - 1

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_id(value: Optional[str]) -> str:
    """
    正規化隊伍 / 節點識別碼（去空白、轉大寫）

    大小寫不敏感是對外契約，所有查詢前都要先經過這裡

    範例：
        normalize_id(" alpha ") -> "ALPHA"
        normalize_id(None) -> ""
    """
    return (value or "").strip().upper()


def session_key(team_id: str, node_id: str) -> str:
    """SessionStore 的 key：TEAM_NODE"""
    return f"{team_id}_{node_id}"


def is_node1(node_id: str) -> bool:
    """
    節點是否為 node 1（走 node1_levels 軌道）

    規則：識別碼以 01 結尾，例如 SYS-01、NODE01
    """
    return node_id.endswith(NODE1_SUFFIX)


def node_role(node_id: str) -> NodeRole:
    """解鎖時回報的角色：node 1 為 PARTNER-A，其餘為 PARTNER-B"""
    return NodeRole.PARTNER_A if is_node1(node_id) else NodeRole.PARTNER_B


def team_number(team_id: str) -> int:
    """
    從隊伍識別碼取出數字部分

    規則：
    - 去掉所有非 0-9 字元後解析成整數
    - 沒有數字時回傳 0
    - 超過 32-bit 有號整數上限（2**31 - 1）視為無法解析，回傳 0

    範例：
        team_number("TEAM07") -> 7
        team_number("T1-2") -> 12
        team_number("OMEGA") -> 0
        team_number("TEAM99999999999") -> 0
    """
    digits = _NON_DIGITS.sub("", team_id).lstrip("0")
    if not digits or len(digits) > len(str(MAX_TEAM_NUMBER)):
        return 0
    number = int(digits)
    return number if number <= MAX_TEAM_NUMBER else 0


def generate_team_ids(prefix: str, count: int) -> List[str]:
    """
    產生自動編號的隊伍識別碼

    格式：前綴 + 兩位數編號（超過 99 時自然延長）

    範例：
        generate_team_ids("TEAM", 3) -> ["TEAM01", "TEAM02", "TEAM03"]
    """
    prefix = normalize_id(prefix)
    return [f"{prefix}{i:02d}" for i in range(1, count + 1)]
