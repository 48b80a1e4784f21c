"""
憑證服務：建立 (team, node) -> 存取金鑰 對照表並驗證登入

需求：
- 啟動時建立一次，之後唯讀
- team_count > 0 時為自動編號的隊伍推導金鑰，否則使用設定中的憑證清單
- 驗證時以 constant-time 比對，未知節點一律驗證失敗
"""
from typing import Dict, Iterable, List, Optional, Tuple
import hashlib
import hmac
import logging
import re

from settings import CredentialEntry, Settings
from core.exceptions import CredentialConfigError
from services.naming_service import generate_team_ids, normalize_id

logger = logging.getLogger(__name__)

ACCESS_KEY_LENGTH = 8

_NOT_ALNUM = re.compile(r"[^A-Z0-9]")


def derive_key(team_id: str, node_id: str, secret_salt: str) -> str:
    """
    推導單一節點的存取金鑰

    規則：HMAC-SHA256(salt, "TEAM_NODE") 的十六進位字串，轉大寫後取前 8 碼

    參數：
        team_id: 隊伍識別碼（已正規化）
        node_id: 節點識別碼（已正規化）
        secret_salt: HMAC 金鑰

    返回：
        8 碼存取金鑰

    注意：
        HMAC 無法計算時（例如 salt 含無法編碼的字元）記錄 warning，
        改用 team + node 的英數字元前 8 碼，啟動不會因此失敗
    """
    try:
        digest = hmac.new(
            secret_salt.encode("utf-8"),
            f"{team_id}_{node_id}".encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return digest.upper()[:ACCESS_KEY_LENGTH]
    except (UnicodeEncodeError, ValueError, TypeError) as e:
        logger.warning(f"HMAC derivation failed for {team_id}/{node_id}, using fallback key: {e}")
        return _NOT_ALNUM.sub("", f"{team_id}{node_id}".upper())[:ACCESS_KEY_LENGTH]


class CredentialTable:
    """唯讀的 (team_id, node_id) -> 存取金鑰 對照表"""

    def __init__(self, entries: Iterable[Tuple[str, str, str]] = ()):
        self._keys: Dict[Tuple[str, str], str] = {}
        for team_id, node_id, access_key in entries:
            identity = (normalize_id(team_id), normalize_id(node_id))
            if identity in self._keys:
                raise CredentialConfigError(
                    f"Duplicate credential for {identity[0]}/{identity[1]}"
                )
            self._keys[identity] = access_key

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, identity) -> bool:
        return identity in self._keys

    def get(self, team_id: str, node_id: str) -> Optional[str]:
        return self._keys.get((team_id, node_id))

    def verify(self, team_id: str, node_id: str, access_key: str) -> bool:
        """
        驗證存取金鑰

        參數：
            team_id: 隊伍識別碼（已正規化）
            node_id: 節點識別碼（已正規化）
            access_key: 玩家輸入的金鑰（已去除前後空白）

        返回：
            金鑰完全相符時為 True；未發放憑證的節點一律 False
        """
        expected = self._keys.get((team_id, node_id))
        if expected is None:
            return False
        return hmac.compare_digest(expected.encode("utf-8"), access_key.encode("utf-8"))

    def items(self) -> List[Tuple[Tuple[str, str], str]]:
        return list(self._keys.items())


def generated_credentials(settings: Settings) -> List[Tuple[str, str, str]]:
    """自動編號隊伍 × 設定中的節點，每個組合一筆推導出的金鑰"""
    node_ids = [normalize_id(n) for n in settings.node_ids]
    return [
        (team_id, node_id, derive_key(team_id, node_id, settings.secret_salt))
        for team_id in generate_team_ids(settings.team_prefix, settings.team_count)
        for node_id in node_ids
    ]


def configured_credentials(entries: Iterable[CredentialEntry]) -> List[Tuple[str, str, str]]:
    return [(e.team_id, e.node_id, e.access_key) for e in entries]


def build_credentials(settings: Settings) -> CredentialTable:
    """
    依設定建立憑證表

    規則：
    - team_count > 0 優先：為 TEAM01..TEAMnn 的每個節點推導金鑰
    - 否則使用設定中的 credentials 清單

    參數：
        settings: 應用程式設定

    返回：
        CredentialTable

    異常：
        CredentialConfigError: 同一個 (team, node) 出現兩次
    """
    if settings.team_count > 0:
        logger.info(f"[INIT] Auto-generating credentials for {settings.team_count} teams.")
        table = CredentialTable(generated_credentials(settings))
    else:
        table = CredentialTable(configured_credentials(settings.credentials))

    if not len(table):
        logger.warning("[INIT] No credentials configured, nobody will be able to log in.")
    return table
