"""
API 請求 / 回應 Schema

對外欄位一律使用 camelCase（teamId、attemptsRemaining...），
選填欄位為 None 時由 router 的 response_model_exclude_none 省略。
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models import AuthStatus, NodeRole, StartStatus, SubmitStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Requests ============

class LoginRequest(CamelModel):
    team_id: str = ""
    node_id: str = ""
    access_key: str = ""


class NodeIdentity(CamelModel):
    """restore / reset-node 共用"""
    team_id: str = ""
    node_id: str = ""


class SubmitRequest(CamelModel):
    team_id: str = ""
    node_id: str = ""
    payload: str = ""  # 格式：keyword-checksum，例如 victory-112


# ============ Player responses ============

class LoginResponse(CamelModel):
    status: AuthStatus
    team_id: Optional[str] = None
    node_id: Optional[str] = None


class RestoreResponse(CamelModel):
    status: AuthStatus
    team_id: Optional[str] = None
    node_id: Optional[str] = None
    attempts_remaining: Optional[int] = None
    event_active: Optional[bool] = None
    level: Optional[int] = None


class NodeStatusResponse(CamelModel):
    event_active: bool
    authenticated: bool
    attempts_remaining: Optional[int] = None
    node_locked: Optional[bool] = None
    unlocked: Optional[bool] = None
    level: Optional[int] = None
    partner_connected: Optional[bool] = None
    partner_unlocked: Optional[bool] = None
    partner_node_id: Optional[str] = None
    # 以下只在活動進行中出現
    time_remaining_seconds: Optional[int] = None
    cipher: Optional[str] = None
    cipher_type: Optional[str] = None
    hints: Optional[List[str]] = None


class SubmitResponse(CamelModel):
    status: SubmitStatus
    next_level: Optional[int] = None
    cipher: Optional[str] = None
    cipher_type: Optional[str] = None
    hints: Optional[List[str]] = None
    attempts_remaining: Optional[int] = None
    form_link: Optional[str] = None
    node_role: Optional[NodeRole] = None
    message: Optional[str] = None


# ============ Admin responses ============

class StartEventResponse(CamelModel):
    status: StartStatus
    message: str
    time_remaining_seconds: Optional[int] = None


class EndEventResponse(CamelModel):
    status: str = "ENDED"
    message: str = "Event ended. All windows sealed."


class ResetNodeResponse(CamelModel):
    status: str = "RESET"
    team_id: str
    node_id: str


class AdminNodeEntry(CamelModel):
    team_id: str
    node_id: str
    authenticated: bool
    level: int
    attempts_used: int
    attempts_remaining: int
    unlocked: bool
    locked: bool
    keyword: str
    checksum: int


class AdminStatusResponse(CamelModel):
    event_active: bool
    event_started: bool
    time_remaining_seconds: int
    duration_minutes: int
    nodes: List[AdminNodeEntry]


class CredentialRow(CamelModel):
    team_id: str
    node_id: str
    access_key: str
    cipher: str
    keyword: str
    checksum: str
