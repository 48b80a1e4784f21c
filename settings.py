from typing import List
from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings

# 本機開發用的前端 origin，永遠允許
LOCAL_DEV_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class CredentialEntry(BaseModel):
    """
    一筆預先發放的登入憑證

    環境變數範例：
        TWINLOCK_CREDENTIALS='[{"team_id": "ALPHA", "node_id": "SYS-01", "access_key": "K1"}]'
    """
    team_id: str
    node_id: str
    access_key: str

    @field_validator("team_id", "node_id")
    @classmethod
    def normalize_identity(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("team_id / node_id must not be empty")
        return value

    @field_validator("access_key")
    @classmethod
    def strip_access_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("access_key must not be empty")
        return value


class Settings(BaseSettings):
    admin_key: str = "TWINLOCK_ADMIN_2024"

    # 活動長度：duration_seconds > 0 時優先使用（測試或彩排用）
    duration_minutes: int = 30
    duration_seconds: int = 0

    # 憑證：team_count > 0 時自動產生，否則使用 credentials 清單
    secret_salt: str = "TWINLOCK_DEFAULT_SALT"
    team_count: int = 0
    team_prefix: str = "TEAM"
    node_ids: List[str] = ["SYS-01", "SYS-02"]
    credentials: List[CredentialEntry] = []

    form_link_node1: str = "https://forms.gle/REPLACEME_NODE1"
    form_link_node2: str = "https://forms.gle/REPLACEME_NODE2"

    cors_origin: str = "http://localhost:5173"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "TWINLOCK_"
        extra = "ignore"

    @property
    def event_duration_seconds(self) -> int:
        if self.duration_seconds > 0:
            return self.duration_seconds
        return self.duration_minutes * 60

    @property
    def cors_origins_list(self) -> List[str]:
        """逗號分隔的 origin，加上本機開發用 origin（去重、保留順序）"""
        origins = [o.strip() for o in self.cors_origin.split(",") if o.strip()]
        for origin in LOCAL_DEV_ORIGINS:
            if origin not in origins:
                origins.append(origin)
        return origins


@lru_cache()
def get_settings():
    return Settings()
