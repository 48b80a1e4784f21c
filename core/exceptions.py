"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理

注意：玩家端的拒絕（密碼錯誤、答案錯誤、活動未開始）一律以
status=FAIL / LOCKED 的資料回應，不會以異常往外丟。
"""


class TwinLockException(Exception):
    """所有 Twin Lock 異常的基類"""
    pass


# ============ 狀態轉換異常 ============

class InvalidStateTransition(TwinLockException):
    """非法的狀態轉換（例如對已凍結的 session 升級）"""
    pass


# ============ 設定 / 權限異常 ============

class CredentialConfigError(TwinLockException):
    """憑證設定不合法（例如同一個節點出現兩次）"""
    pass


class AdminUnauthorized(TwinLockException):
    """管理員金鑰錯誤或缺少"""
    def __init__(self):
        super().__init__("Invalid admin key")
