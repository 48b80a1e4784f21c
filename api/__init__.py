"""
HTTP 層（FastAPI routers）

- auth：登入 / 恢復 session
- node：節點狀態輪詢 / 提交答案
- admin：活動控制與管理員儀表板（需 X-Admin-Key）
"""
