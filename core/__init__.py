"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- 狀態機：集中管理所有節點狀態轉換
- Engine：登入、提交、管理員操作
- SessionStore / EventWindow：process 內共享狀態
- Locks：並發控制工具
"""
