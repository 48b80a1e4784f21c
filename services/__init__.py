"""
服務層

這個 package 包含純計算邏輯與靜態資料，不負責狀態轉換：
- NamingService：識別碼正規化、節點判斷
- PuzzleCatalog：隊伍 -> 謎題組對應
- CredentialService：憑證推導與比對
"""
