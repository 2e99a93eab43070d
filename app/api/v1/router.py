"""
Main router for API v1.

Aggregates all v1 endpoints into a single router.
"""
from fastapi import APIRouter

from api.v1.endpoints import home, login, signup

# 創建 v1 主路由器
api_router = APIRouter()

# 包含登入頁面端點
api_router.include_router(
    login.router,
    tags=["login"]
)

# 包含註冊頁面端點
api_router.include_router(
    signup.router,
    tags=["signup"]
)

# 包含首頁與狀態端點
api_router.include_router(
    home.router,
    tags=["home"]
)
