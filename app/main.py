"""
Main application entry point for secure access gateway.

Every request passes the access gate before reaching a route handler.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.i18n import load_text_domain
from core.middleware import SecureAccessMiddleware
from api.v1.router import api_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

# 載入翻譯檔
load_text_domain(settings.text_domain, settings.languages_dir, settings.locale)

# 創建 FastAPI 應用程式
app = FastAPI(
    debug=settings.debug,
    title="Secure Access Gateway",
    description="要求使用者登入後才能瀏覽網站",
    version="1.0.0"
)

# 存取閘道
app.add_middleware(SecureAccessMiddleware)

# CORS 設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
