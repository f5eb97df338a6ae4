from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import health, recommends, replace
from config import APP_TITLE, CORS_ALLOWED_ORIGINS


def create_app() -> FastAPI:
    app = FastAPI(title=APP_TITLE)

    # ============================================================
    # 🌐 CORS 설정 (프론트 도메인 허용)
    # ============================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(recommends.router, prefix="/api")
    app.include_router(replace.router, prefix="/api")
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성
app = create_app()
