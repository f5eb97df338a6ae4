import os
from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "SF Date Roulette - Idea API")

# 프론트 도메인 (쉼표 구분)
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]
