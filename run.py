"""서버 실행 스크립트"""
import logging
import uvicorn
import os
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

LOGGER = logging.getLogger(__name__)

# OpenAI API 키 확인 (없어도 서버는 시작, 번역 요청 시 실패로 처리)
if not os.getenv("OPENAI_API_KEY"):
    logging.basicConfig(level=logging.INFO)
    LOGGER.warning("OPENAI_API_KEY is not set. Please set it in .env file.")

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        reload=True
    )
