"""FastAPI 메인 애플리케이션"""
import os
import logging
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from dotenv import load_dotenv

from api.page import render_page
from orchestrator import BaseOrchestrator, TranslationOrchestrator
from schema.schemas import ErrorResponse, TranslateRequest, TranslationResponse
from state.session_state import SessionRegistry
from utils.errors import EmptyInputError, NoTargetsSelectedError, TranslationError
from utils.language_utils import Language, SUPPORTED_LANGUAGES

# 환경 변수 로드
load_dotenv()

LOGGER = logging.getLogger(__name__)

SESSION_COOKIE = "linguasync_session"

# 에러 종류별 HTTP 상태 코드
ERROR_STATUS = {
    EmptyInputError: 400,
    NoTargetsSelectedError: 400,
}


def _error_status(error: TranslationError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 502


def create_app(
    orchestrator: Optional[BaseOrchestrator] = None,
    max_sessions: Optional[int] = None
) -> FastAPI:
    app = FastAPI(
        title="LinguaSync API",
        description="LangGraph 기반 다국어 세그먼트 정렬 번역 API",
        version="1.0.0"
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    orchestrator = orchestrator or TranslationOrchestrator()
    sessions = SessionRegistry(max_sessions=max_sessions)
    app.state.sessions = sessions
    app.state.orchestrator = orchestrator
    model_name = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    def _session(request: Request) -> tuple:
        return sessions.get_or_create(request.cookies.get(SESSION_COOKIE))

    def _redirect_home(session_id: str) -> RedirectResponse:
        response = RedirectResponse(url="/", status_code=303)
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """메인 화면"""
        session_id, session = _session(request)
        response = HTMLResponse(render_page(session, model_name=model_name))
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.post("/session/source")
    async def set_source_language(request: Request, source_language: Language = Form(...)):
        """원본 언어 변경"""
        session_id, session = _session(request)
        session.set_source_language(source_language)
        return _redirect_home(session_id)

    @app.post("/session/targets")
    async def toggle_target_language(request: Request, language: Language = Form(...)):
        """대상 언어 선택/해제"""
        session_id, session = _session(request)
        session.toggle_target_language(language)
        return _redirect_home(session_id)

    @app.post("/translate")
    async def translate_form(request: Request, text: str = Form("")):
        """화면에서 번역 요청 (결과/에러는 세션에 저장 후 메인 화면으로 이동)"""
        session_id, session = _session(request)
        session.set_input_text(text)
        await session.submit(orchestrator)
        return _redirect_home(session_id)

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {"status": "healthy"}

    @app.get("/api/languages")
    async def languages():
        """지원 언어 목록"""
        return {"languages": [lang.value for lang in SUPPORTED_LANGUAGES]}

    @app.post("/api/translate", response_model=TranslationResponse, response_model_by_alias=True)
    async def translate(request: TranslateRequest):
        """
        텍스트 번역/세그먼트 분석 API

        Request Body:
        - text: 번역할 텍스트
        - source_language: 원본 언어
        - target_languages: 대상 언어 목록
        """
        try:
            return await orchestrator.translate(
                request.text,
                request.source_language,
                request.target_languages
            )
        except TranslationError as e:
            body = ErrorResponse(error=e.kind, message=e.user_message)
            return JSONResponse(status_code=_error_status(e), content=body.model_dump())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    # OpenAI API 키 확인
    if not os.getenv("OPENAI_API_KEY"):
        LOGGER.warning("OPENAI_API_KEY is not set. Please set it in .env file.")

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
