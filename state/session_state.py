"""화면 세션 상태와 상태 변경 진입점"""
import logging
import os
import secrets
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional

from orchestrator.base_orchestrator import BaseOrchestrator
from schema.schemas import TranslationResponse
from utils.errors import GENERIC_FAILURE_MESSAGE, NO_TARGETS_MESSAGE, TranslationError
from utils.language_utils import Language, available_targets

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


@dataclass
class SessionState:
    """한 브라우저 세션의 화면 상태 (프로세스 메모리에만 존재)"""
    input_text: str = ""
    source_language: Language = Language.ENGLISH
    target_languages: List[Language] = field(default_factory=lambda: [Language.ITALIAN])
    result: Optional[TranslationResponse] = None
    is_loading: bool = False
    error: Optional[str] = None
    hovered_match_id: Optional[int] = None


class TranslationSession:
    """SessionState를 소유하고 setter로만 변경하는 컨트롤러"""

    def __init__(self, state: Optional[SessionState] = None):
        self.state = state or SessionState()

    def set_input_text(self, text: str) -> None:
        self.state.input_text = text or ""

    def set_source_language(self, language: Language) -> None:
        """원본 언어 변경 (대상 언어 목록에 있으면 제거)"""
        language = Language(language)
        self.state.source_language = language
        self.state.target_languages = [
            lang for lang in self.state.target_languages if lang != language
        ]

    def toggle_target_language(self, language: Language) -> None:
        language = Language(language)
        if language == self.state.source_language:
            return
        if language in self.state.target_languages:
            self.state.target_languages = [
                lang for lang in self.state.target_languages if lang != language
            ]
        else:
            self.state.target_languages = self.state.target_languages + [language]

    def available_targets(self) -> List[Language]:
        return available_targets(self.state.source_language)

    def hover(self, match_id: Optional[int]) -> None:
        """
        포인터 진입: 연결된 세그먼트(matchId > 0)만 hover 상태로 설정

        브라우저에서는 페이지 스크립트가 hover를 직접 처리하므로 HTTP 라우트는 없음.
        hovered_match_id는 서버에서 특정 hover 상태로 페이지를 렌더링할 때 사용
        (render_page -> render_segments).
        """
        if match_id is not None and match_id > 0:
            self.state.hovered_match_id = match_id

    def leave(self) -> None:
        self.state.hovered_match_id = None

    def can_submit(self) -> bool:
        return bool(self.state.input_text.strip()) and not self.state.is_loading

    async def submit(self, orchestrator: BaseOrchestrator) -> bool:
        """
        현재 입력으로 번역 요청

        Returns:
            bool: 새 결과를 받았으면 True
        """
        if not self.state.input_text.strip():
            return False
        if self.state.is_loading:
            LOGGER.info("이미 번역 요청이 진행 중입니다")
            return False
        if not self.state.target_languages:
            self.state.error = NO_TARGETS_MESSAGE
            return False

        self.state.is_loading = True
        self.state.error = None
        self.state.result = None
        self.state.hovered_match_id = None

        try:
            self.state.result = await orchestrator.translate(
                self.state.input_text,
                self.state.source_language,
                list(self.state.target_languages)
            )
            return True
        except TranslationError as e:
            LOGGER.warning(f"번역 실패 ({e.kind}): {e}")
            self.state.error = GENERIC_FAILURE_MESSAGE
            return False
        finally:
            self.state.is_loading = False


class SessionRegistry:
    """
    세션 ID -> TranslationSession 매핑 (LRU)

    max_sessions를 넘으면 가장 오래 사용되지 않은 세션부터 제거
    """

    def __init__(self, max_sessions: Optional[int] = None):
        if max_sessions is None:
            max_sessions = int(os.getenv("SESSION_MAX_COUNT", str(DEFAULT_MAX_SESSIONS)))
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, TranslationSession]" = OrderedDict()

    def create(self) -> str:
        session_id = secrets.token_urlsafe(16)
        self._sessions[session_id] = TranslationSession()
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            LOGGER.info(f"세션 제거 (최대 {self.max_sessions}개 초과): {evicted_id[:6]}...")
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[TranslationSession]:
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: Optional[str]) -> tuple:
        """(session_id, session) 반환, 없으면 새로 생성"""
        session = self.get(session_id)
        if session is not None:
            return session_id, session
        new_id = self.create()
        return new_id, self._sessions[new_id]

    def __len__(self) -> int:
        return len(self._sessions)
