"""번역 상태 정의"""
from typing import List, Optional, TypedDict

from schema.schemas import TranslationResponse
from utils.language_utils import Language


class TranslationState(TypedDict):
    """그래프 노드 사이에서 전달되는 요청 상태"""
    original_text: str
    source_language: Language
    target_languages: List[Language]
    prompt: str
    raw_response: str
    response: Optional[TranslationResponse]
