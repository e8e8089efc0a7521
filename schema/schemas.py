"""API 요청/응답 스키마 정의"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List

from utils.language_utils import Language


class Segment(BaseModel):
    """단어 또는 구 단위 세그먼트"""
    model_config = ConfigDict(populate_by_name=True)

    text: str
    # 0 이하: 다른 언어에 대응 개념 없음, 양수: 언어 간 같은 개념을 묶는 ID
    match_id: int = Field(alias="matchId", strict=True)


class TranslatedLanguageResult(BaseModel):
    """대상 언어 하나의 번역 결과 (해당 언어 어순으로 정렬된 세그먼트)"""
    language: str
    segments: List[Segment]


class TranslationResponse(BaseModel):
    """모델 응답 전체"""
    model_config = ConfigDict(populate_by_name=True)

    source_segments: List[Segment] = Field(alias="sourceSegments")
    translations: List[TranslatedLanguageResult]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class TranslateRequest(BaseModel):
    text: str
    source_language: Language = Language.ENGLISH
    target_languages: List[Language] = Field(default_factory=lambda: [Language.ITALIAN])


class ErrorResponse(BaseModel):
    """에러 응답 (error: 에러 종류, message: 사용자 메시지)"""
    error: str
    message: str
