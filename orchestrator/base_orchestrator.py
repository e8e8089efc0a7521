"""Orchestrator 추상 기본 클래스"""
from abc import ABC, abstractmethod
from typing import List

from schema.schemas import TranslationResponse
from utils.language_utils import Language


class BaseOrchestrator(ABC):
    """번역/분석 오케스트레이터의 추상 기본 클래스"""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_language: Language,
        target_languages: List[Language]
    ) -> TranslationResponse:
        """
        텍스트를 세그먼트 단위로 번역/분석하는 추상 메서드

        Args:
            text: 번역할 텍스트
            source_language: 원본 언어
            target_languages: 대상 언어 목록

        Returns:
            TranslationResponse: 검증된 모델 응답

        Raises:
            TranslationError: 입력 검증 실패, 모델 호출 실패, 응답 파싱 실패
        """
        pass
