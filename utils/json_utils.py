"""모델 응답 JSON 파싱 유틸리티"""
import json
import re

from pydantic import ValidationError

from utils.errors import MalformedResponseError
from schema.schemas import TranslationResponse

_FENCE_PATTERN = re.compile(r"```(?:json)?")


def strip_code_fences(text: str) -> str:
    """마크다운 코드 블록 표시(```json, ```)를 모두 제거"""
    return _FENCE_PATTERN.sub("", text).strip()


def parse_translation_response(text: str) -> TranslationResponse:
    """
    모델 응답 텍스트를 TranslationResponse로 변환

    Args:
        text: 모델이 반환한 원문 (코드 펜스 포함 가능)

    Returns:
        TranslationResponse: 검증된 응답

    Raises:
        MalformedResponseError: JSON이 아니거나 스키마와 맞지 않는 경우
    """
    cleaned = strip_code_fences(text or "")
    try:
        payload = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError는 ValueError, 과도한 중첩은 RecursionError
        raise MalformedResponseError(f"Response is not valid JSON: {type(e).__name__}: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(payload).__name__}")

    try:
        return TranslationResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Response does not match schema: {e.error_count()} error(s)") from e
