"""번역 요청 처리 예외 정의"""

GENERIC_FAILURE_MESSAGE = "Failed to translate. Please try again or check your connection."
NO_TARGETS_MESSAGE = "Please select at least one target language."


class TranslationError(Exception):
    """번역 요청 처리 중 발생하는 예외의 기본 클래스"""
    kind = "TranslationError"
    user_message = GENERIC_FAILURE_MESSAGE


class EmptyInputError(TranslationError):
    """입력 텍스트가 비어 있음 (공백만 있는 경우 포함)"""
    kind = "EmptyInput"
    user_message = "Input text is empty."


class NoTargetsSelectedError(TranslationError):
    """대상 언어가 선택되지 않음"""
    kind = "NoTargetsSelected"
    user_message = NO_TARGETS_MESSAGE


class ModelCallError(TranslationError):
    """모델 호출 실패 또는 빈 응답"""
    kind = "ModelCallFailure"


class MalformedResponseError(TranslationError):
    """코드 펜스 제거 후에도 JSON이 아니거나 스키마와 맞지 않는 응답"""
    kind = "MalformedResponse"
