"""언어 관련 유틸리티 함수"""
from enum import Enum
from typing import Iterable, List


class Language(str, Enum):
    """지원 언어 (값은 프롬프트와 화면에 그대로 사용되는 표시 이름)"""
    ENGLISH = "English"
    ITALIAN = "Italian"
    DANISH = "Danish"
    FRENCH = "French"
    KOREAN = "Korean"
    CHINESE = "Mandarin Chinese"


SUPPORTED_LANGUAGES: List[Language] = [
    Language.ENGLISH,
    Language.ITALIAN,
    Language.DANISH,
    Language.FRENCH,
    Language.KOREAN,
    Language.CHINESE,
]


def get_language_name(lang: Language) -> str:
    """언어를 표시 이름으로 변환"""
    return Language(lang).value


def available_targets(source_language: Language) -> List[Language]:
    """원본 언어를 제외한 번역 대상 후보 목록"""
    return [lang for lang in SUPPORTED_LANGUAGES if lang != source_language]


def exclude_source(targets: Iterable[Language], source_language: Language) -> List[Language]:
    """대상 언어 목록에서 원본 언어와 중복 항목 제거 (순서 유지)"""
    result: List[Language] = []
    for lang in targets:
        if lang == source_language or lang in result:
            continue
        result.append(lang)
    return result
