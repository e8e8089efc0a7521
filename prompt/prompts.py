"""분석/번역 프롬프트 및 응답 스키마 생성"""
from typing import Any, Dict, List

from utils.language_utils import Language, get_language_name


def _segment_schema(match_id_description: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "matchId": {"type": "integer", "description": match_id_description},
        },
        "required": ["text", "matchId"],
        "additionalProperties": False,
    }


# OpenAI structured output (strict json_schema) 형식
TRANSLATION_RESPONSE_SCHEMA: Dict[str, Any] = {
    "name": "translation_response",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "sourceSegments": {
                "type": "array",
                "description": "The source text broken down into grammatical units (words or phrases).",
                "items": _segment_schema("A unique ID for the concept. 0 if it has no direct translation."),
            },
            "translations": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "language": {"type": "string"},
                        "segments": {
                            "type": "array",
                            "description": (
                                "The translated text broken down into grammatical units, "
                                "reordered as per the target language syntax."
                            ),
                            "items": _segment_schema(
                                "Must match the matchId of the corresponding concept in sourceSegments."
                            ),
                        },
                    },
                    "required": ["language", "segments"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["sourceSegments", "translations"],
        "additionalProperties": False,
    },
}


def create_analysis_prompt(
    text: str,
    source_language: Language,
    target_languages: List[Language]
) -> str:
    """분석/번역 프롬프트 생성"""
    source_name = get_language_name(source_language)
    target_names = ", ".join(get_language_name(lang) for lang in target_languages)
    return f"""You are a sophisticated linguistic engine.
Translate the following text from {source_name} to: {target_names}.

Analyze the syntax and vocabulary.
Break down the source text and the translated texts into corresponding "segments" (words or meaningful phrases).
Assign a unique 'matchId' (integer > 0) to concepts that are the same across languages.

If a word exists in one language but is implied or non-existent in another (like articles or auxiliary verbs sometimes), use 'matchId: 0' for that specific word, or group it with the relevant noun/verb if it makes semantic sense.

Ensure the 'segments' in the target languages appear in the natural, correct word order for that language, allowing the user to see how the position of one concept moves relative to another.
Return one entry in 'translations' per target language, using the language names exactly as listed above.

Text to translate:
"{text}"
"""
