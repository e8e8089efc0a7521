"""UsageCallbackHandler 클래스 정의"""
from langchain_core.callbacks import AsyncCallbackHandler
from typing import Any, Dict


class UsageCallbackHandler(AsyncCallbackHandler):
    """LLM 호출의 토큰 사용량을 누적하는 비동기 콜백 핸들러"""

    def __init__(self):
        super().__init__()
        self.prompt_tokens = 0
        self.completion_tokens = 0
        self.total_tokens = 0

    async def on_llm_end(self, response, **kwargs: Any) -> None:
        """
        LLM 응답 종료 시 호출

        Args:
            response: LLM 응답 (LLMResult)
            **kwargs: 추가 인자
        """
        usage = {}
        llm_output = getattr(response, "llm_output", None) or {}
        if llm_output.get("token_usage"):
            usage = llm_output["token_usage"]
        else:
            try:
                metadata = response.generations[0][0].message.usage_metadata or {}
                usage = {
                    "prompt_tokens": metadata.get("input_tokens", 0),
                    "completion_tokens": metadata.get("output_tokens", 0),
                    "total_tokens": metadata.get("total_tokens", 0),
                }
            except (IndexError, AttributeError):
                # usage가 없거나 구조가 다를 경우 무시
                usage = {}

        self.prompt_tokens += usage.get("prompt_tokens", 0) or 0
        self.completion_tokens += usage.get("completion_tokens", 0) or 0
        self.total_tokens += usage.get("total_tokens", 0) or 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }
