"""분석 노드 - LangGraph 노드에서 사용하는 모델 호출/응답 파싱 함수"""
import os
import time
import logging
from typing import Dict, Any, List, Optional
from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage

from state.translation_state import TranslationState
from prompt.prompts import create_analysis_prompt, TRANSLATION_RESPONSE_SCHEMA
from utils.errors import ModelCallError
from utils.json_utils import parse_translation_response

# 로거 설정
LOGGER = logging.getLogger(__name__)
# 로거 레벨 및 핸들러 설정 (터미널 출력용)
if not LOGGER.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.INFO)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.2


def create_llm() -> ChatOpenAI:
    """환경 변수 기반 LLM 생성"""
    return ChatOpenAI(
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        # 구조화된 출력을 위해 낮은 temperature 사용
        temperature=float(os.getenv("OPENAI_TEMPERATURE", str(DEFAULT_TEMPERATURE))),
        openai_api_key=os.getenv("OPENAI_API_KEY")
    )


def _message_text(message: Any) -> str:
    """AIMessage의 content를 문자열로 변환 (content block 리스트 포함)"""
    content = getattr(message, "content", message)
    if content is None:
        return ""
    if isinstance(content, list):
        parts: List[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


class AnalyzeAgent:
    """프롬프트를 만들고 모델을 한 번 호출하는 에이전트"""

    def __init__(self, llm: Optional[ChatOpenAI] = None):
        """
        초기화

        Args:
            llm: LLM 인스턴스 (없으면 첫 호출 시 생성, API 키 누락은 호출 실패로 처리)
        """
        self.agent_name = "AnalyzeAgent"
        self.llm = llm

    async def __call__(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> TranslationState:
        """LangGraph에서 호출되는 메서드"""
        await self.preprocess(state)
        await self.run(state, config)
        return state

    async def preprocess(self, state: TranslationState) -> TranslationState:
        """전처리: 프롬프트 생성"""
        prompt = create_analysis_prompt(
            state["original_text"],
            state["source_language"],
            state["target_languages"]
        )
        LOGGER.info(f"프롬프트 길이: {len(prompt)}자, 대상 언어: {len(state['target_languages'])}개")
        state["prompt"] = prompt
        return state

    async def run(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> TranslationState:
        """
        모델 호출 (재시도 없음)

        Raises:
            ModelCallError: 호출 실패 또는 빈 응답
        """
        messages = [HumanMessage(content=state["prompt"])]

        start_time = time.time()
        try:
            if self.llm is None:
                self.llm = create_llm()
            structured_llm = self.llm.bind(
                response_format={"type": "json_schema", "json_schema": TRANSLATION_RESPONSE_SCHEMA}
            )
            response = await structured_llm.ainvoke(messages, config=config)
        except Exception as e:
            LOGGER.error(f"[{self.agent_name}] 모델 호출 실패: {e}")
            raise ModelCallError(f"Model call failed: {e}") from e

        raw_text = _message_text(response).strip()
        LOGGER.info(f"[{self.agent_name}] 모델 응답 {time.time() - start_time:.3f}초 소요, {len(raw_text)}자")
        if not raw_text:
            raise ModelCallError("No response from model")

        state["raw_response"] = raw_text
        return state


class ParseAgent:
    """모델 응답에서 코드 펜스를 제거하고 스키마를 검증하는 에이전트"""

    def __init__(self):
        self.agent_name = "ParseAgent"

    async def __call__(
        self,
        state: TranslationState,
        config: Optional[Dict[str, Any]] = None
    ) -> TranslationState:
        response = parse_translation_response(state["raw_response"])
        LOGGER.info(
            f"[{self.agent_name}] 원문 세그먼트 {len(response.source_segments)}개, "
            f"번역 {len(response.translations)}개"
        )
        state["response"] = response
        return state
