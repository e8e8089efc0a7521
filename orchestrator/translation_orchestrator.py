"""번역 오케스트레이터 구현 클래스"""
import time
import logging
from typing import List, Optional
from langchain_openai import ChatOpenAI
from langchain_core.runnables import RunnableLambda
from langchain_core.runnables.config import ensure_config
from langgraph.graph import StateGraph, END, START

from state.translation_state import TranslationState
from graph.analyze_node import AnalyzeAgent, ParseAgent
from orchestrator.base_orchestrator import BaseOrchestrator
from orchestrator.callback_handler import UsageCallbackHandler
from schema.schemas import TranslationResponse
from utils.errors import EmptyInputError, NoTargetsSelectedError, TranslationError
from utils.language_utils import Language, exclude_source

LOGGER = logging.getLogger(__name__)


class TranslationOrchestrator(BaseOrchestrator):
    """번역 오케스트레이터 구현 클래스"""

    def __init__(self, llm: Optional[ChatOpenAI] = None):
        """
        초기화

        Args:
            llm: 사용할 LLM (없으면 첫 호출 시 환경 변수로 생성)
        """
        self.llm = llm
        self._graph = None
        self.last_token_info = {}

    def _get_graph(self):
        """그래프 생성"""
        if self._graph:
            return self._graph

        ANALYZE_NODE = "ANALYZE_NODE"
        PARSE_NODE = "PARSE_NODE"
        sg = StateGraph(TranslationState)

        # node 생성
        sg.add_node(ANALYZE_NODE, RunnableLambda(AnalyzeAgent(llm=self.llm)))
        sg.add_node(PARSE_NODE, RunnableLambda(ParseAgent()))
        sg.add_edge(START, ANALYZE_NODE)
        sg.add_edge(ANALYZE_NODE, PARSE_NODE)
        sg.add_edge(PARSE_NODE, END)

        self._graph = sg.compile()
        return self._graph

    async def translate(
        self,
        text: str,
        source_language: Language,
        target_languages: List[Language]
    ) -> TranslationResponse:
        """텍스트를 번역/분석하는 메인 메서드"""
        if not text or not text.strip():
            raise EmptyInputError("Input text is empty")

        targets = exclude_source(target_languages, source_language)
        if not targets:
            raise NoTargetsSelectedError("No target language selected")

        # 상태 초기화
        state = TranslationState(
            original_text=text,
            source_language=source_language,
            target_languages=targets,
            prompt="",
            raw_response="",
            response=None
        )

        usage_handler = UsageCallbackHandler()
        config = ensure_config({"callbacks": [usage_handler]})

        start_time = time.time()
        LOGGER.info(f"번역 요청: {source_language.value} -> {', '.join(lang.value for lang in targets)}")
        try:
            final_state = await self._get_graph().ainvoke(state, config=config)
        except TranslationError as e:
            LOGGER.error(f"번역 실패 ({e.kind}): {e}")
            raise

        self.last_token_info = usage_handler.to_dict()
        LOGGER.info(f"번역 완료: {time.time() - start_time:.3f}초 소요, 토큰 사용량: {self.last_token_info}")
        return final_state["response"]
