# -*- coding: utf-8 -*-

import json
import unittest

from langchain_core.messages import AIMessage
from langchain_core.outputs import ChatGeneration, LLMResult

from orchestrator import TranslationOrchestrator, UsageCallbackHandler
from prompt.prompts import TRANSLATION_RESPONSE_SCHEMA, create_analysis_prompt
from utils.errors import (
    EmptyInputError,
    MalformedResponseError,
    ModelCallError,
    NoTargetsSelectedError,
)
from utils.language_utils import Language

PAYLOAD = {
    "sourceSegments": [{"text": "Hello", "matchId": 1}, {"text": "world", "matchId": 2}],
    "translations": [
        {"language": "Italian", "segments": [{"text": "Ciao", "matchId": 1}, {"text": "mondo", "matchId": 2}]},
        {"language": "French", "segments": [{"text": "Bonjour", "matchId": 1}, {"text": "le", "matchId": 0}, {"text": "monde", "matchId": 2}]},
    ],
}


class StubLLM:
    def __init__(self, content=None, *, error: Exception = None):
        self._content = content
        self._error = error
        self.calls = []
        self.bind_kwargs = None

    def bind(self, **kwargs):
        self.bind_kwargs = kwargs
        return self

    async def ainvoke(self, messages, config=None):
        self.calls.append(messages)
        if self._error is not None:
            raise self._error
        return AIMessage(content=self._content)


class TestCreateAnalysisPrompt(unittest.TestCase):
    def test_prompt_mentions_languages_and_text(self):
        prompt = create_analysis_prompt("The red car", Language.ENGLISH, [Language.ITALIAN, Language.CHINESE])
        self.assertIn("from English to: Italian, Mandarin Chinese", prompt)
        self.assertIn('"The red car"', prompt)
        self.assertIn("matchId: 0", prompt)

    def test_schema_is_strict(self):
        schema = TRANSLATION_RESPONSE_SCHEMA["schema"]
        self.assertTrue(TRANSLATION_RESPONSE_SCHEMA["strict"])
        self.assertEqual(schema["required"], ["sourceSegments", "translations"])
        segment = schema["properties"]["sourceSegments"]["items"]
        self.assertEqual(segment["properties"]["matchId"]["type"], "integer")
        self.assertFalse(segment["additionalProperties"])


class TestTranslationOrchestrator(unittest.IsolatedAsyncioTestCase):
    async def test_translate_returns_validated_response(self):
        llm = StubLLM(json.dumps(PAYLOAD))
        orchestrator = TranslationOrchestrator(llm=llm)

        result = await orchestrator.translate("Hello world", Language.ENGLISH, [Language.ITALIAN, Language.FRENCH])

        self.assertEqual(len(llm.calls), 1)
        self.assertEqual([t.language for t in result.translations], ["Italian", "French"])
        self.assertEqual(result.translations[1].segments[1].match_id, 0)
        self.assertEqual(llm.bind_kwargs["response_format"]["type"], "json_schema")
        self.assertIs(llm.bind_kwargs["response_format"]["json_schema"], TRANSLATION_RESPONSE_SCHEMA)

    async def test_prompt_sent_to_model(self):
        llm = StubLLM(json.dumps(PAYLOAD))
        orchestrator = TranslationOrchestrator(llm=llm)
        await orchestrator.translate("Hello world", Language.ENGLISH, [Language.ITALIAN])

        prompt = llm.calls[0][0].content
        self.assertIn("from English to: Italian", prompt)
        self.assertIn("Hello world", prompt)

    async def test_fenced_response_is_accepted(self):
        llm = StubLLM("```json\n" + json.dumps(PAYLOAD) + "\n```")
        result = await TranslationOrchestrator(llm=llm).translate("Hello world", Language.ENGLISH, [Language.ITALIAN])
        self.assertEqual(result.to_payload(), PAYLOAD)

    async def test_blank_text_makes_no_call(self):
        llm = StubLLM(json.dumps(PAYLOAD))
        with self.assertRaises(EmptyInputError):
            await TranslationOrchestrator(llm=llm).translate("   \n", Language.ENGLISH, [Language.ITALIAN])
        self.assertEqual(llm.calls, [])

    async def test_no_targets_makes_no_call(self):
        llm = StubLLM(json.dumps(PAYLOAD))
        orchestrator = TranslationOrchestrator(llm=llm)
        with self.assertRaises(NoTargetsSelectedError):
            await orchestrator.translate("Hello", Language.ENGLISH, [])
        # 원본 언어만 대상으로 지정한 경우도 동일
        with self.assertRaises(NoTargetsSelectedError):
            await orchestrator.translate("Hello", Language.ENGLISH, [Language.ENGLISH])
        self.assertEqual(llm.calls, [])

    async def test_model_exception_becomes_model_call_error(self):
        llm = StubLLM(error=RuntimeError("connection reset"))
        with self.assertRaises(ModelCallError) as ctx:
            await TranslationOrchestrator(llm=llm).translate("Hello", Language.ENGLISH, [Language.ITALIAN])
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertEqual(len(llm.calls), 1)

    async def test_empty_model_response_is_model_call_error(self):
        llm = StubLLM("")
        with self.assertRaises(ModelCallError):
            await TranslationOrchestrator(llm=llm).translate("Hello", Language.ENGLISH, [Language.ITALIAN])

    async def test_unparseable_response_is_malformed(self):
        llm = StubLLM("Sorry, I cannot help with that.")
        with self.assertRaises(MalformedResponseError):
            await TranslationOrchestrator(llm=llm).translate("Hello", Language.ENGLISH, [Language.ITALIAN])

    async def test_deeply_nested_response_is_malformed(self):
        llm = StubLLM("[" * 200000)
        with self.assertRaises(MalformedResponseError):
            await TranslationOrchestrator(llm=llm).translate("Hello", Language.ENGLISH, [Language.ITALIAN])

    async def test_schema_mismatch_is_malformed(self):
        llm = StubLLM(json.dumps({"sourceSegments": [{"text": "Hello"}], "translations": []}))
        with self.assertRaises(MalformedResponseError):
            await TranslationOrchestrator(llm=llm).translate("Hello", Language.ENGLISH, [Language.ITALIAN])


class TestUsageCallbackHandler(unittest.IsolatedAsyncioTestCase):
    async def test_accumulates_token_usage_from_llm_output(self):
        handler = UsageCallbackHandler()
        result = LLMResult(
            generations=[[ChatGeneration(message=AIMessage(content="{}"))]],
            llm_output={"token_usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}},
        )
        await handler.on_llm_end(result)
        await handler.on_llm_end(result)
        self.assertEqual(handler.to_dict(), {"prompt_tokens": 20, "completion_tokens": 10, "total_tokens": 30})

    async def test_falls_back_to_usage_metadata(self):
        handler = UsageCallbackHandler()
        message = AIMessage(content="{}", usage_metadata={"input_tokens": 7, "output_tokens": 3, "total_tokens": 10})
        await handler.on_llm_end(LLMResult(generations=[[ChatGeneration(message=message)]]))
        self.assertEqual(handler.to_dict(), {"prompt_tokens": 7, "completion_tokens": 3, "total_tokens": 10})

    async def test_missing_usage_is_ignored(self):
        handler = UsageCallbackHandler()
        await handler.on_llm_end(LLMResult(generations=[]))
        self.assertEqual(handler.total_tokens, 0)


if __name__ == "__main__":
    unittest.main()
