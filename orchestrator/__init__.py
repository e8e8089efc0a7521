"""오케스트레이터 모듈"""
from .base_orchestrator import BaseOrchestrator
from .translation_orchestrator import TranslationOrchestrator
from .callback_handler import UsageCallbackHandler

__all__ = ["BaseOrchestrator", "TranslationOrchestrator", "UsageCallbackHandler"]
