"""API clients for external services."""

from .browser import BrowserClient
from .llm import LLMClient
from .wordpress import WordPressClient

__all__ = ["BrowserClient", "LLMClient", "WordPressClient"]
