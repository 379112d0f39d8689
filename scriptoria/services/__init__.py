from .export import blueprint_to_markdown, blueprint_to_text
from .llm import LLMResponse, LLMService

__all__ = ["LLMResponse", "LLMService", "blueprint_to_markdown", "blueprint_to_text"]
