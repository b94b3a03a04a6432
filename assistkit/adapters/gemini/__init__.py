from .agents import GeminiAgentAdapter
from .commands import GeminiCommandAdapter
from .plugin import GeminiExtensionAdapter
from .validation import GeminiValidationAdapter

__all__ = ['GeminiAgentAdapter', 'GeminiCommandAdapter', 'GeminiExtensionAdapter', 'GeminiValidationAdapter']
