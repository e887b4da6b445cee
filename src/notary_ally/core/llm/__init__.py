"""
LLM client and utilities, powered by LiteLLM.
"""

from .client import LLMClient
from .config import PROVIDER_ENV_MAP, infer_provider
from .utils import extract_text_from_response, safe_get_content

__all__ = [
    "PROVIDER_ENV_MAP",
    "LLMClient",
    "extract_text_from_response",
    "infer_provider",
    "safe_get_content",
]
