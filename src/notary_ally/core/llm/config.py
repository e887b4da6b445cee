"""Model defaults and how a litellm model string maps to a provider key."""

DEFAULT_MODEL = "gemini/gemini-2.5-flash"

# Env vars litellm reads for each provider's key.
PROVIDER_ENV_MAP: dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}

_PREFIXES = (("gemini/", "gemini"), ("anthropic/", "anthropic"), ("openai/", "openai"))
_MARKERS = (("gemini", "gemini"), ("claude", "anthropic"), ("gpt-", "openai"))


def infer_provider(model_name: str) -> str:
    """Provider for a litellm model string; unknown names count as openai."""
    for prefix, provider in _PREFIXES:
        if model_name.startswith(prefix):
            return provider
    for marker, provider in _MARKERS:
        if marker in model_name:
            return provider
    return "openai"
