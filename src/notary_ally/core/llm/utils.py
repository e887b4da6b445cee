"""Pulling answer text out of litellm responses."""

from typing import Any

from loguru import logger


def safe_get_content(response: Any, default: str = "") -> str:
    """Text of the first choice, or ``default`` when the response has none.

    Providers occasionally return no choices or a message without content;
    those come back as ``default`` rather than raising.
    """
    try:
        message = response.choices[0].message
    except (AttributeError, IndexError, TypeError):
        logger.warning("Completion response carried no message")
        return default
    content = getattr(message, "content", None)
    return default if content is None else extract_text_from_response(content)


def extract_text_from_response(content: Any) -> str:
    """Flatten message content (a string, or a list of text blocks) to a string."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(_block_text(block) for block in content)
    return getattr(content, "text", None) or (str(content) if content else "")


def _block_text(block: Any) -> str:
    if isinstance(block, str):
        return block
    if isinstance(block, dict):
        return block.get("text", "") if block.get("type", "text") == "text" else ""
    return getattr(block, "text", "") or ""
