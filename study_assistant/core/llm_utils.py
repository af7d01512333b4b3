"""
Shared LLM utilities: model construction and response parsing.

Handles the response shapes Google Gemini produces through LangChain.
"""
import json
import re
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel


def create_llm(
    api_key: str,
    model: str = "gemini-2.5-flash",
    temperature: float = 0.7,
    timeout: Optional[float] = None,
) -> BaseChatModel:
    """
    Create the Gemini chat model used to generate study materials.

    Provider-side retries are disabled; a failed request is reported to the
    user, who decides whether to resubmit.

    Args:
        api_key: Google AI Studio API key
        model: Gemini model name
        temperature: Sampling temperature
        timeout: Per-request timeout in seconds passed to the client

    Returns:
        Configured ChatGoogleGenerativeAI instance
    """
    from langchain_google_genai import ChatGoogleGenerativeAI

    if not api_key:
        raise ValueError(
            "API key not set. Please set API_KEY (or GOOGLE_API_KEY) as an environment "
            "variable. Get your key from: https://aistudio.google.com/app/apikey"
        )

    return ChatGoogleGenerativeAI(
        model=model,
        temperature=temperature,
        google_api_key=api_key,
        max_retries=0,
        timeout=timeout,
    )


def extract_text(response) -> str:
    """
    Return the text of a chat model reply.

    Gemini answers either with a plain string or with a list of content
    blocks like {'type': 'text', 'text': '...'}. The JSON document can be
    split across blocks, so text blocks are joined without separators.
    """
    content = response.content
    if isinstance(content, str):
        return content
    return "".join(
        block if isinstance(block, str) else block.get("text", "")
        for block in content or []
    )


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Parse a JSON object from LLM output.

    Tries, in order: the whole text, a fenced markdown code block, and the
    span between the first '{' and the last '}'.

    Args:
        text: Text that should contain a JSON object

    Returns:
        The parsed dictionary

    Raises:
        ValueError: If no JSON object can be parsed from the text
    """
    candidates = [text.strip()]

    code_block_pattern = r'```(?:json)?\s*(\{.*\})\s*```'
    code_match = re.search(code_block_pattern, text, re.DOTALL)
    if code_match:
        candidates.append(code_match.group(1).strip())

    start = text.find('{')
    end = text.rfind('}')
    if start != -1 and end > start:
        candidates.append(text[start:end + 1])

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise ValueError("response does not contain a JSON object")
