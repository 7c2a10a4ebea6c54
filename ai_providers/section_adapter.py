"""
Section Adapter
Normalizes untyped LLM responses into ProgramSections.

The generation prompt asks for a JSON object keyed by section
(titlePage, explanatoryNote, goal, ...). Models wrap it in code fences,
echo the section label at the start of a value, return lists instead of
strings, or run the three task groups together on one line. Everything
provider-specific is resolved here, before the compiler sees the text.
"""

import json
import re
from typing import Any, Dict, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from config.constants import SECTION_LABELS
from config.logging_config import get_logger
from program_docx.models import ProgramSections

from .base import AIProviderType, GenerationStats

logger = get_logger(__name__)

CODE_FENCE_PATTERN = re.compile(r'```json\n?|\n?```')

# Task groups that must each start on their own line
TASK_GROUP_MARKERS = ('Развивающие:', 'Воспитательные:')

PREVIEW_CHARS = 100


class SectionPayloadError(ValueError):
    """The LLM response cannot be read as a section mapping"""
    pass


def strip_code_fences(text: str) -> str:
    """Remove ```json fences around a model response."""
    return CODE_FENCE_PATTERN.sub('', text or '').strip()


def strip_label_prefix(content: str, label: str) -> str:
    """Drop leading repetitions of `label` (optionally followed by ':' or '.')."""
    pattern = re.compile(rf'^(\s*{re.escape(label)}[:.]?\s*)+', re.IGNORECASE)
    return pattern.sub('', content).strip()


def split_task_groups(content: str) -> str:
    """Move each task group marker onto a new line."""
    for marker in TASK_GROUP_MARKERS:
        escaped = re.escape(marker)
        content = re.sub(rf'([.!;])\s*({escaped})', r'\1\n\2', content, count=1, flags=re.IGNORECASE)
    for marker in TASK_GROUP_MARKERS:
        escaped = re.escape(marker)
        content = re.sub(rf'([^\n])\s*({escaped})', r'\1\n\2', content, count=1, flags=re.IGNORECASE)
    return content


def _section_keys() -> Dict[str, str]:
    """Map every accepted key spelling to the snake_case field name."""
    keys = {}
    for name in ProgramSections.model_fields:
        keys[name] = name
        keys[to_camel(name)] = name
    return keys


def _load_payload(payload: Union[str, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload

    text = strip_code_fences(payload)
    if not text:
        raise SectionPayloadError("No response from AI")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {e}")
        raise SectionPayloadError(
            f"Failed to parse AI response as JSON. Raw: {text[:PREVIEW_CHARS]}..."
        ) from e

    if not isinstance(data, dict):
        raise SectionPayloadError(
            f"AI response is not a JSON object. Raw: {text[:PREVIEW_CHARS]}..."
        )
    return data


def normalize_sections(
    payload: Union[str, Mapping[str, Any]],
    labels: Optional[Mapping[str, str]] = None,
) -> ProgramSections:
    """
    Normalize an LLM response into ProgramSections.

    Args:
        payload: Raw response text (JSON, possibly fenced) or decoded mapping
        labels: Section labels to strip from value starts (snake_case keys)

    Returns:
        ProgramSections with cleaned text; missing sections are empty

    Raises:
        SectionPayloadError: empty, non-JSON or non-object payload
    """
    labels = labels if labels is not None else SECTION_LABELS
    data = _load_payload(payload)
    keys = _section_keys()

    cleaned: Dict[str, str] = {}
    for raw_key, value in data.items():
        key = keys.get(raw_key)
        if key is None:
            logger.debug(f"Ignoring unknown section key: {raw_key}")
            continue

        if value is None:
            content = ''
        elif isinstance(value, str):
            content = value
        else:
            content = json.dumps(value, ensure_ascii=False)

        label = labels.get(key)
        if label:
            content = strip_label_prefix(content, label)
        else:
            content = content.strip()

        if key == 'tasks':
            content = split_task_groups(content)

        cleaned[key] = content

    return ProgramSections.model_validate(cleaned)


def extract_usage(response: Mapping[str, Any], model_name: str) -> GenerationStats:
    """
    Read token usage from either provider's response vocabulary.

    OpenAI-compatible (GigaChat): usage.{total,prompt,completion}_tokens
    Gemini: usageMetadata.{totalTokenCount,promptTokenCount,candidatesTokenCount}
    """
    usage = response.get('usage') or {}
    if usage:
        return GenerationStats(
            model_name=model_name,
            provider=AIProviderType.GIGACHAT,
            total_tokens=int(usage.get('total_tokens') or 0),
            prompt_tokens=int(usage.get('prompt_tokens') or 0),
            candidates_tokens=int(usage.get('completion_tokens') or 0),
        )

    metadata = response.get('usageMetadata') or response.get('usage_metadata') or {}
    return GenerationStats(
        model_name=model_name,
        provider=AIProviderType.GEMINI,
        total_tokens=int(metadata.get('totalTokenCount') or 0),
        prompt_tokens=int(metadata.get('promptTokenCount') or 0),
        candidates_tokens=int(metadata.get('candidatesTokenCount') or 0),
    )
