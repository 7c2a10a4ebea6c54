"""
AI Providers Package
Boundary adapters between LLM providers and the program compiler.

Supports:
- Normalizing generated section JSON into ProgramSections
- Reading token usage from GigaChat (OpenAI-style) and Gemini responses
- Short-lived OAuth access tokens with background renewal

Usage:
    from ai_providers import normalize_sections, TokenProvider, OAuthTokenFetcher

    sections = normalize_sections(response_text)

    tokens = TokenProvider(OAuthTokenFetcher(auth_key))
    bearer = tokens.acquire()
"""

from .base import (
    AIProviderType,
    AccessToken,
    GenerationStats,
)

from .section_adapter import (
    SectionPayloadError,
    extract_usage,
    normalize_sections,
    split_task_groups,
    strip_code_fences,
    strip_label_prefix,
)

from .token_provider import (
    OAuthTokenFetcher,
    TokenFetchError,
    TokenProvider,
)

__all__ = [
    # Base
    'AIProviderType',
    'AccessToken',
    'GenerationStats',

    # Section adapter
    'SectionPayloadError',
    'extract_usage',
    'normalize_sections',
    'split_task_groups',
    'strip_code_fences',
    'strip_label_prefix',

    # Tokens
    'OAuthTokenFetcher',
    'TokenFetchError',
    'TokenProvider',
]
