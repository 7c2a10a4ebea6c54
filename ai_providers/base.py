"""
Base AI Provider Types
Provider vocabulary shared by the section adapter and the token provider.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict


class AIProviderType(Enum):
    """Supported AI Providers"""
    GIGACHAT = "gigachat"
    GEMINI = "gemini"


@dataclass
class GenerationStats:
    """Token usage of one generation call, provider-neutral"""
    model_name: str
    provider: AIProviderType
    total_tokens: int = 0
    prompt_tokens: int = 0
    candidates_tokens: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['provider'] = self.provider.value
        return data


@dataclass
class AccessToken:
    """Bearer token with its absolute expiry (epoch seconds)"""
    value: str
    expires_at: float

    def expires_in(self, now: float) -> float:
        return self.expires_at - now
