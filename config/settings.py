#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_FORMATTING,
    FILENAME_SUFFIX,
    GIGACHAT_AUTH_URL,
    GIGACHAT_SCOPE,
    OUTPUT_DIR,
    PAGE_NUMBER_PREFIX,
    TOKEN_EXPIRY_MARGIN_SECONDS,
    TOKEN_REFRESH_LEAD_SECONDS,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields from .env that aren't defined in model
    )

    # ========== Default Formatting ==========
    # Applied under whatever a program stores; the compiler itself has no defaults
    font_family: str = DEFAULT_FORMATTING["font_family"]
    font_size: float = DEFAULT_FORMATTING["font_size"]
    heading_font_size: float = DEFAULT_FORMATTING["heading_font_size"]
    heading_bold: bool = DEFAULT_FORMATTING["heading_bold"]
    line_spacing: float = DEFAULT_FORMATTING["line_spacing"]
    alignment: str = DEFAULT_FORMATTING["alignment"]  # left | center | justified
    margin_top: float = DEFAULT_FORMATTING["margin_top"]
    margin_bottom: float = DEFAULT_FORMATTING["margin_bottom"]
    margin_left: float = DEFAULT_FORMATTING["margin_left"]
    margin_right: float = DEFAULT_FORMATTING["margin_right"]
    show_page_numbers: bool = DEFAULT_FORMATTING["show_page_numbers"]

    # ========== Export ==========
    output_dir: Path = BASE_DIR / OUTPUT_DIR
    filename_suffix: str = FILENAME_SUFFIX
    page_number_prefix: str = PAGE_NUMBER_PREFIX

    # ========== LLM Access Token ==========
    gigachat_auth_key: Optional[str] = None
    gigachat_auth_url: str = GIGACHAT_AUTH_URL
    gigachat_scope: str = GIGACHAT_SCOPE
    token_expiry_margin_seconds: float = TOKEN_EXPIRY_MARGIN_SECONDS
    token_refresh_lead_seconds: float = TOKEN_REFRESH_LEAD_SECONDS

    def formatting_defaults(self) -> Dict[str, Any]:
        """Default formatting as a plain dict (snake_case keys)."""
        return {key: getattr(self, key) for key in DEFAULT_FORMATTING}

    def default_formatting(self):
        """Default formatting as a validated FormattingProfile."""
        from program_docx.models import FormattingProfile

        return FormattingProfile.model_validate(self.formatting_defaults())

    def get_auth_key(self) -> str:
        """Get the OAuth key for the LLM token endpoint"""
        if not self.gigachat_auth_key:
            raise ValueError("GIGACHAT_AUTH_KEY not set in .env")
        return self.gigachat_auth_key


# Global settings instance
settings = Settings()
