# ============================================================================
# src/health_insights/config/analysis_config.py
# ============================================================================
"""
Analysis Settings
- OCR pre-step
- Local heuristic randomness
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class AnalysisSettings(BaseSettings):
    ENABLE_OCR: bool = Field(
        default=True,
        description="Run OCR on JPG/PNG attachments before prompting"
    )
    OCR_LANGUAGE: str = Field(
        default="eng",
        description="Tesseract language pack"
    )
    OCR_SNIPPET_LIMIT: int = Field(
        default=2000,
        description="Maximum OCR characters embedded in a prompt"
    )
    LOCAL_ANALYSIS_SEED: int = Field(
        default=42,
        description="Seed for the local heuristic confidence jitter"
    )

analysis_settings = AnalysisSettings()
