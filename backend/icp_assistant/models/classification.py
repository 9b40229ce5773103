# /icp_assistant/models/classification.py

from typing import Optional, List, Literal
from pydantic import BaseModel, Field

ClassificationField = Literal["industry", "location", "role"]
Confidence = Literal["high", "medium", "low"]
ClassificationSource = Literal["quick_match", "remote", "fallback"]


class ClassificationResult(BaseModel):
    """Standardized value for a free-text industry, location or role answer."""
    field: ClassificationField
    value: str = Field(..., description="Standardized value (comma-joined when several were given)")
    confidence: Confidence = "low"
    alternatives: List[str] = Field(default_factory=list)
    reasoning: Optional[str] = None
    clarifying_question: Optional[str] = None
    category: Optional[str] = Field(default=None, description="Role category (C-Level, Director, ...)")
    source: ClassificationSource = "fallback"
    original_input: str = ""

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


KeywordSource = Literal["cache", "remote", "fallback"]


class KeywordExpansion(BaseModel):
    """Search keywords generated for a topic."""
    original: str
    context: str = "general"
    keywords: List[str] = Field(default_factory=list)
    source: KeywordSource = "fallback"

    @property
    def cached(self) -> bool:
        return self.source == "cache"
