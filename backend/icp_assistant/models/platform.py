# /icp_assistant/models/platform.py

from typing import List, Optional
from pydantic import BaseModel, Field

# Immutable models for the outreach platform catalog. They are loaded once
# from config/onboarding.py; predicate fields hold predicate NAMES, never code.


class DependencyRule(BaseModel):
    """An action matching `dependent` is kept only if some action matches `requires`."""
    dependent: str
    requires: str

    class Config:
        frozen = True


class Platform(BaseModel):
    key: str
    display_name: str
    detection_patterns: List[str]
    actions: List[str]
    template_rule: Optional[str] = Field(default=None, description="Predicate deciding whether a template is needed")
    dependency_rules: List[DependencyRule] = Field(default_factory=list)
    hint: str = ""

    class Config:
        frozen = True
