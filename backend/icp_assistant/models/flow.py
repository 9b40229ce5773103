# /icp_assistant/models/flow.py

from typing import Optional, List, Literal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

QuestionType = Literal["text", "select", "multi-select", "confirmation"]


class Question(BaseModel):
    """
    A single prompt emitted by the onboarding wizard.

    This is a PURE DATA model with no methods or logic. Instances are produced
    fresh on every turn and are immutable once created. Field names serialize
    in camelCase for the HTTP layer.
    """
    step_index: int = Field(..., ge=1, description="Top-level step this question belongs to")
    intent_key: str = Field(..., description="Answer-map key the answer will be stored under")
    title: str
    question: str = Field(..., description="Prompt text shown to the user")
    question_type: QuestionType = "text"
    options: Optional[List[str]] = None
    helper_text: Optional[str] = None
    allow_skip: bool = False

    # Platform-actions sub-step extras
    pre_selected_options: Optional[List[str]] = None
    current_platform: Optional[str] = None
    platform_index: Optional[int] = None
    total_platforms: Optional[int] = None

    # Campaign-settings sub-step extra
    sub_step_index: Optional[int] = None

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


class StepPointer(BaseModel):
    """
    Where the conversation currently is. Never persisted: always recomputed
    from the answer map.
    """
    step_index: int
    intent_key: str
    sub_step_index: Optional[int] = None

    class Config:
        frozen = True
