# /icp_assistant/models/api.py

from pydantic import BaseModel, Field, AliasChoices, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional
from datetime import datetime

from icp_assistant.models.flow import Question

# This file contains Pydantic models that define the structure of data for
# API requests and responses, ensuring type safety and validation.

class APIResponse(BaseModel):
    success: bool
    message: str
    data: Optional[Dict] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    version: str

class TurnRequest(BaseModel):
    """One onboarding turn. Older clients send the `current*` field names."""
    step_index: int = Field(..., validation_alias=AliasChoices("stepIndex", "currentStepIndex", "step_index"))
    intent_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("intentKey", "currentIntentKey", "intent_key")
    )
    user_answer: str = Field(default="", validation_alias=AliasChoices("userAnswer", "user_answer"))
    collected_answers: Dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("collectedAnswers", "collected_answers")
    )
    conversation_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("conversationId", "conversation_id")
    )

class TurnResponse(BaseModel):
    clarification_needed: bool = False
    message: Optional[str] = None
    next_step_index: Optional[int] = None
    next_question: Optional[Question] = None
    completed: bool = False
    updated_collected_answers: Dict[str, Any] = Field(default_factory=dict)
    conversation_id: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class SequenceRequest(BaseModel):
    collected_answers: Dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("collectedAnswers", "collected_answers")
    )

class ClassifyRequest(BaseModel):
    input: str = Field(
        ...,
        min_length=2,
        max_length=500,
        validation_alias=AliasChoices("input", "industry_input", "location_input", "role_input"),
    )

class KeywordRequest(BaseModel):
    topic: str = Field(..., min_length=1, max_length=200)
    context: str = Field(default="general", max_length=50)

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Topic is required")
        return v.strip()

    @field_validator("context")
    @classmethod
    def normalize_context(cls, v: str) -> str:
        return v.strip().lower() or "general"
