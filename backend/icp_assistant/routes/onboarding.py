# /icp_assistant/routes/onboarding.py

import structlog
from typing import Optional
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from icp_assistant.config.settings import settings
from icp_assistant.config.onboarding import TOTAL_STEPS
from icp_assistant.models.api import APIResponse, TurnRequest, TurnResponse, SequenceRequest
from icp_assistant.services.conversation_store import ConversationStoreError, conversation_store
from icp_assistant.services.question_generator import generate_question
from icp_assistant.services.sequence_builder import build_sequence
from icp_assistant.services.template_handler import TemplateRequiredError
from icp_assistant.utils.metrics import onboarding_turns_counter
from icp_assistant.utils.request_utils import parse_context
from icp_assistant.workflows.definitions import FIRST_STEP
from icp_assistant.workflows.engine import process_answer
from icp_assistant.workflows.validator import ValidationResult, validate_step_index, validate_turn

# This file defines the onboarding wizard endpoints: fetching questions,
# submitting answers turn by turn, and the optional server-side answer store.

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])
log = structlog.get_logger(__name__)


def _rejected(result: ValidationResult) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": result["message"], "error_code": result["error_code"]},
    )


async def _load_conversation(conversation_id: str) -> Optional[dict]:
    try:
        return await conversation_store.load(conversation_id)
    except ConversationStoreError as e:
        log.error("Conversation store unavailable", conversation_id=conversation_id, error=str(e))
        raise HTTPException(status_code=503, detail="Conversation store unavailable")


def _turn_outcome(result: dict) -> str:
    if result["completed"]:
        return "completed"
    if result["clarification_needed"]:
        return "clarification"
    return "advanced"


@router.get("/icp-questions", response_model=APIResponse)
async def get_first_question():
    """Returns the first onboarding question and the total number of steps."""
    question = generate_question(FIRST_STEP)
    return APIResponse(
        success=True,
        message="Onboarding questions retrieved.",
        data={"questions": [question.model_dump(by_alias=True, mode="json")], "totalSteps": TOTAL_STEPS},
        version=settings.api_version,
    )


@router.get("/icp-questions/{step_index}", response_model=APIResponse)
async def get_question_by_step(
    step_index: int,
    context: Optional[str] = Query(default=None, description="JSON-encoded collected answers"),
):
    """Regenerates the question for a step from the collected answers."""
    validation = validate_step_index(step_index)
    if not validation["is_valid"]:
        return _rejected(validation)

    question = generate_question(step_index, parse_context(context))
    return APIResponse(
        success=True,
        message="Question generated.",
        data={"question": question.model_dump(by_alias=True, mode="json"), "stepIndex": question.step_index},
        version=settings.api_version,
    )


@router.post("/icp-answer", response_model=APIResponse)
async def submit_answer(body: TurnRequest):
    """Processes one answer and returns the next question, a clarification, or completion."""
    validation = validate_turn(body.step_index, body.intent_key, body.user_answer)
    if not validation["is_valid"]:
        log.warning("Rejected onboarding answer", step_index=body.step_index, error_code=validation["error_code"])
        return _rejected(validation)

    answers = dict(body.collected_answers)
    if body.conversation_id:
        stored = await _load_conversation(body.conversation_id)
        if stored is None:
            raise HTTPException(status_code=404, detail="Conversation not found")
        answers = {**stored, **answers}

    try:
        result = await process_answer(body.step_index, body.intent_key, body.user_answer, answers)
    except TemplateRequiredError as e:
        return _rejected({"is_valid": False, "error_code": "TEMPLATE_REQUIRED", "message": str(e)})

    outcome = _turn_outcome(result)
    onboarding_turns_counter.labels(step=str(body.step_index), outcome=outcome).inc()

    if body.conversation_id and not await conversation_store.save(body.conversation_id, result["updated_collected_answers"]):
        log.error("Failed to persist conversation answers", conversation_id=body.conversation_id)

    log.info(
        "Onboarding turn processed",
        step_index=body.step_index,
        intent_key=body.intent_key,
        next_step_index=result["next_step_index"],
        outcome=outcome,
    )
    response = TurnResponse(**result, conversation_id=body.conversation_id)
    return APIResponse(
        success=True,
        message=result["message"] or "Answer processed.",
        data=response.model_dump(by_alias=True, mode="json"),
        version=settings.api_version,
    )


@router.post("/sequence", response_model=APIResponse)
async def get_sequence(body: SequenceRequest):
    """Builds the outreach sequence (platform order, actions, templates, delays) from the answers."""
    return APIResponse(
        success=True,
        message="Sequence built.",
        data=build_sequence(body.collected_answers),
        version=settings.api_version,
    )


@router.post("/conversations", response_model=APIResponse, status_code=201)
async def create_conversation():
    conversation_id = await conversation_store.create()
    if conversation_id is None:
        raise HTTPException(status_code=503, detail="Conversation store unavailable")

    log.info("Conversation created", conversation_id=conversation_id)
    return APIResponse(
        success=True,
        message="Conversation created.",
        data={"conversationId": conversation_id, "collectedAnswers": {}},
        version=settings.api_version,
    )


@router.get("/conversations/{conversation_id}", response_model=APIResponse)
async def get_conversation(conversation_id: str):
    answers = await _load_conversation(conversation_id)
    if answers is None:
        raise HTTPException(status_code=404, detail="Conversation not found")

    return APIResponse(
        success=True,
        message="Conversation retrieved.",
        data={"conversationId": conversation_id, "collectedAnswers": answers},
        version=settings.api_version,
    )
