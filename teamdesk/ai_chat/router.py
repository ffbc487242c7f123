# teamdesk/ai_chat/router.py
from fastapi import APIRouter, Depends

from teamdesk.ai_chat.client import ChatAssistant, get_chat_assistant
from teamdesk.auth.dependencies import Identity, get_identity
from teamdesk.errors import ValidationError
from teamdesk.schemas.chat_schema import ChatRequestSchema

router = APIRouter(tags=["ai-chat"])


@router.post("/ai-chat")
def ai_chat(
    body: ChatRequestSchema,
    identity: Identity = Depends(get_identity),
    assistant: ChatAssistant = Depends(get_chat_assistant),
):
    if not (body.message or "").strip():
        raise ValidationError("Message is required")
    return {"reply": assistant.reply(body.message.strip(), body.projects, body.tasks)}
