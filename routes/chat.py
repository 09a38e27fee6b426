"""
Route handlers for chat operations.
Handles the /api/chat endpoint.
"""
from fastapi import APIRouter, Depends, Request
from models.api_models import ChatResponse
from services.chat_service import ChatService

router = APIRouter()


def get_chat_service(request: Request) -> ChatService:
    """Return the ChatService built at startup."""
    return request.app.state.chat_service


@router.post("/api/chat", response_model=ChatResponse)
async def chat(request: Request, service: ChatService = Depends(get_chat_service)):
    """
    Forward a message to Azure OpenAI and return the answer with its references.
    The body is decoded as JSON regardless of its Content-Type.
    Errors are raised as ChatProxyError and rendered by the app's exception handlers.
    """
    chat_request = ChatService.parse_request(await request.body())
    return await service.handle(chat_request)
