"""
Models package exports.
"""
from models.api_models import ChatRequest, ChatResponse
from models.azure_models import AzureResponse, ChatChoice, ChoiceMessage

__all__ = [
    'ChatRequest',
    'ChatResponse',
    'AzureResponse',
    'ChatChoice',
    'ChoiceMessage'
]
