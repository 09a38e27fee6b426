"""
Chat service containing the core request/response transformation.
Builds the citation-augmented prompt, calls Azure OpenAI and splits the reply into answer and references.
"""
import json
from typing import List, Tuple

import httpx
from pydantic import ValidationError

from config import Config
from models.api_models import ChatRequest, ChatResponse
from models.azure_models import AzureResponse
from utils.constants import (
    SYSTEM_PROMPT,
    REFERENCE_REQUEST_TEMPLATE,
    DATA_SOURCE_ROLE_INFORMATION,
    REFERENCES_MARKER,
    GenerationParams,
    SearchParams,
    ErrorMessages
)
from utils.errors import BadRequest, UpstreamRequestError, UpstreamDecodeError, NoChoicesError
from utils.logger import app_logger


class ChatService:
    """Service for proxying chat messages to Azure OpenAI."""

    def __init__(self, config: Config, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    @staticmethod
    def parse_request(body: bytes) -> ChatRequest:
        """
        Decode a raw request body as a ChatRequest, whatever its Content-Type.
        A JSON null body is an empty request.

        Raises:
            BadRequest: If the body is not JSON in the chat request shape
        """
        if body.strip() == b"null":
            return ChatRequest()

        try:
            return ChatRequest.model_validate_json(body)
        except ValidationError as e:
            app_logger.error(f"Invalid chat request: {e}")
            raise BadRequest() from e

    @staticmethod
    def format_prompt_with_reference_request(message: str) -> str:
        """Wrap the user message with the citation request block."""
        return REFERENCE_REQUEST_TEMPLATE.format(message=message)

    @staticmethod
    def split_response_and_references(content: str) -> Tuple[str, List[str]]:
        """
        Split model output into the answer and its reference lines.

        Everything before the first "References:" is the answer. Everything after it
        is broken on newlines, each line trimmed and blank lines dropped.

        Args:
            content: Raw text from the first completion choice

        Returns:
            Tuple of (answer, references)
        """
        main_content, marker, references_text = content.partition(REFERENCES_MARKER)
        if not marker:
            return content.strip(), []

        references = []
        for line in references_text.split("\n"):
            trimmed = line.strip()
            if trimmed:
                references.append(trimmed)

        return main_content.strip(), references

    def build_data_source(self) -> dict:
        """Build the azure_search grounding descriptor."""
        return {
            "type": SearchParams.TYPE,
            "parameters": {
                "endpoint": self.config.azure_search_endpoint,
                "key": self.config.azure_search_key,
                "index_name": self.config.azure_search_index,
                "query_type": SearchParams.QUERY_TYPE,
                "semantic_configuration": SearchParams.SEMANTIC_CONFIGURATION,
                "role_information": DATA_SOURCE_ROLE_INFORMATION,
                "filter": None,
                "strictness": SearchParams.STRICTNESS,
                "authentication": {
                    "type": SearchParams.AUTHENTICATION_TYPE,
                    "key": self.config.azure_search_key,
                },
            },
        }

    def build_request_body(self, message: str) -> dict:
        """Build the chat completions body for a user message."""
        return {
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.format_prompt_with_reference_request(message)},
            ],
            "data_sources": [self.build_data_source()],
            "max_tokens": GenerationParams.MAX_TOKENS,
            "temperature": GenerationParams.TEMPERATURE,
            "top_p": GenerationParams.TOP_P,
            "frequency_penalty": GenerationParams.FREQUENCY_PENALTY,
            "presence_penalty": GenerationParams.PRESENCE_PENALTY,
        }

    async def call_azure(self, body: dict) -> bytes:
        """
        POST the body to the completion endpoint and return the raw response bytes.
        The upstream status code is not checked; the body is decoded either way.

        Raises:
            UpstreamRequestError: If the request cannot be serialized, built, sent or read
        """
        try:
            payload = json.dumps(body)
        except (TypeError, ValueError) as e:
            app_logger.error(f"Marshal error: {e}")
            raise UpstreamRequestError(ErrorMessages.MARSHAL) from e

        try:
            request = self.client.build_request(
                "POST",
                self.config.azure_endpoint,
                content=payload,
                headers={
                    "Content-Type": "application/json",
                    "api-key": self.config.azure_api_key,
                },
            )
        except (httpx.InvalidURL, ValueError) as e:
            app_logger.error(f"Request build error: {e}")
            raise UpstreamRequestError(ErrorMessages.CREATE_REQUEST) from e

        try:
            response = await self.client.send(request, stream=True)
        except httpx.RequestError as e:
            app_logger.error(f"Azure request failed: {e!r}")
            raise UpstreamRequestError(ErrorMessages.SEND) from e

        try:
            return await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as e:
            app_logger.error(f"Azure response read failed: {e!r}")
            raise UpstreamRequestError(ErrorMessages.READ) from e
        finally:
            await response.aclose()

    async def handle(self, request: ChatRequest) -> ChatResponse:
        """
        Proxy one chat message and return the answer with its references.

        Raises:
            UpstreamRequestError: Transport failure to or from Azure
            UpstreamDecodeError: Response is not the expected JSON shape
            NoChoicesError: Response has no choices
        """
        body = await self.call_azure(self.build_request_body(request.message))

        app_logger.info(f"Raw response from Azure: {body.decode('utf-8', errors='replace')}")

        try:
            azure_response = AzureResponse.model_validate_json(body)
        except ValidationError as e:
            app_logger.error(f"Unmarshal error: {e}")
            raise UpstreamDecodeError() from e

        if not azure_response.choices:
            raise NoChoicesError()

        content = azure_response.choices[0].message.content or ""
        main_content, references = self.split_response_and_references(content)
        app_logger.info(f"Parsed response: {len(main_content)} characters, {len(references)} references")

        return ChatResponse(response=main_content, references=references)
