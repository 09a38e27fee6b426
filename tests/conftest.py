import pytest

AZURE_ENV_VARS = (
    "AZURE_API_KEY",
    "AZURE_ENDPOINT",
    "AZURE_SEARCH_ENDPOINT",
    "AZURE_SEARCH_KEY",
    "AZURE_SEARCH_INDEX",
)


@pytest.fixture
def test_config():
    """Standard Config for testing."""
    from config import Config
    return Config(
        azure_api_key="test-azure-key",
        azure_endpoint="https://example-openai.openai.azure.com/openai/deployments/gpt-4o/chat/completions?api-version=2024-05-01-preview",
        azure_search_endpoint="https://example-search.search.windows.net",
        azure_search_key="test-search-key",
        azure_search_index="papers-index",
    )


@pytest.fixture
def azure_stub():
    """Deterministic Azure OpenAI endpoint recording every request."""
    from tests.fixtures.mock_clients import AzureStubBuilder
    return AzureStubBuilder()


@pytest.fixture
def chat_service(test_config, azure_stub):
    """ChatService wired to the Azure stub."""
    from services.chat_service import ChatService
    return ChatService(test_config, azure_stub.build())


@pytest.fixture
def configured_app(test_config, azure_stub):
    """App with the Azure stub as upstream."""
    from fastapi.testclient import TestClient
    from main import create_app

    app = create_app(test_config, http_client=azure_stub.build())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def clean_azure_env(monkeypatch):
    """Remove Azure variables before the test and any that .env loading set after it."""
    import os
    for name in AZURE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in AZURE_ENV_VARS:
        os.environ.pop(name, None)
