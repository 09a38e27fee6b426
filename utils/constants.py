"""
Constants and prompts for the Azure Citation Chat Proxy.
"""

SYSTEM_PROMPT = """You are a helpful assistant that provides detailed, accurate information with references.
When providing information:
1. Include relevant citations and sources
2. Use a consistent citation format
3. List all references at the end of your response
4. Prefer academic sources, official documentation, and reliable websites
5. Format your response as follows:
    - Main answer
    - Supporting details
    - References (numbered list)"""

# Appended to every user message
REFERENCE_REQUEST_TEMPLATE = """{message}

Please provide a detailed response with references. Include:
1. A clear explanation
2. Supporting evidence
3. Specific citations
4. A numbered list of references at the end

Format references using a standard academic format."""

DATA_SOURCE_ROLE_INFORMATION = (
    "You are an AI assistant that helps people with questions using the provided documentation."
)

REFERENCES_MARKER = "References:"


class GenerationParams:
    """Fixed sampling parameters sent with every completion request."""
    MAX_TOKENS = 2000
    TEMPERATURE = 0.9
    TOP_P = 0.95
    FREQUENCY_PENALTY = 0.5
    PRESENCE_PENALTY = 0.5


class SearchParams:
    """Retrieval parameters for the azure_search data source."""
    TYPE = "azure_search"
    QUERY_TYPE = "simple"
    SEMANTIC_CONFIGURATION = "default"
    STRICTNESS = 3
    AUTHENTICATION_TYPE = "api_key"


class ErrorMessages:
    """Plain-text bodies returned for upstream failures."""
    MARSHAL = "Failed to marshal request data"
    CREATE_REQUEST = "Failed to create request"
    SEND = "Failed to send request to Azure OpenAI"
    READ = "Failed to read response from Azure OpenAI"
