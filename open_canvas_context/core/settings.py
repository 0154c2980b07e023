"""
Provider credentials and endpoints read from the environment.
"""
import os
from typing import Optional
from pydantic import BaseModel

DEFAULT_AZURE_OPENAI_API_VERSION = "2024-08-01-preview"
DEFAULT_OLLAMA_API_URL = "http://host.docker.internal:11434"
DEFAULT_AWS_REGION = "us-east-1"


class ProviderSettings(BaseModel):
    """Credentials for every supported model provider.

    Built once by the application at startup and passed down explicitly, so
    the resolver and factory never touch ``os.environ`` when one is injected.
    """
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    fireworks_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    azure_openai_api_key: str = ""
    azure_openai_api_instance_name: str = ""
    azure_openai_api_deployment_name: str = ""
    azure_openai_api_version: str = DEFAULT_AZURE_OPENAI_API_VERSION
    azure_openai_base_path: Optional[str] = None

    ollama_api_url: str = DEFAULT_OLLAMA_API_URL

    # `bedrock/<model-id>` names are only routed to Bedrock when enabled
    enable_bedrock: bool = False
    aws_region: str = DEFAULT_AWS_REGION

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ProviderSettings":
        """Read settings from environment variables.

        Environment variables:
            OPENAI_API_KEY, ANTHROPIC_API_KEY, FIREWORKS_API_KEY, GOOGLE_API_KEY
            _AZURE_OPENAI_API_KEY, _AZURE_OPENAI_API_INSTANCE_NAME,
            _AZURE_OPENAI_API_DEPLOYMENT_NAME, _AZURE_OPENAI_API_VERSION,
            _AZURE_OPENAI_API_BASE_PATH
            OLLAMA_API_URL (default: "http://host.docker.internal:11434")
            ENABLE_BEDROCK_MODELS ("true" routes `bedrock/` names to Bedrock)
            AWS_DEFAULT_REGION (default: "us-east-1")
            NEXT_PUBLIC_SUPABASE_URL, NEXT_PUBLIC_SUPABASE_ANON_KEY
        """
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
            fireworks_api_key=os.getenv("FIREWORKS_API_KEY"),
            google_api_key=os.getenv("GOOGLE_API_KEY"),
            azure_openai_api_key=os.getenv("_AZURE_OPENAI_API_KEY") or "",
            azure_openai_api_instance_name=os.getenv("_AZURE_OPENAI_API_INSTANCE_NAME") or "",
            azure_openai_api_deployment_name=os.getenv("_AZURE_OPENAI_API_DEPLOYMENT_NAME") or "",
            azure_openai_api_version=(
                os.getenv("_AZURE_OPENAI_API_VERSION") or DEFAULT_AZURE_OPENAI_API_VERSION
            ),
            azure_openai_base_path=os.getenv("_AZURE_OPENAI_API_BASE_PATH"),
            ollama_api_url=os.getenv("OLLAMA_API_URL") or DEFAULT_OLLAMA_API_URL,
            enable_bedrock=os.getenv("ENABLE_BEDROCK_MODELS", "").lower() in ("1", "true", "yes"),
            aws_region=os.getenv("AWS_DEFAULT_REGION") or DEFAULT_AWS_REGION,
            supabase_url=os.getenv("NEXT_PUBLIC_SUPABASE_URL"),
            supabase_anon_key=os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        )
