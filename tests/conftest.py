import pytest

from open_canvas_context.core.settings import ProviderSettings


@pytest.fixture
def settings():
    return ProviderSettings(
        openai_api_key="sk-openai",
        anthropic_api_key="sk-anthropic",
        fireworks_api_key="fw-key",
        google_api_key="google-key",
        azure_openai_api_key="azure-key",
        azure_openai_api_instance_name="canvas-instance",
        azure_openai_api_deployment_name="canvas-deployment",
        ollama_api_url="http://localhost:11434",
        aws_region="eu-west-1",
    )
