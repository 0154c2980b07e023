"""
Resolution of a requested model name to a provider and its credentials.
"""
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, TypedDict
from langchain_core.runnables import RunnableConfig
from pydantic import BaseModel

from open_canvas_context.core.exceptions import MissingConfigError, UnknownProviderError
from open_canvas_context.core.settings import ProviderSettings


class ModelProvider(str, Enum):
    AZURE_OPENAI = "azure_openai"
    BEDROCK = "bedrock_converse"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    FIREWORKS = "fireworks"
    GOOGLE_GENAI = "google-genai"
    OLLAMA = "ollama"


class AzureConfig(TypedDict, total=False):
    azureOpenAIApiKey: str
    azureOpenAIApiInstanceName: str
    azureOpenAIApiDeploymentName: str
    azureOpenAIApiVersion: str
    azureOpenAIBasePath: Optional[str]


class ResolvedModelConfig(TypedDict, total=False):
    modelName: str
    modelProvider: str
    modelConfig: Optional[Dict[str, Any]]
    azureConfig: AzureConfig
    apiKey: Optional[str]
    baseUrl: str
    region: str


def _prefix(prefix: str) -> Callable[[str], bool]:
    return lambda name: name.startswith(prefix)


def _contains(*fragments: str) -> Callable[[str], bool]:
    return lambda name: any(fragment in name for fragment in fragments)


# (matcher, provider, prefix to strip) - first match wins
PROVIDER_TABLE: Tuple[Tuple[Callable[[str], bool], ModelProvider, Optional[str]], ...] = (
    (_prefix("azure/"), ModelProvider.AZURE_OPENAI, "azure/"),
    (_prefix("bedrock/"), ModelProvider.BEDROCK, "bedrock/"),
    (_contains("gpt-", "o1"), ModelProvider.OPENAI, None),
    (_contains("claude-"), ModelProvider.ANTHROPIC, None),
    (_contains("fireworks/"), ModelProvider.FIREWORKS, None),
    (_contains("gemini-"), ModelProvider.GOOGLE_GENAI, None),
    (_prefix("ollama-"), ModelProvider.OLLAMA, "ollama-"),
)


def match_provider(model_name: str, enable_bedrock: bool = False) -> Tuple[ModelProvider, str]:
    """Return the provider for ``model_name`` and the name to send to it.

    The Bedrock row is skipped unless ``enable_bedrock`` is set.
    """
    for matches, provider, strip in PROVIDER_TABLE:
        if provider == ModelProvider.BEDROCK and not enable_bedrock:
            continue
        if matches(model_name):
            return provider, model_name[len(strip):] if strip else model_name
    raise UnknownProviderError(model_name)


def _api_key_for(provider: ModelProvider, settings: ProviderSettings) -> Optional[str]:
    return {
        ModelProvider.OPENAI: settings.openai_api_key,
        ModelProvider.ANTHROPIC: settings.anthropic_api_key,
        ModelProvider.FIREWORKS: settings.fireworks_api_key,
        ModelProvider.GOOGLE_GENAI: settings.google_api_key,
    }.get(provider)


def get_model_config(
    config: RunnableConfig,
    settings: Optional[ProviderSettings] = None,
) -> ResolvedModelConfig:
    """Resolve ``configurable.customModelName`` into provider settings.

    Args:
        config: Runnable config carrying ``customModelName`` and optional ``modelConfig``.
        settings: Provider credentials. Read from the environment when omitted.

    Raises:
        MissingConfigError: If no model name is configured.
        UnknownProviderError: If no provider matches the model name.
    """
    configurable = config.get("configurable", {}) if config else {}
    custom_model_name = configurable.get("customModelName")
    if not custom_model_name:
        raise MissingConfigError("Model name is missing in config.")

    settings = settings or ProviderSettings.from_env()
    provider, model_name = match_provider(custom_model_name, settings.enable_bedrock)

    if provider == ModelProvider.AZURE_OPENAI:
        return {
            "modelName": model_name,
            "modelProvider": provider.value,
            "azureConfig": {
                "azureOpenAIApiKey": settings.azure_openai_api_key,
                "azureOpenAIApiInstanceName": settings.azure_openai_api_instance_name,
                "azureOpenAIApiDeploymentName": settings.azure_openai_api_deployment_name,
                "azureOpenAIApiVersion": settings.azure_openai_api_version,
                "azureOpenAIBasePath": settings.azure_openai_base_path,
            },
        }

    if provider == ModelProvider.OLLAMA:
        return {
            "modelName": model_name,
            "modelProvider": provider.value,
            "baseUrl": settings.ollama_api_url,
        }

    model_config = configurable.get("modelConfig")
    if isinstance(model_config, BaseModel):
        model_config = model_config.model_dump()

    resolved: ResolvedModelConfig = {
        "modelName": model_name,
        "modelProvider": provider.value,
        "modelConfig": model_config,
    }
    if provider == ModelProvider.BEDROCK:
        resolved["region"] = settings.aws_region
    else:
        resolved["apiKey"] = _api_key_for(provider, settings)
    return resolved


def optionally_get_system_prompt_from_config(config: RunnableConfig) -> Optional[str]:
    """Return the custom system prompt, if the caller supplied one."""
    configurable = config.get("configurable", {}) if config else {}
    return configurable.get("systemPrompt")
