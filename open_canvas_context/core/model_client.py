"""
Chat model construction through LangChain's universal model loader.
"""
import logging
from typing import Any, Dict, Optional
import boto3
from langchain.chat_models import init_chat_model
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.runnables import RunnableConfig

from open_canvas_context.core.auth import get_user_from_config
from open_canvas_context.core.exceptions import UnauthorizedError
from open_canvas_context.core.model_config import AzureConfig, ModelProvider, get_model_config
from open_canvas_context.core.models import (
    PRIVILEGED_EMAIL_DOMAIN,
    RESTRICTED_MODELS,
    TEMPERATURE_EXCLUDED_MODELS,
)
from open_canvas_context.core.settings import ProviderSettings

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.5


def _current_value(model_config: Optional[Dict[str, Any]], field: str) -> Optional[Any]:
    """Read ``<field>.current`` from a model config dict."""
    if not model_config:
        return None
    return (model_config.get(field) or {}).get("current")


def _azure_params(azure_config: AzureConfig) -> Dict[str, Any]:
    deployment = azure_config.get("azureOpenAIApiDeploymentName")
    params: Dict[str, Any] = {
        "api_key": azure_config.get("azureOpenAIApiKey"),
        "azure_deployment": deployment,
        "api_version": azure_config.get("azureOpenAIApiVersion"),
    }
    base_path = azure_config.get("azureOpenAIBasePath")
    if base_path:
        params["base_url"] = f"{base_path.rstrip('/')}/{deployment}"
    else:
        instance = azure_config.get("azureOpenAIApiInstanceName")
        params["azure_endpoint"] = f"https://{instance}.openai.azure.com/"
    return params


async def _ensure_authorized(
    config: RunnableConfig,
    model_name: str,
    settings: Optional[ProviderSettings],
) -> None:
    user = await get_user_from_config(config, settings)
    if not user:
        raise UnauthorizedError(
            "Unauthorized. Can not use restricted models without a user.",
            model_name=model_name,
        )
    email = user.get("email") or ""
    if not email.endswith(PRIVILEGED_EMAIL_DOMAIN):
        raise UnauthorizedError(
            f"Unauthorized. Can not use restricted models without a user with a "
            f"{PRIVILEGED_EMAIL_DOMAIN} email.",
            model_name=model_name,
        )


async def get_model_from_config(
    config: RunnableConfig,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    settings: Optional[ProviderSettings] = None,
) -> BaseChatModel:
    """Build the chat model selected by ``configurable.customModelName``.

    Explicit ``temperature``/``max_tokens`` win over ``modelConfig.*.current``;
    temperature falls back to 0.5.

    Raises:
        MissingConfigError: If no model name is configured.
        UnknownProviderError: If no provider matches the model name.
        UnauthorizedError: If a restricted model is requested without a privileged user.
    """
    model_config = get_model_config(config, settings)
    model_name = model_config["modelName"]
    model_provider = model_config["modelProvider"]
    config_dict = model_config.get("modelConfig")

    if temperature is None:
        temperature = _current_value(config_dict, "temperatureRange")
    if temperature is None:
        temperature = DEFAULT_TEMPERATURE
    if max_tokens is None:
        max_tokens = _current_value(config_dict, "maxTokens")

    if model_name in RESTRICTED_MODELS:
        await _ensure_authorized(config, model_name, settings)

    params: Dict[str, Any] = {}
    # Reasoning models (e.g. OpenAI o1) reject the temperature param and streaming.
    if model_name in TEMPERATURE_EXCLUDED_MODELS:
        if max_tokens is not None:
            params["max_completion_tokens"] = max_tokens
        params["streaming"] = False
    else:
        params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

    if model_config.get("baseUrl"):
        params["base_url"] = model_config["baseUrl"]
    if model_config.get("apiKey"):
        params["api_key"] = model_config["apiKey"]
    if model_config.get("azureConfig") is not None:
        params.update(_azure_params(model_config["azureConfig"]))
    if model_provider == ModelProvider.BEDROCK.value:
        region = model_config.get("region")
        params["region_name"] = region
        params["client"] = boto3.Session(region_name=region).client("bedrock-runtime")

    logger.debug("Initializing %s model %s", model_provider, model_name)
    return init_chat_model(model_name, model_provider=model_provider, **params)
