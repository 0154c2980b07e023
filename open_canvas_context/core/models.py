"""
Model catalog and per-model parameter constraints.
"""
from typing import List, Dict, Any
from pydantic import BaseModel


class TemperatureRange(BaseModel):
    min: float
    max: float
    default: float
    current: float


class MaxTokens(BaseModel):
    min: int
    max: int
    default: int
    current: int


class CustomModelConfig(BaseModel):
    provider: str
    temperatureRange: TemperatureRange
    maxTokens: MaxTokens


class ModelConfigurationParams(BaseModel):
    name: str
    label: str
    config: CustomModelConfig
    isNew: bool = False


def _model(
    name: str,
    label: str,
    provider: str,
    max_tokens: int = 4096,
    default_tokens: int = 4096,
    is_new: bool = False,
) -> Dict[str, Any]:
    return {
        "name": name,
        "label": label,
        "config": {
            "provider": provider,
            "temperatureRange": {
                "min": 0,
                "max": 1,
                "default": 0.5,
                "current": 0.5,
            },
            "maxTokens": {
                "min": 1,
                "max": max_tokens,
                "default": default_tokens,
                "current": default_tokens,
            },
        },
        "isNew": is_new,
    }


OPENAI_MODELS: List[Dict[str, Any]] = [
    _model("gpt-4o", "GPT 4o", "openai", max_tokens=16384),
    _model("gpt-4o-mini", "GPT 4o mini", "openai", max_tokens=16384),
    _model("o1-mini", "o1 mini", "openai", max_tokens=65536),
    _model("o1", "o1", "openai", max_tokens=100000),
]

AZURE_MODELS: List[Dict[str, Any]] = [
    _model("azure/gpt-4o-mini", "GPT 4o mini (Azure)", "azure_openai", max_tokens=16384),
]

ANTHROPIC_MODELS: List[Dict[str, Any]] = [
    _model("claude-3-5-sonnet-latest", "Claude 3.5 Sonnet", "anthropic", max_tokens=8192),
    _model("claude-3-5-haiku-20241022", "Claude 3.5 Haiku", "anthropic", max_tokens=8192),
    _model("claude-3-haiku-20240307", "Claude 3 Haiku", "anthropic"),
]

FIREWORKS_MODELS: List[Dict[str, Any]] = [
    _model(
        "accounts/fireworks/models/llama-v3p3-70b-instruct",
        "Llama 3.3 70B",
        "fireworks",
        max_tokens=16384,
    ),
    _model(
        "accounts/fireworks/models/deepseek-v3",
        "DeepSeek V3",
        "fireworks",
        max_tokens=8000,
    ),
]

GEMINI_MODELS: List[Dict[str, Any]] = [
    _model("gemini-1.5-flash", "Gemini 1.5 Flash", "google-genai", max_tokens=8192),
    _model("gemini-2.0-flash-exp", "Gemini 2.0 Flash", "google-genai", max_tokens=8192, is_new=True),
]

OLLAMA_MODELS: List[Dict[str, Any]] = [
    _model("ollama-llama3.3", "Llama 3.3 70B (local)", "ollama", max_tokens=2048, default_tokens=2048),
]

BEDROCK_MODELS: List[Dict[str, Any]] = [
    _model(
        "bedrock/global.anthropic.claude-sonnet-4-5-20250929-v1:0",
        "Claude Sonnet 4.5 (Bedrock)",
        "bedrock_converse",
        max_tokens=64000,
    ),
    _model("bedrock/us.amazon.nova-pro-v1:0", "Nova Pro (Bedrock)", "bedrock_converse", max_tokens=8192),
]

ALL_MODELS: List[ModelConfigurationParams] = [
    ModelConfigurationParams.model_validate(m)
    for m in (
        OPENAI_MODELS
        + AZURE_MODELS
        + ANTHROPIC_MODELS
        + FIREWORKS_MODELS
        + GEMINI_MODELS
        + OLLAMA_MODELS
    )
]


def available_models(include_bedrock: bool = False) -> List[ModelConfigurationParams]:
    """Models selectable by clients. Bedrock models need `enable_bedrock`."""
    if not include_bedrock:
        return ALL_MODELS
    return ALL_MODELS + [ModelConfigurationParams.model_validate(m) for m in BEDROCK_MODELS]


DEFAULT_MODEL_NAME = OPENAI_MODELS[1]["name"]
DEFAULT_MODEL_CONFIG = OPENAI_MODELS[1]["config"]

# Models which may only be used by signed-in users of the privileged domain
RESTRICTED_MODELS: List[str] = [
    "o1",
    "gpt-4o",
    "claude-3-5-sonnet-latest",
    "gemini-2.0-flash-exp",
]

PRIVILEGED_EMAIL_DOMAIN = "@langchain.dev"

# Models which do NOT support the temperature parameter
TEMPERATURE_EXCLUDED_MODELS: List[str] = ["o1-mini", "o1"]
