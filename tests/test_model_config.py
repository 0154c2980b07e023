import pytest

from open_canvas_context.core.exceptions import MissingConfigError, UnknownProviderError
from open_canvas_context.core.model_config import (
    ModelProvider,
    get_model_config,
    optionally_get_system_prompt_from_config,
)
from open_canvas_context.core.models import ALL_MODELS, CustomModelConfig, available_models
from open_canvas_context.core.settings import DEFAULT_OLLAMA_API_URL
from tests.helpers import runnable_config


def test_missing_model_name():
    with pytest.raises(MissingConfigError):
        get_model_config(runnable_config())


def test_unknown_provider(settings):
    with pytest.raises(UnknownProviderError):
        get_model_config(runnable_config("unknown-model"), settings)


def test_azure_prefix_stripped(settings):
    resolved = get_model_config(runnable_config("azure/gpt-4"), settings)
    assert resolved["modelProvider"] == "azure_openai"
    assert resolved["modelName"] == "gpt-4"
    assert resolved["azureConfig"]["azureOpenAIApiKey"] == "azure-key"
    assert resolved["azureConfig"]["azureOpenAIApiVersion"] == "2024-08-01-preview"
    assert "modelConfig" not in resolved


@pytest.mark.parametrize(
    "model_name, provider, api_key",
    [
        ("gpt-4o-mini", "openai", "sk-openai"),
        ("o1-mini", "openai", "sk-openai"),
        ("claude-3-5-sonnet", "anthropic", "sk-anthropic"),
        ("accounts/fireworks/models/deepseek-v3", "fireworks", "fw-key"),
        ("gemini-1.5-flash", "google-genai", "google-key"),
    ],
)
def test_key_based_providers(settings, model_name, provider, api_key):
    resolved = get_model_config(runnable_config(model_name), settings)
    assert resolved["modelProvider"] == provider
    assert resolved["modelName"] == model_name
    assert resolved["apiKey"] == api_key


def test_first_match_wins(settings):
    # contains both "gpt-" and "claude-"
    resolved = get_model_config(runnable_config("gpt-claude-mix"), settings)
    assert resolved["modelProvider"] == ModelProvider.OPENAI


def test_ollama(settings):
    resolved = get_model_config(runnable_config("ollama-llama3.3"), settings)
    assert resolved == {
        "modelName": "llama3.3",
        "modelProvider": "ollama",
        "baseUrl": "http://localhost:11434",
    }


def test_bedrock_prefix_follows_default_table(settings):
    resolved = get_model_config(
        runnable_config("bedrock/us.anthropic.claude-3-5-sonnet-v2:0"), settings
    )
    assert resolved["modelProvider"] == "anthropic"
    assert resolved["modelName"] == "bedrock/us.anthropic.claude-3-5-sonnet-v2:0"
    with pytest.raises(UnknownProviderError):
        get_model_config(runnable_config("bedrock/us.amazon.nova-pro-v1:0"), settings)


def test_bedrock_when_enabled(settings):
    settings = settings.model_copy(update={"enable_bedrock": True})
    resolved = get_model_config(
        runnable_config("bedrock/us.anthropic.claude-3-5-sonnet-v2:0"), settings
    )
    assert resolved["modelProvider"] == "bedrock_converse"
    assert resolved["modelName"] == "us.anthropic.claude-3-5-sonnet-v2:0"
    assert resolved["region"] == "eu-west-1"


def test_model_config_passed_through(settings):
    model_config = ALL_MODELS[0].config
    resolved = get_model_config(runnable_config("gpt-4o", modelConfig=model_config), settings)
    assert resolved["modelConfig"] == model_config.model_dump()
    assert CustomModelConfig.model_validate(resolved["modelConfig"]) == model_config


def test_reads_environment(monkeypatch):
    monkeypatch.delenv("ENABLE_BEDROCK_MODELS", raising=False)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")
    monkeypatch.delenv("OLLAMA_API_URL", raising=False)
    assert get_model_config(runnable_config("claude-3-haiku"))["apiKey"] == "env-key"
    assert get_model_config(runnable_config("ollama-phi"))["baseUrl"] == DEFAULT_OLLAMA_API_URL
    assert get_model_config(runnable_config("bedrock/claude-x"))["modelProvider"] == "anthropic"
    monkeypatch.setenv("ENABLE_BEDROCK_MODELS", "true")
    assert get_model_config(runnable_config("bedrock/claude-x"))["modelProvider"] == "bedrock_converse"


def test_catalog_models_all_resolve(settings):
    settings = settings.model_copy(update={"enable_bedrock": True})
    for model in available_models(include_bedrock=True):
        resolved = get_model_config(runnable_config(model.name), settings)
        assert resolved["modelProvider"] == model.config.provider


def test_system_prompt():
    assert optionally_get_system_prompt_from_config(runnable_config(systemPrompt="Be kind")) == "Be kind"
    assert optionally_get_system_prompt_from_config({}) is None
