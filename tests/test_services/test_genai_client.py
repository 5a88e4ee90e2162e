"""Tests for the generative client wrapper."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from google.genai import errors

from chefai.services.genai_client import (
    BILLING_ERROR,
    CONFIGURATION_ERROR,
    EMPTY_RESPONSE_ERROR,
    GENERIC_ERROR,
    FlowError,
    GenerativeClient,
    describe_error,
)
from chefai.services.recipe_schemas import Recipe

RECIPE_JSON = {
    "name": "Gazpacho",
    "ingredients": ["tomatoes"],
    "instructions": ["Blend"],
    "equipment": ["Blender"],
}


def _client_returning(response=None, error=None):
    """A GenerativeClient whose SDK call is an AsyncMock."""
    client = GenerativeClient(api_key="test-key", model="test-model")
    generate = AsyncMock(return_value=response, side_effect=error)
    sdk = MagicMock()
    sdk.aio.models.generate_content = generate
    return client, sdk, generate


class TestDescribeError:
    def test_configuration(self):
        assert describe_error(Exception("API key not valid. Please pass")) == CONFIGURATION_ERROR
        assert describe_error(Exception("403 PERMISSION_DENIED")) == CONFIGURATION_ERROR

    def test_billing(self):
        assert describe_error(Exception("Billing account required")) == BILLING_ERROR

    def test_generic(self):
        assert describe_error(Exception("deadline exceeded")) == GENERIC_ERROR


class TestGenerateStructured:
    @pytest.mark.asyncio
    async def test_parsed_response(self):
        recipe = Recipe(**RECIPE_JSON)
        client, sdk, generate = _client_returning(MagicMock(parsed=recipe, text=""))
        with patch.object(client, "_get_client", return_value=sdk):
            result = await client.generate_structured("generate-recipe", "prompt", Recipe, 1.0)

        assert result is recipe
        kwargs = generate.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].temperature == 1.0
        assert kwargs["config"].safety_settings

    @pytest.mark.asyncio
    async def test_falls_back_to_text(self):
        response = MagicMock(parsed=None, text=json.dumps(RECIPE_JSON))
        client, sdk, _ = _client_returning(response)
        with patch.object(client, "_get_client", return_value=sdk):
            result = await client.generate_structured("generate-recipe", "prompt", Recipe)
        assert result.name == "Gazpacho"

    @pytest.mark.asyncio
    async def test_safety_disabled(self):
        recipe = Recipe(**RECIPE_JSON)
        client, sdk, generate = _client_returning(MagicMock(parsed=recipe))
        with patch.object(client, "_get_client", return_value=sdk):
            await client.generate_structured("f", "prompt", Recipe, safety=False)
        assert generate.call_args.kwargs["config"].safety_settings is None

    @pytest.mark.asyncio
    async def test_empty_response(self):
        client, sdk, _ = _client_returning(MagicMock(parsed=None, text=None))
        with patch.object(client, "_get_client", return_value=sdk):
            with pytest.raises(FlowError, match=EMPTY_RESPONSE_ERROR):
                await client.generate_structured("f", "prompt", Recipe)

    @pytest.mark.asyncio
    async def test_invalid_response(self):
        client, sdk, _ = _client_returning(MagicMock(parsed=None, text='{"name": 1}'))
        with patch.object(client, "_get_client", return_value=sdk):
            with pytest.raises(FlowError) as exc_info:
                await client.generate_structured("f", "prompt", Recipe)
        assert str(exc_info.value) == GENERIC_ERROR

    @pytest.mark.asyncio
    async def test_api_error_is_described(self):
        error = errors.APIError(
            400, {"error": {"message": "API key not valid.", "status": "INVALID_ARGUMENT"}}
        )
        client, sdk, _ = _client_returning(error=error)
        with patch.object(client, "_get_client", return_value=sdk):
            with pytest.raises(FlowError) as exc_info:
                await client.generate_structured("f", "prompt", Recipe)
        assert str(exc_info.value) == CONFIGURATION_ERROR
        assert exc_info.value.__cause__ is error


class TestGenerateText:
    @pytest.mark.asyncio
    async def test_strips_text(self):
        client, sdk, generate = _client_returning(MagicMock(text="  Use butter.  "))
        with patch.object(client, "_get_client", return_value=sdk):
            assert await client.generate_text("cooking-assistant", "q", 0.7) == "Use butter."
        assert generate.call_args.kwargs["config"].response_mime_type is None

    @pytest.mark.asyncio
    async def test_empty_text(self):
        client, sdk, _ = _client_returning(MagicMock(text="   "))
        with patch.object(client, "_get_client", return_value=sdk):
            with pytest.raises(FlowError, match=EMPTY_RESPONSE_ERROR):
                await client.generate_text("f", "q")


class TestClientSetup:
    def test_defaults_from_settings(self):
        with patch("chefai.services.genai_client.settings") as mock_settings:
            mock_settings.google_api_key = "env-key"
            mock_settings.genai_model = "env-model"
            client = GenerativeClient()
        assert client.api_key == "env-key"
        assert client.model == "env-model"

    def test_sdk_client_is_cached(self):
        client = GenerativeClient(api_key="k", model="m")
        with patch("chefai.services.genai_client.genai.Client") as sdk_cls:
            assert client._get_client() is client._get_client()
        sdk_cls.assert_called_once_with(api_key="k")
