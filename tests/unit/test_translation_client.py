import json
import pytest
import pytest_asyncio
import httpx
from app.clients.translation_client import TranslationClient
from app.exceptions import ProviderError, RateLimitedError
from app.models import TranslationStyle


MOCK_TRANSLATION_SUCCESS = {
    "success": {"total": 1},
    "contents": {
        "translated": "Yoda speaks, you listen.",
        "text": "You listen to Yoda speak.",
        "translation": "yoda"
    }
}

@pytest_asyncio.fixture
async def translation_client():
    client = TranslationClient()
    yield client
    await client.close()

@pytest.mark.asyncio
async def test_successful_yoda_translation(httpx_mock, translation_client):
    """Verifies successful API call and correct extraction of the translated text."""
    # ARRANGE: Mock the external API call
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda",
        method="POST",
        json=MOCK_TRANSLATION_SUCCESS,
        status_code=200
    )

    # ACT
    result = await translation_client.translate("You listen to Yoda speak.", TranslationStyle.YODA)

    # ASSERT: Check that only the translated text is returned
    assert result == "Yoda speaks, you listen."

    # The text is sent as a JSON body
    request = httpx_mock.get_request()
    assert json.loads(request.content) == {"text": "You listen to Yoda speak."}

@pytest.mark.asyncio
async def test_shakespeare_style_uses_shakespeare_endpoint(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/shakespeare",
        json={"contents": {"translated": "Thee shall listen."}},
    )

    result = await translation_client.translate("You shall listen.", TranslationStyle.SHAKESPEARE)

    assert result == "Thee shall listen."

@pytest.mark.asyncio
async def test_double_spaces_are_collapsed(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda",
        json={"contents": {"translated": "Dark places.  Ultrasonic waves, uses."}},
    )

    result = await translation_client.translate("Dark places. Uses ultrasonic waves.", "yoda")

    assert result == "Dark places. Ultrasonic waves, uses."

@pytest.mark.asyncio
async def test_api_rate_limit_raises_rate_limited_error(httpx_mock, translation_client):
    """Tests that a 429 (Rate Limit) from the external API is reported as RateLimitedError."""
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/shakespeare",
        status_code=429,
        json={"error": {"code": 429, "message": "Too Many Requests"}}
    )

    with pytest.raises(RateLimitedError) as excinfo:
        await translation_client.translate("To be or not to be.", TranslationStyle.SHAKESPEARE)

    assert excinfo.value.status_code == 429
    assert "rate limit" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_api_server_error_raises_provider_error(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda",
        status_code=500,
    )

    with pytest.raises(ProviderError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert not isinstance(excinfo.value, RateLimitedError)
    assert excinfo.value.status_code == 500

@pytest.mark.asyncio
async def test_api_network_error_raises_provider_error(httpx_mock, translation_client):
    """Tests that a network failure (timeout, DNS error) raises a ProviderError."""
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url="https://api.funtranslations.com/translate/yoda"
    )

    with pytest.raises(ProviderError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_unexpected_envelope_raises_provider_error(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda",
        json={"success": {"total": 1}},
    )

    with pytest.raises(ProviderError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "unexpected response format" in excinfo.value.detail

@pytest.mark.asyncio
async def test_explicit_client_settings_are_kept():
    client = TranslationClient(base_url="http://translate.local", timeout=0)

    assert str(client.client.base_url) == "http://translate.local/"
    assert client.client.timeout.read == 0
    await client.close()
