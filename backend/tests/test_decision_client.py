import httpx
import pytest

from fashion_adviser.exceptions import RecommendationRequestError
from fashion_adviser.schemas.fashion import InputSchema
from fashion_adviser.services.decision_client import RecommendationClient
from fashion_adviser.services.request_builder import RequestBuilder


@pytest.fixture
def trip_request():
    return RequestBuilder().build(InputSchema.TRIP, {
        "departure_date": "2024-07-15",
        "destination": "大阪",
        "goal": "遊園地",
        "gender": "女性",
    })


@pytest.mark.asyncio
async def test_posts_json_with_bearer_token(settings, server, trip_request):
    server.reply(settings.decision_service_url, json_body={"interpretation": {"tops": "Tシャツ"}})
    client = RecommendationClient(settings, client=server.client())

    result = await client.get_recommendation("token-123", trip_request)

    assert result.interpretation == {"tops": "Tシャツ"}
    assert result.has_problems is False

    sent = server.sent_to(settings.decision_service_url)
    assert len(sent) == 1
    assert sent[0].method == "POST"
    assert sent[0].headers["Authorization"] == "Bearer token-123"
    assert sent[0].headers["Content-Type"] == "application/json"
    assert server.json_sent(settings.decision_service_url) == trip_request.body()


@pytest.mark.asyncio
async def test_problems_response_is_returned(settings, server, trip_request):
    problems = [{"type": "input", "detail": "month out of range"}]
    server.reply(settings.decision_service_url, json_body={"problems": problems})
    client = RecommendationClient(settings, client=server.client())

    result = await client.get_recommendation("token-123", trip_request)

    assert result.has_problems is True
    assert result.problems == problems
    assert result.interpretation is None


@pytest.mark.asyncio
@pytest.mark.parametrize("problems", [[], {}])
async def test_empty_problems_still_count_as_problems(settings, server, trip_request, problems):
    server.reply(settings.decision_service_url, json_body={"problems": problems})
    client = RecommendationClient(settings, client=server.client())

    result = await client.get_recommendation("token-123", trip_request)

    assert result.has_problems is True


@pytest.mark.asyncio
async def test_response_without_problems_field(settings, server, trip_request):
    server.reply(settings.decision_service_url, json_body={"interpretation": {}})
    client = RecommendationClient(settings, client=server.client())

    result = await client.get_recommendation("token-123", trip_request)

    assert result.has_problems is False


@pytest.mark.asyncio
async def test_extra_keys_are_kept(settings, server, trip_request):
    server.reply(
        settings.decision_service_url,
        json_body={"interpretation": {"tops": "シャツ"}, "decisionId": "d-1"},
    )
    client = RecommendationClient(settings, client=server.client())

    result = await client.get_recommendation("token-123", trip_request)
    assert result.model_extra == {"decisionId": "d-1"}


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 404, 500, 502])
async def test_non_2xx_raises(settings, server, trip_request, status):
    server.reply(settings.decision_service_url, status_code=status, json_body={})
    client = RecommendationClient(settings, client=server.client())

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client.get_recommendation("token-123", trip_request)

    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_transport_error_raises(settings, server, trip_request):
    server.fail(settings.decision_service_url, httpx.ReadTimeout("timed out"))
    client = RecommendationClient(settings, client=server.client())

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client.get_recommendation("token-123", trip_request)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_non_object_body_raises(settings, server, trip_request):
    server.reply(settings.decision_service_url, json_body=["unexpected"])
    client = RecommendationClient(settings, client=server.client())

    with pytest.raises(RecommendationRequestError):
        await client.get_recommendation("token-123", trip_request)
