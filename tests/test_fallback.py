from unittest.mock import AsyncMock

from vendor_app.application.fallback import endpoint_fetchers, fetch_first_available
from vendor_app.application.interfaces.vendor_backend import EndpointResult
from vendor_app.domain.errors import NetworkError, ServerError


def _fetcher(result: EndpointResult) -> AsyncMock:
    return AsyncMock(return_value=result)


async def test_first_array_wins_and_later_candidates_are_not_called():
    a = _fetcher(EndpointResult(path="/a", body={"cars": []}))
    b = _fetcher(EndpointResult(path="/b", body=[{"id": 1}]))
    c = _fetcher(EndpointResult(path="/c", body=[{"id": 2}]))

    items = await fetch_first_available([a, b, c], resource="cars")

    assert items == [{"id": 1}]
    a.assert_awaited_once()
    b.assert_awaited_once()
    c.assert_not_called()


async def test_errors_move_on_to_next_candidate():
    a = _fetcher(EndpointResult(path="/a", error=ServerError(status_code=503)))
    b = _fetcher(EndpointResult(path="/b", error=NetworkError()))
    c = _fetcher(EndpointResult(path="/c", body=[]))

    assert await fetch_first_available([a, b, c]) == []
    c.assert_awaited_once()


async def test_empty_array_is_a_valid_answer():
    a = _fetcher(EndpointResult(path="/a", body=[]))
    b = _fetcher(EndpointResult(path="/b", body=[{"id": 1}]))

    assert await fetch_first_available([a, b]) == []
    b.assert_not_called()


async def test_all_candidates_failing_yields_empty_list(caplog):
    fetchers = [
        _fetcher(EndpointResult(path="/a", body=None)),
        _fetcher(EndpointResult(path="/b", error=ServerError())),
    ]

    with caplog.at_level("WARNING"):
        assert await fetch_first_available(fetchers, resource="drivers") == []

    assert "No drivers found from any endpoint" in caplog.text


async def test_endpoint_fetchers_call_backend_in_order(mock_backend):
    mock_backend.try_get_list.side_effect = [
        EndpointResult(path="/x", error=ServerError()),
        EndpointResult(path="/y", body=[{"id": "car-1"}]),
    ]

    items = await fetch_first_available(endpoint_fetchers(mock_backend, ["/x", "/y", "/z"]))

    assert items == [{"id": "car-1"}]
    assert [call.args[0] for call in mock_backend.try_get_list.await_args_list] == ["/x", "/y"]
