from unittest.mock import AsyncMock, Mock

import pytest

from mindmap_ai.services.fallback import with_fallback


@pytest.mark.asyncio
async def test_primary_result_wins():
    primary = AsyncMock(return_value="ai")
    fallback = Mock(return_value="mock")
    assert await with_fallback(primary, fallback, label="T") == "ai"
    fallback.assert_not_called()


@pytest.mark.asyncio
async def test_any_exception_falls_back():
    primary = AsyncMock(side_effect=KeyError("boom"))
    fallback = Mock(return_value="mock")
    assert await with_fallback(primary, fallback, label="T") == "mock"
    primary.assert_awaited_once()
    fallback.assert_called_once()


@pytest.mark.asyncio
async def test_fallback_errors_propagate():
    primary = AsyncMock(side_effect=RuntimeError("ai down"))
    fallback = Mock(side_effect=ValueError("mock broke"))
    with pytest.raises(ValueError, match="mock broke"):
        await with_fallback(primary, fallback, label="T")
