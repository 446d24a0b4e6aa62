"""Unit tests for IngestNewsUseCase."""

import pytest

from newsfeed.application.usecase.news import (
    IngestedArticle,
    IngestNewsRequest,
    IngestNewsUseCase,
)
from newsfeed.domain.value import NewsOrigin
from tests.conftest import author
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestIngestNewsUseCase:
    """Tests for batch ingestion."""

    @pytest.mark.asyncio
    async def test_retried_batch_is_skipped(self, unit_env):
        """Re-sending a batch creates nothing and passes the cursor through."""
        # Arrange
        use_case = await unit_env.get(IngestNewsUseCase)
        request = IngestNewsRequest(
            viewer=author(1),
            articles=[
                IngestedArticle(external_id="x-1", title="One"),
                IngestedArticle(external_id="x-2", title="Two"),
            ],
            source_cursor="page-2",
        )

        # Act
        first = await use_case.execute(request)
        retry = await use_case.execute(request)

        # Assert
        assert [item.title for item in first.created] == ["One", "Two"]
        assert all(item.origin is NewsOrigin.INGESTED for item in first.created)
        assert first.skipped == 0
        assert first.source_cursor == "page-2"
        assert retry.created == []
        assert retry.skipped == 2
