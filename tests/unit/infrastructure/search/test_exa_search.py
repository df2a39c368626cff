"""
Tests for ExaSearchService.

The exa-py client is replaced by a MagicMock returning SimpleNamespace hits.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.infrastructure.search import ExaSearchService, WebResearchResult


def _hit(title="Title", url="https://example.com", text="Body text"):
    return SimpleNamespace(title=title, url=url, text=text)


@pytest.fixture
def exa_client():
    client = MagicMock()
    client.search_and_contents.return_value = SimpleNamespace(results=[_hit()])
    return client


# ============================================================================
# search
# ============================================================================


def test_search_passes_options_to_exa(exa_client):
    service = ExaSearchService(client=exa_client, num_results=5, max_characters=100)

    results = service.search("biotech market")

    exa_client.search_and_contents.assert_called_once_with(
        "biotech market", type="auto", num_results=5, text={"max_characters": 100}
    )
    assert results == [
        WebResearchResult(
            title="Title",
            url="https://example.com",
            content="Body text",
            query="biotech market",
        )
    ]


def test_search_skips_incomplete_hits_and_truncates(exa_client):
    exa_client.search_and_contents.return_value = SimpleNamespace(
        results=[
            _hit(text=None),
            _hit(url=None),
            _hit(title=""),
            _hit(text="x" * 50),
        ]
    )
    service = ExaSearchService(client=exa_client)

    results = service.search("query", max_characters=10)

    assert len(results) == 1
    assert results[0].content == "x" * 10


def test_service_requires_api_key_or_client():
    with pytest.raises(ValueError):
        ExaSearchService()


# ============================================================================
# search_web_research
# ============================================================================


def test_build_research_queries():
    queries = ExaSearchService.build_research_queries(
        "Bionomous", ["Union Biometrica", "Sysmex"], "biotech", year=2025
    )

    assert queries == [
        '"Bionomous" biotech',
        "biotech market size market overview 2025",
        "biotech trends technology innovation 2025",
        "biotech competitive landscape",
        '"Union Biometrica" biotech',
        '"Sysmex" biotech',
    ]


def test_build_research_queries_uses_solution_category():
    queries = ExaSearchService.build_research_queries(
        "Acme", [], "biotech", solution_category="lab automation", year=2025
    )
    assert queries[3] == "lab automation competitive landscape"


def test_search_web_research_keeps_query_order_and_skips_failures():
    client = MagicMock()

    def search_and_contents(query, **kwargs):
        if "market size" in query:
            error = RuntimeError("rate limited")
            error.status_code = 429
            raise error
        return SimpleNamespace(results=[_hit(title=query)])

    client.search_and_contents.side_effect = search_and_contents
    service = ExaSearchService(client=client)

    results = service.search_web_research(
        "Acme", ["Globex"], "biotech", year=2025
    )

    assert [r.query for r in results] == [
        '"Acme" biotech',
        "biotech trends technology innovation 2025",
        "biotech competitive landscape",
        '"Globex" biotech',
    ]
    assert all(r.title == r.query for r in results)
    assert client.search_and_contents.call_count == 5
