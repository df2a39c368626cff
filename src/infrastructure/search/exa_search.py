"""
Exa Web Research Service

Runs web searches through Exa.ai and returns trimmed text snippets used as
market context for research deliverables.

Responsibility:
    - Single search with page text (search)
    - Research query set for a client + competitors (search_web_research)
    - Drop results without title, url or text; truncate text

Architecture Notes:
    - Infrastructure Layer (external dependency on exa-py)
    - exa-py client is synchronous; queries run on a ThreadPoolExecutor
    - Failed queries are logged and skipped, never raised

Examples:
    >>> service = ExaSearchService(api_key="exa-key")
    >>> results = service.search_web_research(
    ...     client_name="Bionomous",
    ...     competitor_names=["Union Biometrica"],
    ...     industry="biotech",
    ... )
    >>> results[0].query
    '"Bionomous" biotech'
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from exa_py import Exa

# Configure logger for this module
logger = logging.getLogger(__name__)

DEFAULT_NUM_RESULTS = 3
DEFAULT_MAX_CHARACTERS = 2000
MAX_PARALLEL_QUERIES = 8


@dataclass(frozen=True)
class WebResearchResult:
    """One search hit with the query that produced it."""

    title: str
    url: str
    content: str
    query: str


class ExaSearchService:
    """
    Exa.ai search wrapper.

    Attributes:
        num_results: Default hits per query
        max_characters: Default text length per hit
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        num_results: int = DEFAULT_NUM_RESULTS,
        max_characters: int = DEFAULT_MAX_CHARACTERS,
        client: Optional[Any] = None,
    ) -> None:
        if client is None:
            if not api_key:
                raise ValueError("EXA_API_KEY is required for web research")
            client = Exa(api_key)

        self._client = client
        self.num_results = num_results
        self.max_characters = max_characters

    def search(
        self,
        query: str,
        num_results: Optional[int] = None,
        max_characters: Optional[int] = None,
    ) -> list[WebResearchResult]:
        """
        Search and fetch page text for one query.

        Args:
            query: Search query
            num_results: Hits to request (default: self.num_results)
            max_characters: Text length per hit (default: self.max_characters)

        Returns:
            Results that have title, url and text

        Raises:
            Exception: Whatever exa-py raises for the request
        """
        limit = max_characters or self.max_characters
        response = self._client.search_and_contents(
            query,
            type="auto",
            num_results=num_results or self.num_results,
            text={"max_characters": limit},
        )

        results = []
        for hit in response.results:
            text = getattr(hit, "text", None)
            url = getattr(hit, "url", None)
            title = getattr(hit, "title", None)
            if text and url and title:
                results.append(
                    WebResearchResult(
                        title=title, url=url, content=text[:limit], query=query
                    )
                )
        return results

    def _search_or_skip(self, query: str) -> list[WebResearchResult]:
        try:
            results = self.search(query)
        except Exception as e:
            status = getattr(e, "status_code", None) or getattr(e, "status", "unknown")
            logger.warning(
                f"Exa search failed for query {query!r}: status={status} message={e}"
            )
            return []

        logger.info(f"Exa query {query[:60]!r} -> {len(results)} results")
        return results

    @staticmethod
    def build_research_queries(
        client_name: str,
        competitor_names: list[str],
        industry: str,
        solution_category: Optional[str] = None,
        year: Optional[int] = None,
    ) -> list[str]:
        """
        Query set: company coverage, market size, trends, competitive
        landscape, then one query per competitor.
        """
        current_year = year or date.today().year
        queries = [
            f'"{client_name}" {industry}',
            f"{industry} market size market overview {current_year}",
            f"{industry} trends technology innovation {current_year}",
            f"{solution_category or industry} competitive landscape",
        ]
        queries.extend(f'"{name}" {industry}' for name in competitor_names)
        return queries

    def search_web_research(
        self,
        client_name: str,
        competitor_names: list[str],
        industry: str,
        solution_category: Optional[str] = None,
        year: Optional[int] = None,
    ) -> list[WebResearchResult]:
        """
        Run the research query set concurrently.

        Returns:
            Results of all successful queries, in query order
        """
        queries = self.build_research_queries(
            client_name, competitor_names, industry, solution_category, year
        )

        with ThreadPoolExecutor(
            max_workers=min(MAX_PARALLEL_QUERIES, len(queries)),
            thread_name_prefix="exa",
        ) as executor:
            batches = list(executor.map(self._search_or_skip, queries))

        results = [result for batch in batches for result in batch]
        logger.info(
            f"Completed web research: {len(results)} results from {len(queries)} queries"
        )
        return results
