"""
Search Infrastructure Module

Exports:
    - ExaSearchService: Exa.ai search with page text
    - WebResearchResult: One search hit
"""

from .exa_search import ExaSearchService, WebResearchResult

__all__ = ["ExaSearchService", "WebResearchResult"]
