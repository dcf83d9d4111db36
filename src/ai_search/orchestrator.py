"""
Search Pipeline Orchestration

Runs search, then fetches every result in order, then synthesizes one answer.
Each stage contains its own failures, so a run always terminates normally.
"""

import logging
import time
import uuid
from collections.abc import Callable
from enum import Enum

from .providers import ProviderFactory
from .search import SearchProvider
from .settings import Settings
from .synthesis import SynthesisProvider
from .types import Excerpt, SearchRunResult
from .web import ContentFetcher

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found."


class PipelineState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    FETCHING_CONTENT = "fetching_content"
    SYNTHESIZING = "synthesizing"
    DONE = "done"
    NO_RESULTS = "no_results"


ProgressCallback = Callable[[PipelineState, str], None]


class SearchOrchestrator:
    """
    Sequential search → fetch → synthesize pipeline.

    The fetcher and synthesizer are bound at construction and used for the
    whole run; nothing is kept between runs.
    """

    def __init__(
        self,
        search_provider: SearchProvider,
        fetcher: ContentFetcher,
        synthesizer: SynthesisProvider,
        num_results: int = 5,
        progress_callback: ProgressCallback | None = None,
    ):
        if num_results < 1:
            raise ValueError("num_results must be at least 1")

        self.search_provider = search_provider
        self.fetcher = fetcher
        self.synthesizer = synthesizer
        self.num_results = num_results
        self.progress_callback = progress_callback

    @classmethod
    def from_settings(
        cls, settings: Settings, progress_callback: ProgressCallback | None = None
    ) -> "SearchOrchestrator":
        return cls(
            ProviderFactory.create_search_provider(settings),
            ProviderFactory.create_fetcher(settings),
            ProviderFactory.create_synthesizer(settings),
            num_results=settings.num_results,
            progress_callback=progress_callback,
        )

    def _transition(self, run_id: str, state: PipelineState, detail: str = "") -> None:
        logger.info(f"[{run_id}] {state.value}: {detail}")
        if self.progress_callback:
            self.progress_callback(state, detail)

    async def run(self, query: str) -> SearchRunResult:
        """
        Run the full pipeline for one query.

        Args:
            query: Non-empty search query

        Returns:
            SearchRunResult with status "no_results" when the search came back
            empty, otherwise "done" with one excerpt per result

        Raises:
            ValueError: If the query is empty
        """
        if not query or not query.strip():
            raise ValueError("query must not be empty")

        run_id = str(uuid.uuid4())[:8]
        run_start = time.time()
        self._transition(run_id, PipelineState.IDLE, query)

        self._transition(run_id, PipelineState.SEARCHING, query)
        results = await self.search_provider.search(query, self.num_results)

        result: SearchRunResult = {
            "query": query,
            "status": "no_results",
            "results": results,
            "excerpts": [],
            "summary": NO_RESULTS_MESSAGE,
            "fetch_library": self.fetcher.name,
            "model": self.synthesizer.name,
        }

        if not results:
            self._transition(run_id, PipelineState.NO_RESULTS, NO_RESULTS_MESSAGE)
            return result

        excerpts: list[Excerpt] = []
        for locator in results:
            self._transition(run_id, PipelineState.FETCHING_CONTENT, locator["link"])
            excerpts.append(await self.fetcher.fetch(locator["link"]))

        failed = sum(1 for e in excerpts if e["status"] == "error")
        self._transition(
            run_id,
            PipelineState.SYNTHESIZING,
            f"{len(excerpts)} excerpts ({failed} failed)",
        )
        summary = await self.synthesizer.synthesize(
            query, [e["content"] for e in excerpts]
        )

        result["status"] = "done"
        result["excerpts"] = excerpts
        result["summary"] = summary

        self._transition(
            run_id, PipelineState.DONE, f"finished in {time.time() - run_start:.2f}s"
        )
        return result
