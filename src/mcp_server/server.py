"""
AI Search MCP Server Implementation

Exposes the search → fetch → synthesize pipeline as a single MCP tool.
"""

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from ai_search import SearchOrchestrator, setup_logging
from ai_search.settings import Settings, get_settings, settings_with_overrides
from ai_search.types import SearchRunResult

# Create the FastMCP server instance
mcp = FastMCP("AI Search")

STATUS_MARKERS = {"ok": "✅", "empty": "⚪", "error": "❌"}


def create_orchestrator(settings: Settings) -> SearchOrchestrator:
    """Create a fresh orchestrator per call; runs share no state."""
    return SearchOrchestrator.from_settings(settings)


def format_run_result(result: SearchRunResult) -> str:
    """Render a run as the answer followed by its numbered sources."""
    if result["status"] == "no_results":
        return result["summary"]

    lines = [result["summary"], "", "## Sources", ""]
    for i, (locator, excerpt) in enumerate(
        zip(result["results"], result["excerpts"], strict=True), 1
    ):
        marker = STATUS_MARKERS.get(excerpt["status"], "")
        lines.append(f"[{i}] {marker} {locator['title']} – {locator['link']}")
    return "\n".join(lines)


@mcp.tool()
async def search_and_synthesize(
    query: str,
    num_results: int | None = None,
    fetch_library: str | None = None,
    model: str | None = None,
) -> str:
    """
    <tool_description>
    Search the web for a query, read the top results and write a new answer
    synthesized from their content.
    </tool_description>

    <tool_usage_guidelines>
    - fetch_library: "lightweight" (plain HTTP, fast) or "rendered" (headless
      browser, for pages that build their content with JavaScript)
    - model: "openai" or "gemini"
    - num_results: how many search results to read (default 5)
    Pages that cannot be fetched are passed to the model as "Error fetching
    content." in place of their text and marked ❌ in the source list.
    </tool_usage_guidelines>

    Returns:
        The synthesized answer with a numbered source list, or an error message
    """
    if not query.strip():
        return "Error: query must not be empty."

    try:
        settings = settings_with_overrides(
            num_results=num_results,
            fetch_library=fetch_library,
            summary_model=model,
        )
    except ValidationError as e:
        return f"Error: invalid configuration: {e}"

    result = await create_orchestrator(settings).run(query)
    return format_run_result(result)


def main() -> None:
    load_dotenv()
    setup_logging(get_settings().log_dir)
    mcp.run()


if __name__ == "__main__":
    main()
