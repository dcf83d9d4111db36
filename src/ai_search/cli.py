"""
AI Search - Command Line Entry Point

Searches the web, scrapes the top results and synthesizes an answer.
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from ai_search.logger import add_console_handler, setup_logging
from ai_search.orchestrator import PipelineState, SearchOrchestrator
from ai_search.providers import ProviderFactory
from ai_search.settings import Settings, settings_with_overrides

USAGE = (
    "Usage: ai-search 'your search query' [--model openai|gemini] "
    "[--fetch-library lightweight|rendered] [--num-results 5]"
)


def build_parser() -> argparse.ArgumentParser:
    supported = ProviderFactory.get_supported_providers()
    parser = argparse.ArgumentParser(
        prog="ai-search",
        description="Search the web and synthesize an answer from the top results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ai-search "weather today"
  ai-search "rust vs go" --model gemini --fetch-library rendered --num-results 3
        """,
    )
    parser.add_argument("query", nargs="*", help="Search query")
    parser.add_argument(
        "--fetch-library",
        choices=supported["fetch_library"],
        help="Page fetch strategy (default: FETCH_LIBRARY or lightweight)",
    )
    parser.add_argument(
        "--model",
        choices=supported["model"],
        help="Synthesis provider (default: SUMMARY_MODEL or openai)",
    )
    parser.add_argument(
        "--num-results",
        type=int,
        help="Number of search results to scrape (default: 5)",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Overlay command-line selections on the environment settings."""
    return settings_with_overrides(
        fetch_library=args.fetch_library,
        summary_model=args.model,
        num_results=args.num_results,
    )


def print_progress(state: PipelineState, detail: str) -> None:
    if state is PipelineState.SEARCHING:
        print(f'🔍 Searching for: "{detail}"...\n')
    elif state is PipelineState.FETCHING_CONTENT:
        print(f"📄 Fetching content from: {detail}")
    elif state is PipelineState.SYNTHESIZING:
        print(f"\n📝 Generating summary from {detail}...\n")


async def run(query: str, settings: Settings) -> int:
    orchestrator = SearchOrchestrator.from_settings(
        settings, progress_callback=print_progress
    )

    print(
        f"🤖 Scraping the top {settings.num_results} search results with "
        f"{settings.fetch_library} and summarizing with {settings.summary_model}...\n"
    )

    result = await orchestrator.run(query)

    if result["status"] == "no_results":
        print(f"❌ {result['summary']}")
        return 0

    print("\n📌 Summary:\n", result["summary"])
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    query = " ".join(args.query).strip()
    if not query:
        print("❌ Error: Please provide a search query.", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_dir)
    add_console_handler()
    return asyncio.run(run(query, settings))


if __name__ == "__main__":
    sys.exit(main())
