"""
Tests for the ai-search command line entry point
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from ai_search import cli
from ai_search.orchestrator import PipelineState
from ai_search.providers import ProviderFactory


def run_result(status="done", summary="Synthesized answer."):
    return {
        "query": "weather today",
        "status": status,
        "results": [],
        "excerpts": [],
        "summary": summary,
        "fetch_library": "lightweight",
        "model": "OpenAI",
    }


@pytest.mark.usefixtures("clean_env")
class TestCli:
    """Test cases for argument handling and console output"""

    @pytest.fixture
    def orchestrator(self):
        orchestrator = Mock()
        orchestrator.run = AsyncMock(return_value=run_result())
        with (
            patch(
                "ai_search.cli.SearchOrchestrator.from_settings",
                return_value=orchestrator,
            ) as mock_from_settings,
            patch("ai_search.cli.setup_logging"),
            patch("ai_search.cli.load_dotenv"),
            patch("ai_search.cli.add_console_handler"),
        ):
            yield orchestrator, mock_from_settings

    def test_empty_query_exits_before_pipeline(self, orchestrator, capsys):
        mock_orchestrator, mock_from_settings = orchestrator

        assert cli.main([]) == 1

        err = capsys.readouterr().err
        assert "Please provide a search query" in err
        assert "Usage:" in err
        mock_from_settings.assert_not_called()

    def test_query_words_are_joined(self, orchestrator, capsys):
        mock_orchestrator, _ = orchestrator

        assert cli.main(["weather", "today"]) == 0

        mock_orchestrator.run.assert_awaited_once_with("weather today")
        out = capsys.readouterr().out
        assert "Summary:" in out
        assert "Synthesized answer." in out

    def test_selectors_override_settings(self, orchestrator):
        _, mock_from_settings = orchestrator

        cli.main(
            [
                "x",
                "--fetch-library",
                "rendered",
                "--model",
                "gemini",
                "--num-results",
                "3",
            ]
        )

        settings = mock_from_settings.call_args.args[0]
        assert settings.fetch_library == "rendered"
        assert settings.summary_model == "gemini"
        assert settings.num_results == 3
        assert mock_from_settings.call_args.kwargs["progress_callback"] is cli.print_progress

    def test_defaults_come_from_environment(self, orchestrator, clean_env):
        _, mock_from_settings = orchestrator
        clean_env.setenv("SUMMARY_MODEL", "gemini")

        cli.main(["x"])

        settings = mock_from_settings.call_args.args[0]
        assert settings.summary_model == "gemini"
        assert settings.fetch_library == "lightweight"
        assert settings.num_results == 5

    def test_unknown_model_rejected_by_parser(self, orchestrator):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["x", "--model", "claude"])

        assert exc_info.value.code == 2

    def test_invalid_num_results(self, orchestrator, capsys):
        _, mock_from_settings = orchestrator

        assert cli.main(["x", "--num-results", "0"]) == 1

        assert "Invalid configuration" in capsys.readouterr().err
        mock_from_settings.assert_not_called()

    def test_no_results_message(self, orchestrator, capsys):
        mock_orchestrator, _ = orchestrator
        mock_orchestrator.run.return_value = run_result(
            status="no_results", summary="No results found."
        )

        assert cli.main(["test"]) == 0

        assert "No results found." in capsys.readouterr().out


class TestPrintProgress:
    def test_fetching_line(self, capsys):
        cli.print_progress(PipelineState.FETCHING_CONTENT, "https://example.com")

        assert "Fetching content from: https://example.com" in capsys.readouterr().out

    def test_idle_is_silent(self, capsys):
        cli.print_progress(PipelineState.IDLE, "q")

        assert capsys.readouterr().out == ""


@pytest.mark.usefixtures("clean_env")
class TestCliConsoleLogging:
    def test_console_handler_installed_for_run(self):
        orchestrator = Mock()
        orchestrator.run = AsyncMock(return_value=run_result())
        with (
            patch(
                "ai_search.cli.SearchOrchestrator.from_settings",
                return_value=orchestrator,
            ),
            patch("ai_search.cli.setup_logging"),
            patch("ai_search.cli.load_dotenv"),
            patch("ai_search.cli.add_console_handler") as mock_console,
        ):
            assert cli.main(["weather"]) == 0

        mock_console.assert_called_once_with()


class TestBuildParser:
    def test_choices_follow_supported_providers(self):
        supported = ProviderFactory.get_supported_providers()
        actions = {a.dest: a for a in cli.build_parser()._actions}

        assert actions["fetch_library"].choices == supported["fetch_library"]
        assert actions["model"].choices == supported["model"]
        assert actions["model"].choices == ["openai", "gemini"]
