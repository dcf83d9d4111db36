"""Prompt text shared by the synthesis providers."""

NO_RESULTS_REPLY = "No results."

SYSTEM_PROMPT = (
    "You are an assistant that generates a new, comprehensive response based on "
    "provided content. Synthesize new insights while being informative and cohesive."
)


def join_excerpts(excerpts: list[str]) -> str:
    return "\n\n".join(excerpts)


def build_chat_prompt(query: str, excerpts: list[str]) -> str:
    return (
        f'Generate new content that answers the query: "{query}" '
        f'-- if there is nothing useful to say, simply say "{NO_RESULTS_REPLY}"\n\n'
        f"Here is the information gathered from various sources:\n\n"
        f"{join_excerpts(excerpts)}"
    )


def build_single_prompt(query: str, excerpts: list[str]) -> str:
    """Prompt for providers without a system message: instructions go inline."""
    return (
        f"{SYSTEM_PROMPT}\n\n"
        f'Generate new content to answer the query: "{query}" based on the '
        f"following information. If there is nothing useful to say, simply say "
        f'"{NO_RESULTS_REPLY}"\n\n'
        f"{join_excerpts(excerpts)}"
    )
