"""Render a persona manifest as an agent block for tron.vega.yaml."""

import re

from vega_population.models.manifest import Manifest

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_BUDGET = "$3.00"
DEFAULT_TOOLS = ("read_file", "write_file", "web_search")

_NAME_SEPARATORS = re.compile(r"[ ,.\-:]+")
_ARTICLES = frozenset({"a", "an", "the"})


def title_case(text: str) -> str:
    """Capitalize the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def extract_agent_name(system_prompt: str) -> str | None:
    """Find the agent's name in a "You are X" line of a system prompt.

    Examples:
        >>> extract_agent_name("You are Maya, a marketing lead.")
        'Maya'
        >>> extract_agent_name("You are a helpful assistant.") is None
        True
    """
    for line in system_prompt.splitlines():
        line = line.strip()
        if not line.startswith("You are "):
            continue

        words = [word for word in _NAME_SEPARATORS.split(line[len("You are ") :]) if word]
        if not words:
            continue

        if words[0] in _ARTICLES and len(words) > 1:
            return None
        return words[0]
    return None


def render_agent_config(
    manifest: Manifest,
    *,
    agent_name: str,
    model: str = DEFAULT_MODEL,
    temperature: float = DEFAULT_TEMPERATURE,
    budget: str = DEFAULT_BUDGET,
) -> str:
    """Render the agents-section entry for a persona.

    Args:
        manifest: Persona manifest supplying the system prompt
        agent_name: Key of the agent entry
        model: Model identifier
        temperature: Sampling temperature
        budget: Budget limit, e.g. "$3.00"

    Returns:
        YAML text indented for nesting under an `agents:` key
    """
    lines = [
        f"  {agent_name}:",
        f"    model: {model}",
        f"    temperature: {temperature:g}",
        f'    budget: "{budget}"',
        "    system: |",
    ]
    lines.extend(f"      {line}" for line in manifest.system_prompt.split("\n"))
    lines.append("    tools:")
    lines.extend(f"      - {tool}" for tool in DEFAULT_TOOLS)
    lines.extend(
        [
            "    supervision:",
            "      strategy: restart",
            "      max_restarts: 2",
        ]
    )
    return "\n".join(lines) + "\n"
