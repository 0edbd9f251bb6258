"""
Rendering of the sections that wrap the code dump.

The final document has this section order:
1) Language and environment, 2) Description, 3) Problem statement,
4) `Code:` followed by the aggregated files, 5) Questions.
"""

from __future__ import annotations

from typing import List, Sequence

from .config import RunConfig
from .environment import EnvironmentInfo

CODE_MARKER = "Code:\n\n"


def render_header(env: EnvironmentInfo, description: str, problem_statements: Sequence[str]) -> str:
    """Render the metadata block that precedes the code dump."""
    parts: List[str] = [f"Language: {env.language}\nEnvironment: {env.environment}\n\n"]
    if description:
        parts.append(f"Description: {description}\n\n")
    else:
        parts.append("Description:\n\n")
    parts.append("Problem Statement:\n")
    if problem_statements:
        for statement in problem_statements:
            parts.append(f"- {statement}\n")
        parts.append("\n")
    else:
        # Empty bullet left for the reader to fill in
        parts.append("- \n\n")
    return "".join(parts)


def render_footer(questions: Sequence[str]) -> str:
    """Render the numbered question list that follows the code dump."""
    parts: List[str] = ["Questions:\n"]
    if questions:
        for index, question in enumerate(questions, start=1):
            parts.append(f"{index}. {question}\n")
    else:
        parts.append("1. ")
    return "".join(parts)


def render_document(env: EnvironmentInfo, config: RunConfig, body: str) -> str:
    """Assemble the full artifact from its constituent parts."""
    return (
        render_header(env, config.description, config.problem_statements)
        + CODE_MARKER
        + body
        + render_footer(config.questions)
    )
