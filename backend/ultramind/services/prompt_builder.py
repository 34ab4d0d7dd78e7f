"""
UltraMind Backend: Prompt Builder
===================================

What:  Turns a role tag and document text into the single prompt sent to Gemini.
How:   Resolves the role (unknown roles fall back to developer), then joins
       the identity clause, the role's instruction, the analysis template
       and the document text.

Prompt layout:
    You are an expert <role>. <instruction>.

    Analyze this document and provide:
    1) Key Insights (bullet points)
    ...
    Document:
    <text, verbatim>

The document text is never truncated or sanitized.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ultramind.schemas.analysis import Role

ROLE_INSTRUCTIONS: Mapping[Role, str] = MappingProxyType({
    Role.DEVELOPER: "Extract technical insights, APIs, code patterns, and implementation details",
    Role.RECRUITER: "Extract skills, experience, qualifications, and candidate strengths",
    Role.ANALYST: "Extract patterns, risks, trends, and data-driven insights",
    Role.STUDENT: "Explain in simple terms with learning points",
})

ANALYSIS_TEMPLATE = """Analyze this document and provide:
1) Key Insights (bullet points)
2) Important Entities (names, technologies, concepts)
3) Executive Summary (3-4 sentences)
4) Action Items (if applicable)"""


def build_prompt(role: Role, text: str) -> str:
    """Assemble the prompt for an already-resolved role."""
    return (
        f"You are an expert {role.value}. {ROLE_INSTRUCTIONS[role]}.\n\n"
        f"{ANALYSIS_TEMPLATE}\n\n"
        f"Document:\n{text}"
    )


def prepare_prompt(role: Optional[str], text: str) -> Tuple[Role, str]:
    """
    Resolve a caller-supplied role and build the prompt for it.

    Returns:
        (resolved_role, prompt). The resolved role is what the response reports.
    """
    resolved = Role.resolve(role)
    return resolved, build_prompt(resolved, text)
