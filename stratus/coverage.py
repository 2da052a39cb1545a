"""MITRE ATT&CK coverage matrices rendered per platform."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Union

from .platform import Platform
from .technique import AttackTechnique

logger = logging.getLogger(__name__)

MITRE_TACTIC_ORDER: tuple[str, ...] = (
    "Reconnaissance",
    "Resource Development",
    "Initial Access",
    "Execution",
    "Persistence",
    "Privilege Escalation",
    "Defense Evasion",
    "Credential Access",
    "Discovery",
    "Lateral Movement",
    "Collection",
    "Command and Control",
    "Exfiltration",
    "Impact",
)

PLATFORM_ORDER: tuple[Platform, ...] = (
    Platform.AWS,
    Platform.AZURE,
    Platform.GCP,
    Platform.KUBERNETES,
    Platform.ENTRA_ID,
    Platform.EKS,
)

_HEADER = """
<style>
    .table-container {
        max-width: 80%; /* Ensures it doesn't go beyond the page */
        padding: 10px;
        margin-bottom: 20px;
    }
    table {
        width: 100%;
        border-collapse: collapse;
        margin: 20px 0;
        font-size: 16px;
        white-space: nowrap; /* Prevents text wrapping in cells */
    }
    th, td {
        border: 1px solid #ddd;
        padding: 8px;
        text-align: center;
    }
    .md-sidebar.md-sidebar--secondary { display: none; }
    .md-content { min-width: 100%; }
</style>

# MITRE ATT&CK Coverage by Platform

This provides coverage matrices of MITRE ATT&CK tactics and techniques currently covered by Stratus Red Team for different cloud platforms.
"""

CoverageIndex = Mapping[Platform, Mapping[str, Iterable[AttackTechnique]]]


def _technique_cell(technique: AttackTechnique) -> str:
    platform_name = technique.platform.format_name() if technique.platform else ""
    return f'<a href="../{platform_name}/{technique.id}">{technique.friendly_name}</a>'


def _render_platform(platform: Platform, tactics_map: Mapping[str, Iterable[AttackTechnique]]) -> str:
    parts = [f"<h2>{platform.format_name()}</h2>\n", '<div class="table-container">', "<table>\n"]

    sorted_tactics = [tactic for tactic in MITRE_TACTIC_ORDER if tactic in tactics_map]

    parts.append("<thead><tr>")
    parts.extend(f"<th>{tactic}</th>" for tactic in sorted_tactics)
    parts.append("</tr></thead>\n<tbody>\n")

    columns = [[_technique_cell(t) for t in tactics_map[tactic]] for tactic in sorted_tactics]
    row_count = max((len(column) for column in columns), default=0)

    for row_number in range(row_count):
        parts.append("<tr>")
        for column in columns:
            cell = column[row_number] if row_number < len(column) else ""
            parts.append(f"<td>{cell}</td>" if cell else "<td></td>")
        parts.append("</tr>\n")

    parts.append("</tbody>\n</table>\n</div>\n")
    return "".join(parts)


def render_coverage_matrices(index: CoverageIndex) -> str:
    """Return the coverage page: one table per platform, one column per tactic."""
    sections = [_render_platform(platform, index.get(platform, {})) for platform in PLATFORM_ORDER]
    return _HEADER + "".join(sections)


def generate_coverage_matrices(index: CoverageIndex, docs_directory: Union[str, Path]) -> Path:
    """Write the coverage page under the docs directory and return its path."""
    output_path = Path(docs_directory) / "attack-techniques" / "mitre-attack-coverage-matrices.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_coverage_matrices(index), encoding="utf-8")
    logger.info("Generated MITRE ATT&CK coverage markdown file: %s", output_path)
    return output_path