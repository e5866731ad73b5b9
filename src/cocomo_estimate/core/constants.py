"""COCOMO Basic model constants and mode guidance."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from cocomo_estimate.core.models import DevelopmentMode, ModeDescription, ModelConstants

# Boehm (1981) Basic COCOMO coefficients.
MODEL_CONSTANTS: Mapping[DevelopmentMode, ModelConstants] = MappingProxyType(
    {
        DevelopmentMode.ORGANIC: ModelConstants(a=2.4, b=1.05, c=2.5, d=0.38),
        DevelopmentMode.SEMI_DETACHED: ModelConstants(a=3.0, b=1.12, c=2.5, d=0.35),
        DevelopmentMode.EMBEDDED: ModelConstants(a=3.6, b=1.20, c=2.5, d=0.32),
    }
)

MODE_DESCRIPTIONS: Mapping[DevelopmentMode, ModeDescription] = MappingProxyType(
    {
        DevelopmentMode.ORGANIC: ModeDescription(
            summary="Simple projects with small, experienced teams",
            typical_projects=(
                "Typical for small business applications, utilities, "
                "and simple data processing systems."
            ),
        ),
        DevelopmentMode.SEMI_DETACHED: ModeDescription(
            summary="Medium complexity projects with mixed experience",
            typical_projects=(
                "Common for compilers, database systems, "
                "and medium-scale embedded systems."
            ),
        ),
        DevelopmentMode.EMBEDDED: ModeDescription(
            summary="Complex projects with tight constraints",
            typical_projects=(
                "Used for real-time systems, operating systems, "
                "and mission-critical applications."
            ),
        ),
    }
)

LOC_PER_KLOC = 1000
