"""Plain-text views: landing summary, segregation guide, analysis result."""

from typing import List, Sequence

from wastesort.domain.catalog import (
    BEST_PRACTICES,
    CATEGORY_DESCRIPTIONS,
    DRY_WASTE_GUIDE,
    HOME_FEATURES,
    HOME_TAGLINE,
    WET_WASTE_GUIDE,
    WHY_SEGREGATE,
    GuideItem,
)
from wastesort.domain.models import ClassificationResult, WasteCategory
from wastesort.scoring.confidence import confidence_bin

CATEGORY_ICONS = {
    WasteCategory.WET: "💧",
    WasteCategory.DRY: "🗑️",
    WasteCategory.HAZARDOUS: "⚠️",
}

RULE = "=" * 60

def _heading(title: str) -> List[str]:
    return [RULE, title, RULE]

def _guide_section(title: str, description: str, items: Sequence[GuideItem]) -> List[str]:
    lines = [title, f"  {description}"]
    width = max((len(i.name) for i in items), default=0)
    for item in items:
        lines.append(f"  - {item.name:<{width}}  [{item.label}]")
    return lines

def render_home() -> str:
    lines = _heading("Segregate Waste, Save the Planet")
    lines.append(HOME_TAGLINE)
    lines.append("")
    lines.append("Why Waste Segregation Matters")
    lines.append(f"  {WHY_SEGREGATE}")
    lines.append("")
    for title, description in HOME_FEATURES:
        lines.append(f"* {title}: {description}")
    lines.append("")
    lines.append("Run `wastesort guide` to start learning or `wastesort classify -i PHOTO` to try waste detection.")
    return "\n".join(lines)

def render_guide(show_dry: bool = True, show_wet: bool = True) -> str:
    lines = _heading("Waste Segregation Guide")
    lines.append(
        "Learn how to properly categorize different types of waste for "
        "effective recycling and environmental protection."
    )
    if show_dry:
        lines.append("")
        lines.extend(_guide_section(
            "Dry Waste", CATEGORY_DESCRIPTIONS[WasteCategory.DRY], DRY_WASTE_GUIDE))
    if show_wet:
        lines.append("")
        lines.extend(_guide_section(
            "Wet Waste", CATEGORY_DESCRIPTIONS[WasteCategory.WET], WET_WASTE_GUIDE))
    lines.append("")
    lines.append("Best Practices")
    for title, tip in BEST_PRACTICES:
        lines.append(f"  - {title}: {tip}")
    return "\n".join(lines)

def render_result(result: ClassificationResult, title: str = "Analysis Results") -> str:
    icon = CATEGORY_ICONS.get(result.category, "❓")
    lines = _heading(title)
    lines.append(f"{icon} {result.category.label}")
    lines.append(
        f"Confidence: {result.confidence_percent}% ({confidence_bin(result.confidence)})"
    )
    if result.items:
        lines.append("Detected items: " + ", ".join(f"[{i}]" for i in result.items))
    if result.recommendations:
        lines.append("Recommendations:")
        for n, rec in enumerate(result.recommendations, start=1):
            lines.append(f"  {n}. {rec}")
    if result.source is not None:
        lines.append(f"(via {result.source.value} tier)")
    return "\n".join(lines)
