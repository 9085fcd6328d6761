"""Fixed catalogs: per-bucket labels and advice, and the segregation guide."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import Bucket, WasteCategory

@dataclass(frozen=True)
class CatalogEntry:
    category: WasteCategory
    items: Tuple[str, ...]
    recommendations: Tuple[str, ...]


WASTE_CATALOG: Mapping[Bucket, CatalogEntry] = MappingProxyType({
    Bucket.ORGANIC: CatalogEntry(
        category=WasteCategory.WET,
        items=("Food scraps", "Fruit peels", "Vegetable waste", "Organic matter"),
        recommendations=(
            "This appears to be organic waste suitable for composting",
            "Place in your green/wet waste bin",
            "Consider starting a home compost system",
        ),
    ),
    Bucket.RECYCLABLE: CatalogEntry(
        category=WasteCategory.DRY,
        items=("Plastic bottles", "Paper", "Cardboard", "Metal cans", "Glass"),
        recommendations=(
            "These items can be recycled",
            "Clean the containers before recycling",
            "Place in your blue/dry waste bin",
        ),
    ),
    Bucket.ELECTRONIC: CatalogEntry(
        category=WasteCategory.HAZARDOUS,
        items=("Electronic devices", "Batteries", "Circuit boards"),
        recommendations=(
            "This requires special disposal methods",
            "Take to designated e-waste collection center",
            "Do not dispose in regular waste bins",
        ),
    ),
    Bucket.GENERAL: CatalogEntry(
        category=WasteCategory.DRY,
        items=("Mixed waste", "Non-recyclable items"),
        recommendations=(
            "Place in general waste bin",
            "Consider reducing waste by choosing reusable alternatives",
            "Check if any components can be separated for recycling",
        ),
    ),
})


@dataclass(frozen=True)
class GuideItem:
    name: str
    label: str      # e.g. "Recyclable", "E-Waste", "Compostable"


DRY_WASTE_GUIDE: Tuple[GuideItem, ...] = (
    GuideItem("Plastic Bottles", "Recyclable"),
    GuideItem("Paper & Cardboard", "Recyclable"),
    GuideItem("Metal Cans", "Recyclable"),
    GuideItem("Glass Containers", "Recyclable"),
    GuideItem("Electronics", "E-Waste"),
    GuideItem("Batteries", "Hazardous"),
    GuideItem("Fabric & Textiles", "Recyclable"),
    GuideItem("Rubber Items", "Special"),
)

WET_WASTE_GUIDE: Tuple[GuideItem, ...] = (
    GuideItem("Fruit Peels", "Compostable"),
    GuideItem("Vegetable Scraps", "Compostable"),
    GuideItem("Food Leftovers", "Compostable"),
    GuideItem("Coffee Grounds", "Compostable"),
    GuideItem("Tea Bags", "Compostable"),
    GuideItem("Eggshells", "Compostable"),
    GuideItem("Garden Waste", "Compostable"),
    GuideItem("Dairy Products", "Organic"),
)

CATEGORY_DESCRIPTIONS: Mapping[WasteCategory, str] = MappingProxyType({
    WasteCategory.DRY: "Non-biodegradable waste that can be recycled or requires special disposal",
    WasteCategory.WET: "Biodegradable organic waste that can be composted",
    WasteCategory.HAZARDOUS: "Batteries, electronics and chemicals that need a designated collection point",
})

BEST_PRACTICES: Tuple[Tuple[str, str], ...] = (
    ("Separate at Source",
     "Use different bins for different types of waste right from your home or office."),
    ("Clean Before Disposal",
     "Rinse containers and remove food residue to improve recycling quality."),
    ("Follow Local Rules",
     "Check your local waste management guidelines for specific requirements."),
)


def entry_for(bucket: Bucket) -> CatalogEntry:
    """Look up the catalog entry for a bucket."""
    return WASTE_CATALOG[bucket]

HOME_TAGLINE = (
    "Transform your waste management habits with our smart segregation guide "
    "and tools. Every action counts towards a cleaner future."
)

HOME_FEATURES: Tuple[Tuple[str, str], ...] = (
    ("Smart Segregation",
     "Learn how to properly segregate waste for maximum recycling efficiency."),
    ("Save Environment",
     "Every piece of waste properly sorted helps reduce environmental impact."),
    ("Community Impact",
     "Join thousands of others making a difference in waste management."),
)

WHY_SEGREGATE = (
    "Proper waste segregation is the first step towards effective recycling and "
    "environmental conservation. It reduces landfill waste, saves energy, and "
    "creates a sustainable future for generations to come."
)
