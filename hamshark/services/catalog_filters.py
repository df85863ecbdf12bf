# hamshark/services/catalog_filters.py
"""
Catalog filter engine.

Pure select/sort/search helpers over menu items. Nothing here raises for
missing optional data: absent nutrition, fiber or sodium count as 0 and
absent tags/allergens as empty.
"""
from decimal import Decimal
from typing import Callable, Iterable, List, Sequence, Tuple

from hamshark.domain.models import MenuItem, NutritionTotals

HIGH_PROTEIN_MIN = 25
LOW_CARB_MAX = 20


def _available(items: Iterable[MenuItem]) -> List[MenuItem]:
    return [i for i in items if i.is_available]


def _price(item: MenuItem) -> Decimal:
    return item.price


def _calories(item: MenuItem) -> float:
    return item.nutrition.calories if item.nutrition else 0


def _protein(item: MenuItem) -> float:
    return item.nutrition.protein if item.nutrition else 0


def _has_tag(item: MenuItem, tag: str) -> bool:
    tag = tag.lower()
    return any(t.lower() == tag for t in item.tags)


def _where(items: Iterable[MenuItem], predicate: Callable[[MenuItem], bool]) -> List[MenuItem]:
    return [i for i in items if i.is_available and predicate(i)]


# =====================================================
# FIELD FILTERS
# =====================================================
def filter_by_cuisine(items: Sequence[MenuItem], cuisine: str) -> List[MenuItem]:
    return _where(items, lambda i: i.cuisine.lower() == cuisine.lower())


def filter_by_category(items: Sequence[MenuItem], category: str) -> List[MenuItem]:
    return _where(items, lambda i: i.category.lower() == category.lower())


def filter_by_spice_level(items: Sequence[MenuItem], spice_level: str) -> List[MenuItem]:
    return _where(items, lambda i: (i.spice_level or "").lower() == spice_level.lower())


def filter_by_diet(items: Sequence[MenuItem], diet: str) -> List[MenuItem]:
    """
    vegetarian / vegan use the item flags, high-protein and low-carb use
    nutrition; anything else is matched against the item's tags.
    """
    key = diet.lower()
    if key == "vegetarian":
        return _where(items, lambda i: i.is_vegetarian)
    if key == "vegan":
        return _where(items, lambda i: i.is_vegan)
    if key == "high-protein":
        return _where(items, lambda i: i.nutrition is not None and i.nutrition.protein >= HIGH_PROTEIN_MIN)
    if key == "low-carb":
        return _where(items, lambda i: i.nutrition is not None and i.nutrition.carbs <= LOW_CARB_MAX)
    return _where(items, lambda i: _has_tag(i, key))


def exclude_allergens(items: Sequence[MenuItem], allergens: Iterable[str]) -> List[MenuItem]:
    excluded = {a.lower() for a in allergens}
    return [i for i in items if not any(a.lower() in excluded for a in i.allergens)]


def filter_by_price_range(items: Sequence[MenuItem], min_price, max_price) -> List[MenuItem]:
    low, high = Decimal(str(min_price)), Decimal(str(max_price))
    return _where(items, lambda i: low <= _price(i) <= high)


def filter_by_calories(items: Sequence[MenuItem], min_calories: float, max_calories: float) -> List[MenuItem]:
    return _where(
        items,
        lambda i: i.nutrition is not None and min_calories <= i.nutrition.calories <= max_calories,
    )


def search_menu_items(items: Sequence[MenuItem], query: str) -> List[MenuItem]:
    term = (query or "").strip().lower()
    if not term:
        return _available(items)

    def matches(item: MenuItem) -> bool:
        return (
            term in item.name.lower()
            or term in item.description.lower()
            or any(term in ing.lower() for ing in item.ingredients)
            or any(term in tag.lower() for tag in item.tags)
        )

    return _where(items, matches)


# =====================================================
# SORTING
# =====================================================
_SORT_KEYS = {
    "price-low-high": (_price, False),
    "price-high-low": (_price, True),
    "calories-low-high": (_calories, False),
    "calories-high-low": (_calories, True),
    "protein-high-low": (_protein, True),
    "name-a-z": (lambda i: i.name.lower(), False),
    "name-z-a": (lambda i: i.name.lower(), True),
}


def sort_menu_items(items: Sequence[MenuItem], sort_by: str) -> List[MenuItem]:
    """Stable sort; an unknown key keeps the input order."""
    spec = _SORT_KEYS.get((sort_by or "").lower())
    if spec is None:
        return list(items)
    key, reverse = spec
    # sorted(reverse=True) keeps ties in input order
    return sorted(items, key=key, reverse=reverse)


# =====================================================
# COMPOSITE SELECTIONS
# =====================================================
def items_for_goal(items: Sequence[MenuItem], goal: str) -> List[MenuItem]:
    key = goal.lower()
    if key == "weight-loss":
        return _where(items, lambda i: i.nutrition is not None and i.nutrition.calories <= 400 and i.nutrition.protein >= 15)
    if key == "muscle-gain":
        return _where(items, lambda i: i.nutrition is not None and i.nutrition.protein >= 25)
    if key == "heart-healthy":
        return _where(
            items,
            lambda i: i.nutrition is not None and i.nutrition.fat <= 15 and (i.nutrition.sodium or 0) <= 600,
        )
    return _available(items)


def _is_balanced(item: MenuItem) -> bool:
    n = item.nutrition
    if n is None:
        return False
    total = n.protein + n.carbs + n.fat
    if total <= 0:
        return False
    return (
        0.15 <= n.protein / total <= 0.35
        and 0.45 <= n.carbs / total <= 0.65
        and 0.20 <= n.fat / total <= 0.35
    )


def items_by_nutrition(items: Sequence[MenuItem], nutrition_type: str) -> List[MenuItem]:
    key = nutrition_type.lower()
    if key == "high-fiber":
        return _where(items, lambda i: i.nutrition is not None and (i.nutrition.fiber or 0) >= 5)
    if key == "low-sodium":
        return _where(items, lambda i: i.nutrition is not None and (i.nutrition.sodium or 0) <= 300)
    if key == "balanced":
        return _where(items, _is_balanced)
    return _available(items)


def popular_items(items: Sequence[MenuItem], limit: int = 8) -> List[MenuItem]:
    return _where(items, lambda i: _has_tag(i, "popular"))[:limit]


def chef_specials(items: Sequence[MenuItem]) -> List[MenuItem]:
    return _where(items, lambda i: _has_tag(i, "chef-special") or _has_tag(i, "chef's special"))


def student_combos(items: Sequence[MenuItem]) -> List[MenuItem]:
    return _where(items, lambda i: _has_tag(i, "student-combo"))


def total_nutrition(entries: Iterable[Tuple[MenuItem, int]]) -> NutritionTotals:
    """Sum nutrition over (item, quantity) pairs; items without nutrition add nothing."""
    totals = NutritionTotals()
    for item, quantity in entries:
        n = item.nutrition
        if n is None:
            continue
        totals.calories += n.calories * quantity
        totals.protein += n.protein * quantity
        totals.carbs += n.carbs * quantity
        totals.fat += n.fat * quantity
        totals.fiber += (n.fiber or 0) * quantity
        totals.sodium += (n.sodium or 0) * quantity
    return totals
