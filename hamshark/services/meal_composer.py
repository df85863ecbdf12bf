# hamshark/services/meal_composer.py
"""
Custom meal composer.

Builds a priced, nutrition-annotated meal from the fixed ingredient table
and turns it into a catalog-compatible item / cart line.

Size scales price and calories/protein/carbs/fat. Fiber and sodium are a
flat +2 g / +200 mg per selected ingredient whatever the size; this is a
known approximation, kept until product confirms otherwise.
"""
from decimal import Decimal
from typing import Dict, Iterable, List
from uuid import uuid4

from hamshark.domain.errors import ValidationError
from hamshark.domain.models import CartLineItem, CustomMeal, Ingredient, MenuItem, Nutrition, NutritionTotals
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)

SIZE_MULTIPLIERS: Dict[str, Decimal] = {
    "small": Decimal("0.8"),
    "medium": Decimal("1.0"),
    "large": Decimal("1.3"),
}

FIBER_PER_INGREDIENT = 2
SODIUM_PER_INGREDIENT = 200

CUSTOM_MEAL_IMAGE = "https://images.unsplash.com/photo-1546833999-b9f581a1996d?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=300"


def _ingredient(name: str, price: int, protein: int, carbs: int, fat: int, calories: int) -> Ingredient:
    return Ingredient(name=name, price=Decimal(price), protein=protein, carbs=carbs, fat=fat, calories=calories)


INGREDIENTS: Dict[str, Ingredient] = {
    i.name: i
    for i in (
        _ingredient("Paneer", 30, 8, 2, 6, 80),
        _ingredient("Chicken", 50, 12, 0, 4, 80),
        _ingredient("Rice", 15, 2, 25, 1, 115),
        _ingredient("Quinoa", 25, 4, 20, 2, 110),
        _ingredient("Mixed Vegetables", 20, 3, 8, 1, 50),
        _ingredient("Lentils", 18, 9, 20, 1, 115),
        _ingredient("Spinach", 12, 3, 4, 0, 25),
        _ingredient("Tomatoes", 10, 1, 4, 0, 20),
        _ingredient("Onions", 8, 1, 6, 0, 25),
        _ingredient("Bell Peppers", 15, 1, 5, 0, 25),
    )
}


def _resolve(ingredient_names: Iterable[str]) -> List[Ingredient]:
    # keep the reference table order, drop duplicates
    selected = set(ingredient_names)
    unknown = sorted(selected - INGREDIENTS.keys())
    if unknown:
        raise ValidationError("Unknown ingredients", {"ingredients": unknown})
    return [ing for name, ing in INGREDIENTS.items() if name in selected]


def _multiplier(size: str) -> Decimal:
    try:
        return SIZE_MULTIPLIERS[size]
    except KeyError:
        raise ValidationError("Unknown meal size", {"size": size, "allowed": list(SIZE_MULTIPLIERS)}) from None


def meal_price(ingredients: List[Ingredient], size: str) -> Decimal:
    return (_multiplier(size) * sum((i.price for i in ingredients), Decimal("0"))).quantize(Decimal("0.01"))


def meal_nutrition(ingredients: List[Ingredient], size: str) -> NutritionTotals:
    m = _multiplier(size)

    def scaled(field: str) -> float:
        # decimal keeps 1.3 * 115 exact before handing back a float
        return float(sum((m * Decimal(str(getattr(i, field))) for i in ingredients), Decimal("0")))

    return NutritionTotals(
        calories=scaled("calories"),
        protein=scaled("protein"),
        carbs=scaled("carbs"),
        fat=scaled("fat"),
        fiber=FIBER_PER_INGREDIENT * len(ingredients),
        sodium=SODIUM_PER_INGREDIENT * len(ingredients),
    )


def compose(name: str, ingredient_names: Iterable[str], size: str = "medium") -> CustomMeal:
    """
    Build a custom meal.

    Raises ValidationError for a blank name, no ingredients, an ingredient
    outside the reference table or an unknown size.
    """
    names = list(ingredient_names)
    if not name or not name.strip():
        raise ValidationError("Please provide a name for the meal")
    if not names:
        raise ValidationError("Please select at least one ingredient")

    ingredients = _resolve(names)
    meal = CustomMeal(
        id=f"custom-{uuid4().hex[:12]}",
        name=name.strip(),
        ingredients=[i.name for i in ingredients],
        base_price=meal_price(ingredients, size),
        nutrition=meal_nutrition(ingredients, size),
        size=size,
    )
    logger.info(f"Composed custom meal {meal.id} ({meal.name}, {size}) at {meal.base_price}")
    return meal


def to_menu_item(meal: CustomMeal) -> MenuItem:
    """Catalog-compatible item for a custom meal (heuristic diet/allergen flags)."""
    has_chicken = "Chicken" in meal.ingredients
    has_paneer = "Paneer" in meal.ingredients
    vegetarian = not has_chicken
    n = meal.nutrition
    return MenuItem(
        id=meal.id,
        name=f"Custom: {meal.name}",
        description=f"Your custom creation with: {', '.join(meal.ingredients)}",
        price=meal.base_price,
        category="Custom",
        cuisine="Custom",
        is_vegetarian=vegetarian,
        is_vegan=vegetarian and not has_paneer,
        spice_level="mild",
        nutrition=Nutrition(
            calories=n.calories,
            protein=n.protein,
            carbs=n.carbs,
            fat=n.fat,
            fiber=n.fiber,
            sodium=n.sodium,
        ),
        ingredients=list(meal.ingredients),
        allergens=["dairy"] if has_paneer else [],
        tags=["custom", "fresh", "personalized"],
        image_url=CUSTOM_MEAL_IMAGE,
        is_available=True,
    )


def compose_line_item(meal: CustomMeal) -> CartLineItem:
    return CartLineItem(
        id=f"cart-{uuid4().hex[:12]}",
        menu_item=to_menu_item(meal),
        quantity=1,
        customizations={"size": meal.size},
        price=meal.base_price,
    )
