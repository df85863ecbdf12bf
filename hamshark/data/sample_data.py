# hamshark/data/sample_data.py
"""Demo catalog, truck stops, plans and rewards loaded into a fresh backend."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List

from hamshark.domain.models import (
    LoyaltyReward,
    MembershipPlan,
    MenuItem,
    Nutrition,
    ScheduleSlot,
    TruckLocation,
)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def _item(id, name, description, price, category, cuisine, nutrition, ingredients,
          allergens=(), tags=(), vegetarian=True, vegan=False, spice="mild"):
    return MenuItem(
        id=id,
        name=name,
        description=description,
        price=Decimal(price),
        category=category,
        cuisine=cuisine,
        is_vegetarian=vegetarian,
        is_vegan=vegan,
        spice_level=spice,
        nutrition=Nutrition(**nutrition),
        ingredients=list(ingredients),
        allergens=list(allergens),
        tags=list(tags),
    )


def _n(calories, protein, carbs, fat, fiber, sodium):
    return dict(calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber, sodium=sodium)


def menu_items() -> List[MenuItem]:
    return [
        # North Indian
        _item("ni1", "Paneer Tikka Wrap", "Grilled paneer with fresh vegetables and mint chutney",
              "180.00", "Wraps", "North Indian", _n(420, 28, 32, 18, 8, 680),
              ["paneer", "bell peppers", "onions", "mint chutney", "whole wheat wrap"],
              ["dairy", "gluten"], ["high-protein", "spicy", "vegetarian"], spice="medium"),
        _item("ni2", "Butter Chicken", "Rich tomato-based curry with tender chicken pieces",
              "280.00", "Curry", "North Indian", _n(520, 35, 15, 24, 3, 890),
              ["chicken", "tomato sauce", "cream", "butter", "spices"],
              ["dairy"], ["popular", "high-protein", "non-vegetarian"], vegetarian=False, spice="medium"),
        _item("ni3", "Dal Makhani", "Creamy black lentils cooked in rich tomato gravy",
              "200.00", "Dal", "North Indian", _n(340, 18, 45, 12, 15, 650),
              ["black lentils", "kidney beans", "cream", "tomato", "ginger-garlic"],
              ["dairy"], ["chef-special", "protein-rich", "creamy"]),
        _item("ni4", "Chole Bhature", "Spicy chickpea curry with fluffy fried bread",
              "160.00", "Combo", "North Indian", _n(580, 22, 78, 20, 12, 920),
              ["chickpeas", "refined flour", "yogurt", "spices", "oil"],
              ["gluten", "dairy"], ["traditional", "spicy", "filling"], spice="hot"),
        _item("ni5", "Rajma Chawal", "Kidney bean curry served with steamed basmati rice",
              "140.00", "Rice Bowl", "North Indian", _n(460, 20, 85, 8, 18, 580),
              ["kidney beans", "basmati rice", "onion", "tomato", "cumin"],
              [], ["healthy", "protein-rich", "student-combo"], vegan=True, spice="medium"),
        _item("ni8", "Chicken Biryani", "Aromatic basmati rice layered with spiced chicken",
              "320.00", "Biryani", "North Indian", _n(680, 42, 78, 22, 4, 1020),
              ["chicken", "basmati rice", "saffron", "yogurt", "fried onions"],
              ["dairy"], ["chef-special", "festive", "aromatic"], vegetarian=False, spice="medium"),
        _item("ni9", "Paneer Makhani", "Cottage cheese in rich tomato and cream sauce",
              "210.00", "Curry", "North Indian", _n(450, 28, 20, 32, 4, 780),
              ["paneer", "tomato", "cream", "cashews", "fenugreek"],
              ["dairy", "nuts"], ["creamy", "rich", "popular"]),
        _item("ni13", "Tandoori Chicken", "Marinated chicken grilled in traditional tandoor",
              "240.00", "Tandoor", "North Indian", _n(380, 45, 8, 18, 2, 920),
              ["chicken", "yogurt", "red chili", "garam masala", "lemon"],
              ["dairy"], ["grilled", "smoky", "protein-rich"], vegetarian=False, spice="medium"),
        # South Indian
        _item("si1", "Masala Dosa", "Crispy dosa with spiced potato filling and chutney",
              "150.00", "Dosa", "South Indian", _n(380, 12, 68, 8, 6, 420),
              ["rice batter", "urad dal", "potato", "spices", "coconut chutney"],
              [], ["student-combo", "traditional", "gluten-free"], vegan=True),
        _item("si4", "Idli Sambar", "Steamed rice cakes served with lentil soup and chutneys",
              "100.00", "Idli", "South Indian", _n(240, 12, 48, 2, 8, 420),
              ["rice", "urad dal", "toor dal", "vegetables", "tamarind"],
              [], ["healthy", "light", "protein-rich"], vegan=True),
        # Bengali
        _item("bg1", "Fish Curry", "Traditional Bengali fish curry with mustard oil",
              "240.00", "Curry", "Bengali", _n(380, 32, 12, 24, 3, 820),
              ["fish", "mustard oil", "turmeric", "green chili", "ginger"],
              [], ["traditional", "omega-3-rich", "authentic"], vegetarian=False, spice="medium"),
        _item("bg2", "Aloo Posto", "Potatoes in poppy seed paste - Bengali specialty",
              "140.00", "Curry", "Bengali", _n(320, 8, 48, 12, 6, 480),
              ["potato", "poppy seeds", "mustard oil", "green chili", "nigella seeds"],
              [], ["unique", "nutty", "traditional"], vegan=True),
        # Gujarati
        _item("gj1", "Gujarati Thali", "Complete Gujarati meal with dal, vegetables, roti, rice",
              "180.00", "Thali", "Gujarati", _n(650, 24, 98, 18, 16, 1020),
              ["dal", "vegetables", "roti", "rice", "pickles", "papad"],
              ["gluten", "dairy"], ["complete-meal", "sweet-salty", "traditional"]),
        # Street Food
        _item("sf1", "Pani Puri", "Crispy shells filled with spiced water and chutneys",
              "50.00", "Chaat", "Street Food", _n(120, 4, 24, 2, 3, 580),
              ["semolina shells", "tamarind water", "mint chutney", "chickpeas", "potato"],
              [], ["tangy", "crispy", "popular"], vegan=True, spice="hot"),
        _item("sf2", "Bhel Puri", "Puffed rice mix with chutneys and vegetables",
              "60.00", "Chaat", "Street Food", _n(180, 6, 36, 4, 5, 620),
              ["puffed rice", "sev", "onion", "tomato", "chutneys"],
              [], ["crunchy", "tangy", "light"], vegan=True, spice="medium"),
        # Beverages & Desserts
        _item("bd1", "Mango Lassi", "Creamy yogurt drink with fresh mango pulp",
              "80.00", "Beverage", "Beverages & Desserts", _n(180, 6, 32, 4, 2, 120),
              ["mango pulp", "yogurt", "sugar", "cardamom", "ice"],
              ["dairy"], ["refreshing", "creamy", "summer-special"], spice="none"),
        _item("bd2", "Masala Chai", "Spiced Indian tea with milk and aromatic spices",
              "30.00", "Beverage", "Beverages & Desserts", _n(80, 3, 12, 2, 0, 40),
              ["tea leaves", "milk", "ginger", "cardamom", "cloves"],
              ["dairy"], ["warming", "energizing", "traditional"]),
    ]


def truck_locations() -> List[TruckLocation]:
    return [
        TruckLocation(
            id="loc1",
            name="Tech Park - Sector 5",
            address="Sector 5, IT Park, Mumbai",
            latitude=Decimal("19.0760"),
            longitude=Decimal("72.8777"),
            schedule=[ScheduleSlot(day=d, start_time="11:30", end_time="14:30") for d in WEEKDAYS],
            current_status="open",
            orders_today=24,
        ),
        TruckLocation(
            id="loc2",
            name="University Campus",
            address="Main Campus, Mumbai University",
            latitude=Decimal("19.0176"),
            longitude=Decimal("72.8562"),
            schedule=[ScheduleSlot(day=d, start_time="15:00", end_time="20:00") for d in WEEKDAYS],
            current_status="coming",
            estimated_arrival=datetime.now(timezone.utc) + timedelta(minutes=45),
            orders_today=18,
        ),
    ]


def membership_plans() -> List[MembershipPlan]:
    return [
        MembershipPlan(
            id="plan1",
            name="Student Saver Plan",
            description="Perfect for college students",
            price=Decimal("2499.00"),
            duration=30,
            features=["30 meals included", "Free delivery", "Student pricing", "Flexible schedule"],
            target_audience="students",
        ),
        MembershipPlan(
            id="plan2",
            name="IT Pro Plan",
            description="Designed for professionals",
            price=Decimal("3999.00"),
            duration=30,
            features=["Custom lunch packs", "Office delivery", "Healthy options", "Macro tracking"],
            target_audience="professionals",
        ),
        MembershipPlan(
            id="plan3",
            name="Shark Club",
            description="Premium membership",
            price=Decimal("199.00"),
            duration=30,
            features=["Free delivery always", "Priority queue", "Exclusive dishes", "Special events"],
            target_audience="premium",
        ),
    ]


def loyalty_rewards() -> List[LoyaltyReward]:
    return [
        LoyaltyReward(
            id="reward1",
            name="Free Healthy Drink",
            description="Complimentary lemon detox water",
            points_cost=50,
            category="beverages",
            tier="bronze",
        ),
        LoyaltyReward(
            id="reward2",
            name="Free Dessert",
            description="Choice of traditional Indian dessert",
            points_cost=100,
            category="desserts",
            tier="silver",
        ),
        LoyaltyReward(
            id="reward3",
            name="Free Meal Coupon",
            description="Any meal under 300 free",
            points_cost=250,
            category="meals",
            tier="gold",
        ),
    ]
