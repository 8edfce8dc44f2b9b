"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """A food with its sugar content in grams."""

    id: str
    name: str
    sugar_content: float
    is_healthy: bool


@dataclass(frozen=True)
class FoodCandidate:
    """A food definition that has not been assigned an id yet."""

    name: str
    sugar_content: float
    is_healthy: bool


SEED_FOODS: tuple[FoodItem, ...] = (
    FoodItem(id="1", name="Apple", sugar_content=10, is_healthy=True),
    FoodItem(id="2", name="Banana", sugar_content=14, is_healthy=True),
    FoodItem(id="3", name="Orange", sugar_content=9, is_healthy=True),
    FoodItem(id="4", name="Chocolate Bar", sugar_content=24, is_healthy=False),
    FoodItem(id="5", name="Soda (330ml)", sugar_content=35, is_healthy=False),
    FoodItem(id="6", name="Greek Yogurt", sugar_content=5, is_healthy=True),
    FoodItem(id="7", name="Ice Cream", sugar_content=28, is_healthy=False),
    FoodItem(id="8", name="Carrot", sugar_content=3, is_healthy=True),
    FoodItem(id="9", name="Candy", sugar_content=20, is_healthy=False),
    FoodItem(id="10", name="Donuts", sugar_content=25, is_healthy=False),
    FoodItem(id="11", name="Whole Grain Bread", sugar_content=2, is_healthy=True),
    FoodItem(id="12", name="Sweetened iced tea", sugar_content=28, is_healthy=False),
    FoodItem(id="13", name="Chocolate bars", sugar_content=38, is_healthy=False),
    FoodItem(id="14", name="Cupcakes", sugar_content=50, is_healthy=False),
)
