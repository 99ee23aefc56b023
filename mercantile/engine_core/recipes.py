"""
Recipe Catalog - Fixed raw-material to product conversions.

Any player holding the inputs may run a recipe; factory location is
not checked.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InsufficientResourcesError, ProtocolError

if TYPE_CHECKING:
    from .state import PlayerState


class RecipeId(str, Enum):
    WOOL_TEXTILE = "WOOL_TEXTILE"
    COTTON_TEXTILE = "COTTON_TEXTILE"
    SILK_GOODS = "SILK_GOODS"
    TEA = "TEA"
    ARMS = "ARMS"
    MACHINERY = "MACHINERY"


@dataclass(frozen=True)
class Recipe:
    """
    One conversion.

    inputs maps RawStock field names to quantities consumed;
    output is the ProductStock field credited by one.
    """
    recipe_id: RecipeId
    inputs: tuple[tuple[str, int], ...]
    output: str


RECIPES: dict[RecipeId, Recipe] = {
    RecipeId.WOOL_TEXTILE: Recipe(RecipeId.WOOL_TEXTILE, (("wool", 1),), "wool_textile"),
    RecipeId.COTTON_TEXTILE: Recipe(RecipeId.COTTON_TEXTILE, (("cotton", 1),), "cotton_textile"),
    RecipeId.SILK_GOODS: Recipe(RecipeId.SILK_GOODS, (("silk", 1),), "silk_goods"),
    RecipeId.TEA: Recipe(RecipeId.TEA, (("tea_leaf", 1),), "tea"),
    RecipeId.ARMS: Recipe(RecipeId.ARMS, (("metal_ore", 1), ("coal", 1)), "arms"),
    RecipeId.MACHINERY: Recipe(RecipeId.MACHINERY, (("metal_ore", 1), ("coal", 1)), "machinery"),
}


def get_recipe(recipe_id: RecipeId | str) -> Recipe:
    try:
        return RECIPES[RecipeId(recipe_id)]
    except (KeyError, ValueError):
        raise ProtocolError(f"Unknown recipe: {recipe_id}") from None


def missing_materials(player: PlayerState, recipe: Recipe) -> dict[str, int]:
    """Materials the player is short of, by name. Empty when craftable."""
    missing = {}
    for material, qty in recipe.inputs:
        held = getattr(player.raw, material)
        if held < qty:
            missing[material] = qty - held
    return missing


def craftable_recipes(player: PlayerState) -> list[RecipeId]:
    """Every recipe the player can run right now, in catalog order."""
    return [
        recipe_id
        for recipe_id, recipe in RECIPES.items()
        if not missing_materials(player, recipe)
    ]


def apply_recipe(player: PlayerState, recipe_id: RecipeId | str) -> Recipe:
    """
    Run a recipe on the player, in place.

    Re-checks the inputs first so nothing is debited unless everything is.
    """
    recipe = get_recipe(recipe_id)
    missing = missing_materials(player, recipe)
    if missing:
        raise InsufficientResourcesError(recipe.recipe_id.value, missing)

    for material, qty in recipe.inputs:
        setattr(player.raw, material, getattr(player.raw, material) - qty)
    setattr(player.product, recipe.output, getattr(player.product, recipe.output) + 1)
    return recipe
