"""
Board Validation - Static checks on board data before a game starts.

Validates that:
1. Area keys match area ids and grids are non-empty
2. Every edge endpoint is a non-empty cell of its area
3. Every tile bound to an effect points at a registered effect

Warnings cover data that is legal but probably unintended
(dead-end cells, duplicate edges).
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.board import AreaData, GameData
from ..engine_core.errors import BoardValidationError
from ..engine_core.tile_effects import TileEffectRegistry, default_registry


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_board(
    data: GameData,
    registry: TileEffectRegistry | None = None,
    raise_on_error: bool = False,
) -> ValidationResult:
    """
    Validate complete board data.

    Returns ValidationResult with errors and warnings.
    Raises BoardValidationError if raise_on_error=True and errors exist.
    """
    registry = registry or default_registry()
    errors: list[str] = []
    warnings: list[str] = []

    if not data.areas:
        errors.append("Board has no areas")

    for key, area in data.areas.items():
        if key != area.area_id:
            errors.append(f"Area key '{key}' does not match area id '{area.area_id}'")
        area_errors, area_warnings = _validate_area(area)
        errors.extend(area_errors)
        warnings.extend(area_warnings)

    # Registry consistency
    for tile_id, effect_id in sorted(registry.tile_map.items()):
        if effect_id not in registry.effects:
            errors.append(f"Tile '{tile_id}' is bound to unregistered effect '{effect_id}'")

    result = ValidationResult(valid=not errors, errors=errors, warnings=warnings)
    if raise_on_error and not result.valid:
        raise BoardValidationError(errors)
    return result


def _validate_area(area: AreaData) -> tuple[list[str], list[str]]:
    """Validate a single area."""
    errors = []
    warnings = []

    if not area.grid or not any(area.grid):
        errors.append(f"Area '{area.area_id}' has an empty grid")
        return errors, warnings

    seen = set()
    sources = set()
    for edge in area.edges:
        for label, coord in (("source", edge.source), ("target", edge.target)):
            if area.cell(coord) is None:
                errors.append(
                    f"Area '{area.area_id}': edge {label} [{coord[0]},{coord[1]}] "
                    "is outside the grid or on an empty cell"
                )
        key = (edge.source, edge.target)
        if key in seen:
            warnings.append(
                f"Area '{area.area_id}': duplicate edge "
                f"[{edge.source[0]},{edge.source[1]}] -> [{edge.target[0]},{edge.target[1]}]"
            )
        seen.add(key)
        sources.add(edge.source)

    for row_idx, row in enumerate(area.grid):
        for col_idx, tile_id in enumerate(row):
            if tile_id and (row_idx, col_idx) not in sources:
                warnings.append(
                    f"Area '{area.area_id}': cell [{row_idx},{col_idx}] ({tile_id}) is a dead end"
                )

    return errors, warnings
