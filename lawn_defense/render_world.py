"""Drawing of the moving world: suns, projectiles, dragged and fading plants."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, MutableMapping, Sequence

from lawn_defense.constants import (
    HEART_SCALE_IN_INVENTORY,
    HEART_SPACING,
    HEARTS_START_X,
    HEARTS_START_Y,
    LAST_SLOT_WIDTH,
    PLANT_FADE_OUT_SPEED,
)
from lawn_defense.plants import DragState, Plant
from lawn_defense.point_scores import PointScore
from lawn_defense.projectiles import Projectile
from lawn_defense.render_hud import Matrix3, _compose, rotate, scale, translate

logger = logging.getLogger(__name__)

_MAX_INVENTORY_POINTS = 3

DrawFunction = Callable[[Any, Matrix3], None]


@dataclass
class WorldRenderer:
    """Draws dynamic objects through a ``draw(mesh, model_matrix)`` callback.

    Names marked for deletion are removed from ``meshes`` by :meth:`deferred_deletion`.
    """

    meshes: MutableMapping[str, Any]
    draw: DrawFunction
    objects_to_delete: set[str] = field(default_factory=set)

    def render_point_scores_for_inventory(
        self, inventory_point_scores: Sequence[PointScore], point_score_counter: int
    ) -> int:
        """Draw up to three collected suns in the last inventory slot.

        Returns how many were drawn. Asking for more suns than the list holds
        raises ``IndexError``.
        """
        spacing = HEART_SPACING * 2.5
        start_x = HEARTS_START_X + LAST_SLOT_WIDTH / 3 - 5.0
        pos_y = HEARTS_START_Y + HEART_SCALE_IN_INVENTORY - spacing / 2.0
        count = min(point_score_counter, _MAX_INVENTORY_POINTS)
        for i in range(count):
            pos_x = start_x + i * (HEART_SCALE_IN_INVENTORY + spacing * 2)
            matrix = _compose(
                translate(pos_x, pos_y),
                scale(HEART_SCALE_IN_INVENTORY, HEART_SCALE_IN_INVENTORY),
            )
            self.draw(inventory_point_scores[i].mesh, matrix)
        return max(count, 0)

    def render_point_scores(self, point_scores: Sequence[PointScore]) -> None:
        """Draw every active sun at its position; suns without a mesh are logged."""
        for point_score in point_scores:
            if not point_score.active:
                continue
            if point_score.mesh is None:
                logger.error("Mesh not found for PointScore: %s", point_score.name)
                continue
            x, y, _ = point_score.position
            self.draw(point_score.mesh, _compose(translate(x, y)))

    def render_projectiles(
        self,
        delta_time: float,
        resolution: Sequence[int],
        projectiles: Sequence[Projectile],
    ) -> None:
        """Move active projectiles, deactivate those off screen and draw the rest."""
        for projectile in projectiles:
            if not projectile.active:
                continue
            projectile.move(delta_time, resolution)
            x, y = projectile.position
            if x > resolution[0] or y > resolution[1]:
                projectile.active = False
                continue
            side = projectile.shorter_side_length
            matrix = _compose(
                translate(x, y),
                rotate(projectile.rotation),
                scale(side, side),
            )
            self.draw(projectile.mesh, matrix)

    def render_dragged_plant(self, drag_state: DragState) -> None:
        """Draw the plant being dragged, if any, at its current position."""
        plant = drag_state.selected_plant
        if not drag_state.is_dragging or plant is None:
            return
        x, y = plant.position
        self.draw(plant.mesh, _compose(translate(x, y), scale(plant.scale, plant.scale)))

    def animate_plant_disappearance(self, plant: Plant, delta_time: float) -> None:
        """Shrink an inactive plant; once gone, mark its mesh for deletion."""
        if plant.active or plant.scale <= 0.0:
            return
        plant.scale = max(plant.scale - PLANT_FADE_OUT_SPEED * delta_time, 0.0)
        if plant.scale <= 0.0:
            self.mark_for_deletion(plant.name)
            return
        x, y = plant.position
        self.draw(plant.mesh, _compose(translate(x, y), scale(plant.scale, plant.scale)))

    def mark_for_deletion(self, name: str) -> None:
        """Queue a mesh name for removal at the next deferred deletion."""
        self.objects_to_delete.add(name)

    def deferred_deletion(self) -> set[str]:
        """Remove every queued mesh that exists and clear the queue.

        Returns the names actually removed.
        """
        removed = {name for name in self.objects_to_delete if name in self.meshes}
        for name in removed:
            del self.meshes[name]
        self.objects_to_delete.clear()
        return removed