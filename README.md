# lawn_defense

The model behind a lane-based defence game. Plants sit on a grid of green
squares, plants fire spinning projectiles along their row, and suns that
appear at random are collected and spent on new plants.

The package does no drawing of its own. It builds the geometry (vertices,
colours and indices) and the 3×3 model matrices that a renderer needs, and it
keeps the state of plants, projectiles and suns up to date. You supply the
function that draws a mesh: a callable `draw(mesh, model_matrix)`.

## Installing

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

- `lawn_defense.constants`: layout, sizes, colours, plant costs and timings.
- `lawn_defense.shapes`: `Vertex`, `Mesh`, `DrawMode` and basic shapes
  (`create_square`, `create_rectangle`, `create_triangle`,
  `create_isosceles_triangle`, `create_equilateral_triangle`,
  `create_rhombus`, `create_circle`, `create_hexagon`).
- `lawn_defense.game_meshes`: the game's own meshes (`create_point_score`,
  `create_heart`, `create_projectile`, `create_plant`, `create_zombie`,
  `create_inventory`).
- `lawn_defense.squares`: `GreenSquare`, a cell of the planting grid, with
  `center`, `is_mouse_over`, `contains_plant_at`, `is_free` and `occupy`.
- `lawn_defense.plants`: `Plant` (mouse hit test and shooting cooldown) and
  the `DragState` used for drag and drop.
- `lawn_defense.projectiles`: `Projectile`, whose `move` advances it to the
  right, spins it, and deactivates it past the window's right edge.
- `lawn_defense.point_scores`: `PointScore` suns and a `PointScoreSpawner`
  that adds three to six suns at random positions every five seconds.
- `lawn_defense.scene_setup`: `SceneBuilder`, which creates the inventory
  slots, inventory plants, cost suns, hearts, base rectangle, the grid of
  `GreenSquare`s and a random set of plants, and can print a numbered table
  of the meshes it registered (`mesh_report`).
- `lawn_defense.render_hud`: the matrix helpers `translate`, `scale`,
  `rotate`, and `HudRenderer` for the inventory bar, cost suns, hearts, lawn
  grid and base rectangle.
- `lawn_defense.render_world`: `WorldRenderer` for collected and free suns,
  projectiles, the dragged plant, the plant fade-out animation and deferred
  mesh deletion.

## Example

```python
from lawn_defense.game_meshes import create_plant
from lawn_defense.projectiles import Projectile

mesh = create_plant("plant0", 55.0, 8, 25.0, 40.0, (0.0, 0.0, 1.0), True)
print(len(mesh.vertices), len(mesh.indices))   # 25 48

shot = Projectile(
    mesh=None, color=(0.0, 0.0, 1.0),
    longer_side_length=5.0, shorter_side_length=3.0, num_segments=8,
    name="Projectile_plant0", position=(100.0, 200.0),
    rotation=30.0, active=True, speed=50.0,
)
shot.move(1.0, (1280, 720))
print(shot.position)   # (150.0, 200.0)
```

Building a scene and drawing its static parts:

```python
from lawn_defense.constants import CX, CY, INVENTORY_SLOTS, NUM_LIVES, SQUARE_SIDE, SQUARE_SPACING
from lawn_defense.render_hud import HudRenderer
from lawn_defense.scene_setup import SceneBuilder

builder = SceneBuilder()
builder.initialize_inventory_slots()
builder.initialize_hearts_for_inventory()
builder.initialize_base_rectangle()
squares = builder.initialize_green_squares()

calls = []
hud = HudRenderer(builder.meshes, lambda mesh, matrix: calls.append(mesh.name))
hud.render_inventory_slots(CX, CY, SQUARE_SPACING, INVENTORY_SLOTS)
hud.render_hearts_for_inventory(NUM_LIVES)
hud.render_green_squares(CX, CY, SQUARE_SPACING, SQUARE_SIDE)
hud.render_base_rectangle(CX, CY, SQUARE_SPACING)
print(builder.mesh_report())
```

## What the package does not do

- It opens no window and draws nothing; every renderer calls the `draw`
  function you pass in.
- There is no game loop, no keyboard or mouse handling and no conversion
  from screen to world coordinates.
- Zombies exist only as a mesh (`create_zombie`): there is no zombie actor
  that walks, spawns, takes hits or costs the player a life, and so no
  collision handling between zombies, plants and projectiles.
- Nothing is saved or loaded.

## Running the tests

```
pytest
```