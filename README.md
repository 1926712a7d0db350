# lowengine

lowengine is the core of a small 2D game engine built on an entity-component system. It uses only the standard library.

It provides:

- **Scenes** (`lowengine.scene.Scene`). A `SceneManager` (`lowengine.scene_manager`) creates scenes, selects the current one, makes deep temporary copies and destroys them.
- **Entities** (`lowengine.entity.Entity`). Components are attached to entities.
- **Components** (`lowengine.component.Component`). They are stored in per-type `ComponentPool`s (`lowengine.pool`) inside a scene's `Memory` (`lowengine.memory`).
- Two built-in component types:
  - `TransformComponent` (`lowengine.transform`) holds position, rotation in degrees and scale.
  - `CameraComponent` (`lowengine.camera`) keeps a `View` centred on the entity's transform.
- **Input actions** (`lowengine.actions`, `lowengine.input_manager`). These are named actions bound to a `Key` or `MouseButton`, together with an exact set of modifier keys.

## Installation

```
pip install .
```

## Scenes and entities

```python
from lowengine.scene_manager import SceneManager
from lowengine.transform import TransformComponent
from lowengine.camera import CameraComponent

manager = SceneManager()            # starts with one "Default scene", which is current
level = manager.create_scene("Level 1")
manager.select_scene(level)         # also accepts an index or a scene name

player = level.add_entity("Player")
transform = player.add_component(TransformComponent)
player.add_component(CameraComponent)   # requires a TransformComponent first
level.set_current_camera(player.id)

transform.position = (10.0, 20.0)
level.update(1 / 60)                # the camera's view now centres on (10.0, 20.0)
```

### Component rules

- A component type declares the types it needs in `dependencies()`.
- `Memory.create_component` raises errors in these cases:
  - `EntityNotFoundError` for an unknown entity id.
  - `MissingDependencyError` when a required component is missing.
  - `ComponentExistsError` when the entity already has a component of that type.
- `Entity.add_component` and `Scene.add_component` let these errors propagate.
- Only active components are updated. Only active components contribute sprites through `draw()`.

### Copies of a scene

`SceneManager.create_copy_scene_from_current()` makes a deep copy of the current scene and returns the copy's index:

- The copy's entities and components are bound to the copy's own `Memory`.
- The copy is named after the current scene with `" (TEMPORARY)"` appended.
- It is marked `is_temporary`.
- It can be selected with `select_scene(index)`.

### Destroying scenes

- `destroy_current_scene()` removes the current scene and makes the next lower one current.
- `destroy_all()` removes every scene.

## Drawing

`Scene.draw(window)` works in three steps:

1. It collects copies of the sprites that active components return.
2. It orders them by the scene's `SpriteSortingMethod`: `NONE`, `LAYERS` or `Y_AXIS_INCREMENTAL`.
3. It calls `window.draw(sprite)` for each sprite, then returns the list.

If a camera is set, `draw` first calls `CameraComponent.set_view(window)`. For that, the window must have a `size` pair and a `set_view(view)` method.

## Input actions

```python
from lowengine.input_manager import InputManager, KeyPressed, KeyReleased
from lowengine.actions import Key

inputs = InputManager()
inputs.add_key_action("save", Key.S, Key.LCONTROL)

inputs.clear_action_state()
inputs.read(KeyPressed(Key.LCONTROL))
inputs.read(KeyPressed(Key.S))
inputs.update()
assert inputs.get_action("save").started

inputs.clear_action_state()
inputs.read(KeyReleased(Key.S))
inputs.update()
assert inputs.get_action("save").ended
```

### How actions respond to events

- `read` accepts these events: `MouseMoved`, `MouseButtonPressed`, `MouseButtonReleased`, `KeyPressed` and `KeyReleased`.
- An action becomes `active` only when two things hold:
  - its key or mouse button is held;
  - the held modifier keys (left/right Shift, Control, Alt) match exactly the ones the action was defined with.
- `started` and `ended` stay true until the next `clear_action_state()`.
- Mouse actions are defined with `add_mouse_action`.
- The pointer position is available as `mouse_position`.

## What the package does not do

lowengine has no window, renderer, audio or asset loading. It has no sprite, animation, tile-map or sound components either; only `TransformComponent` and `CameraComponent` are included. It does not read events from an operating system. You create the events and pass them to `InputManager.read`, and you supply the window object that `Scene.draw` draws onto. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```