# sceneobjects

A small library for keeping a set of scene objects in JSON. Each object has an
id, a name, a position, a colour and an active flag. The library loads the
objects from a document, lets you change them while notifying listeners, and
writes them back. It uses only the standard library.

## The JSON format

```json
{
  "objects": [
    {"id": 1, "name": "Box1", "position": [0, 100, 50], "color": "red", "isActive": true}
  ]
}
```

A colour is written as a name. Known names are black, white, red, green, blue,
yellow, cyan, magenta, orange, purple and gray. Case does not matter when
reading, and an unknown name reads as white. When saving, each colour is
written as the name of the nearest known colour (by RGB distance; on a tie the
name listed first above wins). Files are written as tab-indented JSON.

## Modules

### `sceneobjects.colors`

- `Color(r, g, b, a=255)`: a frozen 8-bit RGBA colour. A channel outside 0..255
  raises `ValueError`. `as_linear()` returns the channels scaled to 0..1.
- `COLOR_DICTIONARY`: the known colour names and their values.
- `from_name(name)`: the colour for a name, case-insensitive; white if unknown.
- `nearest_color_name(color)`: the known name closest to a colour.
- `random_color(rng=None)`: a colour picked from the dictionary, using the given
  `random.Random` or the `random` module.

### `sceneobjects.jsonio`

- `load_json_object(path)`: reads a file and returns the JSON object at its
  root. Raises `JsonLoadError` if the file cannot be read, is not valid JSON, or
  its root is not an object.
- `save_json_object(path, obj)`: writes a dict as tab-indented JSON, creating
  parent directories as needed.
- `to_json_array(values)`: the values as a list of floats.

### `sceneobjects.objects`

- `ObjectData(id, name, position, color, is_active)`: one object.
  `subscribe(callback)` registers a function called with the object whenever
  `toggle_active()` or `set_color(color)` changes it.
- `ObjectsManager(content_dir, saved_dir, init_data_name="init_data",
  save_data_name="objects_state")`: holds a list of `ObjectData` in `objects`.
  - `init_path()` is `content_dir/Data/<init_data_name>.json`.
  - `save_path()` is `saved_dir/<save_data_name>.json`.
  - `load_from_json()` reads the init file, appends its objects to `objects`
    and returns the list. It raises `JsonLoadError` when the file cannot be
    loaded, the `objects` array is missing, or an entry is malformed.
  - `save_to_json()` writes `objects` to the save file and returns its path.

### `sceneobjects.views`

Presentation models that stay in step with the data they show:

- `ObjectRow(data)`: `name_text`, `color_text` (nearest colour name) and
  `active_checked`, refreshed when the data changes.
  `on_checkbox_changed(checked)` toggles the object.
- `ObjectList(manager)`: one `ObjectRow` per managed object in `rows`;
  `finish()` saves the objects and returns the path written.
- `SceneObject(data)`: `location`, `mesh_name`, `material_color` (linear RGBA)
  and `visible`; `on_data_changed(obj)` updates colour and visibility.

## Example

```python
from pathlib import Path

from sceneobjects.colors import from_name
from sceneobjects.objects import ObjectsManager
from sceneobjects.views import ObjectList

manager = ObjectsManager(content_dir=Path("Content"), saved_dir=Path("Saved"))
manager.load_from_json()          # reads Content/Data/init_data.json
for obj in manager.objects:
    obj.subscribe(lambda changed: print(changed.name, "changed"))

panel = ObjectList(manager)
manager.objects[0].set_color(from_name("orange"))
print(panel.rows[0].color_text)   # "orange"
panel.finish()                    # writes Saved/objects_state.json
```

## What this package does not do

It draws nothing and has no user interface or command: the view classes only
hold the values a screen would show. There is no rendering of meshes, no input
handling and no way to pick an object in the scene; to recolour an object,
call `set_color`, for example with `random_color()`.

## Running the tests

```
pip install -e .[test]
pytest
```