# cuddlyui

The widget-tree core of a small UI toolkit. It holds sizes, child lists,
keyboard focus and the routing of mouse and key events. It needs nothing
outside the Python standard library.

## What it provides

- `cuddlyui.util`: `utf8_to_u32` decodes UTF-8 bytes into a list of code
  points, and `u32_to_utf8` encodes code points (or a `str`) back to
  bytes. Both handle the older 5- and 6-byte forms. A byte that cannot
  start a sequence decodes to U+FFFD. A sequence cut short raises
  `ValueError`.
- `cuddlyui.rect.Rect`: a `width` and `height` (also as `size`). Every
  change goes through `resize`.
- `cuddlyui.quadtree.QuadTree`: a fixed-depth spatial index. It holds any
  object with a `bounds()` method returning `(x, y, width, height)`.
  `search(point)` finds the item under a point. It also has `insert`,
  `remove` and `clear`.
- `cuddlyui.composite`:
  - `Widget`: a rectangle with a `position`, a `visible` flag and
    callback lists. The lists are managed with `add_callback`,
    `remove_callback` and `call_callbacks`. Each callback is called as
    `func(widget, event, client)`.
  - `Composite`: holds children and routes `mouse_pos_callback`,
    `mouse_btn_callback` and `key_callback` to the child concerned. Tab
    and Shift-Tab move the keyboard focus between children. A button
    press focuses the child under the pointer. `remove_child` only
    schedules a removal; `manage_children` carries it out.
  - The event types `MouseEvent`, `ButtonEvent`, `KeyEvent`, `FocusEvent`
    and `ResizeEvent`.
  - The enumerations `Callback`, `Key`, `KeyMod`, `MouseState` and
    `KeyState`.
- `cuddlyui.manager.Manager`: a composite with `margin`, `border` and
  `child_spacing`. Its `Resize` policy (`NONE`, `SHRINK`, `GROW`, `ALL`)
  lets `set_desired_size` fit it to its children.
- `cuddlyui.row_column.RowColumn`: lays its children out in equal cells
  on a grid of `columns` by `rows`, filled in row or column `Order`. A
  zero in the grid size means "as many as needed".
- `cuddlyui.pie_menu.PieMenu`: a round pop-up menu. Each child takes one
  sector of the ring. The menu shows itself centred on the pointer when
  `popup_button` is pressed over its parent, and hides when the button is
  released. `which_sector` and `which_child` map a point to a sector and
  to a child.
- `cuddlyui.shader`: these functions deal with shader file names and GL
  values:
  - `shader_path` builds a shader file name. It reads the
    `CUDDLY_SHADER_PATH` environment variable or falls back to a default
    directory.
  - `load_shader_source` reads that file.
  - `shader_version` maps a GL version to the family `"2"`, `"3"` or
    `"4"`.
  - `parse_opengl_version` reads a GL version string.
  - `glenum_to_string` names the GL values in `GLEnum`.
- `cuddlyui.text_field.TextField`: a one-line text editor. It supports
  cursor movement, insertion and deletion, key repeat and a blinking
  cursor. Call `tick(now)` to drive the blinking and the repeat.
  `visible_window` reports which part of a too-long text is shown.

## Example

```python
from cuddlyui.composite import Callback, Composite, Widget

root = Composite(None)
root.resize(200, 100)

button = Widget(root)          # a widget adds itself to its parent
button.resize(50, 20)

hits = []
button.add_callback(Callback.ENTER, lambda widget, event, client: hits.append(event), None)
root.mouse_pos_callback(10, 10)
assert hits[0].location == (10, 10)
```

## What it does not do

This package draws nothing. It has no rendering or vertex buffers, and it
does not compile or link shaders: `cuddlyui.shader` only finds and reads
shader files. It has no connection to a window system.

It loads no fonts. A `TextField` is given any font object that has
`get_string_size(code_points)` and `max_cell_size()`, and it uses only the
sizes that object reports.

## Running the tests

```
pip install -e .[test]
pytest
```