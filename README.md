# raycube

`raycube` is a small raycasting viewer in the style of the classic
grid-based first-person games. It reads a `.cub` scene file, checks it,
and opens a 640×480 window that shows the walls in perspective, textured
from XPM images, with a flat floor and ceiling colour. A minimap with the
player marker and every cast ray is drawn over the top-left corner of the
view.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window and keyboard input.
The tests need `pytest` (`pip install ".[test]"`).

## Running

```
raycube path/to/scene.cub
```

Exactly one argument is expected. It must end in `.cub` and be readable;
otherwise an error is printed and the command exits with status 1. The
four wall textures are loaded before the window opens.

### Controls

| Key          | Action             |
|--------------|--------------------|
| `W` / `S`    | move forward/back  |
| `A` / `D`    | strafe left/right  |
| `←` / `→`    | turn               |
| `Esc`        | quit               |

Closing the window also quits. Movement is checked against the walls one
axis at a time, so the player slides along a wall instead of stopping.

## The `.cub` format

A scene starts with six configuration entries, in any order, followed by
the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
111111111011000001101
100000000000000000001
1111111110N0000000001
        1111111111111
```

- `NO`, `SO`, `WE`, `EA` name the wall textures. Each path must end in
  `.xpm` and must be readable.
- `F` and `C` give the floor and ceiling colours as three whole numbers
  from 0 to 255, separated by commas.
- Blank lines may appear between entries. Each key must appear exactly
  once; an unknown key is an error.

The map uses `1` for walls, `0` for floor, spaces for empty space, and
exactly one of `N`, `S`, `E`, `W` for the player's start and facing.
Shorter rows are padded with spaces. Every floor cell and the start cell
must be enclosed by walls: none may lie on the edge of the map or next to
empty space that reaches the edge. Blank lines inside or after the map are
rejected, as are any other characters.

Any error is reported on standard error, in red, as

```
ERROR
<message>
```

and the command exits with status 1.

## Using it as a library

The parsing and rendering parts work without a window:

```python
from raycube.parser import read_cub
from raycube.xpm import load_xpm
from raycube.colors import lookup_color

scene = read_cub("maps/room.cub")
print(scene.config.floor, scene.map.start_x, scene.map.direction)

image = load_xpm("textures/north.xpm")
print(image.width, image.height, image.pixel(0, 0))
print(lookup_color("light goldenrod"))  # 0xfafad2
```

- `raycube.parser.parse_lines` takes the lines of a scene directly and
  returns a `Scene` with its `Config` and `ParsedMap`.
- `raycube.xpm.parse_xpm_text` decodes XPM text; named colours come from
  `raycube.colors.lookup_color`, and the colour `None` becomes a
  transparent pixel.
- `raycube.state.Game` holds the flooded grid and the `Player`;
  `Game.set_map_size()` works out the drawing scale.
- `raycube.raycast.render_view` casts one ray per screen column and draws
  the 3D view into a `raycube.framebuffer.FrameBuffer`;
  `raycube.app.render_frame` adds the player's movement, the minimap and
  the rays, which is handy for tests and screenshots.

Invalid scenes raise `raycube.errors.CubError`; unreadable or malformed
images raise `raycube.xpm.XpmError`.

## Limitations

Wall textures must be XPM images; no other image format is read. The view
has fixed size and field of view (60 degrees), and there are no sprites,
doors or mouse look.