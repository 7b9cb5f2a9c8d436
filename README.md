# sclgui

The state and arithmetic behind a small set of desktop widgets, with no
drawing code and no ties to any GUI toolkit. Feed it events from any event
loop and read back positions, colours and selections; or test it on its own.

## Modules

- `sclgui.spring`: `Spring` and `Spring2D`, damped springs in closed form.
  The position is computed from the time elapsed since the last change, so it
  does not depend on how often you ask. Each takes an optional `clock`
  (default `time.monotonic`). `fast_round` is the rounding helper they use.
- `sclgui.tween`: easing curves `ease_in_circ`, `ease_out_circ`,
  `ease_inout_circ`, `ease_in_expo` and `ease_out_expo`, for inputs in `[0, 1]`.
- `sclgui.colors`: a frozen 8-bit RGBA `Color` (`from_rgba32`, `rgba`,
  `with_alpha`, `as_rgba`, `as_rgba32`), the constants `BLACK`, `WHITE` and
  `TRANSPARENT`, and `get_contrast_yiq`, `invert_color`, `gray_color` and
  `mix_color` (alpha compositing).
- `sclgui.icons`: `IconData` (light colour, dark colour, SVG path; built with
  `IconData.from_value` from a path or a `(colour, path)` pair) and
  `IconKeyPair`, the theme keys for an icon.
- `sclgui.theme`: theme key names, `Theme.LIGHT` / `Theme.DARK`, `FontWeight`,
  `FontStyle`, `FontDescriptor`, and `set_color_to_env`, which fills a mutable
  mapping with every colour and font of a theme. `get_font` returns the
  `"system-ui"` family.
- `sclgui.button_style`: `button_background_key` and `button_background`
  choose a button's background from its accent, flat, active, hot and
  disabled state.
- `sclgui.password`: `PasswordBox`, the editing state of a masked entry field
  (cursor, backspace, arrows, Tab focus moves, paste, click placement), with
  the `Key` and `FocusMove` enums.
- `sclgui.list_select`: `ListSelect`, one selected value out of a labelled
  list, moved by arrow keys or clicks, with an `on_select` callback.
- `sclgui.press_key`: `PressKey`, which runs an action when a key is pressed
  and released while focused and enabled.
- `sclgui.page_switcher`: `PageSwitcher`, a page stack with queued push and
  pop transitions driven by `anim_frame(nanoseconds)`, returning `ON_PAGE` and
  `POP_PAGE` notifications. Registering a page twice or pushing an unknown page
  raises `PageSwitcherError`; going back from the only page issues a warning.
- `sclgui.navigation_control`: `NavigationControl`, a pivot-style bar whose
  selection underline follows two springs.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Easing:

```python
from sclgui.tween import ease_out_expo

ease_out_expo(0.0)   # 0.0
ease_out_expo(1.0)   # 1.0
```

Colours:

```python
from sclgui.colors import Color, get_contrast_yiq

accent = Color.from_rgba32(0x0078D4FF)
text = get_contrast_yiq(accent)   # white on this blue
```

A spring that eases towards a target:

```python
from sclgui.spring import Spring

spring = Spring(0.0)
spring.set_target(100.0)
spring.position()   # moves towards 100.0 as time passes
spring.arrived()    # True once it has come to rest at the target
```

Theme palettes:

```python
from sclgui.theme import BODY, IS_DARK, Theme, set_color_to_env

env = {}
set_color_to_env(env, Theme.DARK)
env[IS_DARK]      # True
env[BODY].size    # 14.0
```

Page navigation:

```python
from sclgui.page_switcher import PageSwitcher

pages = PageSwitcher().with_page("home", dict).with_page("settings", dict)
pages.push_page("settings")
# call pages.anim_frame(interval_ns) on every frame until the queue empties
```

## What it does not do

There is no rendering, no window, no event loop and no text measurement.
Widths of labels, glyphs and similar must be supplied by the caller (for
example `NavigationControl.set_text_widths` and `PasswordBox.click`), and the
package never draws the colours, paths and positions it computes.