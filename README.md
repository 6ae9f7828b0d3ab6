# channelsurf

The building blocks of a general purpose fuzzy finder for the terminal, in
plain Python with no third-party dependencies.

## What is inside

- `channelsurf.event`: a terminal-neutral `Key` model (`KeyKind` plus an
  optional character or function-key number). `convert_raw_event_to_key`
  turns a raw `KeyEvent` (`KeyCode`, `KeyModifiers`, `KeyEventKind`) into a
  `Key` such as `Ctrl-a`, `Alt-Enter` or `F5`; released or unknown keys give
  `Null`. `Event` describes input, resize, focus and tick events.
- `channelsurf.keymap`: `Keymap.from_keybindings` reverses a mapping of
  action → key (or iterable of keys) into a read-only key → action mapping.
- `channelsurf.picker`: `Picker` tracks the selected entry and its row within
  a scrolling window, wrapping around at either end; `inverted()` returns a
  copy whose "next" and "previous" are swapped, for lists drawn bottom to top.
- `channelsurf.preview`: `Preview`, `PreviewContent` and `PreviewState` with
  bounded scrolling, a fixed-size `PreviewCache` that evicts the oldest
  inserted key, and the `loading` and `timeout` placeholder previews.
- `channelsurf.spinner`: a frame-cycling `Spinner`.
- `channelsurf.matcher`: a fuzzy `Matcher` fed through an `Injector` (safe to
  call from other threads), configured with `MatcherConfig`, returning
  `MatchedItem`s with the matched character positions. Patterns are split on
  whitespace; each word is fuzzy by default, `'word` is a substring, `^word` a
  prefix, `word$` a suffix, `^word$` an exact match and `!word` excludes items
  containing it. `fuzzy_match` matches a single pattern against a single text.
- `channelsurf.theme`: colour schemes, the `Mode` enum, `mode_color`, the
  logo lines and `metadata_rows` for the help bar.
- `channelsurf.layout`: `Rect`, `Constraint`, `split`, `centered_rect` and
  `Layout.build`, which places the help bar, results, input, preview and
  remote-control panes according to `UiOptions`.
- `channelsurf.keybindings`: `to_displayable` groups keybindings per mode and
  `build_keybindings_rows` gives the label and key text of each help row.

## Installation

```
pip install channelsurf
```

## Example

```python
from channelsurf.event import KeyCode, KeyEvent, KeyModifiers, convert_raw_event_to_key
from channelsurf.matcher import Matcher, MatcherConfig
from channelsurf.picker import Picker

key = convert_raw_event_to_key(KeyEvent(KeyCode.CHAR, KeyModifiers.CONTROL, value="a"))
print(key)  # Ctrl-a

matcher = Matcher(MatcherConfig())
injector = matcher.injector()
for name in ["README.md", "src/main.rs", "docs/guide.md"]:
    injector.push(name, lambda item: item)
matcher.find("md")
matcher.tick()  # pushed items and pattern changes take effect here
for item in matcher.results(10, 0):
    print(item.matched_string, item.match_indices)

picker = Picker()
picker.select(0)
picker.relative_select(0)
picker.select_next(1, 4, 3)
print(picker.selected, picker.offset())  # 1 0
```

## What it does not do

This package holds the model and geometry of a fuzzy finder, not a finished
program. It has no command to run, does not read keys from the terminal, does
not draw anything on screen, does not load channels or configuration files and
does not run commands to produce previews. `Layout.build` computes rectangles
and `build_keybindings_rows` / `metadata_rows` compute text; drawing them is
left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```