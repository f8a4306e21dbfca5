# simplemenu

Building blocks for a launcher menu on handheld game consoles. The package
reads configuration and `.desktop` metadata, stores ROM aliases, polls input
events, works out screen layout and draws text and rectangles with pygame.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `simplemenu.hashtable`: `HashTable(size)` is a string-to-string table with a fixed number of buckets. Each bucket is kept sorted by key. It provides `set`, `get` (returns `None` when the key is missing), `bucket_of` and `in`. A size below 1 raises `ValueError`.
- `simplemenu.flatini`: `parse_ini(text)` and `load_ini(path)` return an `IniFile`. Its `get(section, key)` looks up sections and keys case-insensitively; with `section=None` any section matches. `sget(section, key, convert)` passes the value through `convert`. Comments start with `;`. Quoted values may contain the escapes `\n`, `\r` and `\t`. Lines without `=` or without a value are ignored.
- `simplemenu.libini`: `IniReader` reads INI data in order. `next_section()` returns the next section name and `read_pair()` returns the next `(key, value)` pair. Both return `None` at the end. Comments start with `#`. Malformed input raises `IniFormatError`, and the message gives the line number. The reader also provides `set_read_pointer(offset)`, `line_number(offset)` and `IniReader.from_file(path)`. `from_file` rejects empty files.
- `simplemenu.opk`: `MetadataReader(name, data)` checks that the first section of a `.desktop` file is the `Desktop Entry` header. Iterating over it yields that section's key/value pairs. `read_desktop_entry(name, data)` returns the same pairs as a dict. Errors raise `OpkError`.
- `simplemenu.input`: `InputPoller` takes events from an iterable you pass in, or from the pygame event queue if you pass none. It reports the last event's type and key. It also says whether a joystick motion was left/right, up or down.
- `simplemenu.layout`: pure layout arithmetic.
  - `ScreenGeometry` scales sizes given for a 240-line 4:3 screen with `proportional`. It also provides `ratio`, `is_four_by_three` and `magic_number`.
  - `Align` holds the alignment flags.
  - Text helpers: `aligned_position`, `truncate_to_width`, `wrap_words`, `split_error_message` and `cpu_prefixed`.
  - Image sizing helpers: `fit_centered_image`, `traditional_art_size` and `custom_art_size`.
- `simplemenu.textrender`: `TextRenderer(surface, geometry)` draws onto a pygame surface. It provides:
  - `draw_text` for aligned text, cut to the screen width.
  - `draw_multiline_text` for word-wrapped text.
  - `draw_error`, which splits a message in two at the first `-`.
  - `draw_rectangle` and `draw_transparent_rectangle`.
  - Fonts are any objects with `size()` and `render()`, such as `pygame.font.Font`.

## Example

```python
from simplemenu.flatini import parse_ini
from simplemenu.hashtable import HashTable
from simplemenu.layout import ScreenGeometry

config = parse_ini("[Main]\nfont = \"menu.ttf\"\nitems = 12\n")
print(config.get("main", "FONT"))            # menu.ttf
print(config.sget("main", "items", int))     # 12

aliases = HashTable(100)
aliases.set("sonic", "Sonic the Hedgehog")
print(aliases.get("sonic"))                  # Sonic the Hedgehog

print(ScreenGeometry(640, 480).proportional(10))  # 20
```

## What it does not do

This package is a library, not a runnable menu, and it installs no command.

- It does not hold a menu's sections, favourites or ROM lists.
- It does not load, scale or draw images.
- It does not map button presses to menu actions.
- It does not launch emulators or games.

Those parts have to be provided by the application that uses these modules.