# raidtools

Building blocks for a raid den search tool: bounded number input fields,
IV and nature filters, result tables with TXT/CSV export, den listings for
each map area, display labels for results and a small JSON settings store.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### Number input — `raidtools.textbox`

- `InputType` — preset kinds of input (`SEED_64BIT`, `ADVANCE_64BIT`,
  `SEED_32BIT`, `ADVANCES_32BIT`, `SEED_16BIT`, `DELAY`, `ID`).
- `NumberField(minimum, maximum, length, base=10)` — holds the text of an
  unsigned decimal or hexadecimal number; `base` must be 10 or 16.
  - `NumberField.for_type(input_type)` builds a field with a preset's limits.
  - `edit(text)` drops a leading `0x` in hexadecimal fields, cuts the text to
    `length`, upper-cases it and removes characters that are not digits of
    the base.
  - `finish()` clamps the value to the limits and rewrites the text
    (lower-case in hexadecimal).
  - `value()` returns the number, or 0 if the text is not a valid number.

```python
from raidtools.textbox import InputType, NumberField

field = NumberField.for_type(InputType.ID)
field.edit("70000")
field.finish()   # "65535"
```

### Filters — `raidtools.filters`

- `IVFilter` — lower and upper IV bounds (0–31) for the six stats
  (`STAT_NAMES`: HP, Atk, Def, SpA, SpD, Spe), with `lower()`, `upper()`,
  `clear()` and `set_range(stat, minimum, maximum)`; a stat is given by
  index or name.
- `apply_modifier(stat, modifiers)` applies a quick preset by the `Modifier`
  flags held: none gives 0–31, `CONTROL` gives 31–31, `ALT` gives 30–31 and
  `CONTROL | ALT` gives 0–0.
- `CheckList(items)` and `CheckState` — a list of checkable items such as
  natures, with `setup`, `toggle`, `reset`, `check_state`, `checked` and
  `text`. With none or all items checked, `checked()` accepts every item and
  `text()` is `"Any"`; otherwise `text()` joins the checked items with commas.

### Tables — `raidtools.table`

- `TableModel(header, render)` — rows of items; `render(item, column)` gives
  the value of a cell. Methods: `add_items`, `add_item`, `update_item`,
  `remove_item`, `item`, `items`, `clear`, `row_count`, `column_count` and
  `cell`. Row and column indexes out of range raise `IndexError`.
- `format_table(model, csv)` — the header line followed by the rows,
  separated by commas or tabs; empty cells are written as `-`.
- `write_table(model, path, csv)` — writes that text to a file.
- `selection_text(cells)` — joins `(row, value)` pairs with tabs within a
  row and newlines between rows.

### Dens — `raidtools.raids`

- `den_range(location)` — `(start, end, offset)` of the den ids of a map
  area; indexes past the last area select the last one.
- `den_numbers(location, event_available=False)` — `(label, den_id)` for
  each selectable den, with the event den (`EVENT_DEN_ID`) first when event
  data is available.
- `parse_event_index(text)` — reads `file,species` lines into `EventFile`
  entries (file, date taken from the file name, species), newest first;
  malformed lines raise `ValueError`.

### Result labels and den data — `raidtools.lookup`

- `bot_den_index(den_id)` — the slot of a den in a console's den save block.
- `den_seed(data)` — the raid seed in raw den bytes, as lower-case
  hexadecimal.
- `ability_label(ability)`, `shiny_label(shiny)` and
  `gender_symbol(gender)` — how results are shown.

### Settings — `raidtools.settings`

- `Settings(path)` — key/value settings in a JSON file, with `get`, `set`,
  `contains` and `save`.
- `validate_settings(settings, app_dir)` fills in the profile file path,
  style (`"dark"`) and locale (`"en"`) when missing.
- `change_language(settings, language)` and `change_style(settings, style)`
  accept only `LANGUAGES` and `STYLES`, and return `True` when the value
  changed.

## What this package does not do

raidtools is a library only: it installs no command and has no windows.
It holds no den or species data, does not generate raid results, does not
calculate stats or IVs, does not store trainer profiles, and does not
download event data or connect to a console — `lookup` only interprets den
bytes that have already been read.