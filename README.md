# deskdemos

Small, self-contained examples of tasks that come up again and again in
desktop applications, written in plain Python on the standard library alone.
Each module covers one topic and can be imported, read and tested on its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `deskdemos.currency` | `CurrencyModel`, a square cross-rate table over a currency-to-rate mapping, with `Role` and `sample_rates()` |
| `deskdemos.news` | `Signal` (connect, disconnect, emit), and a `Newspaper` that sends its name to a `Reader` |
| `deskdemos.datastream` | Big-endian length-prefixed UTF-16 strings and 32-bit integers: `write_string`, `read_string`, `write_int32`, `read_int32`, `save_answer`, `load_answer` |
| `deskdemos.json_settings` | `parse_settings` reads an editor settings document into `Settings`; `format_settings` renders it |
| `deskdemos.students` | A SQLite student register: `connect`, `table_exists`, `create_students`, `list_students`, `students_between`, `students_sorted_by_name`, `create_cities`, `students_with_city` |
| `deskdemos.weather` | Weather request URLs (`weather_url`, `icon_url`), reply parsing (`parse_weather` into `WeatherInfo` and `WeatherDetail`), report text (`format_info`, `format_detail`) and a `WeatherClient` |
| `deskdemos.datatable` | `DataTable`, whose rectangular selections become tab-separated text, and `to_html` / `to_csv` exports |
| `deskdemos.snake` | `Snake` and `Food` on a wrapping 200 by 200 field, steered by `Direction` |
| `deskdemos.game` | `GameController`: arrow `Key`s, food placement, pausing, ticking and restarting after the snake bites itself |
| `deskdemos.bookindex` | Book-index XML: `parse_dom`, `parse_stream`, `read_file`, `sample_index_xml`, `write_sample`, into `Entry` trees |
| `deskdemos.stringlist` | `StringListModel`, a `SpinBoxDelegate` that edits cells as integers 0 to 100, and a `StringListEditor` with insert, delete and show |
| `deskdemos.filters` | `filter_names` and `compile_filter`: case-insensitive filtering by regular expression, wildcard or fixed string (`PatternSyntax`), over `color_names()` |
| `deskdemos.filesystem` | `list_directory`, `make_directory`, `remove_path`, `read_text_file` |
| `deskdemos.shared_image` | `SharedBlob`, which publishes and loads bytes through named shared memory |
| `deskdemos.widgets` | `TreeItem` with `CheckState`, a selectable `Grid`, and the samples `sample_tree()`, `sample_table()`, `browser_names()` |

## Commands

```
deskdemos-news                    # a newspaper sends itself to a reader
deskdemos-datastream [PATH]       # write "the answer is" and 42 to PATH (file.dat), read them back
deskdemos-json [PATH]             # parse and print a settings file, or the built-in sample
deskdemos-students [DB]           # create the student table in DB (demo.db) if missing, list it
deskdemos-bookindex [PATH]        # read a book index (books.xml) and print its entries
deskdemos-bookindex write [PATH]  # write the sample book index to PATH (bookindex.xml)
deskdemos-ls [DIR]                # list the visible entries of DIR (the current directory)
```

## Examples

Currency cross rates:

```python
from deskdemos.currency import CurrencyModel, Role, sample_rates

model = CurrencyModel(sample_rates())
print(model.header_data(0, Role.DISPLAY), model.data(0, 1, Role.DISPLAY))
```

Signals:

```python
from deskdemos.news import Newspaper, Reader

paper = Newspaper("Newspaper A")
reader = Reader()
paper.new_paper.connect(reader.receive_newspaper)
paper.send()
```

Book index XML:

```python
from deskdemos.bookindex import parse_stream, sample_index_xml

for entry in parse_stream(sample_index_xml()):
    print(entry.term, entry.pages_text)
```

Weather URLs and replies:

```python
from deskdemos.weather import parse_weather, weather_url

print(weather_url("Beijing,cn", app_id="placeholder"))
info = parse_weather('{"name": "Beijing", "dt": 0, "main": {"temp": 3}}')
```

A few game ticks:

```python
from deskdemos.game import GameController, Key

game = GameController()
game.handle_key_pressed(Key.UP)
for _ in range(9):
    game.tick()
print(game.snake.cells())
```

Filtering colour names:

```python
from deskdemos.filters import PatternSyntax, color_names, filter_names

print(filter_names(color_names(), "dark*", PatternSyntax.WILDCARD))
```

## What it does not do

The package has no graphical interface. The models, tables, trees and lists
hold data and answer queries, but nothing draws them; the snake game is
driven by calling `GameController.tick` and has no window, rendering or
keyboard capture of its own. There are no commands for the weather client,
the snake game or the shared-memory blob. `WeatherClient` fetches over plain
HTTP with `urllib` and needs a real application id from the weather service
to get data back.