# colorout

Colored and optionally bold terminal output built from ANSI escape sequences.
You can give output as plain objects, build it with chained builders, or print
ready-made success, warning and error messages that carry a timestamp.

## Installation

```
pip install colorout
```

## Colors

`colorout.color` provides three kinds of color. Each can be used for the text
or for the background:

- `Color` holds the built-in colors `DEFAULT`, `BLACK`, `RED`, `GREEN`,
  `YELLOW`, `BLUE`, `MAGENTA`, `CYAN` and `WHITE`. `DEFAULT` adds no escape
  sequence.
- `Rgb(r, g, b)` is a true color. Each component must be in 0..255, or
  `ValueError` is raised.
- `Color256(code)` is a 256-color code. As a text color the code is used as it
  is. As a background color the code is read as `0xRRGGBB` and mapped onto the
  6×6×6 color cube. A value above `0xFFFFFF` gives no background sequence.

Each color has `get_str(DisplayType.TEXT)` and `get_str(DisplayType.BACKGROUND)`.
`str(color)` gives the text form. The module also exports the raw sequence
functions `color256_fg_color`, `color256_bg_color`, `rgb_fg_color` and
`rgb_bg_color`, and constants such as `RED`, `BG_BLUE`, `BOLD`, `UNBOLD` and
`RESET`.

## A single output

```python
from colorout.color import Color, Color256
from colorout.output import Output, output

output(Output(text="hello", color=Color.DEFAULT, bg_color=Color256(0x000000), endl=True))

Output(text="hello again", bg_color=Color.BLUE, endl=True).output()
```

`Output` has these fields: `text`, `color`, `bg_color`, `bold` and `endl`. An
output with empty text writes nothing.

## Builders

```python
from colorout.builder import OutputBuilder, OutputListBuilder
from colorout.color import Color, Color256

(
    OutputBuilder()
    .text("built")
    .color(Color256(0xFFFFFF))
    .bold(True)
    .endl(True)
    .output()
)

(
    OutputListBuilder()
    .add(OutputBuilder().text("first ").bg_color(Color.BLUE).build())
    .add(OutputBuilder().text("second").bg_color(Color.CYAN).endl(True).build())
    .run()
)
```

`OutputBuilder(output)` starts from an existing `Output`.
`OutputListBuilder(outputs)` starts from an existing sequence of outputs.

`OutputListBuilder` also has these methods:

- `remove(idx)` does nothing if the index is out of range.
- `query_idx(idx)` returns a default `Output` if the index is out of range.
- `run_idx(idx)` prints one entry and keeps it in the list.
- `clear()` empties the list.
- `run()` prints every entry in a single write and then empties the list.

## Lists of outputs

```python
from colorout.color import Color
from colorout.output import Output
from colorout.output_list import OutputList, output_list

OutputList([
    Output(text="left ", bg_color=Color.BLUE),
    Output(text="right", bg_color=Color.GREEN, endl=True),
]).output()

output_list([Output(text="plain", endl=True)])
```

An `OutputList` created without arguments holds one default output.

## Status messages

```python
from colorout.messages import println_success, println_warning, println_error, print_success

println_success("deployed")
println_warning("disk at ", 91, "%")
println_error("failed\nretrying")
print_success("no trailing newline")
```

The arguments are turned into strings, joined and split into lines. Every line
gets a bold `[YYYY-MM-DD HH:MM:SS => <level>]` prefix. The `println_` forms end
the last line with a newline and the `print_` forms do not. `timestamp()`
returns the current local time in that format. `output_all(*items)` calls
`output()` on each item in turn.

## Lower-level pieces

- `colorout.text.Text` is one formatted piece of text. Its `display_str()`
  method returns the text wrapped in escape sequences.
- `colorout.task.Task` queues `Text` objects and skips any with empty text. It
  writes them with `run_all()` or `run_idx(idx)`. Its index methods raise
  `IndexError` for an index out of range.

## Output stream

Every printing function and method takes an optional `file` argument. It
defaults to standard output.

## Limits

This is a library only. It has no command-line tool. It does not check whether
the stream is a terminal or supports color, so the escape sequences are always
written.