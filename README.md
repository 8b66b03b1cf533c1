# clashtui

Building blocks for a terminal dashboard of a Clash proxy server. Everything
draws into an in-memory cell buffer, so each piece can be used and tested
without a real terminal.

## Modules

- `clashtui.text`: `Color`, `Modifier`, `Style`, `StyledGrapheme`, `Span`,
  `Line`, `Rect`, `Cell` and `Buffer`, plus `text_width`, `into_spans` and
  `styled_chars_to_line`. Widths come from `wcwidth`, so wide characters take
  two cells. `Buffer.row_text` returns the symbols of one row as a string.
- `clashtui.wrap`: `wrap_by(value, char)` and `wrapped(value)` put a character
  (a space for `wrapped`) before and after a string, a `Span` or a `Line`.
- `clashtui.helper`: `help_footer` builds `[T]est`-style labels with the first
  character highlighted. `tagged_footer` adds a reversed tag after such a label.
  `string_window` and `line_window` cut characters `start` to `end` out of a
  string or a line and keep the styles. `text_style` gives the body text style.
- `clashtui.hms`: `hms(value)` formats seconds or a `timedelta` as
  `"1h 2m 3s"` and leaves out leading zero units. Negative values start with
  `-` and always show hours.
- `clashtui.timing`: `Interval` sleeps so that ticks fall on a fixed grid.
  `Pulse(n)` fires on the first tick and then on every n-th tick.
  `TicksCounter` counts ticks and estimates ticks per second from recent ones.
  `Interval` and `TicksCounter` accept a `clock` (and `Interval` a `sleep`)
  function for testing.
- `clashtui.coord`: `Coord`, a list's scroll offset and hold flag, with
  `toggle`, `end` and `lock`.
- `clashtui.footer`: `FooterItem` (raw text, a span or a line, shown or
  hidden) and `Footer`. `Footer.render` lays items out on the bottom row of an
  area, left items from the left and right items from the right edge, and stops
  before they would overlap.
- `clashtui.sparkline`: `Sparkline` and `BarSet`, with the bar sets
  `NINE_LEVELS`, `DOTS` and `REV_DOTS`. A reversed sparkline hangs from the top.
- `clashtui.constants`: indicator symbols, latency styles and spans, and
  `delay_style(delay)` / `delay_span(delay)`. A delay of 0 means unknown, 1–200
  ms is low, 201–400 is medium and anything above is high.
- `clashtui.events`: `KeyCode`, `KeyModifiers`, `KeyEvent`, the actions
  `TestLatency` and `ApplySelection`, `ListEvent`, and the events `QuitEvent`,
  `ActionEvent`, `InputEvent` (with `InputKind`), `UpdateEvent` and
  `DiagnosticEvent`. Every event has a `to_line()` for a debug list.
  `event_from_key` maps key presses to events: `q`, `x` or Ctrl-C quit, Ctrl-D
  toggles debug, arrows and Enter move in lists (fast with Ctrl or Shift), `s`
  and Alt-`s` change the sort, `t` tests latency, space holds the view, digits
  go to a tab. Errors are `TuiError`, `BackendError` and `InternalError`.
- `clashtui.movable_list`: `MovableListState`, a list that can scroll, sort
  and hold its position. `NoSort` keeps the insertion order.
  `item_to_line` and `item_width` render strings, spans, lines or anything with
  a `to_line()` method.
- `clashtui.logger`: `TuiLogHandler`, a `logging.Handler` that sends each
  record as a `DiagnosticEvent` and can also append it to a file. `level_color`
  maps a level to a colour. `init_logger(level)` logs to stderr as
  `" Info > message"`, taking the level from the argument, then from the
  `CLASHCTL_LOG` variable, and otherwise using INFO. `detect_shell()` returns
  `bash`, `elvish`, `fish`, `powershell` or `zsh` when `$SHELL` names one of
  them.

## Example

```python
from clashtui.text import Buffer, Rect, Span
from clashtui.footer import Footer, FooterItem

area = Rect(0, 0, 30, 3)
buf = Buffer.empty(area)

footer = Footer()
footer.push_left(FooterItem.raw("NORMAL"))
footer.push_right(FooterItem.span(Span.raw("Ln 1, Col 0")))
footer.render(area, buf)

print(buf.row_text(2))
```

```python
from clashtui.timing import Pulse

pulse = Pulse(20)
fired = [pulse.tick() for _ in range(41)]
# True at ticks 0, 20 and 40
```

## What it does not do

The package has no command to run and no application loop. It does not connect
to a Clash server, fetch proxies, rules, connections or logs, or send actions
anywhere. It does not draw to a real terminal or handle raw keyboard input, and
it has no page layouts. It gives the state, events and widgets that such a
dashboard would be built from.

## Tests

The tests use pytest, which the `test` extra installs.