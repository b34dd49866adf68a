# atframe

Small building blocks for the user interface of interactive applications,
independent of any particular GUI toolkit. Each helper turns input (text,
mouse state, a directory) into plain Python data that a renderer can draw.

## What is inside

- `atframe.markdown`: `parse_markdown(text)` turns a small markdown subset
  into a list of `MarkdownLine` records. Each line has a `LinePurpose`
  (`EMPTY`, `NORMAL`, `BULLET`, `HEADLINE`, `HIGHLIGHT_BLOCK`, `SEPARATOR`),
  an `indent`, a heading `level` and a tuple of `Span`s. A `Span` has a
  `SpanKind` (`TEXT`, `LINK`, `HIGHLIGHT`, `EMPHASIS`, `CODE_BLOCK`), its
  `text` and, for links, a `target`. Supported are `#` headings, `-` bullets,
  `---` separators, fenced ```` ``` ```` blocks, `[text](target)` links,
  `` `inline code` `` and `**bold**`. Runs of blank lines collapse to one,
  and a blank line straight after a headline is dropped.
- `atframe.ansi`: `parse_ansi(text)` splits text at SGR escape sequences into
  `TextSegment`s, each with `text`, a foreground `color` and a `background`
  (both `Color` values with `r`, `g`, `b`, `a` in 0..1). It understands reset
  (0), bold (1, brightens the colour), the 8 and bright colours (30-37,
  90-97, 40-47, 100-107), 256-colour and RGB extended colours (38/48 with 5 or
  2) and background reset (49). An escape sequence that is never closed by
  `m` raises `ValueError`. The palettes are available as `color_8`,
  `color_16`, `color_256`, `background_8` and `background_16`.
- `atframe.text_wrap`: `wrap_text(text, wrap_width, measure=len,
  max_lines=-1)` breaks lines after the last delimiter (`is_delim_char`:
  space, `_`, `-`, `/`, `\`, `.`), or hyphenates where there is none, and
  ends the last allowed line with `...` when `max_lines` is reached.
  `wrap_text_at_underscore(text, wrap_width, measure=len)` breaks only at
  underscores. `measure` is any function returning the width of a string.
- `atframe.interaction`: an `InteractionTracker` whose `resolve(...)` turns
  hover, focus and per-button `ButtonInput` for each `MouseButton` into one
  `MouseInteraction`, remembering held buttons so a release is reported only
  after a press. `directory_tree(path, extension="")` builds a name-sorted
  tree of `DirectoryNode`s, and `strip_label(label)` makes a hidden widget id
  (`"##"` plus the label without whitespace).

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Examples

Parsing markdown:

    from atframe.markdown import parse_markdown, LinePurpose

    lines = parse_markdown("# Title\n- see [docs](docs.md)\n")
    assert lines[0].purpose is LinePurpose.HEADLINE
    assert lines[1].purpose is LinePurpose.BULLET

Parsing coloured terminal output:

    from atframe.ansi import parse_ansi

    for segment in parse_ansi("\033[31merror\033[0m: disk full"):
        print(segment.text, segment.color, segment.has_background)

Wrapping a label with a fixed-width measure:

    from atframe.text_wrap import wrap_text

    wrapped = wrap_text("some_long_file_name.txt", 10, len)

Resolving mouse interaction for an item:

    from atframe.interaction import (
        ButtonInput, InteractionTracker, MouseButton, MouseInteraction,
    )

    tracker = InteractionTracker()
    state = tracker.resolve(
        hovering=True,
        buttons={MouseButton.LEFT: ButtonInput(clicked=True)},
    )
    assert state is MouseInteraction.LEFT_CLICKED

## What it does not do

The package draws nothing and talks to no windowing system: it has no
renderer, no widgets, no fonts and no event loop. Its functions produce
lines, spans, segments, wrapped strings and interaction states, and leave
drawing them to whatever toolkit the application uses. It also has no
command-line program.