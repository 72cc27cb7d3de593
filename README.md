# xmlui

`xmlui` reads a compact XML-like markup that describes user interface
layouts. It turns the markup into tag sequences that a layout builder can
walk. A file has up to three sections:

- `<parameters> ... </parameters>` is optional.
- `<labels> ... </labels>` is optional. It holds pairs of string tags, and
  each first tag of a pair is replaced by the second throughout the main
  section.
- `<main> ... </main>` is required.

Before parsing, `<!-- ... -->` comments, non-printable characters (newlines
included) and spaces are removed. Spaces are kept only inside `<...>`, and
never two in a row. Because of this, the tags in a section have to be
separated by reserved characters (`<`, `>`, `/`, `=` or a space inside an
element).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading markup

```python
from xmlui.xmlfile import XMLFile

text = """
<labels><WIDTH=200/></labels>
<main>
  <div posx=0 posy=0 sizex=WIDTH sizey=_height>
    <textStatic posx=4 posy=4 text=hello/>
  </div>
</main>
"""

xml_file = XMLFile(text, "window.xml")   # "WIDTH" becomes "200" in main
xml_file.set_parameter("height", 120)    # every "_height" tag becomes "120"
print(xml_file.main.get_string_tag(6))   # "200"
print(xml_file.describe())
```

- `XMLFile.from_path(path)` reads and parses a file from disk.
- `set_parameter(tag, value)` takes a string, an int or a float. Floats are
  written with four truncated decimals.
- `set_label(tag, value)` replaces a tag as written, with no `_` prefix.
- `copy()` returns a copy whose tag sequences can be changed on their own.

Problems in the markup raise exceptions:

- `xmlui.sections.SectionError` when sections are missing or out of order.
- `xmlui.primtags.PrimTagError` when two `/` appear in a row.
- `xmlui.xmlfile.LabelError` when the labels section has an odd number of
  tags.
- `xmlui.core.TagTooLongError` when a tag is longer than
  `MAX_TAG_LENGTH` (64).

Swapping a tag that is not there gives a warning.

## Modules

- `xmlui.sections`: `format_text` cleans the text. `locate_sections` returns
  the bounds of each section as a `Sections`, with `-1` for a section that
  is absent.
- `xmlui.tagsequence`: `TagSequence` holds the string tags of a section.
  Before each one it keeps a set of primitive tags (`PrimitiveTagType`:
  `ELEMENT`, `PARAMS`, `CHILDREN`; `PrimitiveTagState`: `NONE`, `OPEN`,
  `CLOSE`, `CLOSE_OPEN`, `DOUBLE_CLOSE`). It offers `get_string_tag`,
  `set_string_tag`, `swap_string_tag`, `get_primitive_tag`,
  `set_primitive_tag`, `copy` and `describe`.
- `xmlui.primtags`: `populate_prim_tags` fills in the primitive tags from the
  section text.
- `xmlui.parameterinfo`: `ParameterInfoBuilder.add_parameter(name, type,
  position)` and `build()` produce a `ParameterInfo`. Its `match(name)`
  returns `(ParameterType, position)`, or `(ParameterType.NONE, -1)` for an
  unknown name.
- `xmlui.elementset`: `ElementSet` registers `Element` entries by name.
  Built-in kinds (`ElementType`) are added with `add_default_element`.
  `CUSTOM` elements, which are backed by an `XMLFile`, are added with
  `add_custom_element`. `match(name)` returns the first entry with that
  name, or `None`.
- `xmlui.linkedlist`: `LinkedList`, a double-ended list whose entries carry
  integer ids.
- `xmlui.filenavigator`: `FileNavigator(working_path, use_subdirs=True)`.
  `files(pattern)` yields the paths that match a case-insensitive wildcard,
  in name order, and goes into subdirectories depth first when
  `use_subdirs` is set. `read_files(pattern)` yields each path with its
  contents.
- `xmlui.filereader`: `read_file(path)` returns the bytes of a file and
  raises `FileReadError` for an empty file. `file_size(path)` returns its
  size.
- `xmlui.log`: `Log(path)`, a file logger that flushes after every write
  and can be used as a context manager. It has `write`, `new_line`, `var`,
  `clear` and `close`.
- `xmlui.utility`: `Color` codes, `set_brightness`, `merge_colors`, bounded
  number/string conversions (`int_to_string`, `number_to_string`,
  `string_to_int`, `string_to_number`, `string_hex_to_int`), `floor` and
  `round_half_up`.
- `xmlui.mathutil`: approximate `sqrt`, `sin`, `cos`, `tan`, `arcsin`,
  `arccos` and `arctan`, plus `distance2`, `distance3`, `normalize`,
  `in_range`, `get_angle`, `rollover_angle`, `to_radians` and `to_degrees`.
- `xmlui.keycodes`: `KeyCode`, `has_valid_char` and `key_code_to_char`.
- `xmlui.core`: character classes for the markup (`is_valid_char`,
  `is_reserved_char`) and `tag_length`.

## What it does not do

The package stops at the tag sequence. It does not build window or widget
objects from the markup, and it does not draw anything. `ElementSet` comes
empty, so you register the elements yourself. There is no command-line
tool.