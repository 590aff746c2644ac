# jsonmatch

jsonmatch compares two JSON values and reports every place where they
disagree, each with a path to where the difference sits. It works on plain
Python JSON data: `None`, `bool`, `int`, `float`, `str`, `list` and `dict`.
Passing anything else raises `TypeError`.

The package has no dependencies outside the standard library. The `test`
extra installs pytest for running the test suite.

## Comparing values

`jsonmatch.diff.diff(lhs, rhs, config)` returns a list of `Difference`
objects. The list is empty when the values match.

```python
from jsonmatch.config import CompareMode, Config
from jsonmatch.diff import diff

config = Config(CompareMode.INCLUSIVE)

assert diff({"a": {"b": 1}}, {"a": {}}, config) == []

for difference in diff({"a": {}}, {"a": {"b": 1}}, config):
    print(difference)
# json atom at path ".a.b" is missing from actual
```

Values that differ are shown with both sides, pretty-printed as JSON:

```
json atoms at path ".data.users[1].id" are not equal:
    expected:
        2
    actual:
        24
```

## Compare modes

- `CompareMode.INCLUSIVE`: the first argument is the actual value and the
  second the expected one. Everything in `expected` must be found in `actual`;
  extra object fields and extra trailing array items in `actual` are allowed.
  Messages speak of "expected" and "actual".
- `CompareMode.STRICT`: both values must be exactly the same. Messages speak
  of "lhs" and "rhs", for example
  `json atom at path ".a.b" is missing from rhs`.

## Configuration

`Config` is a frozen dataclass. Its `with_*` methods return modified copies:

```python
from jsonmatch.config import CompareMode, Config, FloatCompareMode, NumericMode

config = (
    Config(CompareMode.STRICT)
    .with_numeric_mode(NumericMode.ASSUME_FLOAT)
    .with_float_compare_mode(FloatCompareMode.within(0.00001))
)
```

- `NumericMode.STRICT` (the default) treats `1` and `1.0` as different;
  `NumericMode.ASSUME_FLOAT` converts all numbers to float before comparing.
- `FloatCompareMode.exact()` (the default) compares floats for equality;
  `FloatCompareMode.within(epsilon)` also accepts floats that differ by at most
  `epsilon` or by a few units in the last place.
- `with_compare_mode(mode)` switches between inclusive and strict.
- `consider_array_sorting(False)` ignores the order of array items: each item
  of the expected array must occur in the actual array at least as often as it
  occurs in the expected one. In strict mode the arrays must also have the
  same length. A mismatch is reported once, at the array's path.
  `consider_array_sorting(True)` restores ordered comparison and raises
  `ValueError` on a strict config.

```python
from jsonmatch.config import CompareMode, Config
from jsonmatch.diff import diff

config = Config(CompareMode.INCLUSIVE).consider_array_sorting(False)
assert diff([1, 2, 3, 1, 4], [2, 1, 3, 1], config) == []
```

## Differences

Each `Difference` holds:

- `path`: a `Path` of `Key` items; `str(path)` gives `(root)` for the top
  level, or keys such as `.a[0].b`.
- `lhs` and `rhs`: the values on each side. `lhs_missing` and `rhs_missing`
  tell when a side is absent. When an expected item is missing from the actual
  value in inclusive mode, `rhs` holds the expected container it came from.
- `config`: the configuration used for the comparison.

`str(difference)` gives the report message.

## What the package does not do

jsonmatch does not provide ready-made assertion functions, and it does not
turn objects such as dataclasses into JSON. Convert values to plain JSON data
yourself and raise from the list of differences as suits your tests:

```python
from jsonmatch.config import CompareMode, Config
from jsonmatch.diff import diff


def assert_json_eq(lhs, rhs):
    differences = diff(lhs, rhs, Config(CompareMode.STRICT))
    if differences:
        raise AssertionError("\n\n".join(str(d) for d in differences))
```

## Helpers

`jsonmatch.textutil` holds the small helpers used to format messages:
`indent(text, level)` prefixes every line with `level` spaces, and
`indexes(items)` returns the list of valid indexes of a sequence.