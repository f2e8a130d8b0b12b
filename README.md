# rustdrills

A small library that goes with a set of Rust learning exercises. It holds
worked Python solutions to many of the drills, a helper that writes a
`rust-project.json` file so rust-analyzer can understand loose exercise
files, and two functions for coloured status lines in the terminal.

Requires Python 3.11 or later and `rich`.

## Worked solutions

The `rustdrills.drills` package has one module per topic:

- `quizzes` - `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, and a generic `ReportCard`
  whose `print()` renders a line such as
  `Tom Wriggle (12) - achieved a grade of 2.1`.
- `errors` - `generate_nametag_text`, `total_cost`, `remaining_tokens`,
  `PositiveNonzeroInteger`, `CreationError`, `ParsePosNonzeroError` and
  `parse_pos_nonzero`. Errors are raised as exceptions.
- `options` - `maybe_icecream`, which returns `None` for hours past 24.
- `strings` - `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`.
- `branching` - `bigger` and `foo_if_fizz`.
- `vecs` - `array_and_vec`, `vec_loop` (doubles in place) and `vec_map`
  (returns a new list).
- `functions` - `sale_price`, `is_even`, `square`.
- `iterators` - `favourite_fruits`, `capitalize_first`,
  `capitalize_words_vector`, `capitalize_words_string`, `divide` with
  `DivisionError`, `NotDivisibleError` and `DivideByZero`,
  `result_with_list`, `list_of_results`, `factorial`, and the `Progress`
  counting functions `count_for`, `count_iterator`, `count_collection_for`
  and `count_collection_iterator`.
- `smart_pointers` - `offset_sums` (one thread per offset), the `Cons`
  list with `create_empty_list` and `create_non_empty_list`, `abs_all`
  (returns the input itself when nothing needs changing), and `Sun` and
  `Planet`.
- `enums` - the `ChangeColor`, `Echo`, `Move` and `Quit` messages and a
  `State` whose `process()` applies them.
- `traits` - `append_bar` for strings and lists, `Licensed` with
  `SomeSoftware` and `OtherSoftware`, `compare_license_types`, `some_func`
  and the generic `Wrapper`.
- `hashmaps` - `fruit_basket`, `fill_fruit_basket` with the `Fruit` enum,
  and `build_scores_table`, which turns lines like `England,France,4,2`
  into `Team` records.
- `threads` - `run_threads`, `count_jobs` with a lock-guarded `JobStatus`,
  and `send_tx` / `receive_all` passing a `JobQueue` through a queue.

Example:

```python
from rustdrills.drills.iterators import divide, NotDivisibleError

divide(81, 9)        # 9
try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)   # 81 6
```

## rust-project.json

`rustdrills.project.RustAnalyzerProject` collects a `Crate` for every `.rs`
file below a directory and writes them out:

```python
from rustdrills.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

Each crate uses edition 2021 and the `test` cfg. `to_json()` returns the
compact JSON text without writing it.

## Status lines

`rustdrills.ui.warn(message)` and `rustdrills.ui.success(message)` print a
red or green line prefixed with a symbol and return the plain text. Set the
`NO_EMOJI` environment variable to get `!` and `✓` instead of emoji.

## What it does not do

There is no command-line program. The package does not compile, run or
test exercise files, does not read an exercise list, does not track which
exercises are done, has no watch mode and cannot reset or show hints for
exercises. It offers the library pieces described above and nothing more.