# filehunt

`filehunt` searches a directory tree for files. It matches either the file
names or the lines inside each file. The pattern is a case-insensitive
substring or a regular expression. Files are scanned by a pool of worker
threads, and a progress bar is shown while the search runs.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Usage

```
filehunt PATH PATTERN [-c] [-r] [-t THREADS] [-b]
```

- `PATH`: the directory to search, recursively. If it is not a directory,
  no files are scanned.
- `PATTERN`: the text or regular expression to look for.
- `-c`, `--content`: match the lines inside files. Without this option, only
  the file name (the last path component) is matched.
- `-r`, `--regex`: treat `PATTERN` as a Python regular expression
  (case-sensitive). Without it, `PATTERN` is a case-insensitive substring.
- `-t`, `--threads`: the number of worker threads, at least 1. The default
  is 4.
- `-b`, `--benchmark`: print performance figures and save the full report
  to `search_report.json` in the current directory.
- `-V`, `--version`: print the version and exit.

An invalid regular expression, or a file-system error while walking the tree
or writing the report, is printed to standard error and the command exits
with status 1.

### Examples

Find every file whose name contains `readme`, in any case:

```
filehunt ~/projects readme
```

Find the lines that define a function in Python sources under `src`:

```
filehunt src "^\s*def \w+" --content --regex
```

Scan with eight threads, print timing details and write the JSON report:

```
filehunt /var/log error -c -t 8 -b
```

## Output

The messages are printed in French. Each file that has matches is listed,
in sorted path order. Content matches show the line number and the whole
matching line; name matches are marked as matching file names. The summary
gives the number of files scanned, the number of matches and the total time.
With `--benchmark` it also gives files per second, the average time per file
and thread utilisation (the share of threads that had files to scan).

How matches are counted:

- a substring pattern reports at most one match per line, the first one;
- a regular expression reports every non-overlapping match on each line;
- when searching contents, a file that cannot be read or is not valid UTF-8
  is treated as empty.

## JSON report

`search_report.json` holds `total_files_scanned`, `total_matches`,
`total_duration`, `results` and `performance`. Each result has `file_path`,
`matches` (each with `line_number`, `content` and `position` as a
`[start, end]` pair) and `scan_duration`. Durations are written as
`{"secs": ..., "nanos": ...}`. A line number of 0 marks a file-name match.

## Library use

```python
from filehunt.config import SearchConfig
from filehunt.engine import SearchEngine

config = SearchConfig(path="docs", pattern="todo", search_content=True)
report = SearchEngine(config).search()
print(report.total_matches)
print(report.to_json())
```

- `filehunt.config`: `SearchConfig`, `build_parser()` and `parse_args()`.
- `filehunt.engine`: `SearchEngine` (with `search()` and `search_file()`)
  and `collect_files()`.
- `filehunt.matchers`: `SimpleMatcher`, `RegexMatcher`, the `Matcher` base
  class and `create_matcher()`. `RegexMatcher` raises `ValueError` for an
  invalid pattern.
- `filehunt.results`: `Match`, `SearchResult`, `PerformanceStats` and
  `SearchReport` (with `to_dict()` and `to_json()`).
- `filehunt.cli`: `format_report()` and `main()`.