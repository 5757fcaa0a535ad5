"""Format documentation printed by `matrix-reloaded --instructions`."""

INSTRUCTIONS = """# Decision Matrix Format

Create decision matrices as JSON files in `.decisions/` directory.

## Schema

```json
{
  "decision": {
    "statement": "Question being decided",
    "description": "Context and constraints"
  },
  "options": [
    { "label": "Option A", "description": "Details about option A" },
    { "label": "Option B", "description": "Details about option B" }
  ],
  "criteria": [
    {
      "name": "Criteria Name",
      "cells": {
        "Option A": { "text": "Assessment", "color": "green" },
        "Option B": { "text": "Assessment", "color": "red" }
      }
    }
  ]
}
```

## Colors

Default to no coloring (neutral). Use colors sparingly:

- `red`: Blocker - eliminates this option
- `yellow`: Notably negative aspect
- `green`: Notable good aspect - significant benefit over at least some or all of the other options
- (omit): Neutral

## Example

```json
{
  "decision": {
    "statement": "Which database for the reporting service?",
    "description": "Read-heavy workload, a few million rows, small team"
  },
  "options": [
    { "label": "PostgreSQL", "description": "Mature relational database" },
    { "label": "SQLite", "description": "Embedded, single file" },
    { "label": "DuckDB", "description": "Embedded, columnar analytics" }
  ],
  "criteria": [
    {
      "name": "Operations",
      "cells": {
        "PostgreSQL": { "text": "Needs a server to run and back up", "color": "yellow" },
        "SQLite": { "text": "Nothing to operate", "color": "green" },
        "DuckDB": { "text": "Nothing to operate", "color": "green" }
      }
    },
    {
      "name": "Concurrent writers",
      "cells": {
        "PostgreSQL": { "text": "Handles many writers", "color": "green" },
        "SQLite": { "text": "One writer at a time" },
        "DuckDB": { "text": "Single process only", "color": "red" }
      }
    }
  ]
}
```

## Usage

Save as `.decisions/<name>.json` and run `matrix-reloaded` to view.
The spreadsheet is written next to it as `.decisions/<name>.xlsx`.
"""


def print_instructions() -> None:
    print(INSTRUCTIONS)
