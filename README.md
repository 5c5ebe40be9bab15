# braincli

A command-line tool for working through a project plan kept as a task graph
in `docs/state/tasks.yaml`.

The project root is found by walking up from the current directory until a
directory containing `BRAIN.md` is reached. All other files are read and
written relative to that root.

## Installation

```
pip install .
```

This installs the `brain` command. To run the tests:

```
pip install .[test]
pytest
```

## Commands

```
brain next              # list tasks that are pending/todo and whose needs are all completed
brain context <id>      # print the task header, then its context
brain verify <id>       # check the task's acceptance criteria, then run `cargo test` in docs/scripts
brain conclude <id>     # mark the task completed (also: done)
brain reflect <id>      # print the task as JSON and write a placeholder ADR
brain prompt <role>     # print docs/prompts/<role>.md
brain configure         # prints that there is nothing to configure
```

Short aliases: `c` (context), `v` (verify), `n` (next), `r` (reflect),
`d` or `done` (conclude), `p` (prompt).

When a command fails, an error message is printed to standard error and the
exit status is 1.

### Interactive shell

Running `brain` with no command (or with arguments that cannot be parsed)
opens an interactive shell. Each turn prints the budget status line and the
tasks that can be started now, then reads a command such as
`context TASK-2`. Type `exit`, or send end of input, to leave.

## Task file

```yaml
version: 1
tasks:
  - id: TASK-1
    label: Set up the project
    status: completed
    needs: []
  - id: TASK-2
    label: Add dependencies
    goal: Add the HTTP client dependency
    status: pending
    needs: [TASK-1]
    contextQuery:
      prompt: Add the client crate
      tokenBudget: 2000
    acceptanceCriteria:
      - description: Manifest lists the client
        type: text_check
        file: Cargo.toml
        assertion: contains_string
        value: reqwest
```

`id`, `label`, `status` and `needs` are required on every task; `goal`,
`contextFiles`, `contextQuery`, `acceptanceCriteria` and `testFile` are
optional.

### What the commands do with it

- `next` lists tasks with status `pending` or `todo` whose `needs` are all
  `completed`.
- `context` prints the task's ID, label, goal and acceptance criteria. With a
  `contextQuery` it prints a context package header (query, token budget,
  project root); with `contextFiles` it prints each listed file's content.
- `verify` evaluates each acceptance criterion. `file_exists` passes when the
  file exists; `text_check` needs a `value` and supports the assertions
  `contains_string` (the default) and `not_contains_string`. Unknown check or
  assertion types are reported as skipped and count as passing. A `pending`
  task without criteria is an error. If all criteria pass, `cargo test` is run
  in `docs/scripts` and must succeed.
- `conclude` sets the task's status to `completed`, rewrites `tasks.yaml`
  atomically (through a temporary file), and stores the SHA-256 of the new
  content in `.brain/manifest.json` under `tasks_yaml_sha256`. The file is
  written out from the parsed data, so comments and original formatting are
  not kept.
- `reflect` prints the task as JSON and writes
  `docs/history/ADR-<id>_<label>.md`, where the label is lower-cased, spaces
  become underscores and `/` and `:` are removed.

## What it does not do

- There is no database: `open_db_connection` only returns a handle for
  `.brain_db.sqlite3` and nothing is stored. Version snapshots made on
  `conclude` are not recorded and always get ID 0.
- Context packages do not search the code: the package built for a
  `contextQuery` holds only its header and reports no symbols found.
- `reflect` writes a placeholder ADR; no text is generated for it.
- The budget status line is fixed at `[Budget: $0.00 / $20.00]`; no spending
  is tracked.
- `configure` has no settings to change.

## Library use

The modules can be used directly:

```python
from pathlib import Path

from braincli.loader import load_task_graph
from braincli.model import TaskNotFoundError

graph = load_task_graph(Path("."))
try:
    task = graph.find("TASK-2")
except TaskNotFoundError as exc:
    print(exc)
else:
    print(task.label, task.status)
```

Other entry points include `braincli.state.AppState.create()`,
`braincli.scheduler.get_next_tasks(state)`,
`braincli.manifest.read_manifest(root)` / `write_manifest(root, manifest)`,
`braincli.manifest.calculate_file_hash(path)` and
`braincli.verifier.check_text(path, assertion, value)`. Errors are raised as
`braincli.model.BrainError` or one of its subclasses.