# taskdesk

A small desktop task manager. You register an account, log in, and get a
dashboard where you can add tasks, mark them done and delete them. Accounts
and tasks are kept in a local SQLite database file.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
taskdesk
```

This opens an 800×600 window showing the registration screen. The data is
kept in `users.db` in the working directory; another file can be chosen with
`--database`:

```
taskdesk --database tasks.db
```

If the database cannot be opened, the command prints a message and exits
with status 1.

- **Register**: click the *Username* and *Password* fields, type, and press
  *Register*. Both fields must be filled in, and a username can be registered
  only once. Passwords are stored as SHA-256 hex digests, never as plain text.
  After a successful registration you are taken to the login screen.
- **Login**: enter the same username and password and press *Login*. On
  success you are taken straight to your dashboard; otherwise an error
  message is shown.
- Messages on the registration and login screens stay up until the next
  click; typing is ignored while one is shown.
- **Dashboard**: type a title into the task box and press *Add Task*. Each
  task has a *Done* button, which greys it out, and a *Del* button, which
  removes it. Up to 100 tasks are listed per user, oldest first.

Only printable ASCII characters can be typed into the fields, up to 255 per
field. Close the window to quit.

## Using it as a library

The storage layer can be used without the window:

```python
from taskdesk.db import open_database
from taskdesk.accounts import AccountStore, RegistrationError
from taskdesk.store import TaskStore

connection = open_database("users.db")
accounts = AccountStore(connection)
password = "password"
try:
    accounts.register("alice", password)
except RegistrationError:
    pass  # username already taken
assert accounts.login("alice", password)

tasks = TaskStore(connection)
task_id = tasks.add("alice", "Write report")
tasks.mark_complete(task_id)
for task in tasks.fetch("alice"):
    print(task.id, task.title, task.completed)
tasks.delete(task_id)
```

- `taskdesk.db.open_database(path)` opens the file and creates the `users`
  and `tasks` tables if they are missing.
- `taskdesk.accounts.hash_password` returns the hex digest that is stored for
  a password.
- `TaskStore.mark_complete` and `TaskStore.delete` return whether a task
  with that id existed.
- `taskdesk.widgets` holds `Rect` (hit testing) and `TextField` (the
  single-line input used by the window); `taskdesk.ui.App` holds the screen
  state and can be driven with `handle_click`, `handle_char` and
  `handle_backspace` without opening a window.

## What it does not do

There is no way to log out, change a password, edit a task's title or
reopen a completed task. Tasks beyond the first 100 for a user are kept in
the database but not listed.