# aurakit

Building blocks for desktop-style applications, in plain Python with no
third-party dependencies.

## Modules

- `aurakit.events`: `Event`, `EventArgs` and `ParamEventArgs`. You can
  subscribe handlers, call them with `invoke` (or by calling the event
  itself), and remove them with `unsubscribe` by handler id. A handler id is
  the handler's position in the list, so removing a handler shifts the ids of
  the handlers after it. `len(event)` is the number of handlers.
- `aurakit.flags`: the enumerations `WatcherFlags`, `FileAction`,
  `CredentialCheckStatus`, `PasswordContent` and `ProgressState`.
- `aurakit.strings`: string helpers. It has base64 `encode`/`decode`
  (`decode` returns empty bytes for invalid input), `is_valid_url`, `join`,
  `split`, `split_args`, `trim`, `lower`, `upper`, `replace`, `stoui` and
  `new_guid`.
- `aurakit.codehelpers`: `read_file_bytes`, `write_file_bytes` and
  `last_system_error`.
- `aurakit.version`: `Version` and `VersionType`, for version numbers of the
  form `major.minor.build[-dev]`. `Version.parse` reads a version from text.
  Ordering puts a preview before its stable release.
- `aurakit.updater`: `Updater`, which reads the releases of a GitHub
  repository and returns the newest stable or preview tag through
  `fetch_current_version`. It fetches with `urllib`. You can pass a
  `fetch_json` callable to use another transport.
- `aurakit.appinfo`: `AppInfo` holds the id, name, version, links and
  credits of an application. The URL fields are validated. The module also
  has `url_map_to_list`.
- `aurakit.windowgeometry`: `WindowGeometry`, a window's width, height and
  maximized state.
- `aurakit.credential`: `Credential`, a record of name, URI, username and
  password that is compared and ordered by id.
- `aurakit.passwordstrength`: `PasswordStrength` and `password_strength`.
- `aurakit.directories`: user and system directories. These cover home,
  config, cache, local data, runtime, the XDG user dirs (desktop, documents,
  downloads and so on) and the `PATH`, `XDG_CONFIG_DIRS` and `XDG_DATA_DIRS`
  lists. The `application_*` helpers create a per-application subdirectory.
- `aurakit.configuration`: `ConfigurationBase`, a JSON file named by a key,
  with a `data` dict, `save()` and a `saved` event.
- `aurakit.watcher`: `FileSystemWatcher`. It polls a folder on a background
  thread and invokes `changed` with `FileSystemChangedEventArgs` when
  something is added, removed, modified or renamed. You can filter the
  reported changes by extension. It is a context manager.
- `aurakit.ipc`: `InterProcessCommunicator`. The first instance for an id
  becomes the server. Later instances are clients: `communicate` sends their
  arguments to the server, and the server invokes `command_received` with
  them.
- `aurakit.aura`: `Aura`, the application object. Through it you get:
  - `init` and the app info;
  - a standard-library logger;
  - the IPC instance;
  - platform and packaging checks (Windows, Linux, macOS, Flatpak, Snap);
  - `find_dependency`;
  - `help_url`;
  - per-key configuration objects through `config`.
- `aurakit.taskbar`: `TaskbarItem` holds progress, urgency and count. Once it
  is connected, each change invokes `updated` with launcher entry properties.

## Installing

```
pip install .
```

## Examples

```python
from aurakit.version import Version

assert Version.parse("2024.1.0-beta") < Version.parse("2024.1.0")
print(Version.parse("1.2.3"))  # 1.2.3
```

```python
from aurakit.events import Event, ParamEventArgs

changed = Event()
handler_id = changed.subscribe(lambda args: print(args.param))
changed(ParamEventArgs("hello"))
changed.unsubscribe(handler_id)
```

```python
from aurakit import strings

strings.split("a,b,c", ",")            # ['a', 'b', 'c']
strings.join(["a", "b"], ", ", False)  # 'a, b'
```

## What it does not do

- There is no keyring or credential store. There is no password generator,
  and nothing talks to the system's credential manager. `Credential` is only
  a record.
- `Updater` only finds the latest release. It does not download or install
  updates.
- `TaskbarItem` does not talk to a desktop bus or to the Windows taskbar. It
  only produces the properties through its `updated` event, and sending them
  is left to the application.
- There are no tray icons and no notifications.

## Running the tests

```
pip install .[test]
pytest
```