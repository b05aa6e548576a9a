# iqnotifier

The core of a desktop notification daemon that follows the freedesktop
notification model. It turns incoming `Notify` requests into notifications,
runs them through a chain of modifiers, places popups on screen from the top
down, queues the ones that do not fit, keeps a history and reads the look of
popups, the tray icon and the history window from a theme file.

## Installation

```
pip install iqnotifier
```

To run the tests:

```
pip install "iqnotifier[test]"
pytest
```

## Modules

- `iqnotifier.notification`: the `Notification` and `DBusNotification`
  dataclasses, the `ClosingReason` and `ExpireTimeout` enums, the abstract
  `NotificationModifier` and `NotificationReceiver` bases, and `Signal`, a
  list of callables called in connection order on every `emit`.
- `iqnotifier.config`: `Config` reads and writes INI settings of one
  category in a file under `config_dir()` (`$XDG_CONFIG_HOME/iq-notifier`,
  or `~/.config/iq-notifier`). A missing file is copied from
  `<share_dir>/<file>.example` (by default `/usr/share/iq-notifier`); for the
  default theme the shared `themes` directory is copied. `value(key,
  default)` converts the stored value to the type of `default` and raises
  `ValueError` when it cannot. `Configurable` gives a part its own category
  and an `is_enabled()` switch read from the `enabled` key.
  `application_name()` and `application_version()` return `iq-notifier`
  and `0.4.1`.
- `iqnotifier.modifiers`: `IDGenerator` (consecutive ids for notifications
  that replace nothing), `IconHandler` (turns image hints and icon names into
  cached PNG files and `file://` URLs), `DefaultTimeout` (replaces a negative
  timeout with the configured `default_timeout`, 3500 ms if unset),
  `TitleToIcon`, `BodyToTitleWhenTitleIsAppName` and `ReplaceMinusToDash`
  (" - " becomes " — " in title and body).
- `iqnotifier.dbusservice`: `DBusService` holds the modifier chain and the
  notification-server methods `get_capabilities()`,
  `get_server_information()` (a `ServerInformation` named tuple), `notify()`
  and `close_notification()`. `connect_receiver()` wires a
  `NotificationReceiver` to its `create_notification` and
  `drop_notification` signals and forwards the receiver's results to
  `action_invoked` and `notification_closed`. `add_modifier()` skips a
  `Configurable` modifier whose section does not have `enabled=true`.
- `iqnotifier.disposition`: geometry types `Point`, `Size`, `Margins`,
  `Rect` (inclusive right and bottom edges) and `Screen`, plus the abstract
  `Disposition` and `FullscreenDetector`.
- `iqnotifier.topdown`: `TopDown`, a `Disposition` that stacks popups down
  the right-hand edge and keeps room at the bottom for the window that
  counts queued popups. Removing a popup moves the later ones up and emits
  `move_notification(id, point)`.
- `iqnotifier.notifications`: `Notifications` places popups through a
  disposition, queues those without room and shows them once space frees
  up, and handles close, action, expiry and drop-all requests. Window sizes,
  spacing and margins come from the `popup_notifications` settings or from
  fractions of the screen size. With a `FullscreenDetector` set it can hold
  back popups while full-screen windows are present.
- `iqnotifier.history`: `History` keeps received notifications newest first;
  `HistoryModel` exposes them by row and `HistoryRole`.
- `iqnotifier.themes`: `Themes` reads `theme_name` from the `theme` settings
  and loads `NotificationsTheme`, `TrayIconTheme` and `HistoryWindowTheme`
  from `themes/<name>/theme`. `HistoryWindowTheme` places its window in a
  screen corner chosen by `WindowPosition`.
- `iqnotifier.expiration`: `ExpirationController`, a single-shot timer whose
  `timeout` is in milliseconds; setting `expiration` starts or stops it, and
  it emits `expired` when it runs out.

## Example

```python
from iqnotifier.dbusservice import DBusService
from iqnotifier.disposition import Rect, Screen
from iqnotifier.modifiers import IDGenerator, ReplaceMinusToDash
from iqnotifier.notifications import Notifications
from iqnotifier.topdown import TopDown

popups = Notifications(TopDown(Screen(Rect(0, 0, 1920, 1080))))
popups.create_notification.connect(
    lambda notification_id, size, pos, *rest: print(notification_id, size, pos)
)

service = DBusService()
service.add_modifier(IDGenerator())
service.add_modifier(ReplaceMinusToDash())  # added only if enabled in the config
service.connect_receiver(popups)

notification_id = service.notify(
    "mail", 0, "", "New message", "Alice - lunch?", [], {}, -1
)
```

Creating `Config`-backed objects creates the configuration directory and, on
first use, copies the example configuration if one is installed.

## What it does not do

- It does not connect to a message bus or register the notification service;
  `DBusService` only provides the methods and signals to wire into one.
- It draws nothing: there are no popup windows, tray icon or history window,
  only the signals, models and theme values a front end would use.
- It ships no `FullscreenDetector` implementation; supply your own.
- It has no command-line program.