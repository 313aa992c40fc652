# quizkit

A small library of self-contained building blocks. It has no dependencies
outside the standard library.

## Modules

### `quizkit.basics`

- `get_sum(numbers)` adds up an iterable of numbers. It returns `0.0` when the
  iterable is empty.
- `get_name(names, key)` looks up `key` in a mapping. It returns `""` when the
  key is missing.

### `quizkit.vectors`

- `Vector(x, y, z)` is a frozen dataclass.
- `square_distance(a, b)` gives the squared Euclidean distance between two
  vectors.
- `distance(a, b)` gives the Euclidean distance between two vectors.
- `closest_vector(origin, vectors)` returns the vector nearest to `origin`. When
  several are equally near, the first of them wins. It returns `None` when there
  are no vectors.

### `quizkit.players`

`PlayerManager` keeps `Player` objects, each with a `name` and an `id`, keyed
by id.

- `create_player(name, player_id)` registers a player and returns it. The name
  is cut to 100 characters. A duplicate id raises `PlayerAlreadyExistError`.
- `get_player_by_id(player_id)` returns the player, or `None`.
- `destroy_player_by_id(player_id)` removes a player.
- `destroy_player(player)` also removes a player. It accepts only the very
  `Player` instance that the manager holds.
- Either destroy method raises `InvalidPlayerError` for an unknown player.
- `destroy_all_players()` removes every player.
- `len(manager)` gives the number of registered players.
- Iterating over the manager yields the registered players.

Both errors derive from `PlayerError`.

### `quizkit.bst`

`BinarySearchTree` is an unbalanced binary search tree of distinct integers.

- `add(value)` returns `False` if the value was already present.
- `remove(value)` returns `False` if the value was absent.
- `contains(value)` reports whether the value is in the tree. The `in`
  operator does the same.

### `quizkit.matchmaking`

`Matchmaking(service)` runs one match request at a time. It works between a
`MatchmakingService` and a `MatchmakingUI`, which are abstract base classes
that you implement.

- `start_match_request(ui)` installs a cancel callback on the UI and asks the
  service for a match.
  - It raises `SessionAlreadyActiveError` if a request is already active.
  - It raises `InvalidRequestError` if the service returns request id `0`.
- `process_service_update(state, data)` queues an update. The service calls it
  with a `MatchState` and a `WaitingState`, `MatchFoundState` or
  `MatchNotFoundState`. Updates that arrive with no active request are ignored.
- A background thread delivers the queued updates to the UI:
  - A waiting update sets the dialog message to
    `"There's N users waiting..."`.
  - A found match calls `on_match_found(host, port)` and ends the session.
  - A failed search calls `on_match_not_found(reason)` and ends the session.
- `process_cancel()` cancels the active request at the service and ends the
  session. It is the callback run when the user presses cancel.
- `process_done()` ends the session and clears the UI's cancel callback.
- `close()` ends any session and stops the background thread. Using the object
  as a context manager calls `close()` on exit.

Progress is reported through the `quizkit.matchmaking` logger at debug level.

## Example

```python
from quizkit.bst import BinarySearchTree
from quizkit.matchmaking import Matchmaking, MatchmakingService, MatchmakingUI
from quizkit.vectors import Vector, closest_vector

tree = BinarySearchTree()
tree.add(4)
tree.add(8)
assert 8 in tree
assert tree.remove(8)

nearest = closest_vector(Vector(0, 0, 0), [Vector(3, 0, 0), Vector(1, 1, 0)])
assert nearest == Vector(1, 1, 0)


class Service(MatchmakingService):
    def request_match(self, callback):
        self.callback = callback
        return 1

    def cancel_match_request(self, request_id):
        pass


class Dialog(MatchmakingUI):
    def set_match_search_state(self, message):
        print(message)

    def on_match_found(self, host, port):
        print("found", host, port)

    def on_match_not_found(self, reason):
        print("not found:", reason)

    def set_user_callback(self, callback):
        self.cancel = callback

    def clear_user_callback(self):
        self.cancel = None


with Matchmaking(Service()) as matchmaking:
    matchmaking.start_match_request(Dialog())
```

## What it does not do

`quizkit.matchmaking` includes no real matchmaking service and no dialog. It
only coordinates implementations of `MatchmakingService` and `MatchmakingUI`
that you supply. None of the modules store anything beyond the lifetime of
their objects.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
quizkit
```

The command prints `Nothing to do!` and exits with status 0.