"""Registry of players keyed by their identifier."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

MAX_NAME_LENGTH = 100


@dataclass(eq=False)
class Player:
    """A registered player; compared by identity, like the manager does."""

    name: str
    id: int


class PlayerError(Exception):
    """Base class for player registry errors."""


class PlayerAlreadyExistError(PlayerError):
    """Raised when a player with the same identifier is already registered."""


class InvalidPlayerError(PlayerError):
    """Raised when a player to destroy is unknown to the manager."""


class PlayerManager:
    """Creates, looks up and destroys players by identifier.

    Player objects handed out stay valid while registered, however many
    players are added afterwards.
    """

    def __init__(self) -> None:
        self._players: dict[int, Player] = {}

    def create_player(self, name: str, player_id: int) -> Player:
        """Register and return a new player; the name is cut to 100 characters."""
        if player_id in self._players:
            raise PlayerAlreadyExistError(f"player {player_id} already exists")
        player = Player(name=name[:MAX_NAME_LENGTH], id=player_id)
        self._players[player_id] = player
        return player

    def destroy_player_by_id(self, player_id: int) -> None:
        """Remove the player registered under ``player_id``."""
        try:
            del self._players[player_id]
        except KeyError:
            raise InvalidPlayerError(f"no player with id {player_id}") from None

    def destroy_player(self, player: Optional[Player]) -> None:
        """Remove ``player``, which must be the very instance this manager holds."""
        if player is None or self._players.get(player.id) is not player:
            raise InvalidPlayerError("player is not managed here")
        del self._players[player.id]

    def destroy_all_players(self) -> None:
        """Remove every registered player."""
        self._players.clear()

    def get_player_by_id(self, player_id: int) -> Optional[Player]:
        """Return the player registered under ``player_id``, or None."""
        return self._players.get(player_id)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))