"""User domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a stored user.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Unique identifier. None until the store assigns one on insert.
        login: Login name, letters and digits only
        first_name: Given name
        last_name: Family name
        games_played: Number of finished games
        current_game_id: Game the user is currently playing, if any
    """

    id: UUID | None
    login: str
    first_name: str
    last_name: str
    games_played: int = 0
    current_game_id: UUID | None = None
