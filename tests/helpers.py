from lineup_setter.models import Availability, Player


def make_player(player_id, positions, availability=Availability.PLAYING, rank=100, name=None):
    """Build a player with sensible defaults."""
    return Player(
        id=player_id,
        name=name or f"Player {player_id}",
        positions=positions,
        availability=availability,
        rank=rank,
    )


def ids(players):
    return [p.id for p in players]
