from typing import Sequence

from score.components.player import Player
from score.components.token import Token
from score.errors import EmptyRingError, TokenRingReentryError


class TokenRing:
    """Passes a token around the players in a fixed order.

    Used wherever a role rotates regularly: the dealer in a card game, the
    server in ping pong. Set the first holder directly on the token, or let
    the first next() pick player 0 (previous() picks the last player):

        players = Players.from_names(["Ann", "Bob", "Cat", "Dan"])
        token = Token("dealer", event_bus)
        ring = TokenRing(players, token)
        token.assign(players[1])
        ring.next()        # Cat deals
        ring.previous()    # back to Bob

    Change notification belongs to the token. Rotating the same ring again
    from inside that notification raises TokenRingReentryError.
    """

    def __init__(self, players: Sequence[Player], token: Token):
        self.players = players
        self.token = token
        self._rotating = False

    def next(self) -> None:
        """Advance the token to the next player, wrapping to the first."""
        last = self._last_index()
        holder = self.token.current_holder()
        current = holder.id if holder is not None else last
        self._pass_to(current + 1 if current != last else 0)

    def previous(self) -> None:
        """Roll the token back to the previous player, wrapping to the last."""
        last = self._last_index()
        holder = self.token.current_holder()
        current = holder.id if holder is not None else 0
        self._pass_to(current - 1 if current != 0 else last)

    def _last_index(self) -> int:
        if self._rotating:
            raise TokenRingReentryError(f"token {self.token.name!r} is already being passed")
        if len(self.players) == 0:
            raise EmptyRingError(f"no players to pass token {self.token.name!r} to")
        return len(self.players) - 1

    def _pass_to(self, index: int) -> None:
        self._rotating = True
        try:
            self.token.assign(self.players[index])
        finally:
            self._rotating = False
