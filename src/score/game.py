from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional

from score.components.game_options import GameOptions
from score.components.player import Players
from score.components.tally import Tally
from score.events.bus import (
    EventBus,
    EVENT_GAMES_CHANGED,
    EVENT_GAMES_RESET,
    EVENT_SCORE_CHANGED,
    EVENT_SCORES_RESET,
)
from score.tts.talker import LoggingTalker, Talker

if TYPE_CHECKING:
    from score.features.match import MatchFeature
    from score.features.scores import ScoresFeature
    from score.features.server import ServerFeature


class Game:
    """Central score keeping state shared by features, rules and announcers.

    Holds no behaviour of its own: features and rules are constructed with the
    game and its event bus and react to the events the tallies emit.
    """

    def __init__(
        self,
        event_bus: EventBus,
        options: Optional[GameOptions] = None,
        players: Optional[Players] = None,
        talker: Optional[Talker] = None,
    ):
        self.event_bus = event_bus
        self.options = options if options is not None else GameOptions()
        self.players = players if players is not None else Players.default()
        self.talker = talker if talker is not None else LoggingTalker()
        self.scores = Tally(event_bus, len(self.players), EVENT_SCORE_CHANGED, EVENT_SCORES_RESET)
        self.games = Tally(event_bus, len(self.players), EVENT_GAMES_CHANGED, EVENT_GAMES_RESET)
        # Filled in by create_game; a bare Game has nothing attached.
        self.scoring: Optional["ScoresFeature"] = None
        self.match: Optional["MatchFeature"] = None
        self.server: Optional["ServerFeature"] = None
        self.rules: List[object] = []
        self.announcers: List[object] = []

    def player_name(self, index: int) -> str:
        return self.players[index].name


def create_game(
    event_bus: EventBus,
    options: GameOptions | Mapping[str, Any] | None = None,
    *,
    player_names: Iterable[str] | None = None,
    talker: Optional[Talker] = None,
    first_server: int | None = None,
    with_announcers: bool = True,
) -> Game:
    """Build a game wired with the standard table tennis features and rules.

    The feature, rule and announcer instances are reachable as attributes of
    the returned game (``game.scoring``, ``game.match``, ``game.server``).
    """
    from score.features.match import MatchFeature
    from score.features.scores import ScoresFeature
    from score.features.server import ServerFeature
    from score.rules.win_game_by_two import WinGameByTwoRule
    from score.rules.win_match_best_of import WinMatchBestOfRule
    from score.tts.game_winner import GameWinnerAnnouncer
    from score.tts.match_winner import MatchWinnerAnnouncer
    from score.tts.score_caller import ScoreCaller

    if isinstance(options, Mapping):
        options = GameOptions.from_mapping(options)
    players = Players.from_names(player_names) if player_names is not None else None
    game = Game(event_bus, options=options, players=players, talker=talker)

    game.scoring = ScoresFeature(game, event_bus)
    game.match = MatchFeature(game, event_bus)
    game.server = ServerFeature(game, event_bus, first_server=first_server)
    game.rules = [
        WinGameByTwoRule(game, event_bus),
        WinMatchBestOfRule(game, event_bus),
    ]
    game.announcers = []
    if with_announcers:
        game.announcers = [
            ScoreCaller(game, event_bus),
            GameWinnerAnnouncer(game, event_bus),
            MatchWinnerAnnouncer(game, event_bus),
        ]
    return game
