GAME_LENGTH = 11
MATCH_LENGTH = 3
WIN_BY = 2

# Points served before the serve passes. Drops to one point at deuce.
SERVE_INTERVAL = 2

PLAYER_COUNT = 2
PLAYER_NAME_TEMPLATE = "Player {number}"

SERVER_TOKEN = "server"
