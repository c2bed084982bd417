"""Game-wide tuning values, map geometry and wire command prefixes."""

# Snake
SNAKE_INITIAL_LENGTH = 5
SNAKE_SPEED = 1.0
SNAKE_SPEED_ACCELERATE = 2.0
SNAKE_SPEED_PLUS = 0.2
SNAKE_SPEED_SLOW = 0.5
SNAKE_DOT_SPEED = 0.7
SNAKE_SPEED_AFTER_SEC = 50
SNAKE_SPEED_BOOST = 3.0
SNAKE_SKIN_COLOR_RANGE = 255
SNAKE_ROTATE_SPEED = 5.0
SNAKE_NODE_SPACE = 0.0
SNAKE_NODE_INITIAL_DISTANCE = 7.071067811865475  # sqrt(50)
SNAKE_INITIAL_SIZE = 17.0
SNAKE_IT_IS_TIME_TO_SHORTER = 20
SNAKE_MAX_NODES = 500

# Bait
MAX_BAIT_COLOR_RANGE = 255
MAX_BAIT_SIZE = 10.0
MIN_BAITS = 0
MAX_BAITS = 1000
MAX_BAITS_SIZE_ON_DEAD = 15

# Map
MAP_WIDTH = 2000.0
MAP_HEIGHT = 2000.0
BORDER_WIDTH = 4000.0
BORDER_HEIGHT = 4000.0
MAP_X = BORDER_WIDTH - MAP_WIDTH / 2.0
MAP_Y = BORDER_HEIGHT - MAP_HEIGHT / 2.0
OFFSET_X = 800.0
OFFSET_Y = 800.0
TRUE_MAP_WIDTH = 3200.0
TRUE_MAP_HEIGHT = 3200.0

# Game
GAME_LOOP_DELAY = 10  # milliseconds
SERVER_IP = "0.0.0.0"
SERVER_PORT = 3000
SERVER_CURRENT_UPDATE_PLAYER_METHOD = 2  # 1: old, 2: new
SERVER_CURRENT_SENDING_PLAYER_METHOD = 2  # 2: all nodes, 21: head only
SERVER_UPDATE_ENEMY_METHOD = 6  # 6: all nodes, 61: head only
PLAYER_TIMEOUT_SECS = 30

# Commands
COMM_START_NEW_MESS = "$"
COMM_NEW_SNAKE = "1,"
COMM_UPDATE_SNAKE = "2,"
COMM_UPDATE_SNAKE_HEAD_ONLY = "21,"
COMM_NEW_BAIT = "3,"
COMM_DELETE_BAIT = "4,"
COMM_NEW_ENEMY = "5,"
COMM_UPDATE_ENEMY = "6,"
COMM_DEAD_ENEMY = "7,"
COMM_DIE = "8,"
COMM_ENEMY_NAME = "9,"
COMM_SNAKE_ACCELERATING = "10,"