import gymnasium as gym
from gymnasium import spaces
import numpy as np

from game import Board, DEFAULT_WIDTH, DEFAULT_HEIGHT, WIN_TILE


class Game2048Env(gym.Env):
    """
    gymnasium environment for the 2048 board

    afterstate support:
    - get_afterstate returns the board after the slide, before the random tile
    - step reports it in info so agents can learn from it
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, target=WIN_TILE):
        super().__init__()

        self.width = width
        self.height = height
        self.target = target
        self.board = Board(width, height, target=target)

        # actions -> 4 possible moves
        # 0 = up, 1 = down, 2 = left, 3 = right
        self.action_space = spaces.Discrete(4)

        # raw tile values, not log2
        # the largest reachable tile is 2 ** (cells + 1)
        max_tile = 2 ** (width * height + 1)
        if max_tile <= np.iinfo(np.int32).max:
            dtype = np.int32
        else:
            dtype = np.int64
            max_tile = min(max_tile, np.iinfo(np.int64).max)
        self.observation_space = spaces.Box(
            low=0,
            high=max_tile,
            shape=(height, width),
            dtype=dtype
        )

        self.action_to_direction = {
            0: 'up',
            1: 'down',
            2: 'left',
            3: 'right'
        }

        self.last_afterstate = None

    def _get_observation(self):
        return np.array(self.board.rows(), dtype=self.observation_space.dtype)

    def get_afterstate(self, action):
        """
        get the afterstate: board after move but before random tile

        returns:
            afterstate_board: board after move (None if the move is invalid)
            reward: points earned from merging
            valid: if the move changed the board
        """
        direction = self.action_to_direction[action]
        values, points, moved = self.board.preview(direction)
        if not moved:
            return None, 0, False

        afterstate_board = np.array(values, dtype=self.observation_space.dtype).reshape(self.height, self.width)
        return afterstate_board, points, True

    def reset(self, seed=None, options=None):
        """start a new episode on a fresh board"""
        super().reset(seed=seed)

        # spawns come from the seeded generator so episodes are reproducible
        self.board = Board(self.width, self.height, rng=self.np_random, target=self.target)
        self.last_afterstate = None

        observation = self._get_observation()
        info = {"score": self.board.score}

        return observation, info

    def step(self, action):
        """
        take one step in the environment

        reward is the points earned by merging, no shaping
        """
        afterstate_board, _, valid = self.get_afterstate(action)

        direction = self.action_to_direction[action]
        moved, points = self.board.make_move(direction)
        reward = float(points) if moved else 0.0

        observation = self._get_observation()

        status = self.board.status()
        terminated = self.board.is_game_over()
        truncated = False

        if valid:
            self.last_afterstate = afterstate_board

        info = {
            "score": self.board.score,
            "moved": moved,
            "points_gained": points,
            "afterstate": afterstate_board if valid else None,
            "max_tile": self.board.max_tile(),
            "status": status.value
        }

        return observation, reward, terminated, truncated, info

    def render(self):
        """display the game state"""
        self.board.print_board()
