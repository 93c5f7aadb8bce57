from enum import Enum


class GameStatus(Enum):
    """status the game is currently in"""
    PLAYING = 'playing'
    OVER = 'over'
    WON = 'won'

    def __str__(self):
        # text shown in the header
        if self is GameStatus.OVER:
            return "Game Over!"
        if self is GameStatus.WON:
            return "Victory!"
        return ""
