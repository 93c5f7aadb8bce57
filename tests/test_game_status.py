from game_status import GameStatus


def test_display_text():
    assert str(GameStatus.PLAYING) == ""
    assert str(GameStatus.OVER) == "Game Over!"
    assert str(GameStatus.WON) == "Victory!"


def test_values():
    assert GameStatus("won") is GameStatus.WON
    assert GameStatus.OVER.value == "over"
