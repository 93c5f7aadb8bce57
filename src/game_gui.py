import argparse
import sys

import pygame

from game import Board, DEFAULT_WIDTH, DEFAULT_HEIGHT, WIN_TILE
from game_status import GameStatus


pygame.init()


COLORS = {
    'background': (250, 248, 239),
    'grid_background': (121, 121, 121),
    'empty_cell': (188, 188, 188),
    'fallback': (150, 150, 150),
    'text_dark': (119, 110, 101),
    'text_light': (249, 246, 242),
    'game_over': (200, 0, 0),
    'victory': (34, 160, 70),
    # tile colors
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}

MOVE_KEYS = {
    pygame.K_UP: 'up',
    pygame.K_DOWN: 'down',
    pygame.K_LEFT: 'left',
    pygame.K_RIGHT: 'right',
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def get_tile_color(value):
    """get background color for a tile value"""
    if value == 0:
        return COLORS['empty_cell']
    return COLORS.get(value, COLORS['fallback'])


def get_text_color(value):
    """get text color for a tile value"""
    if value <= 4:
        return COLORS['text_dark']
    return COLORS['text_light']


class GameGUI:
    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, target=WIN_TILE):
        """initialize game GUI"""
        self.board = Board(width, height, target=target)
        self.status = self.board.status()

        # GUI settings
        self.cell_size = 100
        self.cell_margin = 10
        self.header_height = 120

        # window size follows the board dimensions
        self.grid_width = width * self.cell_size + (width + 1) * self.cell_margin
        self.grid_height = height * self.cell_size + (height + 1) * self.cell_margin
        self.window_width = max(self.grid_width, 360)
        self.window_height = self.grid_height + self.header_height

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("2048 Game")

        # fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        self.clock = pygame.time.Clock()

    def restart(self):
        """replace the board with a fresh one of the same shape"""
        self.board = Board(self.board.width, self.board.height, target=self.board.target)
        self.status = self.board.status()

    def draw_board(self):
        """draw the game board"""
        self.screen.fill(COLORS['background'])

        self.draw_header()

        grid_rect = pygame.Rect(0, self.header_height, self.grid_width, self.grid_height)
        pygame.draw.rect(self.screen, COLORS['grid_background'], grid_rect)

        for row in range(self.board.height):
            for col in range(self.board.width):
                self.draw_cell(row, col)

    def draw_header(self):
        """draw the header with score, status and instructions"""
        score_text = self.font_large.render(f"Score: {self.board.score}", True, COLORS['text_dark'])
        self.screen.blit(score_text, (20, 20))

        if self.status is GameStatus.OVER:
            instruction_text = f"{self.status} Press R to restart"
            color = COLORS['game_over']
        elif self.status is GameStatus.WON:
            instruction_text = f"{self.status} Press R to play again"
            color = COLORS['victory']
        else:
            instruction_text = "Use arrow keys to move tiles"
            color = COLORS['text_dark']

        instruction_surface = self.font_small.render(instruction_text, True, color)
        self.screen.blit(instruction_surface, (20, 70))

        restart_text = self.font_small.render("Press R to restart, Q or ESC to quit", True, COLORS['text_dark'])
        self.screen.blit(restart_text, (20, 95))

    def draw_cell(self, row, col):
        """draw a single cell of the grid"""
        value = self.board.tile(row, col).value()

        x = col * (self.cell_size + self.cell_margin) + self.cell_margin
        y = row * (self.cell_size + self.cell_margin) + self.cell_margin + self.header_height

        cell_rect = pygame.Rect(x, y, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, get_tile_color(value), cell_rect, border_radius=8)

        if value != 0:
            # choose font size based on number of digits
            if value < 100:
                font = self.font_large
            elif value < 1000:
                font = self.font_medium
            else:
                font = self.font_small

            text_surface = font.render(str(value), True, get_text_color(value))
            text_rect = text_surface.get_rect()
            text_rect.center = (x + self.cell_size // 2, y + self.cell_size // 2)
            self.screen.blit(text_surface, text_rect)

    def handle_keypress(self, key):
        """keyboard input, returns False when the player quits"""
        if key in QUIT_KEYS:
            return False

        if key == pygame.K_r:
            self.restart()
            print("Game restarted!")

        elif key in MOVE_KEYS and self.status is GameStatus.PLAYING:
            self.status = self.board.move(MOVE_KEYS[key])
            if self.status is not GameStatus.PLAYING:
                print(f"{self.status} Score: {self.board.score}")

        return True

    def run(self):
        """main loop"""
        print("2048 Game Started!")
        print(f"Board: {self.board.width}x{self.board.height}, target {self.board.target}")
        print("Use arrow keys to move tiles")
        print("Press R to restart, Q or ESC to quit")
        print()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_keypress(event.key)

            self.draw_board()
            pygame.display.flip()

            # frame rate
            self.clock.tick(60)

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2048 sliding tile puzzle", prog="slide2048")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Number of columns")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Number of rows")
    parser.add_argument("--target", type=int, default=WIN_TILE, help="Tile value that wins the game")
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("board dimensions must be at least 1")
    return args


def main(argv=None):
    args = parse_args(argv)
    try:
        game = GameGUI(args.width, args.height, args.target)
        game.run()
    except Exception as e:
        print(f"Error running game: {e}")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
