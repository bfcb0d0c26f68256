from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from falling_blocks.game import FallingBlockGame, GameState, PieceType


Color = Tuple[int, int, int]

PIECE_COLORS: Dict[PieceType, Color] = {
    PieceType.SQUARE: (240, 0, 0),
    PieceType.T: (240, 240, 0),
    PieceType.L: (0, 0, 240),
    PieceType.INV_L: (0, 240, 0),
    PieceType.BAR: (0, 240, 240),
    PieceType.S: (240, 0, 240),
    PieceType.INV_S: (160, 0, 240),
}
LOCKED_COLOR: Color = (150, 150, 160)
WALL_COLOR: Color = (0, 0, 0)
EMPTY_COLOR: Color = (20, 20, 26)


def color_for(piece_type: Optional[PieceType]) -> Color:
    if piece_type is None:
        return LOCKED_COLOR
    return PIECE_COLORS.get(piece_type, (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 22, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, game: FallingBlockGame) -> Tuple[int, int]:
        # walls on both sides and the floor
        w = (game.board.width + 2) * self.cell_size + self.margin * 2
        h = (game.board.height + 1) * self.cell_size + self.margin * 2
        return w, h

    def _cell_rect(self, game: FallingBlockGame, x: int, y: int) -> pygame.Rect:
        top = self.margin + (game.board.height - y) * self.cell_size
        left = self.margin + x * self.cell_size
        return pygame.Rect(left, top, self.cell_size - 1, self.cell_size - 1)

    def _board_surface(self, game: FallingBlockGame, size: Tuple[int, int]) -> pygame.Surface:
        surf = pygame.Surface(size)
        surf.fill((10, 10, 14))
        board = game.board
        for y in range(0, board.height + 1):
            for x in range(0, board.width + 2):
                if board.is_wall(x, y):
                    color = WALL_COLOR
                elif board.is_occupied((x, y)):
                    color = LOCKED_COLOR
                else:
                    color = EMPTY_COLOR
                pygame.draw.rect(surf, color, self._cell_rect(game, x, y))
        if game.piece is not None:
            color = color_for(game.piece.piece_type)
            for x, y in game.piece_cells():
                if y <= board.height:
                    pygame.draw.rect(surf, color, self._cell_rect(game, x, y))
        return surf

    def draw(self, screen: pygame.Surface, game: FallingBlockGame, font: Optional[pygame.font.Font] = None) -> None:
        screen.blit(self._board_surface(game, screen.get_size()), (0, 0))
        if font is not None:
            text = font.render(f"score {game.score}  level {game.level}  lines {game.lines_cleared}",
                               True, (255, 255, 255))
            screen.blit(text, (self.margin, 2))
            if game.state is not GameState.IN_GAME:
                label = "GAME OVER" if game.state is GameState.GAME_OVER else "paused"
                banner = font.render(label, True, (255, 80, 80))
                rect = banner.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
                screen.blit(banner, rect)
        pygame.display.flip()
