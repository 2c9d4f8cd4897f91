import logging
from typing import Optional, Protocol

from .config import BANNER_COLOR, HUD_TEXT, NEON

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    def score_updated(self, player1: int, player2: int) -> None: ...

    def game_won(self) -> None: ...


class NullPresenter:
    def score_updated(self, player1, player2):
        pass

    def game_won(self):
        pass


class Scoreboard:
    """HUD strip above the playfield: both scores, plus the win banner once someone wins."""

    def __init__(self, winning_score: int):
        self.winning_score = winning_score
        self.player1 = 0
        self.player2 = 0
        self.won = False

    def score_updated(self, player1, player2):
        self.player1, self.player2 = player1, player2
        if player1 == 0 and player2 == 0:
            self.won = False

    def game_won(self):
        if not self.won:
            logger.info("Showing win banner for %s", self.winner_label())
        self.won = True

    def winner_label(self) -> Optional[str]:
        if self.player1 >= self.winning_score:
            return "Player 1"
        if self.player2 >= self.winning_score:
            return "Player 2"
        return None

    def draw(self, surf):
        mid_x = surf.width / 2
        mid_y = surf.height / 2
        surf.draw_text(str(self.player1), (mid_x - 60, mid_y), NEON, 40, align="right")
        surf.draw_text(":", (mid_x, mid_y), HUD_TEXT, 40)
        surf.draw_text(str(self.player2), (mid_x + 60, mid_y), NEON, 40, align="left")
        surf.draw_text("W/S", (16, mid_y), HUD_TEXT, 18, align="left")
        surf.draw_text("Up/Down", (surf.width - 16, mid_y), HUD_TEXT, 18, align="right")

    def draw_banner(self, surf):
        if not self.won:
            return
        surf.fill_rect((0, 0, surf.width, surf.height), (0, 0, 0), alpha=0.6)
        surf.draw_text(f"{self.winner_label()} wins!", (surf.width / 2, surf.height / 2 - 20),
                       BANNER_COLOR, 48)
        surf.draw_text("Press R to play again", (surf.width / 2, surf.height / 2 + 30), HUD_TEXT, 24)
