"""User interface helpers.

The answer box turns key presses into a submitted response; the draw
helpers put the prompt, the HUD and the end-of-round banner on screen.  None
of them touch round state, they only read a :class:`RoundSnapshot`.
"""

from __future__ import annotations

import pygame

from config import ANSWER_MAX_LEN, PANEL, PANEL_EDGE, WHITE, GREY, YELLOW


# ---------------------------------------------------------------------------
# Answer box
# ---------------------------------------------------------------------------

class AnswerBox:
    """Text field the human types answers into."""

    def __init__(self, max_len: int = ANSWER_MAX_LEN):
        self.text = ""
        self.max_len = max_len

    def clear(self) -> None:
        self.text = ""

    def handle_event(self, event) -> str | None:
        """Feed one pygame event; returns the text when RETURN submits it."""
        if event.type != pygame.KEYDOWN:
            return None
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            submitted, self.text = self.text, ""
            return submitted
        if event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.text) < self.max_len:
            self.text += event.unicode
        return None


# ---------------------------------------------------------------------------
# Prompt / HUD
# ---------------------------------------------------------------------------

def draw_prompt(surface: pygame.Surface, prompt, answer: AnswerBox, your_turn: bool, font) -> None:
    """Render the bomb's challenge and the answer box along the bottom edge."""

    panel = pygame.Surface((surface.get_width(), 64))
    panel.fill(PANEL)
    pygame.draw.rect(panel, PANEL_EDGE, panel.get_rect(), 2)
    if prompt:
        panel.blit(font.render(f"Bomb: {prompt}", True, YELLOW), (16, 8))
    hint = "> " + answer.text + ("_" if your_turn else "")
    panel.blit(font.render(hint, True, WHITE if your_turn else GREY), (16, 34))
    surface.blit(panel, (0, surface.get_height() - 64))


def draw_hud(surface: pygame.Surface, snapshot, font) -> None:
    text = f"Fuse: {snapshot.fuse_remaining:4.1f}s   Left: {sum(p.alive for p in snapshot.participants)}"
    surface.blit(font.render(text, True, WHITE), (16, 16))
    surface.blit(font.render("F5 restart | ESC quit", True, GREY), (16, 40))


def draw_banner(surface: pygame.Surface, text: str, font) -> None:
    t = font.render(text, True, YELLOW)
    surface.blit(t, (surface.get_width() // 2 - t.get_width() // 2, surface.get_height() // 2 - t.get_height() // 2))
