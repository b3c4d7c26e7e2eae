import dataclasses
import logging
import sys

import pygame

from config import BACKGROUND, FPS, LOG_LEVEL, SEAT_RADIUS, VIEW_H, VIEW_W
from driver import RoundDriver, run_headless
from events import Eliminated, RoundWon
from lobby import RoundSettings, new_round
from render import draw_bomb, draw_participants, load_sprites, seat_positions
from ui import AnswerBox, draw_banner, draw_hud, draw_prompt

logger = logging.getLogger("bomb")

CENTER = (VIEW_W // 2, int(VIEW_H / 2.5))


def reset_round(settings):
    scheduler, roster = new_round(settings)
    driver = RoundDriver(scheduler)
    driver.start(roster, settings.fuse_seconds)
    seats = dict(zip((p.id for p in roster), seat_positions(len(roster), CENTER, SEAT_RADIUS)))
    views = {p.id: p.view() for p in roster}
    return driver, seats, views


def winner_text(event, views):
    if event.participant_id is None:
        return "DRAW - nobody survived"
    return f"{views[event.participant_id].name.upper()} WINS"


def play(settings):
    pygame.init()
    pygame.display.set_caption("Bomb Pass")
    screen = pygame.display.set_mode((VIEW_W, VIEW_H))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 18)
    big_font = pygame.font.SysFont("consolas", 40, bold=True)
    sprites = load_sprites()

    driver, seats, views = reset_round(settings)
    answer = AnswerBox()
    banner = ""
    running = True
    while running:
        clock.tick(FPS)
        current = driver.scheduler.current
        your_turn = current is not None and not current.has_automated_decision
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F5:
                driver.stop()
                driver, seats, views = reset_round(settings)
                answer.clear(); banner = ""
            elif your_turn:
                submitted = answer.handle_event(event)
                if submitted is not None:
                    driver.scheduler.submit(submitted)

        for event in driver.tick():
            if isinstance(event, Eliminated):
                views[event.participant_id] = dataclasses.replace(views[event.participant_id], health=0)
            elif isinstance(event, RoundWon):
                banner = winner_text(event, views)

        snap = driver.scheduler.snapshot()
        for view in snap.participants:
            views[view.id] = view

        screen.fill(BACKGROUND)
        draw_participants(screen, list(views.values()), [seats[pid] for pid in views], snap.current_id, font)
        draw_bomb(screen, CENTER, snap.fuse_seconds, snap.fuse_elapsed, sprites)
        draw_hud(screen, snap, font)
        draw_prompt(screen, snap.prompt, answer, your_turn, font)
        if banner:
            draw_banner(screen, banner, big_font)
        pygame.display.flip()

    driver.stop()
    pygame.quit()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = RoundSettings()
    if "--bots" in argv or "--headless" in argv:
        settings = dataclasses.replace(settings, human=False)
    if "--headless" in argv:
        scheduler, roster = new_round(settings)
        names = {p.id: p.name for p in roster}
        won = run_headless(scheduler, roster, settings.fuse_seconds)
        if won is None:
            return 1
        logger.info("Winner: %s", names.get(won.participant_id, "nobody"))
        return 0
    play(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
