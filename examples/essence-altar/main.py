"""Essence Altar: splash, intro, altar hub, briefing, and the matching puzzle.

Exercises altar-layout, altar-match, and altar-scene.

Controls:
  Click   Start / pick an essence / drag catalysts / return to altar
  Resize  Window is resizable; the puzzle re-lays itself out
  Esc     Quit
"""
from __future__ import annotations

import logging
import os
import sys

import pygame

from altar_layout import Viewport, hit_plane_contains, pick, solve, to_world
from altar_match import PuzzleSpec, puzzle_for_essence
from altar_scene import (
    COLLECT_DELAY_TICKS,
    ESSENCE_COLLECTED,
    PUZZLE_COMPLETE,
    SCENE_CHANGED,
    Briefing,
    Countdown,
    PuzzleSession,
    Scene,
    SceneMachine,
    SignalBus,
    bridge_transitions,
)

from game.hub import altar_essences, bob_offset, essence_radius
from ui.altar import draw_altar
from ui.briefing import draw_briefing
from ui.constants import (
    CATALYST_SIZE,
    FPS,
    INTRO_TICKS,
    SCREEN_H,
    SCREEN_W,
    SPLASH_DELAY_TICKS,
    TPS,
)
from ui.intro import draw_intro
from ui.puzzle import draw_board, draw_overlay, return_button_rect
from ui.splash import draw_splash, start_button_rect

logger = logging.getLogger("essence_altar")


class GameState:
    """Holds the scene machine and whatever the current scene has mounted."""

    def __init__(self, width: int, height: int) -> None:
        self.machine = SceneMachine(Scene.SPLASH)
        self.bus = SignalBus()
        bridge_transitions(self.machine, self.bus)
        self.bus.subscribe(SCENE_CHANGED, self._on_scene_changed)
        self.bus.subscribe(PUZZLE_COMPLETE, self._on_puzzle_complete)
        self.bus.subscribe(ESSENCE_COLLECTED, self._on_essence_collected)

        self.viewport = Viewport.from_window(width, height)
        self.layout = solve(width, height)
        self.elapsed = 0.0

        self.splash_delay: Countdown | None = None
        self.intro: Countdown | None = None
        self.puzzle: PuzzleSpec | None = None
        self.briefing: Briefing | None = None
        self.session: PuzzleSession | None = None

    # -- Signals --

    def _on_scene_changed(self, signal: str, data: dict) -> None:
        new = data["new"]
        if new is Scene.INTRO:
            self.intro = Countdown("intro", INTRO_TICKS)
        elif new is Scene.GAME:
            self.briefing = None
            self.session = None
        elif new is Scene.PUZZLE_BRIEFING:
            self._mount_briefing()
        elif new is Scene.PUZZLE_ORACLE:
            self._mount_puzzle()

    def _on_puzzle_complete(self, signal: str, data: dict) -> None:
        logger.info("Essence %d synchronized", data["essence_id"])

    def _on_essence_collected(self, signal: str, data: dict) -> None:
        logger.info(
            "Inventory now holds essences %s", sorted(self.machine.collected_essences)
        )

    def _mount_briefing(self) -> None:
        active = self.machine.active_essence
        self.puzzle = puzzle_for_essence(active) if active is not None else None
        if self.puzzle is None:
            logger.warning("No puzzle for essence %r, back to the altar", active)
            self.machine.return_to_altar()
            return
        self.briefing = Briefing(self.puzzle.briefing, self.machine.go_to_puzzle)

    def _mount_puzzle(self) -> None:
        self.briefing = None
        if self.puzzle is None:
            logger.warning("Puzzle scene entered without a briefing, back to the altar")
            self.machine.return_to_altar()
            return
        self.session = PuzzleSession(
            self.puzzle, self.machine, self.bus, self.layout,
            collect_delay=COLLECT_DELAY_TICKS,
        )

    # -- Host events --

    def resize(self, width: int, height: int) -> None:
        self.viewport = Viewport.from_window(width, height)
        layout = solve(width, height)
        if layout != self.layout:
            self.layout = layout
            if self.session is not None:
                self.session.resize(layout)

    def click(self, surface: pygame.Surface, pos: tuple[int, int]) -> None:
        scene = self.machine.scene
        if scene is Scene.SPLASH:
            if self.splash_delay is None and start_button_rect(surface).collidepoint(pos):
                self.splash_delay = Countdown("splash", SPLASH_DELAY_TICKS)
        elif scene is Scene.GAME:
            x, y = to_world(pos[0], pos[1], self.viewport, self.layout)
            for essence in altar_essences():
                interactive = not self.machine.is_collected(essence.id)
                if not interactive:
                    continue
                ey = essence.y + bob_offset(self.elapsed, interactive)
                radius = essence_radius(interactive)
                if pick(x, y, [(essence.id, (essence.x, ey))], radius) is not None:
                    self.machine.start_puzzle(essence.id)
                    break
        elif scene is Scene.PUZZLE_ORACLE and self.session is not None:
            if return_button_rect(surface).collidepoint(pos):
                self.session.leave()
                return
            x, y = to_world(pos[0], pos[1], self.viewport, self.layout)
            free = [(t.id, t.position) for t in self.session.engine.tokens if not t.is_matched]
            token_id = pick(x, y, free, CATALYST_SIZE * self.layout.scale_factor / 2)
            if token_id is not None:
                self.session.pointer_down(token_id)

    def motion(self, pos: tuple[int, int]) -> None:
        if self.session is None or self.machine.scene is not Scene.PUZZLE_ORACLE:
            return
        x, y = to_world(pos[0], pos[1], self.viewport, self.layout)
        if hit_plane_contains(x, y, self.layout):
            self.session.pointer_move(x, y)

    def release(self) -> None:
        if self.session is not None and self.machine.scene is Scene.PUZZLE_ORACLE:
            self.session.pointer_up()

    # -- Fixed-rate tick --

    def tick(self) -> None:
        scene = self.machine.scene
        if scene is Scene.SPLASH and self.splash_delay is not None:
            if self.splash_delay.tick():
                self.splash_delay = None
                self.machine.show_intro()
        elif scene is Scene.INTRO and self.intro is not None:
            if self.intro.tick():
                self.intro = None
                self.machine.start_game()
        elif scene is Scene.PUZZLE_BRIEFING and self.briefing is not None:
            self.briefing.tick()
        elif scene is Scene.PUZZLE_ORACLE and self.session is not None:
            self.session.tick()

    # -- Render --

    def draw(self, surface: pygame.Surface) -> None:
        scene = self.machine.scene
        mouse = pygame.mouse.get_pos()
        if scene is Scene.SPLASH:
            hovered = start_button_rect(surface).collidepoint(mouse)
            draw_splash(surface, hovered, loading=self.splash_delay is not None)
        elif scene is Scene.INTRO:
            remaining = self.intro.remaining if self.intro is not None else 0
            draw_intro(surface, 1.0 - remaining / INTRO_TICKS)
        elif scene is Scene.GAME:
            draw_altar(surface, self.viewport, self.layout, self.machine, self.elapsed)
        elif scene is Scene.PUZZLE_BRIEFING:
            draw_briefing(surface, self.briefing)
        elif scene is Scene.PUZZLE_ORACLE and self.session is not None:
            draw_board(surface, self.session.engine, self.viewport)
            puzzle = self.session.puzzle
            hovered = return_button_rect(surface).collidepoint(mouse)
            draw_overlay(surface, puzzle.title, puzzle.subtitle, self.session.status, hovered)


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("ALTAR_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Essence Altar")
    clock = pygame.time.Clock()

    state = GameState(SCREEN_W, SCREEN_H)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt
        state.elapsed += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                state.resize(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.click(screen, event.pos)
            elif event.type == pygame.MOUSEMOTION:
                state.motion(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.release()

        # --- Tick at fixed rate ---
        while accumulator >= tick_interval:
            state.tick()
            accumulator -= tick_interval

        state.bus.flush()

        # --- Render ---
        state.draw(screen)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
