"""pygame front end: window, fixed-step frame driver, input mapping and drawing.

Controls: Left/Right or A/D change lane; clicking or tapping the left or right
half of the window does the same. Enter, Space or the on-screen button starts
a run. ESC quits.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import pygame

from .config import (
    COLOR_BAD,
    COLOR_BAR_HIGH,
    COLOR_BAR_LOW,
    COLOR_BAR_MID,
    COLOR_BLUSH,
    COLOR_BODY,
    COLOR_BUTTON,
    COLOR_BUTTON_TEXT,
    COLOR_FACE,
    COLOR_GOOD,
    COLOR_HANDS,
    COLOR_HUD_BG,
    COLOR_HUD_TEXT,
    COLOR_LANE_DIVIDER,
    COLOR_OVERLAY,
    COLOR_ROAD,
    DASH_LENGTH,
    DASH_PERIOD,
    FIXED_DT,
    FPS,
    LEAN_FACTOR,
    GameConfig,
)
from .entities import ItemKind, Mood
from .simulation import ItemView, Phase, PlayerView, Simulation, Snapshot

logger = logging.getLogger(__name__)

MOOD_LABELS = {
    Mood.HAPPY: "Happy",
    Mood.NEUTRAL: "Okay",
    Mood.SAD: "Sad",
    Mood.SICK: "Sick",
}

LEFT = "left"
RIGHT = "right"


# --------------------------------------------------------------------------------------
# Display-free helpers
# --------------------------------------------------------------------------------------
def meter_color(meter: float) -> Tuple[int, int, int]:
    if meter > 50:
        return COLOR_BAR_HIGH
    if meter > 25:
        return COLOR_BAR_MID
    return COLOR_BAR_LOW


def lean_degrees(displacement: float) -> float:
    return displacement * LEAN_FACTOR


def lane_command_for_click(x: float, width: float) -> str:
    return LEFT if x < width / 2 else RIGHT


def format_distance(distance: float) -> str:
    return f"{int(math.floor(distance))}m"


# --------------------------------------------------------------------------------------
# HUD and menu screens
# --------------------------------------------------------------------------------------
class HUD:
    """Renders the score line, balance bar and the start / game-over panels."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.font_small = pygame.font.Font(None, 24)
        self.font_large = pygame.font.Font(None, 34)
        self.font_title = pygame.font.Font(None, 64)
        self.screen = screen
        self.button_rect = pygame.Rect(0, 0, 180, 54)
        self.bar_height = 16
        self.panel_height = 64

    def _layout(self) -> None:
        width, height = self.screen.get_size()
        self.button_rect.center = (width // 2, height // 2 + 90)

    def button_at(self, pos: Tuple[int, int]) -> bool:
        self._layout()
        return self.button_rect.collidepoint(pos)

    def draw(self, snapshot: Snapshot) -> None:
        width = self.screen.get_width()
        panel = pygame.Surface((width, self.panel_height), pygame.SRCALPHA)
        panel.fill(COLOR_HUD_BG)

        score = self.font_large.render(f"Score: {snapshot.score}", True, COLOR_HUD_TEXT)
        panel.blit(score, (12, 8))
        distance = self.font_large.render(format_distance(snapshot.distance), True, COLOR_HUD_TEXT)
        panel.blit(distance, distance.get_rect(midtop=(width // 2, 8)))
        mood = self.font_large.render(MOOD_LABELS[snapshot.player.mood], True, COLOR_HUD_TEXT)
        panel.blit(mood, (width - mood.get_width() - 12, 8))

        bar_rect = pygame.Rect(12, self.panel_height - self.bar_height - 8, width - 24, self.bar_height)
        pygame.draw.rect(panel, (230, 230, 230), bar_rect, border_radius=8)
        fill = bar_rect.copy()
        fill.width = int(bar_rect.width * snapshot.meter_fraction)
        if fill.width > 0:
            pygame.draw.rect(panel, meter_color(snapshot.meter), fill, border_radius=8)
        pygame.draw.rect(panel, COLOR_HUD_TEXT, bar_rect, width=1, border_radius=8)

        self.screen.blit(panel, (0, 0))

    def _draw_panel(self, title: str, lines: Tuple[str, ...], button_label: str) -> None:
        width, height = self.screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

        heading = self.font_title.render(title, True, COLOR_HUD_TEXT)
        self.screen.blit(heading, heading.get_rect(center=(width // 2, height // 2 - 90)))
        for i, line in enumerate(lines):
            text = self.font_large.render(line, True, COLOR_HUD_TEXT)
            self.screen.blit(text, text.get_rect(center=(width // 2, height // 2 - 30 + i * 32)))

        self._layout()
        pygame.draw.rect(self.screen, COLOR_BUTTON, self.button_rect, border_radius=27)
        label = self.font_large.render(button_label, True, COLOR_BUTTON_TEXT)
        self.screen.blit(label, label.get_rect(center=self.button_rect.center))

        hint = self.font_small.render("Arrows / A D or tap a side to switch lanes", True, COLOR_HUD_TEXT)
        self.screen.blit(hint, hint.get_rect(center=(width // 2, self.button_rect.bottom + 30)))

    def draw_start_screen(self) -> None:
        self._draw_panel("Snack Dash", ("Grab the good stuff,", "dodge the junk."), "Start")

    def draw_game_over(self, snapshot: Snapshot) -> None:
        self._draw_panel(
            "Out of balance!",
            (f"Score: {snapshot.score}", f"Distance: {format_distance(snapshot.distance)}"),
            "Play again",
        )


# --------------------------------------------------------------------------------------
# Main Game class
# --------------------------------------------------------------------------------------
class Game:
    """Frame driver and renderer around a :class:`Simulation`."""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        pygame.init()
        self.sim = Simulation(config, seed=seed)
        pygame.display.set_caption("Snack Dash")
        self.screen = pygame.display.set_mode(self.sim.config.size, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.hud = HUD(self.screen)
        self.accumulator = 0.0
        self.road_offset = 0.0
        self.running = True
        logger.debug("window opened at %dx%d", *self.sim.config.size)

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.accumulator += dt
            self.handle_events()
            while self.accumulator >= FIXED_DT:
                self.step()
                self.accumulator -= FIXED_DT
            self.draw()
        pygame.quit()

    # ----------------------------------------------------------------------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif self.sim.playing:
                if event.key in (pygame.K_LEFT, pygame.K_a):
                    self.sim.move_left()
                elif event.key in (pygame.K_RIGHT, pygame.K_d):
                    self.sim.move_right()
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                self.sim.start()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # Touches also arrive as FINGERDOWN; skip the emulated mouse event.
            if getattr(event, "touch", False):
                return
            self.pointer_down(event.pos)
        elif event.type == pygame.FINGERDOWN:
            width, height = self.screen.get_size()
            self.pointer_down((int(event.x * width), int(event.y * height)))

    def pointer_down(self, pos: Tuple[int, int]) -> None:
        if self.sim.playing:
            if lane_command_for_click(pos[0], self.screen.get_width()) == LEFT:
                self.sim.move_left()
            else:
                self.sim.move_right()
        elif self.hud.button_at(pos):
            self.sim.start()

    def resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.get_surface() or self.screen
        self.hud.screen = self.screen
        self.sim.resize(width, height)

    def step(self) -> None:
        self.sim.tick()
        if self.sim.playing:
            self.road_offset = (self.road_offset + self.sim.state.speed) % DASH_PERIOD

    # ----------------------------------------------------------------------------------
    def draw(self) -> None:
        snapshot = self.sim.snapshot()
        self.draw_road()
        if snapshot.phase == Phase.START:
            self.hud.draw_start_screen()
        else:
            for item in snapshot.items:
                self.draw_item(item)
            self.draw_player(snapshot.player)
            if snapshot.phase == Phase.PLAYING:
                self.hud.draw(snapshot)
            else:
                self.hud.draw_game_over(snapshot)
        pygame.display.flip()

    def draw_road(self) -> None:
        self.screen.fill(COLOR_ROAD)
        config = self.sim.config
        height = self.screen.get_height()
        for lane in range(1, config.lane_count):
            x = int(lane * config.lane_width)
            y = -DASH_PERIOD + self.road_offset
            while y < height:
                pygame.draw.line(self.screen, COLOR_LANE_DIVIDER, (x, int(y)), (x, int(y + DASH_LENGTH)), 4)
                y += DASH_PERIOD

    def draw_player(self, player: PlayerView) -> None:
        sprite = pygame.Surface((130, 110), pygame.SRCALPHA)
        cx, cy = 65, 45

        pygame.draw.line(sprite, COLOR_BODY, (cx - 25, cy - 25), (cx - 52, cy - 18), 8)
        pygame.draw.line(sprite, COLOR_BODY, (cx - 52, cy - 18), (cx - 55, cy - 10), 8)
        pygame.draw.line(sprite, COLOR_BODY, (cx + 25, cy - 25), (cx + 52, cy - 18), 8)
        pygame.draw.line(sprite, COLOR_BODY, (cx + 52, cy - 18), (cx + 55, cy - 10), 8)
        pygame.draw.circle(sprite, COLOR_HANDS, (cx - 55, cy - 10), 8)
        pygame.draw.circle(sprite, COLOR_HANDS, (cx + 55, cy - 10), 8)
        pygame.draw.ellipse(sprite, COLOR_BODY, pygame.Rect(cx - 32, cy - 36, 64, 86))

        pygame.draw.circle(sprite, COLOR_FACE, (cx - 10, cy - 10), 3)
        pygame.draw.circle(sprite, COLOR_FACE, (cx + 10, cy - 10), 3)
        if player.mood in (Mood.SAD, Mood.SICK):
            pygame.draw.arc(sprite, COLOR_FACE, pygame.Rect(cx - 8, cy - 3, 16, 16), 0, math.pi, 2)
        else:
            pygame.draw.arc(sprite, COLOR_FACE, pygame.Rect(cx - 8, cy - 8, 16, 16), math.pi, math.tau, 2)
            blush = pygame.Surface(sprite.get_size(), pygame.SRCALPHA)
            pygame.draw.circle(blush, COLOR_BLUSH, (cx - 18, cy - 2), 5)
            pygame.draw.circle(blush, COLOR_BLUSH, (cx + 18, cy - 2), 5)
            sprite.blit(blush, (0, 0))

        # pygame rotates counter-clockwise for positive angles.
        rotated = pygame.transform.rotate(sprite, -lean_degrees(player.displacement))
        self.screen.blit(rotated, rotated.get_rect(center=(int(player.x), int(player.y))))

    def draw_item(self, item: ItemView) -> None:
        surf = pygame.Surface((50, 50), pygame.SRCALPHA)
        color = COLOR_GOOD if item.kind == ItemKind.GOOD else COLOR_BAD
        pygame.draw.circle(surf, (*color, 128), (25, 25), 25)
        self._paint_item_icon(surf, item.variety)
        self.screen.blit(surf, surf.get_rect(center=(int(item.x), int(item.y))))

    def _paint_item_icon(self, surface: pygame.Surface, variety: str) -> None:
        w, h = surface.get_size()
        center = (w // 2, h // 2)

        if variety == "salad":
            bowl = pygame.Rect(0, 0, 26, 12)
            bowl.midtop = (center[0], center[1])
            pygame.draw.ellipse(surface, (255, 255, 255), bowl)
            for dx in (-7, 0, 7):
                pygame.draw.circle(surface, (76, 175, 80), (center[0] + dx, center[1] - 2), 6)
        elif variety == "water":
            points = [(center[0], center[1] - 13), (center[0] + 9, center[1] + 3), (center[0] - 9, center[1] + 3)]
            pygame.draw.polygon(surface, (79, 195, 247), points)
            pygame.draw.circle(surface, (79, 195, 247), (center[0], center[1] + 4), 9)
        elif variety == "apple":
            pygame.draw.circle(surface, (229, 57, 53), (center[0], center[1] + 2), 11)
            pygame.draw.line(surface, (109, 76, 65), (center[0], center[1] - 9), (center[0] + 2, center[1] - 14), 3)
            pygame.draw.ellipse(surface, (76, 175, 80), pygame.Rect(center[0] + 2, center[1] - 15, 8, 5))
        elif variety == "avocado":
            pygame.draw.ellipse(surface, (85, 139, 47), pygame.Rect(center[0] - 10, center[1] - 13, 20, 26))
            pygame.draw.ellipse(surface, (220, 237, 200), pygame.Rect(center[0] - 7, center[1] - 9, 14, 19))
            pygame.draw.circle(surface, (121, 85, 72), (center[0], center[1] + 3), 5)
        elif variety == "donut":
            pygame.draw.circle(surface, (240, 98, 146), center, 13)
            pygame.draw.circle(surface, (0, 0, 0, 0), center, 5)
        elif variety == "soda":
            cup = pygame.Rect(0, 0, 16, 22)
            cup.center = (center[0], center[1] + 3)
            pygame.draw.rect(surface, (229, 57, 53), cup, border_radius=3)
            pygame.draw.line(surface, (255, 255, 255), (center[0] + 2, cup.top), (center[0] + 6, cup.top - 8), 3)
        elif variety == "fries":
            for dx in (-6, -2, 2, 6):
                pygame.draw.line(surface, (255, 213, 79), (center[0] + dx, center[1] - 12), (center[0] + dx, center[1]), 3)
            box = pygame.Rect(0, 0, 20, 14)
            box.midtop = (center[0], center[1] - 2)
            pygame.draw.rect(surface, (211, 47, 47), box, border_radius=2)
        elif variety == "lollipop":
            pygame.draw.line(surface, (255, 255, 255), center, (center[0], center[1] + 14), 3)
            pygame.draw.circle(surface, (171, 71, 188), (center[0], center[1] - 4), 9)
            pygame.draw.circle(surface, (255, 255, 255), (center[0], center[1] - 4), 4, 1)
