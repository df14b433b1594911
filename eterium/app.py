"""Pygame front end: the main menu with its loading bar, and the game window."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from eterium.game import Game, Key
from eterium.menu import LoadingBar
from eterium.sprites import FRAME_SIZE, Actor
from eterium.worlds import WorldLayout

log = logging.getLogger(__name__)

FPS = 60
MENU_SIZE = (800, 600)
FALLBACK_SIZE = (800, 600)
HELP_TEXT = "[Espacio] → Siguiente"
ASSETS_ENV = "ETERIUM_ASSETS"

_KEYS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)
BOX_COLOUR = (40, 60, 40, 220)


@dataclass(frozen=True)
class _BoxStyle:
    side_margin: int
    bottom_margin: int
    height: int
    font_size: int
    help_font_size: int
    help_dx: int
    help_dy: int


_BOX_STYLES = {
    "village": _BoxStyle(30, 350, 130, 10, 9, 200, 150),
    "sacred_land": _BoxStyle(400, 1000, 140, 12, 13, 260, 190),
}


def key_from_pygame(code: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYS.get(code)


def asset_path(directory: str | os.PathLike[str], name: str) -> Path:
    """Where the image called ``name`` lives; a missing .png suffix is added."""
    filename = name if name.lower().endswith(".png") else f"{name}.png"
    return Path(directory) / filename


def _points(size: int) -> int:
    return max(1, round(size * 4 / 3))


class _Images:
    """Loads images from the asset directory once and remembers failures."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._cache: dict[str, pygame.Surface | None] = {}

    def get(self, name: str) -> pygame.Surface | None:
        if name not in self._cache:
            path = asset_path(self.directory, name)
            try:
                self._cache[name] = pygame.image.load(str(path)).convert_alpha()
            except (pygame.error, FileNotFoundError, OSError):
                log.error("could not load image %s", path)
                self._cache[name] = None
        return self._cache[name]


def _wrap(font: pygame.font.Font, text: str, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


class _App:
    def __init__(self, assets: Path) -> None:
        self.images = _Images(assets)
        self.screen = pygame.display.set_mode(MENU_SIZE)
        pygame.display.set_caption("Eterium")
        self.clock = pygame.time.Clock()
        self.quitting = False
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont("arial", _points(size), bold=bold)
        return self._fonts[key]

    # ------------------------------------------------------------------ menu

    def run(self) -> None:
        bar = LoadingBar(on_complete=self._play)
        while not self.quitting:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quitting = True
                elif event.type == pygame.KEYDOWN and not bar.running:
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) and bar.play_enabled:
                        bar.start()
                    elif event.key == pygame.K_ESCAPE:
                        self.quitting = True
            bar.elapse(self.clock.tick(FPS))
            if not self.quitting:
                self._draw_menu(bar)
                pygame.display.flip()

    def _draw_menu(self, bar: LoadingBar) -> None:
        screen = self.screen
        screen.fill((20, 20, 30))
        width, height = screen.get_size()
        title = self.font(28, bold=True).render("Eterium", True, YELLOW)
        screen.blit(title, title.get_rect(center=(width // 2, height // 4)))
        if bar.running:
            left = (width - 400) // 2
            top = (height - 100) // 2
            label = self.font(16, bold=True).render(bar.message, True, WHITE)
            screen.blit(label, label.get_rect(center=(width // 2, top - 30)))
            frame = pygame.Rect(left, top + 10, 400, 30)
            pygame.draw.rect(screen, BLACK, frame)
            filled = frame.inflate(-4, -4)
            filled.width = round(filled.width * bar.value / bar.maximum)
            pygame.draw.rect(screen, GREEN, filled)
            pygame.draw.rect(screen, (85, 85, 85), frame, 2, border_radius=5)
            percent = self.font(12, bold=True).render(f"{bar.value}%", True, WHITE)
            screen.blit(percent, percent.get_rect(center=frame.center))
        else:
            colour = WHITE if bar.play_enabled else (120, 120, 120)
            for offset, text in ((0, "[Enter] Jugar"), (50, "[Esc] Salir")):
                rendered = self.font(16).render(text, True, colour)
                screen.blit(rendered, rendered.get_rect(center=(width // 2, height // 2 + offset)))

    # ------------------------------------------------------------------ game

    def _play(self) -> None:
        game = Game(confirm=self._confirm, notify=self._notify)
        shown: str | None = None
        self.clock.tick(FPS)
        while not game.closed and not self.quitting:
            if game.layout.name != shown:
                self._fit(game.layout)
                shown = game.layout.name
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quitting = True
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    key = key_from_pygame(event.key)
                    if key is None:
                        continue
                    if event.type == pygame.KEYDOWN:
                        game.press(key)
                    else:
                        game.release(key)
            game.tick(self.clock.tick(FPS))
            if not self.quitting:
                self._draw_game(game)
                pygame.display.flip()
        if not self.quitting:
            self.screen = pygame.display.set_mode(MENU_SIZE)
            pygame.display.set_caption("Eterium")
            self.clock.tick(FPS)

    def _fit(self, layout: WorldLayout) -> None:
        pygame.display.set_caption("Mapa del Juego")
        if layout.view_size is not None:
            size = layout.view_size
        else:
            self.screen = pygame.display.set_mode(FALLBACK_SIZE)
            image = self.images.get(layout.map_image)
            size = image.get_size() if image is not None else FALLBACK_SIZE
        self.screen = pygame.display.set_mode(size)

    def _frame(self, sheet_name: str, index: int, scale: float) -> pygame.Surface | None:
        sheet = self.images.get(sheet_name)
        if sheet is None:
            return None
        box = pygame.Rect(index * FRAME_SIZE, 0, FRAME_SIZE, FRAME_SIZE).clip(sheet.get_rect())
        if box.width == 0 or box.height == 0:
            return None
        image = sheet.subsurface(box)
        if scale != 1.0:
            image = pygame.transform.scale(image, (round(box.width * scale), round(box.height * scale)))
        return image

    def _draw_actor(self, world: pygame.Surface, game: Game, actor: Actor | None) -> None:
        if actor is None or actor.name not in game.poses:
            return
        sheet, index = game.poses[actor.name]
        image = self._frame(sheet, index, actor.scale)
        if image is not None:
            world.blit(image, (round(actor.x), round(actor.y)))

    def _draw_game(self, game: Game) -> None:
        layout = game.layout
        map_image = self.images.get(layout.map_image)
        size = map_image.get_size() if map_image is not None else self.screen.get_size()
        world = pygame.Surface(size, pygame.SRCALPHA)
        world.fill(BLACK)
        if map_image is not None:
            world.blit(map_image, (0, 0))

        for actor in (game.wizard, game.axeman, game.slime, game.player):
            self._draw_actor(world, game, actor)

        for label, colour in ((game.mago_label, YELLOW), (game.slime_label, GREEN)):
            if label is not None and label.visible:
                text = self.font(10, bold=True).render(label.text, True, colour)
                world.blit(text, (round(label.x), round(label.y)))

        if game.dialogue_active and game.dialogue is not None:
            self._draw_dialogue(world, game)

        scale = layout.view_scale
        view = world
        if scale != 1.0:
            view = pygame.transform.scale(world, (round(size[0] * scale), round(size[1] * scale)))
        screen_w, screen_h = self.screen.get_size()
        if game.player is not None:
            centre_x, centre_y = game.player.bounds().x, game.player.bounds().y
            bounds = game.player.bounds()
            centre_x += bounds.width / 2
            centre_y += bounds.height / 2
        else:
            centre_x, centre_y = size[0] / 2, size[1] / 2
        offset_x = min(max(centre_x * scale - screen_w / 2, 0), max(view.get_width() - screen_w, 0))
        offset_y = min(max(centre_y * scale - screen_h / 2, 0), max(view.get_height() - screen_h, 0))
        self.screen.fill(BLACK)
        self.screen.blit(view, (-round(offset_x), -round(offset_y)))

    def _draw_dialogue(self, world: pygame.Surface, game: Game) -> None:
        style = _BOX_STYLES.get(game.layout.name, _BOX_STYLES["village"])
        width, height = world.get_size()
        box = pygame.Rect(
            style.side_margin,
            height - style.bottom_margin,
            max(width - 2 * style.side_margin, 0),
            style.height,
        )
        panel = pygame.Surface(box.size, pygame.SRCALPHA)
        panel.fill(BOX_COLOUR)
        world.blit(panel, box.topleft)

        font = self.font(style.font_size)
        y = box.y + 10
        for line in _wrap(font, game.dialogue.text, max(box.width - 30, 1)):
            world.blit(font.render(line, True, WHITE), (box.x + 15, y))
            y += font.get_linesize()

        help_text = self.font(style.help_font_size).render(HELP_TEXT, True, YELLOW)
        world.blit(help_text, (box.right - style.help_dx, box.bottom - style.help_dy))

    # --------------------------------------------------------------- pop-ups

    def _modal(self, title: str, text: str, prompt: str) -> int:
        backdrop = self.screen.copy()
        width, height = self.screen.get_size()
        box = pygame.Rect(0, 0, min(520, width - 20), 160)
        box.center = (width // 2, height // 2)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quitting = True
                    return pygame.K_ESCAPE
                if event.type == pygame.KEYDOWN:
                    return event.key
            self.screen.blit(backdrop, (0, 0))
            pygame.draw.rect(self.screen, (30, 30, 40), box)
            pygame.draw.rect(self.screen, WHITE, box, 2)
            self.screen.blit(self.font(12, bold=True).render(title, True, YELLOW), (box.x + 15, box.y + 10))
            font = self.font(10)
            y = box.y + 45
            for line in _wrap(font, text, box.width - 30):
                self.screen.blit(font.render(line, True, WHITE), (box.x + 15, y))
                y += font.get_linesize()
            hint = self.font(9).render(prompt, True, WHITE)
            self.screen.blit(hint, hint.get_rect(bottomright=(box.right - 15, box.bottom - 10)))
            pygame.display.flip()
            self.clock.tick(FPS)

    def _confirm(self, title: str, question: str) -> bool:
        while True:
            key = self._modal(title, question, "[S] Sí   [N] No")
            if key in (pygame.K_s, pygame.K_y, pygame.K_RETURN):
                answer = True
                break
            if key in (pygame.K_n, pygame.K_ESCAPE):
                answer = False
                break
        self.clock.tick(FPS)
        return answer and not self.quitting

    def _notify(self, title: str, text: str) -> None:
        self._modal(title, text, "[Tecla] Aceptar")
        self.clock.tick(FPS)


def main(argv: list[str] | None = None) -> int:
    """Open the main menu and run until the player quits."""
    parser = argparse.ArgumentParser(prog="eterium", description="A small role-playing adventure.")
    parser.add_argument(
        "--assets",
        default=os.environ.get(ASSETS_ENV, "."),
        help="directory holding the map and sprite images",
    )
    args = parser.parse_args(argv)
    assets = Path(args.assets)
    if not assets.is_dir():
        parser.error(f"asset directory not found: {assets}")

    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        _App(assets).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())