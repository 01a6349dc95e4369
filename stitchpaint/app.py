"""The interactive stitch editor window."""

from __future__ import annotations

import argparse
from os import PathLike
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import pygame

from stitchpaint.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_FILE_PATH,
    FILE_PATH_LENGTH,
    PaintConfig,
    load_config,
    save_config,
)
from stitchpaint.geometry import Vec2, Vec2i
from stitchpaint.stitches import StitchPattern
from stitchpaint.view import Viewport

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

CLEAR_COLOR = (200, 200, 200)
GRID_COLOR = (0, 0, 0)
STITCH_COLOR = (255, 0, 0)
LINE_COLOR = (0, 0, 255)
NEW_LINE_COLOR = (0, 255, 0)
STITCH_SIZE = 10

PANEL_COLOR = (35, 35, 40)
BUTTON_COLOR = (60, 70, 110)
FIELD_COLOR = (55, 55, 60)
FOCUS_COLOR = (120, 160, 255)
TEXT_COLOR = (235, 235, 235)

PANEL_X = 10
PANEL_Y = 10
PANEL_WIDTH = 340
PADDING = 8
LINE_HEIGHT = 18
ROW_HEIGHT = 22
SPACING = 6
BUTTON_WIDTH = 70
FIELD_WIDTH = 240
FONT_SIZE = 18

StrPath = Union[str, "PathLike[str]"]
ScreenPos = Union[Vec2i, Tuple[int, int], Sequence[int]]


class _MenuLayout(NamedTuple):
    panel: pygame.Rect
    lines: List[Tuple[str, Tuple[int, int]]]
    undo: pygame.Rect
    field: pygame.Rect
    save: pygame.Rect
    load: pygame.Rect


def _as_vec2i(pos: ScreenPos) -> Vec2i:
    if isinstance(pos, Vec2i):
        return pos
    x, y = pos
    return Vec2i(int(x), int(y))


class PaintApp:
    """Editor state, event handling and drawing for one window."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        config_path: StrPath = DEFAULT_CONFIG_PATH,
    ) -> None:
        self.config_path = config_path
        try:
            config = load_config(config_path)
        except ValueError:
            config = PaintConfig()
        self.current_file_path = config.current_file_path
        self.new_file_path = config.current_file_path
        self.viewport = Viewport(width, height, config.scale, config.camera_pos)
        self.pattern = StitchPattern()
        self.mouse_pos_base = Vec2()
        self.can_stitch_be_placed = False
        self.is_running = False
        self._mouse_screen = Vec2i()
        self._editing_path = False
        self._font: Optional[pygame.font.Font] = None

        if not self._load_file(self.current_file_path):
            self.current_file_path = DEFAULT_FILE_PATH
            self.new_file_path = DEFAULT_FILE_PATH

    # State changes

    def update_mouse(self, screen_pos: ScreenPos) -> Vec2:
        """Record the cursor position and whether a stitch fits there."""
        self._mouse_screen = _as_vec2i(screen_pos)
        self.mouse_pos_base = self.viewport.to_base(self._mouse_screen)
        self.can_stitch_be_placed = self.pattern.can_place(self.mouse_pos_base)
        return self.mouse_pos_base

    def place_stitch(self) -> bool:
        """Add a stitch under the cursor if it is within reach."""
        if not self.can_stitch_be_placed:
            return False
        self.pattern.add_stitch(self.mouse_pos_base)
        return True

    def _save_file(self) -> bool:
        path = self.new_file_path
        if not path:
            return False
        try:
            self.pattern.save(path)
        except OSError:
            return False
        self.current_file_path = path
        return True

    def _load_file(self, path: str) -> bool:
        if not path:
            return False
        try:
            self.pattern.load(path)
        except (OSError, ValueError):
            return False
        self.current_file_path = path
        return True

    def _type_text(self, text: str) -> None:
        for char in text:
            candidate = self.new_file_path + char
            if len(candidate.encode("utf-8")) >= FILE_PATH_LENGTH:
                break
            self.new_file_path = candidate

    # Events

    def _over_menu(self, pos: Vec2i) -> bool:
        return self._menu_layout().panel.collidepoint(pos.x, pos.y)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.is_running = False
        elif kind == pygame.VIDEORESIZE:
            self.viewport.resize(event.w, event.h)
        elif kind == pygame.WINDOWSIZECHANGED:
            self.viewport.resize(event.x, event.y)
        elif kind == pygame.MOUSEWHEEL:
            self._on_wheel(event)
        elif kind == pygame.MOUSEMOTION:
            self._on_motion(event)
        elif kind == pygame.MOUSEBUTTONDOWN:
            self._on_click(event)
        elif kind == pygame.KEYDOWN:
            self._on_key(event)
        elif kind == pygame.TEXTINPUT:
            if self._editing_path:
                self._type_text(event.text)

    def _on_wheel(self, event: pygame.event.Event) -> None:
        if self._over_menu(self._mouse_screen):
            return
        self.viewport.zoom(getattr(event, "precise_y", event.y))
        self.update_mouse(self._mouse_screen)

    def _on_motion(self, event: pygame.event.Event) -> None:
        pos = _as_vec2i(event.pos)
        if self._over_menu(pos):
            self._mouse_screen = pos
            return
        self.update_mouse(pos)
        buttons = getattr(event, "buttons", (0, 0, 0))
        if len(buttons) > 2 and buttons[2]:
            dx, dy = event.rel
            self.viewport.pan(dx, dy)

    def _on_click(self, event: pygame.event.Event) -> None:
        if event.button != pygame.BUTTON_LEFT:
            return
        pos = _as_vec2i(event.pos)
        layout = self._menu_layout()
        if not layout.panel.collidepoint(pos.x, pos.y):
            self._editing_path = False
            self.place_stitch()
            return
        self._editing_path = layout.field.collidepoint(pos.x, pos.y)
        if layout.undo.collidepoint(pos.x, pos.y):
            self.pattern.undo()
        elif layout.save.collidepoint(pos.x, pos.y):
            self._save_file()
        elif layout.load.collidepoint(pos.x, pos.y):
            self._load_file(self.new_file_path)

    def _on_key(self, event: pygame.event.Event) -> None:
        key = event.key
        if self._editing_path:
            if key == pygame.K_BACKSPACE:
                self.new_file_path = self.new_file_path[:-1]
            elif key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
                self._editing_path = False
            return
        if self._over_menu(self._mouse_screen):
            return
        if key == pygame.K_RETURN:
            self.place_stitch()
        elif key == pygame.K_ESCAPE:
            self.is_running = False

    # Drawing

    def _info_lines(self) -> List[str]:
        size = self.pattern.drawing_size()
        return [
            f"Current file name: {self.current_file_path}",
            f"Drawing size: x = {size.x:.2f} y = {size.y:.2f}",
            f"Stitches amount: {len(self.pattern)}",
            f"Scale: {self.viewport.scale:.2f}",
        ]

    def _menu_layout(self) -> _MenuLayout:
        x = PANEL_X + PADDING
        y = PANEL_Y + PADDING
        lines: List[Tuple[str, Tuple[int, int]]] = []
        for text in self._info_lines():
            lines.append((text, (x, y)))
            y += LINE_HEIGHT
        y += SPACING
        undo = pygame.Rect(x, y, BUTTON_WIDTH, ROW_HEIGHT)
        y += ROW_HEIGHT + SPACING
        offset = self.pattern.relative_to_last(self.mouse_pos_base)
        if offset is not None:
            lines.append(
                (f"Relative cursor pos: x = {offset.x:.2f}; y = {offset.y:.2f}", (x, y))
            )
            y += LINE_HEIGHT + SPACING
        field = pygame.Rect(x, y, FIELD_WIDTH, ROW_HEIGHT)
        y += ROW_HEIGHT + SPACING
        save = pygame.Rect(x, y, BUTTON_WIDTH, ROW_HEIGHT)
        load = pygame.Rect(x + BUTTON_WIDTH + SPACING, y, BUTTON_WIDTH, ROW_HEIGHT)
        y += ROW_HEIGHT
        panel = pygame.Rect(PANEL_X, PANEL_Y, PANEL_WIDTH, y + PADDING - PANEL_Y)
        return _MenuLayout(panel, lines, undo, field, save, load)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def render(self, surface: pygame.Surface) -> None:
        """Draw the grid, the stitches and the menu onto surface."""
        surface.fill(CLEAR_COLOR)
        for start, end in self.viewport.grid_lines():
            pygame.draw.line(surface, GRID_COLOR, start, end)

        points = [self.viewport.to_screen(p) for p in self.pattern.absolute]
        for current, following in zip(points, points[1:]):
            pygame.draw.line(
                surface, LINE_COLOR, (current.x, current.y), (following.x, following.y)
            )
        half = STITCH_SIZE // 2
        for point in points:
            rect = pygame.Rect(point.x - half, point.y - half, STITCH_SIZE, STITCH_SIZE)
            pygame.draw.rect(surface, STITCH_COLOR, rect)

        if points and self.can_stitch_be_placed:
            last = points[-1]
            mouse = self._mouse_screen
            pygame.draw.line(surface, NEW_LINE_COLOR, (mouse.x, mouse.y), (last.x, last.y))

        self._render_menu(surface)

    def _render_menu(self, surface: pygame.Surface) -> None:
        font = self._get_font()
        layout = self._menu_layout()
        pygame.draw.rect(surface, PANEL_COLOR, layout.panel)
        for text, pos in layout.lines:
            surface.blit(font.render(text, True, TEXT_COLOR), pos)

        for rect, label in ((layout.undo, "Undo"), (layout.save, "Save"), (layout.load, "Load")):
            pygame.draw.rect(surface, BUTTON_COLOR, rect)
            rendered = font.render(label, True, TEXT_COLOR)
            surface.blit(rendered, rendered.get_rect(center=rect.center))

        pygame.draw.rect(surface, FIELD_COLOR, layout.field)
        if self._editing_path:
            pygame.draw.rect(surface, FOCUS_COLOR, layout.field, 1)
        path_text = font.render(self.new_file_path, True, TEXT_COLOR)
        surface.blit(path_text, (layout.field.x + 4, layout.field.y + 4))
        label = font.render("File path", True, TEXT_COLOR)
        surface.blit(label, (layout.field.right + SPACING, layout.field.y + 4))

    # Main loop

    def run(self) -> int:
        """Open the window and process events until the editor is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(
                (self.viewport.width, self.viewport.height), pygame.RESIZABLE
            )
            pygame.display.set_caption("Paint")
            clock = pygame.time.Clock()
            self.is_running = True
            while self.is_running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.render(pygame.display.get_surface())
                pygame.display.flip()
                clock.tick(60)
        finally:
            self._font = None
            pygame.quit()

        save_config(
            PaintConfig(self.current_file_path, self.viewport.scale, self.viewport.camera_pos),
            self.config_path,
        )
        for stitch in self.pattern.relative:
            print(f"({stitch.x:g}; {stitch.y:g})")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="stitchpaint", description="Draw stitch patterns.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height")
    args = parser.parse_args(argv)
    return PaintApp(args.width, args.height).run()