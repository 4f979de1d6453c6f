"""The editor window: glyph atlas, drawing and the event loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .editor import Editor
from .gap import GapBuffer
from .glyph import FIRST_GLYPH, GlyphMap, GlyphRect
from .layout import calculate_cursor_x, line_width
from .vec import Vec2

FONT_FILE = "DejaVuSansMono.ttf"
FONT_SIZE = 24
MAX_FONT_SIZE = 40
MIN_FONT_SIZE = 8
FONT_STEP = 2
WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Text Editor"

TEXT_COLOR = (255, 255, 255, 255)
BACKGROUND = (0, 0, 0)
CURSOR_COLOR = (255, 255, 255, 0xAA)
SELECTION_COLOR = (100, 150, 255, 100)

ATLAS_GLYPHS = 95
# Atlas side length, in line heights.
ATLAS_SCALE = 12


def build_glyph_atlas(font, glyph_map: GlyphMap) -> pygame.Surface:
    """Render printable ASCII into one surface and record each glyph's rectangle.

    ``font`` needs ``get_height``, ``get_ascent``, ``get_descent`` and
    ``render(text, antialias, color)`` as a pygame font has. The map's line
    height is set to the font's ascent minus its descent.
    """
    height = font.get_height()
    ascent = font.get_ascent()
    descent = font.get_descent()
    if ascent - descent != height:
        height = ascent - descent

    side = height * ATLAS_SCALE
    glyph_map.glyph_height = height
    atlas = pygame.Surface((side, side), pygame.SRCALPHA)
    atlas.fill((0, 0, 0, 0))

    x = y = 0
    for code in range(FIRST_GLYPH, FIRST_GLYPH + ATLAS_GLYPHS):
        char = chr(code)
        glyph = font.render(char, True, TEXT_COLOR)
        width, glyph_height = glyph.get_size()
        if x + width >= side:
            x = 0
            y += height
        # Glyphs never overlap and the atlas starts fully transparent,
        # so taking the maximum copies the glyph's pixels unchanged.
        atlas.blit(glyph, (x, y), special_flags=pygame.BLEND_RGBA_MAX)
        glyph_map.add_glyph(char, GlyphRect(x, y, width, glyph_height))
        x += width
    return atlas


def _atlas_rect(glyph_map: GlyphMap, char: str) -> GlyphRect | None:
    index = ord(char) - FIRST_GLYPH
    if index < 0:
        return None
    index = min(index, ATLAS_GLYPHS - 1)
    return glyph_map[chr(FIRST_GLYPH + index)]


def _render_line(
    surface: pygame.Surface, pen: Vec2, line: GapBuffer, atlas: pygame.Surface, glyph_map: GlyphMap
) -> None:
    for char in str(line):
        rect = _atlas_rect(glyph_map, char)
        if rect is None:
            continue
        surface.blit(atlas, (int(pen.x), int(pen.y)), pygame.Rect(rect.x, rect.y, rect.w, rect.h))
        pen.x += rect.w


def _fill_translucent(surface: pygame.Surface, rect: pygame.Rect, color) -> None:
    if rect.w <= 0 or rect.h <= 0:
        return
    patch = pygame.Surface(rect.size, pygame.SRCALPHA)
    patch.fill(color)
    surface.blit(patch, rect.topleft)


def _render_selection(surface: pygame.Surface, editor: Editor) -> None:
    selection = editor.selection
    if selection.is_empty():
        return
    text, glyph_map, scroll = editor.text, editor.glyph_map, editor.scroll
    first_line, first_index, last_line, last_index = selection.ordered()
    for number in range(first_line, last_line + 1):
        if number >= len(text):
            break
        line = text[number]
        start = first_index if number == first_line else 0
        end = last_index if number == last_line else len(line)
        if start >= end:
            continue
        start_x = calculate_cursor_x(line, glyph_map, start) - scroll.x
        end_x = calculate_cursor_x(line, glyph_map, end) - scroll.x
        top = (number - scroll.y) * glyph_map.glyph_height
        _fill_translucent(
            surface,
            pygame.Rect(start_x, top, end_x - start_x, glyph_map.glyph_height),
            SELECTION_COLOR,
        )


def _render_cursor(surface: pygame.Surface, editor: Editor) -> None:
    glyph_map, scroll, cursor = editor.glyph_map, editor.scroll, editor.cursor
    height = glyph_map.glyph_height
    x = -scroll.x + calculate_cursor_x(editor.text[cursor.line], glyph_map, cursor.index)
    y = (cursor.line - scroll.y) * height
    _fill_translucent(surface, pygame.Rect(x, y, height // 2, height), CURSOR_COLOR)


def render_text(surface: pygame.Surface, editor: Editor, atlas: pygame.Surface) -> None:
    """Draw the visible lines, the selection and the cursor onto ``surface``.

    Also updates the editor's horizontal scroll limit from the widest
    visible line.
    """
    text, glyph_map, scroll = editor.text, editor.glyph_map, editor.scroll
    height = glyph_map.glyph_height
    first_line = scroll.y
    last_line = min(len(text), first_line + scroll.lines_visible(glyph_map) + 1)
    visible = range(first_line, last_line)

    widest = max((line_width(text[i], glyph_map) for i in visible), default=0)
    scroll.max_x = max(0, widest - scroll.win_w)

    for number in visible:
        pen = Vec2(-scroll.x, (number - first_line) * height)
        _render_line(surface, pen, text[number], atlas, glyph_map)

    _render_selection(surface, editor)

    if first_line <= editor.cursor.line < last_line:
        _render_cursor(surface, editor)


def _load_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(FONT_FILE, size)


def _ctrl_held() -> bool:
    return bool(pygame.key.get_mods() & pygame.KMOD_CTRL)


def _shift_held() -> bool:
    return bool(pygame.key.get_mods() & pygame.KMOD_SHIFT)


def _run(args: Sequence[str]) -> int:
    try:
        font = _load_font(FONT_SIZE)
    except (OSError, pygame.error) as error:
        print(f"font error: {error}", file=sys.stderr)
        return 1

    screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    glyph_map = GlyphMap()
    atlas = build_glyph_atlas(font, glyph_map)

    width, height = screen.get_size()
    editor = Editor(glyph_map, width, height)
    if args:
        editor.load(args[0])

    def rescale(size: int) -> None:
        nonlocal font, atlas
        try:
            font = _load_font(size)
        except (OSError, pygame.error) as error:
            print(f"font error: {error}", file=sys.stderr)
            return
        atlas = build_glyph_atlas(font, glyph_map)
        glyph_map.glyph_height = size
        editor.scroll.update_max(editor.text, glyph_map)

    shift_pressed = False
    clock = pygame.time.Clock()
    running = True
    pygame.key.start_text_input()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                editor.resize(event.w, event.h)
            elif event.type == pygame.MOUSEWHEEL:
                editor.wheel(event.x, event.y)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                editor.mouse_down(*event.pos)
            elif event.type == pygame.MOUSEMOTION:
                editor.mouse_drag(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                editor.mouse_up()
            elif event.type == pygame.TEXTINPUT:
                if not _ctrl_held():
                    editor.type_text(event.text)
            elif event.type == pygame.KEYUP:
                if event.key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
                    shift_pressed = False
            elif event.type == pygame.KEYDOWN:
                key = event.key
                if key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
                    shift_pressed = True
                elif key == pygame.K_EQUALS:
                    if _ctrl_held() and _shift_held():
                        size = glyph_map.glyph_height + FONT_STEP
                        if size <= MAX_FONT_SIZE:
                            rescale(size)
                elif key == pygame.K_MINUS:
                    if _ctrl_held():
                        size = glyph_map.glyph_height - FONT_STEP
                        if size >= MIN_FONT_SIZE:
                            rescale(size)
                elif key == pygame.K_a:
                    if _ctrl_held():
                        editor.select_all()
                elif key == pygame.K_c:
                    if _ctrl_held():
                        editor.copy()
                elif key == pygame.K_v:
                    if _ctrl_held():
                        editor.paste()
                elif key == pygame.K_s:
                    if _ctrl_held() and args:
                        editor.save(args[0])
                elif key == pygame.K_BACKSPACE:
                    editor.backspace()
                elif key == pygame.K_RETURN:
                    editor.enter()
                elif key == pygame.K_LEFT:
                    editor.move_left(shift_pressed)
                elif key == pygame.K_RIGHT:
                    editor.move_right(shift_pressed)
                elif key == pygame.K_UP:
                    editor.move_up(shift_pressed)
                elif key == pygame.K_DOWN:
                    editor.move_down(shift_pressed)
                elif key == pygame.K_PAGEUP:
                    editor.page_up()
                elif key == pygame.K_PAGEDOWN:
                    editor.page_down()
                editor.scroll.keep_visible(editor.cursor, editor.text, glyph_map)

        screen = pygame.display.get_surface()
        screen.fill(BACKGROUND)
        render_text(screen, editor, atlas)
        pygame.display.flip()
        clock.tick(60)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the editor window, optionally on the file named first in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    pygame.init()
    try:
        return _run(args)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())