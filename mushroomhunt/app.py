"""Main menu, dialogs and the window that runs a round of the game."""

from __future__ import annotations

import argparse
import enum
from pathlib import Path

import pygame

from mushroomhunt.game import (
    DEFAULT_PLAYER_NAME,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    PLAYER_SIZE,
    Control,
    Game,
)
from mushroomhunt.mushroom import MUSHROOM_SIZE
from mushroomhunt.records import RecordsManager
from mushroomhunt.settings import SLIDER_MAX, SettingsStore, VolumeSession

WINDOW_CAPTION = "Грибник"
TITLE_PREFIX = "Грибник - "
EMPTY_NAME_MESSAGE = "Введите имя игрока!"
WARNING_TITLE = "Ошибка"
MUSIC_PATH = "sounds/sandbox-serenade-sky-toes-main-version-28029-02-39.wav"
BACKGROUND_PATH = "images/back.png"
PLAYER_PATH = "images/hat.png"
FONT_NAME = "Saturn"
FRAMES_PER_SECOND = 60

_BACKGROUND_FILL = (0x5A, 0x8F, 0x5A)
_BORDER = (0x2D, 0x5A, 0x3F)
_PANEL = (255, 255, 255)
_BUTTON = (187, 224, 190)
_BUTTON_HOVER = (167, 204, 170)
_CLOSE_BUTTON = (224, 187, 187)
_CLOSE_BORDER = (0x5A, 0x2D, 0x2D)
_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)

_KEY_CONTROLS = {
    pygame.K_w: Control.UP,
    pygame.K_s: Control.DOWN,
    pygame.K_a: Control.LEFT,
    pygame.K_d: Control.RIGHT,
    pygame.K_UP: Control.UP,
    pygame.K_DOWN: Control.DOWN,
    pygame.K_LEFT: Control.LEFT,
    pygame.K_RIGHT: Control.RIGHT,
    pygame.K_ESCAPE: Control.MENU,
    pygame.K_p: Control.PAUSE,
}


class MenuAction(enum.Enum):
    """Buttons of the main menu."""

    START = "Начать игру"
    SETTINGS = "Настройки"
    RECORDS = "Рекорды"
    EXIT = "Выход"


class _Screen(enum.Enum):
    MENU = enum.auto()
    WARNING = enum.auto()
    SETTINGS = enum.auto()
    RECORDS = enum.auto()
    CONFIRM_EXIT = enum.auto()
    GAME = enum.auto()
    PAUSE = enum.auto()
    GAME_OVER = enum.auto()


def key_to_control(key: int) -> Control | None:
    """The game control bound to a keyboard key, or None for other keys."""
    return _KEY_CONTROLS.get(key)


def validate_player_name(text: str) -> str:
    """Return the trimmed player name; raise ValueError when it is empty."""
    name = text.strip()
    if not name:
        raise ValueError(EMPTY_NAME_MESSAGE)
    return name


def window_title(name: str) -> str:
    """Caption of the game window for the given player."""
    return TITLE_PREFIX + name


class _SilentSound:
    """Stands in for the music when no audio can be played."""

    def __init__(self) -> None:
        self._volume = 1.0

    def get_volume(self) -> float:
        return self._volume

    def set_volume(self, value: float) -> None:
        self._volume = float(value)

    def play(self, loops: int = 0) -> None:
        pass


class Application:
    """The whole program: menu, settings, records and the game window."""

    def __init__(
        self,
        records: RecordsManager | None = None,
        settings: SettingsStore | None = None,
        resource_dir: str | Path | None = None,
    ) -> None:
        self.records = records if records is not None else RecordsManager()
        self.settings = settings if settings is not None else SettingsStore()
        self.resource_dir = (
            Path(resource_dir)
            if resource_dir is not None
            else Path(__file__).resolve().parent / "resources"
        )
        self.player_name = ""
        self.game: Game | None = None
        self.volume_session: VolumeSession | None = None
        self._state = _Screen.MENU
        self._settings_return = _Screen.MENU
        self._warning = ""
        self._running = False
        self._dragging = False
        self._buttons: dict[str, pygame.Rect] = {}
        self._slider = pygame.Rect(FIELD_WIDTH // 2 - 140, FIELD_HEIGHT // 2 - 10, 280, 20)
        self._sound = _SilentSound()
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    # ---------------------------------------------------------------- setup

    def _resource(self, relative: str) -> Path:
        return self.resource_dir / relative

    def _load_image(
        self, relative: str, size: tuple[int, int], fill, keep_aspect: bool
    ) -> pygame.Surface:
        try:
            image = pygame.image.load(str(self._resource(relative))).convert_alpha()
        except (pygame.error, OSError):
            surface = pygame.Surface(size)
            surface.fill(fill)
            return surface
        if keep_aspect:
            scale = min(size[0] / image.get_width(), size[1] / image.get_height())
            size = (max(1, int(image.get_width() * scale)), max(1, int(image.get_height() * scale)))
        return pygame.transform.smoothscale(image, size)

    def _load_assets(self) -> None:
        self._background = self._load_image(
            BACKGROUND_PATH, (FIELD_WIDTH, FIELD_HEIGHT), _BACKGROUND_FILL, keep_aspect=False
        )
        self._player = self._load_image(
            PLAYER_PATH, (PLAYER_SIZE, PLAYER_SIZE), (0, 0, 255), keep_aspect=True
        )

    def _mushroom_texture(self, relative: str) -> pygame.Surface:
        if relative not in self._textures:
            self._textures[relative] = self._load_image(
                relative, (MUSHROOM_SIZE, MUSHROOM_SIZE), (255, 0, 0), keep_aspect=True
            )
        return self._textures[relative]

    def _load_music(self):
        try:
            pygame.mixer.init()
            return pygame.mixer.Sound(str(self._resource(MUSIC_PATH)))
        except (pygame.error, OSError, FileNotFoundError):
            return _SilentSound()

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(FONT_NAME, size)
        return self._fonts[size]

    # ------------------------------------------------------------- run loop

    def run(self) -> int:
        """Open the window and run until the player quits; return the exit code."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
            pygame.display.set_caption(WINDOW_CAPTION)
            self._load_assets()
            self._sound = self._load_music()
            self._sound.set_volume(self.settings.load_volume())
            self._sound.play(loops=-1)
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            self._running = True
            while self._running:
                elapsed = clock.tick(FRAMES_PER_SECOND)
                for event in pygame.event.get():
                    self._handle_event(event)
                if self.game is not None:
                    self.game.advance(elapsed)
                    if self._state is _Screen.GAME and self.game.final_message is not None:
                        self._state = _Screen.GAME_OVER
                self._draw(surface)
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0

    # --------------------------------------------------------------- events

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            self._on_key_down(event)
        elif event.type == pygame.KEYUP:
            control = key_to_control(event.key)
            if self.game is not None and control is not None:
                self.game.release(control)
        elif event.type == pygame.TEXTINPUT and self._state is _Screen.MENU:
            self.player_name += event.text
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._on_click(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self._move_slider(event.pos[0])

    def _on_key_down(self, event: pygame.event.Event) -> None:
        state = self._state
        if state is _Screen.MENU:
            if event.key == pygame.K_BACKSPACE:
                self.player_name = self.player_name[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self._menu_action(MenuAction.START)
        elif state is _Screen.GAME and self.game is not None:
            control = key_to_control(event.key)
            if control is not None and self.game.press(control):
                self._state = _Screen.PAUSE
        elif event.key == pygame.K_ESCAPE:
            self._reject_dialog()

    def _reject_dialog(self) -> None:
        state = self._state
        if state is _Screen.SETTINGS:
            self._close_settings(keep=False)
        elif state is _Screen.PAUSE:
            self._resume_game()
        elif state in (_Screen.WARNING, _Screen.RECORDS, _Screen.CONFIRM_EXIT):
            self._state = _Screen.MENU

    def _on_click(self, pos: tuple[int, int]) -> None:
        if self._state is _Screen.SETTINGS and self._slider.inflate(0, 20).collidepoint(pos):
            self._dragging = True
            self._move_slider(pos[0])
            return
        clicked = next((label for label, rect in self._buttons.items() if rect.collidepoint(pos)), None)
        if clicked is None:
            return
        state = self._state
        if state is _Screen.MENU:
            self._menu_action(MenuAction(clicked))
        elif state is _Screen.WARNING:
            self._state = _Screen.MENU
        elif state is _Screen.RECORDS:
            self._state = _Screen.MENU
        elif state is _Screen.CONFIRM_EXIT:
            if clicked == "Да":
                self._running = False
            else:
                self._state = _Screen.MENU
        elif state is _Screen.SETTINGS:
            self._close_settings(keep=clicked == "Сохранить")
        elif state is _Screen.PAUSE:
            if clicked == "Продолжить":
                self._resume_game()
            elif clicked == "Настройки":
                self._open_settings(return_to=_Screen.PAUSE)
            else:
                self._return_to_menu()
        elif state is _Screen.GAME_OVER:
            self._return_to_menu()

    def _menu_action(self, action: MenuAction) -> None:
        if action is MenuAction.START:
            try:
                name = validate_player_name(self.player_name)
            except ValueError as error:
                self._warning = str(error)
                self._state = _Screen.WARNING
                return
            self.game = Game(name or DEFAULT_PLAYER_NAME, records=self.records)
            pygame.display.set_caption(window_title(name))
            self._state = _Screen.GAME
        elif action is MenuAction.SETTINGS:
            self._open_settings(return_to=_Screen.MENU)
        elif action is MenuAction.RECORDS:
            self._state = _Screen.RECORDS
        else:
            self._state = _Screen.CONFIRM_EXIT

    def _open_settings(self, return_to: _Screen) -> None:
        self.volume_session = VolumeSession(self._sound, self.settings)
        self._settings_return = return_to
        self._state = _Screen.SETTINGS

    def _close_settings(self, keep: bool) -> None:
        if self.volume_session is not None:
            if keep:
                self.volume_session.save()
            else:
                self.volume_session.discard()
        self.volume_session = None
        self._dragging = False
        self._state = self._settings_return

    def _move_slider(self, mouse_x: int) -> None:
        if self.volume_session is None:
            return
        fraction = (mouse_x - self._slider.x) / self._slider.width
        self.volume_session.update(round(fraction * SLIDER_MAX))

    def _resume_game(self) -> None:
        if self.game is not None:
            self.game.resume()
        self._state = _Screen.GAME

    def _return_to_menu(self) -> None:
        self.game = None
        pygame.display.set_caption(WINDOW_CAPTION)
        self._state = _Screen.MENU

    # -------------------------------------------------------------- drawing

    def _text(self, surface, text: str, size: int, color, center: tuple[int, int]) -> None:
        lines = text.split("\n")
        font = self._font(size)
        height = font.get_linesize()
        top = center[1] - height * len(lines) // 2
        for number, line in enumerate(lines):
            image = font.render(line, True, color)
            surface.blit(image, image.get_rect(midtop=(center[0], top + number * height)))

    def _panel(self, surface, width: int, height: int) -> pygame.Rect:
        shade = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 90))
        surface.blit(shade, (0, 0))
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (FIELD_WIDTH // 2, FIELD_HEIGHT // 2)
        pygame.draw.rect(surface, _PANEL, rect)
        pygame.draw.rect(surface, _BORDER, rect, 3)
        return rect

    def _button(self, surface, label: str, rect: pygame.Rect, fill=_BUTTON, border=_BORDER) -> None:
        hovered = rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(surface, _BUTTON_HOVER if hovered else fill, rect)
        pygame.draw.rect(surface, border, rect, 2)
        self._text(surface, label, 18, _BLACK, rect.center)
        self._buttons[label] = rect

    def _button_column(self, surface, labels, center_x: int, top: int, width: int = 220) -> None:
        for number, label in enumerate(labels):
            rect = pygame.Rect(0, 0, width, 44)
            rect.midtop = (center_x, top + number * 56)
            self._button(surface, label, rect)

    def _draw(self, surface) -> None:
        self._buttons = {}
        state = self._state
        if self.game is not None and state is not _Screen.MENU:
            self._draw_game(surface)
        else:
            self._draw_menu(surface)
        if state is _Screen.WARNING:
            panel = self._panel(surface, 400, 200)
            self._text(surface, WARNING_TITLE, 24, _BORDER, (panel.centerx, panel.top + 40))
            self._text(surface, self._warning, 18, _BLACK, panel.center)
            self._button_column(surface, ["OK"], panel.centerx, panel.bottom - 60, 120)
        elif state is _Screen.RECORDS:
            self._draw_records(surface)
        elif state is _Screen.CONFIRM_EXIT:
            panel = self._panel(surface, 400, 200)
            self._text(surface, "Действительно хотите выйти?", 18, _BLACK, (panel.centerx, panel.top + 60))
            for label, offset in (("Да", -70), ("Нет", 70)):
                rect = pygame.Rect(0, 0, 120, 44)
                rect.center = (panel.centerx + offset, panel.bottom - 50)
                self._button(surface, label, rect)
        elif state is _Screen.SETTINGS:
            self._draw_settings(surface)
        elif state is _Screen.PAUSE:
            panel = self._panel(surface, 300, 250)
            self._button_column(
                surface, ["Продолжить", "Настройки", "Выйти в меню"], panel.centerx, panel.top + 40
            )
        elif state is _Screen.GAME_OVER and self.game is not None:
            panel = self._panel(surface, 400, 200)
            self._text(surface, self.game.final_message or "", 18, _BLACK, (panel.centerx, panel.top + 60))
            self._button_column(surface, ["Выйти в главное меню"], panel.centerx, panel.bottom - 64, 280)

    def _draw_menu(self, surface) -> None:
        surface.blit(self._background, (0, 0))
        self._text(surface, WINDOW_CAPTION, 48, _WHITE, (FIELD_WIDTH // 2, 120))
        field = pygame.Rect(0, 0, 320, 44)
        field.center = (FIELD_WIDTH // 2, 220)
        pygame.draw.rect(surface, _PANEL, field)
        pygame.draw.rect(surface, _BORDER, field, 2)
        self._text(surface, self.player_name + "|", 20, _BLACK, field.center)
        self._button_column(surface, [action.value for action in MenuAction], FIELD_WIDTH // 2, 280)

    def _draw_game(self, surface) -> None:
        game = self.game
        surface.blit(self._background, (0, 0))
        for mushroom in game.mushrooms:
            surface.blit(self._mushroom_texture(mushroom.texture_path()), mushroom.rect())
        surface.blit(self._player, (game.player_x, game.player_y))
        font = self._font(24)
        surface.blit(font.render(game.time_text(), True, _WHITE), (20, 20))
        surface.blit(font.render(game.score_text(), True, _WHITE), (920, FIELD_HEIGHT - 60))
        surface.blit(
            font.render(game.lives_text(), True, pygame.Color(game.lives_color())), (920, 20)
        )

    def _draw_records(self, surface) -> None:
        panel = self._panel(surface, 500, 400)
        self._text(surface, "Лучшие игроки", 24, _BORDER, (panel.centerx, panel.top + 30))
        for number, line in enumerate(self.records.table_lines()):
            self._text(surface, line, 18, _BLACK, (panel.centerx, panel.top + 80 + number * 26))
        self._button_column(surface, ["Закрыть"], panel.centerx, panel.bottom - 60, 140)

    def _draw_settings(self, surface) -> None:
        panel = self._panel(surface, 350, 200)
        self._text(surface, "Громкость музыки", 20, _BORDER, (panel.centerx, panel.top + 35))
        pygame.draw.rect(surface, _BUTTON, self._slider)
        pygame.draw.rect(surface, _BORDER, self._slider, 2)
        if self.volume_session is not None:
            knob_x = self._slider.x + self._slider.width * self.volume_session.slider_value() // SLIDER_MAX
            pygame.draw.circle(surface, _BORDER, (knob_x, self._slider.centery), 12)
        save = pygame.Rect(0, 0, 140, 44)
        save.center = (panel.centerx - 80, panel.bottom - 40)
        self._button(surface, "Сохранить", save)
        close = pygame.Rect(0, 0, 140, 44)
        close.center = (panel.centerx + 80, panel.bottom - 40)
        self._button(surface, "Закрыть", close, fill=_CLOSE_BUTTON, border=_CLOSE_BORDER)


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="mushroomhunt", description="Pick mushrooms, avoid poison.")
    parser.add_argument("--records-file", type=Path, help="file holding the records table")
    parser.add_argument("--settings-file", type=Path, help="file holding the settings")
    parser.add_argument("--resources", type=Path, help="directory of images and sounds")
    args = parser.parse_args(argv)
    app = Application(
        records=RecordsManager(args.records_file) if args.records_file else None,
        settings=SettingsStore(args.settings_file) if args.settings_file else None,
        resource_dir=args.resources,
    )
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())