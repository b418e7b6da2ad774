import pygame
import pytest

from mushroomhunt.app import (
    EMPTY_NAME_MESSAGE,
    TITLE_PREFIX,
    Application,
    MenuAction,
    key_to_control,
    main,
    validate_player_name,
    window_title,
)
from mushroomhunt.game import Control
from mushroomhunt.records import RecordsManager
from mushroomhunt.settings import SettingsStore


@pytest.mark.parametrize(
    "key, control",
    [
        (pygame.K_w, Control.UP),
        (pygame.K_UP, Control.UP),
        (pygame.K_s, Control.DOWN),
        (pygame.K_DOWN, Control.DOWN),
        (pygame.K_a, Control.LEFT),
        (pygame.K_LEFT, Control.LEFT),
        (pygame.K_d, Control.RIGHT),
        (pygame.K_RIGHT, Control.RIGHT),
        (pygame.K_ESCAPE, Control.MENU),
        (pygame.K_p, Control.PAUSE),
    ],
)
def test_key_to_control_bindings(key, control):
    assert key_to_control(key) is control


@pytest.mark.parametrize("key", [pygame.K_q, pygame.K_SPACE, pygame.K_RETURN])
def test_unbound_keys_give_none(key):
    assert key_to_control(key) is None


def test_validate_player_name_trims():
    assert validate_player_name("  Анна \n") == "Анна"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_validate_player_name_rejects_empty(text):
    with pytest.raises(ValueError) as excinfo:
        validate_player_name(text)
    assert str(excinfo.value) == EMPTY_NAME_MESSAGE


def test_empty_name_error_text_matches_source():
    with pytest.raises(ValueError) as excinfo:
        validate_player_name("")
    assert str(excinfo.value) == "Введите имя игрока!"


def test_window_title():
    assert window_title("Анна") == "Грибник - Анна"


def test_window_title_starts_with_prefix():
    name = "player"
    title = window_title(name)
    assert title.startswith(TITLE_PREFIX)
    assert title[len(TITLE_PREFIX):] == name


def test_menu_actions_have_distinct_labels():
    labels = [action.value for action in MenuAction]
    assert len(set(labels)) == len(labels) == 4
    assert MenuAction(MenuAction.START.value) is MenuAction.START


def test_application_uses_given_stores(tmp_path):
    records = RecordsManager(tmp_path / "records.txt")
    settings = SettingsStore(tmp_path / "settings.json")
    app = Application(records=records, settings=settings, resource_dir=tmp_path)
    assert app.records is records
    assert app.settings is settings
    assert app.resource_dir == tmp_path
    assert app.game is None
    assert app.player_name == ""


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--records-file" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2