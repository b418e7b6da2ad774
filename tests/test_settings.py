import pytest

from mushroomhunt.settings import (
    DEFAULT_VOLUME,
    SETTINGS_FILENAME,
    SettingsStore,
    VolumeSession,
    default_settings_path,
)


class FakeSound:
    def __init__(self, volume):
        self.volume = volume
        self.calls = []

    def get_volume(self):
        return self.volume

    def set_volume(self, value):
        self.calls.append(value)
        self.volume = value


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "cfg" / "settings.json")


def test_default_path_uses_settings_filename():
    assert default_settings_path().name == SETTINGS_FILENAME


def test_missing_file_gives_full_volume(store):
    assert store.load_volume() == DEFAULT_VOLUME


def test_volume_round_trip(store):
    store.save_volume(0.35)
    assert store.load_volume() == pytest.approx(0.35)


def test_corrupt_file_gives_default(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load_volume() == DEFAULT_VOLUME


def test_save_overwrites_corrupt_file(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[1, 2]", encoding="utf-8")
    store.save_volume(0.6)
    assert store.load_volume() == pytest.approx(0.6)


def test_session_starts_from_sound_volume(store):
    session = VolumeSession(FakeSound(0.4), store)
    assert session.current_volume == pytest.approx(0.4)
    assert session.slider_value() == 40


def test_update_applies_immediately(store):
    sound = FakeSound(1.0)
    session = VolumeSession(sound, store)
    session.update(25)
    assert sound.volume == pytest.approx(0.25)
    assert session.slider_value() == 25


@pytest.mark.parametrize("position, expected", [(150, 1.0), (-20, 0.0)])
def test_update_clamps_to_slider_range(store, position, expected):
    sound = FakeSound(0.5)
    session = VolumeSession(sound, store)
    session.update(position)
    assert sound.volume == pytest.approx(expected)


def test_discard_restores_initial_volume(store):
    sound = FakeSound(0.8)
    session = VolumeSession(sound, store)
    session.update(10)
    session.discard()
    assert sound.volume == pytest.approx(0.8)
    assert session.current_volume == pytest.approx(0.8)
    assert store.load_volume() == DEFAULT_VOLUME


def test_save_persists_current_volume(store):
    sound = FakeSound(1.0)
    session = VolumeSession(sound, store)
    session.update(70)
    session.save()
    assert store.load_volume() == pytest.approx(0.7)
    assert sound.volume == pytest.approx(0.7)


def test_save_without_changes_stores_initial_volume(store):
    session = VolumeSession(FakeSound(0.3), store)
    session.save()
    assert store.load_volume() == pytest.approx(0.3)