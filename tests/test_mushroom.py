import pytest

from mushroomhunt.mushroom import MUSHROOM_SIZE, Mushroom, MushroomType

POISONOUS = {MushroomType.TOADSTOOL, MushroomType.AMANITA}


def test_white_is_worth_ten_points():
    assert Mushroom(MushroomType.WHITE).value() == 10


@pytest.mark.parametrize("kind", list(MushroomType))
def test_only_poisonous_kinds_have_negative_value(kind):
    value = Mushroom(kind).value()
    if kind in POISONOUS:
        assert value < 0
    else:
        assert value > 0


def test_white_is_the_most_valuable():
    values = [Mushroom(kind).value() for kind in MushroomType]
    assert max(values) == Mushroom(MushroomType.WHITE).value()


def test_paired_kinds_share_value():
    assert Mushroom(MushroomType.BOLETUS).value() == Mushroom(MushroomType.BIRCH).value()
    assert Mushroom(MushroomType.TOADSTOOL).value() == Mushroom(MushroomType.AMANITA).value()


def test_seven_kinds_can_be_built_from_integers():
    kinds = [Mushroom(number).kind for number in range(7)]
    assert kinds == list(MushroomType)
    assert len(set(kinds)) == 7


def test_rect_has_fixed_size_and_starts_at_origin():
    rect = Mushroom(MushroomType.RUSSULA).rect()
    assert (rect.x, rect.y) == (0, 0)
    assert rect.size == (MUSHROOM_SIZE, MUSHROOM_SIZE)


def test_set_position_moves_rect_without_resizing():
    mushroom = Mushroom(MushroomType.CHANTERELLE)
    mushroom.set_position(120, 345)
    rect = mushroom.rect()
    assert rect.topleft == (120, 345)
    assert rect.size == (MUSHROOM_SIZE, MUSHROOM_SIZE)


def test_rect_is_a_copy():
    mushroom = Mushroom(MushroomType.WHITE, 5, 6)
    rect = mushroom.rect()
    rect.move_ip(100, 100)
    assert mushroom.rect().topleft == (5, 6)


def test_texture_paths():
    assert Mushroom(MushroomType.WHITE).texture_path().endswith("mush1.png")
    assert Mushroom(MushroomType.AMANITA).texture_path().endswith("mush4.png")


def test_texture_paths_are_distinct():
    paths = {Mushroom(kind).texture_path() for kind in MushroomType}
    assert len(paths) == len(list(MushroomType))


def test_kind_accepts_integer():
    assert Mushroom(0).kind is MushroomType.WHITE


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Mushroom(7)