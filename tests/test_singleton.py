import pytest

from patterndemos.singleton import GameSetting, main


@pytest.fixture
def settings():
    setting = GameSetting.get_instance()
    saved = (setting.width, setting.height, setting.brightness)
    yield setting
    setting.width, setting.height, setting.brightness = saved


def test_get_instance_returns_same_object(settings):
    settings.brightness = 42
    again = GameSetting.get_instance()
    assert again.brightness == 42
    assert again is settings


def test_default_values(settings):
    assert (settings.width, settings.height, settings.brightness) == (768, 1300, 75)


def test_changes_are_shared(settings):
    settings.width = 1024
    assert GameSetting.get_instance().width == 1024


def test_direct_construction_is_refused():
    with pytest.raises(TypeError):
        GameSetting()


def test_display_setting(settings, capsys):
    settings.display_setting()
    assert capsys.readouterr().out == "brightness75\nheight1300\nwidth768\n"


def test_main_prints_settings(settings, capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "brightness75"