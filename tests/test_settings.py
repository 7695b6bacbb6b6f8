import pytest

from markbook.settings import (
    Key,
    SettingDoesNotExist,
    Settings,
    SettingsBuilder,
    SettingsError,
    WrongSettingType,
    define_keys,
)

keys = define_keys(
    yes=bool,
    no=bool,
    maybe=bool,
    hello=str,
    not_found=int,
    bool=bool,
    i32=int,
    hash_map=dict,
)


def standard() -> Settings:
    return (
        SettingsBuilder()
        .add(keys.YES, True)
        .add(keys.NO, False)
        .add(keys.MAYBE, True)
        .add(keys.HELLO, "world")
        .add(keys.NOT_FOUND, 404)
        .build()
    )


def write_all(settings: Settings) -> None:
    settings.set("yes", False)
    settings.set("no", True)
    settings.set("maybe", False)
    settings.set("hello", "rust")
    settings.set("not_found", 101)


def test_define_keys():
    assert keys.YES == Key("yes", bool)
    assert keys.HASH_MAP.name == "hash_map"
    assert str(keys.NOT_FOUND) == "not_found"


def test_build_settings_add():
    settings = standard()
    assert settings[keys.YES] is True
    assert settings[keys.NO] is False
    assert settings[keys.MAYBE] is True
    assert settings[keys.HELLO] == "world"
    assert settings[keys.NOT_FOUND] == 404


def test_settings_read():
    settings = standard()
    assert settings.get("yes") is True
    assert settings.get("no") is False
    assert settings.get("maybe") is True
    assert settings.get("hello") == "world"
    assert settings.get("not_found") == 404


def test_settings_check():
    settings = standard()
    assert settings.check("yes", True) is True
    assert settings.check("yes", False) is False
    assert settings.check("no", False) is True
    assert settings.check("no", True) is False
    assert settings.check("maybe", True) is True
    assert settings.check("maybe", False) is False
    assert settings.check("hello", "world") is True
    assert settings.check("hello", "rust") is False
    assert settings.check("not_found", 404) is True

    with pytest.raises(WrongSettingType):
        settings.check("no", 404)
    with pytest.raises(SettingDoesNotExist):
        settings.check("nice", True)


def test_build_settings_default():
    settings = (
        SettingsBuilder()
        .add_default(keys.BOOL)
        .add_default(keys.I32)
        .add_default(keys.HASH_MAP)
        .build()
    )
    assert settings.check("bool", False) is True
    assert settings.check("i32", 0) is True
    assert settings.check("hash_map", {}) is True


def test_build_settings_fn():
    settings = (
        SettingsBuilder()
        .add_fn("yes", lambda: True)
        .add_fn("no", lambda: False)
        .add_fn("maybe", lambda: True)
        .add_fn("hello", lambda: "world")
        .add_fn("not_found", lambda: 404)
        .build()
    )
    assert settings.check("yes", True) is True
    assert settings.check("no", False) is True
    assert settings.check("maybe", True) is True
    assert settings.check("hello", "world") is True
    assert settings.check("not_found", 404) is True

    with pytest.raises(WrongSettingType):
        settings.check("no", 404)
    with pytest.raises(SettingDoesNotExist):
        settings.check("nice", True)


def test_settings_write():
    settings = standard()
    write_all(settings)

    with pytest.raises(WrongSettingType):
        settings.set("maybe", 5)
    with pytest.raises(WrongSettingType):
        settings.set("no", {})

    assert settings.check("yes", False) is True
    assert settings.check("no", True) is True
    assert settings.check("maybe", False) is True
    assert settings.check("hello", "rust") is True
    assert settings.check("not_found", 101) is True


def test_settings_get_default():
    settings = (
        SettingsBuilder()
        .add(keys.YES, True)
        .add_default(keys.NO)
        .add_fn(keys.MAYBE, lambda: True)
        .add_fn(keys.HELLO, lambda: "world")
        .add(keys.NOT_FOUND, 404)
        .build()
    )
    write_all(settings)

    assert settings.get_default("yes", bool) is True
    assert settings.get_default("no", bool) is False
    assert settings.get_default("maybe", bool) is True
    assert settings.get_default("hello", str) == "world"
    assert settings.get_default("not_found", int) == 404
    with pytest.raises(WrongSettingType):
        settings.get_default("hello", int)
    with pytest.raises(SettingDoesNotExist):
        settings.get_default("nice")


def test_settings_reset_setting():
    settings = standard()
    write_all(settings)

    assert settings.check("yes", False) is True
    assert settings.check("no", True) is True
    assert settings.check("maybe", False) is True
    assert settings.check("hello", "rust") is True
    assert settings.check("not_found", 101) is True

    settings.reset_setting("yes")
    settings.reset_setting("no")
    settings.reset_setting("maybe")

    assert settings.check("yes", True) is True
    assert settings.check("no", False) is True
    assert settings.check("maybe", True) is True
    assert settings.check("hello", "rust") is True
    assert settings.check("not_found", 101) is True

    settings.reset_setting("hello")
    settings.reset_setting("not_found")

    assert settings.check("hello", "world") is True
    assert settings.check("not_found", 404) is True

    with pytest.raises(SettingDoesNotExist):
        settings.reset_setting("nice")


def test_settings_reset_all():
    settings = standard()
    write_all(settings)

    assert settings.check("yes", False)
    assert settings.check("no", True)
    assert settings.check("maybe", False)
    assert settings.check("hello", "rust")
    assert settings.check("not_found", 101)

    settings.reset_all()

    assert settings.check("yes", True)
    assert settings.check("no", False)
    assert settings.check("maybe", True)
    assert settings.check("hello", "world")
    assert settings.check("not_found", 404)


def test_index_assignment_and_missing_key():
    settings = standard()
    settings[keys.HELLO] = "there"
    assert settings[keys.HELLO] == "there"
    with pytest.raises(SettingDoesNotExist):
        settings[keys.I32]


def test_key_with_wrong_type_is_rejected():
    settings = standard()
    with pytest.raises(WrongSettingType):
        settings.get(Key("hello", int))


def test_error_messages():
    assert str(SettingDoesNotExist("x")) == 'Setting "x" does not exist'
    err = WrongSettingType("x", "bool", "int")
    assert str(err) == 'Setting "x" is of type <bool>, not <int>'
    assert isinstance(err, SettingsError)


def test_mutable_default_is_fresh_after_reset():
    settings = SettingsBuilder().add(keys.HASH_MAP, {"a": 1}).build()
    settings[keys.HASH_MAP]["b"] = 2
    assert settings[keys.HASH_MAP] == {"a": 1, "b": 2}
    settings.reset_setting("hash_map")
    assert settings[keys.HASH_MAP] == {"a": 1}


def test_add_with_mismatched_default_type():
    with pytest.raises(WrongSettingType):
        SettingsBuilder().add(keys.YES, "no")