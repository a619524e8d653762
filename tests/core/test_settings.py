from catalog_toolkit.core.settings import Settings


def test_get_returns_default_for_missing_key():
    settings = Settings()
    assert settings.get("font") is None
    assert settings.get("font", "serif") == "serif"


def test_set_returns_value_and_stores_it():
    settings = Settings()
    assert settings.set("font", "sans") == "sans"
    assert settings.get("font", "serif") == "sans"


def test_falsy_stored_value_wins_over_default():
    settings = Settings({"zoom": 0, "night": False})
    assert settings.get("zoom", 100) == 0
    assert settings.get("night", True) is False


def test_initial_mapping_is_copied():
    initial = {"font": "serif"}
    settings = Settings(initial)
    settings.set("font", "mono")
    assert initial["font"] == "serif"
