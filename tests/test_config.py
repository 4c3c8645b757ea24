import config
from config import Settings, get_settings, load_settings


def test_defaults():
    settings = Settings()
    assert settings.cook_name == "Head cook"
    assert settings.kitchen.stove_burners == 4
    assert settings.kitchen.oven_max_temperature == 300.0
    assert settings.pantry.stock_grams == {}
    assert settings.environment == "development"


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("CAREME_COOK_NAME", "Auguste")
    monkeypatch.setenv("KITCHEN_STOVE_BURNERS", "6")

    settings = Settings()
    assert settings.cook_name == "Auguste"
    assert settings.kitchen.stove_burners == 6


def test_get_settings_is_a_singleton():
    assert get_settings() is get_settings()


def test_load_settings_from_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "environment: production\n"
        "cook_name: Careme\n"
        "narration: silent\n"
        "kitchen:\n"
        "  stove_burners: 2\n"
        "  tool_durability: 10\n"
        "pantry:\n"
        "  rice: 250\n"
    )

    settings = load_settings(config_file)
    assert settings.environment == "production"
    assert settings.cook_name == "Careme"
    assert settings.narration == "silent"
    assert settings.kitchen.stove_burners == 2
    assert settings.kitchen.tool_durability == 10
    assert settings.pantry.stock_grams == {"rice": 250.0}
    assert get_settings() is settings


def test_load_settings_accepts_explicit_stock_key(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("pantry:\n  stock_grams:\n    milk: 20\n")

    assert load_settings(config_file).pantry.stock_grams == {"milk": 20.0}


def test_missing_file_falls_back_to_defaults(tmp_path):
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings.cook_name == "Head cook"
    assert config._settings is settings
