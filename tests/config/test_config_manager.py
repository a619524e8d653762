from catalog_toolkit.config import ConfigManager


def test_singleton_until_reset():
    first = ConfigManager()
    assert ConfigManager() is first
    ConfigManager.reset()
    assert ConfigManager() is not first


def test_packaged_defaults_loaded():
    cfg = ConfigManager()
    assert cfg.get_index_config() == {"base_url": ""}
    logging_cfg = cfg.get_logging_config()
    assert logging_cfg["version"] == 1
    assert "file" in logging_cfg["handlers"]


def test_defaults_copied_to_user_dir(isolated_config):
    ConfigManager()
    assert (isolated_config / "index.yml").is_file()
    assert (isolated_config / "logging.yml").is_file()


def test_user_overrides_merge(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "index.yml").write_text('base_url: "http://example.com/"\n', encoding="utf-8")

    cfg = ConfigManager()
    assert cfg.get_index_config()["base_url"] == "http://example.com/"
    # The existing user file is not overwritten by the packaged default.
    assert "example.com" in (isolated_config / "index.yml").read_text(encoding="utf-8")


def test_invalid_user_override_is_ignored(isolated_config, caplog):
    isolated_config.mkdir(parents=True)
    (isolated_config / "index.yml").write_text("base_url: [unclosed\n", encoding="utf-8")

    cfg = ConfigManager()
    assert cfg.get_index_config() == {"base_url": ""}
    assert "Could not parse user config" in caplog.text


def test_non_mapping_user_override_is_ignored(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "index.yml").write_text("- just\n- a list\n", encoding="utf-8")

    assert ConfigManager().get_index_config() == {"base_url": ""}
