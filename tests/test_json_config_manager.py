from exifdeck.utils.shared.json_config_manager import ExifToolConfig, JSONConfigManager


def test_register_save_load(tmp_path):
    cfg_dir = tmp_path / "cfg"
    mgr = JSONConfigManager(app_name="testapp", config_dir=str(cfg_dir))

    exiftool = ExifToolConfig()
    mgr.register_category(exiftool)
    exiftool.set("custom_path", "/opt/exiftool/exiftool")
    exiftool.set("overwrite_original", True)

    assert mgr.save()

    cfg_file = cfg_dir / "config.json"
    assert cfg_file.exists()

    # Load into a fresh manager pointing to same dir
    mgr2 = JSONConfigManager(app_name="testapp", config_dir=str(cfg_dir))
    mgr2.register_category(ExifToolConfig())
    assert mgr2.load()

    loaded = mgr2.get_category("exiftool")
    assert loaded.custom_path == "/opt/exiftool/exiftool"
    assert loaded.overwrite_original is True


def test_defaults_without_file(tmp_path):
    mgr = JSONConfigManager(app_name="testx", config_dir=str(tmp_path))
    exiftool = ExifToolConfig()
    mgr.register_category(exiftool)

    assert mgr.load()
    assert exiftool.custom_path is None
    assert exiftool.overwrite_original is False


def test_save_keeps_backup(tmp_path):
    mgr = JSONConfigManager(app_name="testx", config_dir=str(tmp_path))
    mgr.register_category(ExifToolConfig())

    assert mgr.save()
    assert mgr.save()
    assert (tmp_path / "config.json.bak").exists()


def test_corrupt_file_is_reported(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    mgr = JSONConfigManager(app_name="testx", config_dir=str(tmp_path))
    exiftool = ExifToolConfig()
    mgr.register_category(exiftool)

    assert mgr.load() is False
    assert exiftool.custom_path is None


def test_reset_restores_defaults():
    exiftool = ExifToolConfig()
    exiftool.set("overwrite_original", True)
    exiftool.reset()
    assert exiftool.overwrite_original is False
