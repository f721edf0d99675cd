import pytest
from config import LifeConfig, load_config


def test_default_values():
    cfg = LifeConfig()
    assert (cfg.rows, cfg.cols) == (22, 78)
    assert cfg.turns == 0
    assert cfg.rate == 2
    assert cfg.file is None and cfg.gif is None
    assert (cfg.delta_x, cfg.delta_y) == (0, 0)
    assert cfg.age_color is False and cfg.age_shape is False


def test_from_dict_accepts_dashed_keys():
    cfg = LifeConfig.from_dict({"rows": 40, "age-color": True, "delta_x": 3})
    assert cfg.rows == 40
    assert cfg.age_color is True
    assert cfg.delta_x == 3
    assert cfg.cols == 78


def test_from_dict_unknown_key():
    with pytest.raises(ValueError):
        LifeConfig.from_dict({"torus": True})


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "life.yaml"
    path.write_text("rows: 30\ncols: 40\nturns: 5\nage-shape: true\n")
    cfg = load_config(path)
    assert (cfg.rows, cfg.cols, cfg.turns) == (30, 40, 5)
    assert cfg.age_shape is True


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == LifeConfig()


def test_load_config_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_config(tmp_path / "nonexistent.yaml")
