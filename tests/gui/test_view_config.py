import pytest

from lifesim.core.exceptions import ConfigurationError
from lifesim_gui.config import ViewConfig, load_view_config


def test_bundled_view_config():
    cfg = load_view_config()
    assert cfg.title == "Life Board"
    assert cfg.position == (10.0, 10.0)
    assert cfg.cell_size == 8.0
    assert cfg.live_color == (1.0, 1.0, 1.0, 1.0)
    assert cfg.scale_mode == "fit"


def test_cell_rect():
    cfg = ViewConfig(position=(10.0, 20.0), cell_size=4.0)
    assert cfg.cell_rect(0, 0) == (10.0, 20.0, 4.0, 4.0)
    assert cfg.cell_rect(3, 2) == (22.0, 28.0, 4.0, 4.0)


def test_rgb_color_gets_opaque_alpha(temp_yaml_file):
    temp_yaml_file.write_text("colors:\n  live: [0, 0.5, 1]\n", encoding="utf-8")
    cfg = load_view_config(temp_yaml_file)
    assert cfg.live_color == (0.0, 0.5, 1.0, 1.0)
    assert cfg.dead_color == ViewConfig().dead_color


def test_empty_file_uses_defaults(temp_yaml_file):
    temp_yaml_file.write_text("", encoding="utf-8")
    assert load_view_config(temp_yaml_file) == ViewConfig()


@pytest.mark.parametrize(
    "content",
    [
        "cell_size: 0\n",
        "grid_line_width: -1\n",
        "position: [1, 2, 3]\n",
        "scale_mode: zoom\n",
        "colors:\n  live: [2, 0, 0]\n",
        "colors:\n  dead: red\n",
        "{ invalid: yaml: content",
    ],
)
def test_invalid_view_config(temp_yaml_file, content):
    temp_yaml_file.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_view_config(temp_yaml_file)
