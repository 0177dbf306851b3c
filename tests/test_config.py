import yaml

from gridpath.config import CONFIG_PATH, Config, LoggingConfig, SolverConfig, load_config


def test_repository_config_loads():
    cfg = load_config(CONFIG_PATH)
    assert isinstance(cfg, Config)
    assert isinstance(cfg.solver, SolverConfig)
    assert isinstance(cfg.logging, LoggingConfig)


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg.solver.allow_diagonal is False
    assert cfg.render.colour is False
    assert cfg.render.path_glyph == "W"
    assert cfg.logging.global_level == "WARNING"
    assert cfg.logging.module_levels == {}


def test_values_are_read_from_yaml(tmp_path):
    data = {
        "solver": {"allow_diagonal": True},
        "render": {"colour": True, "path_glyph": "*+"},
        "logging": {
            "global_level": "debug",
            "module_levels": {"gridpath.search.solver": "INFO"},
        },
    }
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.dump(data))

    cfg = load_config(path)
    assert cfg.solver.allow_diagonal is True
    assert cfg.render.colour is True
    assert cfg.render.path_glyph == "*"
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"gridpath.search.solver": "INFO"}


def test_empty_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("solver:\nrender:\n")
    cfg = load_config(path)
    assert cfg.solver.allow_diagonal is False
    assert cfg.render.path_glyph == "W"
