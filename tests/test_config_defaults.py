from careerdocs.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.template == "classic"
    assert cfg.page.size == "letter"
    assert cfg.page.margin == 54
    assert cfg.page.line_height == 14
    assert cfg.style.model_dump(exclude_none=True) == {}
    assert cfg.output.formats == ["pdf", "txt"]
    assert cfg.logging.level == "WARNING"


def test_default_geometry_and_style() -> None:
    cfg = load_config(env={})
    geometry = cfg.geometry()
    assert (geometry.width, geometry.height) == (612.0, 792.0)
    assert geometry.usable_width == 612.0 - 2 * 54
    assert cfg.build_style().name == "classic"
