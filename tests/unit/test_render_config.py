"""Unit tests for rendering configuration."""

from tablecraft.config import RenderConfig, config


def test_config_singleton():
    """Test config is a singleton."""
    config1 = RenderConfig()
    config2 = RenderConfig()
    assert config1 is config2
    assert config1 is config


def test_config_rendering_defaults():
    """Test placeholder and number defaults."""
    assert config.missing_text == "NA"
    assert config.default_decimals is None
    assert config.group_separator == ","
    assert config.decimal_separator == "."


def test_config_alignment_defaults():
    """Test default alignments."""
    assert config.text_alignment == "left"
    assert config.numeric_alignment == "right"
    assert config.image_alignment == "center"
    assert config.header_alignment is None


def test_config_export_defaults():
    """Test export defaults."""
    assert config.export_formats == ["md", "tex", "html"]
    assert config.latex_booktabs is True
    assert config.latex_image_height == "1em"
    assert config.html_table_class == "tablecraft"


def test_config_get_nested():
    """Test nested key access."""
    assert config.get("numbers", "group_separator") == ","
    assert config.get("export", "html", "table_class") == "tablecraft"
    assert config.get("nonexistent", "key", default="default") == "default"


def test_footnote_symbols():
    """Test auto-assigned footnote symbols."""
    assert config.footnote_symbol_style == "numeric"
    assert [config.footnote_symbol(i) for i in range(3)] == ["1", "2", "3"]


def test_config_version():
    """Test version metadata."""
    assert config.config_version == "1.0.0"
