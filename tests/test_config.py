import pytest

from expression_kernel import KernelConfig, configure, get_config, reset_config


def test_defaults():
    config = get_config()
    assert config.render_precision == 6
    assert config.exp_rule == "chain"
    assert config.binary_rules is True


def test_configure_replaces_selected_keys():
    configure(render_precision=2)
    assert get_config().render_precision == 2
    assert get_config().exp_rule == "chain"
    reset_config()
    assert get_config() == KernelConfig()


def test_invalid_settings_are_rejected():
    with pytest.raises(ValueError):
        configure(colour="red")
    with pytest.raises(ValueError):
        configure(exp_rule="product")
    with pytest.raises(ValueError):
        configure(render_precision=-1)
    with pytest.raises(ValueError):
        KernelConfig(binary_rules="yes")
    # A rejected update leaves the previous configuration active
    assert get_config() == KernelConfig()


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        get_config().render_precision = 3
