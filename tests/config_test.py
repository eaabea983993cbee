import pytest

from dunif import Config, DiscreteUniform, checking_parameters
from dunif.config import config, resolve
from dunif.errors import InvalidParameterError


def test_defaults():
    assert Config().check_distribution_parameters is True
    assert Config(check_distribution_parameters=0).check_distribution_parameters is False


def test_resolve():
    private = Config()
    assert resolve(private) is private
    assert resolve(None) is config


def test_update():
    private = Config()
    with pytest.warns(UserWarning):
        private.update("check_distribution_parameters", False)
    assert private.check_distribution_parameters is False

    private.update("check_distribution_parameters", 1)
    assert private.check_distribution_parameters is True


def test_update_unknown_option():
    with pytest.raises(AttributeError):
        Config().update("check_everything", True)


def test_checking_parameters_restores_previous_value():
    private = Config()
    with pytest.warns(UserWarning):
        with checking_parameters(False, private) as cfg:
            assert cfg is private
            assert private.check_distribution_parameters is False
    assert private.check_distribution_parameters is True


def test_checking_parameters_restores_on_error():
    private = Config()
    with pytest.raises(RuntimeError), pytest.warns(UserWarning):
        with checking_parameters(False, private):
            raise RuntimeError
    assert private.check_distribution_parameters is True


def test_global_switch():
    with pytest.warns(UserWarning):
        with checking_parameters(False):
            dist = DiscreteUniform(5, 3)
    assert (dist.lower_bound, dist.upper_bound) == (5, 3)

    with pytest.raises(InvalidParameterError):
        DiscreteUniform(5, 3)


def test_environment_variable(monkeypatch):
    from dunif.config import _bool_env

    monkeypatch.setenv("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", "0")
    assert _bool_env("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", True) is False
    monkeypatch.setenv("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", "yes")
    assert _bool_env("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", False) is True
    monkeypatch.delenv("DUNIF_CHECK_DISTRIBUTION_PARAMETERS")
    assert _bool_env("DUNIF_CHECK_DISTRIBUTION_PARAMETERS", True) is True
