import importlib
import math


def test_defaults():
    settings = importlib.import_module("curvekit.settings")
    assert settings.DEFAULT_CURVE_COUNT == 20
    assert settings.PARAM_LOW == -10.0
    assert settings.PARAM_HIGH == 10.0
    assert math.isclose(settings.EVAL_PARAMETER, math.pi / 4)
    assert settings.DEFAULT_SEED is None
