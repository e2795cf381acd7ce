import pytest

from scritto.config import config, defaultdict
from scritto.grouping import region, measuresFromTimesig


def test_defaults():
    for key, value in defaultdict.items():
        assert config[key] == value


def test_unknown_key():
    with pytest.raises(KeyError):
        config['measure.foo'] = 'bar'


def test_type_validation():
    with pytest.raises((TypeError, ValueError)):
        config['controller.descendToLeaf'] = 'yes'
    with pytest.raises((TypeError, ValueError)):
        config['measure.endAnnotation'] = 1


def test_region_annotations(restoreConfig):
    restoreConfig['region.startAnnotation'] = '\\section '
    r = region(measuresFromTimesig("4/4"), label="B")
    assert r.startAnnotation() == '\\section \\mark "B" '
    assert r.endAnnotation() == ' \\bar "||"\n'
