import pytest

from expokit.strikers import Boxer, Programmer, Striker, make_striker


def test_box_1():
    strengths = [200, 10, 3, 143, 49]
    strikers = [make_striker(s) for s in strengths]
    assert [s.hit() for s in strikers] == strengths
    assert [type(s) for s in strikers] == [
        Boxer,
        Programmer,
        Programmer,
        Boxer,
        Programmer,
    ]


@pytest.mark.parametrize("strength, kind", [(50, Programmer), (51, Boxer)])
def test_threshold(strength, kind):
    striker = make_striker(strength)
    assert isinstance(striker, kind)
    assert isinstance(striker, Striker)
    assert striker.hit() == strength


def test_striker_is_abstract():
    with pytest.raises(TypeError):
        Striker()