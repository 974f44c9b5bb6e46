import string

import pytest

from ocmadm.randomstr import rand_string_az09


@pytest.mark.parametrize("n", [0, 1, 6, 64])
def test_length(n):
    assert len(rand_string_az09(n)) == n


def test_alphabet():
    allowed = set(string.ascii_lowercase + string.digits)
    result = rand_string_az09(500)
    assert set(result) <= allowed


def test_results_vary():
    results = {rand_string_az09(16) for _ in range(20)}
    assert len(results) > 1


def test_negative_length_raises():
    with pytest.raises(ValueError):
        rand_string_az09(-1)