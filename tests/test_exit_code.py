import sys
import subprocess
from unittest import mock

from hyperbench import exit_code
from hyperbench.exit_code import extract_exit_code, random_environment_offset


def test_normal_exit_code_of_real_process():
    proc = subprocess.run([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert extract_exit_code(proc.returncode) == 3


def test_zero_and_positive_codes_pass_through():
    assert extract_exit_code(0) == 0
    assert extract_exit_code(2) == 2


def test_none_stays_none():
    assert extract_exit_code(None) is None


def test_signal_on_posix_adds_128():
    with mock.patch.object(exit_code, "_POSIX", True):
        assert extract_exit_code(-9) == 137


def test_negative_code_elsewhere_is_kept():
    with mock.patch.object(exit_code, "_POSIX", False):
        assert extract_exit_code(-9) == -9


def test_random_offset_is_bounded_and_uniform():
    for _ in range(50):
        offset = random_environment_offset()
        assert len(offset) < 4096
        assert set(offset) <= {"X"}


def test_random_offset_length_follows_random_source():
    with mock.patch("random.randrange", return_value=5):
        assert random_environment_offset() == "X" * 5