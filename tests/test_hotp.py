import logging

import pytest

import ootp
from ootp import HOTP, Algorithm, CheckOption, MakeOption
from ootp.otp import OTP

RFC_SECRET = b"12345678901234567890"

# RFC 4226 Appendix D
RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.fixture
def hotp():
    return HOTP(RFC_SECRET)


@pytest.mark.parametrize("counter,code", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(hotp, counter, code):
    assert hotp.make(counter=counter) == code


def test_make_defaults_to_counter_zero(hotp):
    assert hotp.make() == "755224"
    assert hotp.make(MakeOption()) == "755224"


def test_make_is_deterministic():
    hotp = HOTP(b"A strong shared secret")
    assert hotp.make(counter=42) == hotp.make(counter=42)
    assert hotp.make(algorithm=Algorithm.SHA256) == hotp.make(algorithm=Algorithm.SHA256)


def test_str_secret_is_utf8_encoded(hotp):
    assert HOTP("12345678901234567890").make(counter=9) == hotp.make(counter=9)
    assert HOTP(bytearray(RFC_SECRET)).secret == RFC_SECRET


def test_at_matches_make(hotp):
    assert hotp.at(3) == "969429"
    assert hotp.at(3, digits=8) == hotp.make(counter=3, digits=8)


def test_make_positional_counter(hotp):
    assert hotp.make(5) == "254676"
    assert hotp.make(9, digits=6) == "520489"
    assert hotp.make(3, digits=8) == hotp.make(counter=3, digits=8)
    assert hotp.make(0) == hotp.make(MakeOption())


def test_codes_are_left_padded(hotp):
    # HOTP value for counter 7 is 82162583
    assert hotp.make(counter=7, digits=10) == "0082162583"
    assert hotp.make(counter=7, digits=9) == "082162583"
    assert hotp.make(counter=2, digits=10) == "0137359152"


@pytest.mark.parametrize("digits", [1, 4, 6, 7, 8, 10])
@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_code_length_and_charset(hotp, digits, algorithm):
    for counter in range(5):
        code = hotp.make(counter=counter, digits=digits, algorithm=algorithm)
        assert len(code) == digits
        assert code.isdigit()


def test_algorithms_give_different_codes(hotp):
    codes = {hotp.make(counter=1, digits=8, algorithm=a) for a in (Algorithm.SHA1, Algorithm.SHA256, Algorithm.SHA512)}
    assert len(codes) == 3


def test_hashlib_constructor_accepted(hotp):
    import hashlib

    assert hotp.make(counter=1, algorithm=hashlib.sha256) == hotp.make(counter=1, algorithm="SHA256")


@pytest.mark.parametrize("digits", [0, 11, -1])
def test_make_rejects_digits_out_of_range(hotp, digits):
    with pytest.raises(ootp.InvalidDigitsError):
        hotp.make(digits=digits)


@pytest.mark.parametrize("counter", [-1, 2**64])
def test_make_rejects_counter_out_of_range(hotp, counter):
    with pytest.raises(ootp.InvalidCounterError):
        hotp.make(counter=counter)


def test_make_accepts_largest_counter(hotp):
    assert len(hotp.make(counter=2**64 - 1)) == 6


def test_make_rejects_unknown_algorithm(hotp):
    with pytest.raises(ootp.UnsupportedAlgorithmError):
        hotp.make(algorithm="md5")


def test_rejects_non_bytes_secret():
    with pytest.raises(ootp.InvalidSecretError):
        HOTP(12345)


def test_empty_secret_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="ootp.otp"):
        HOTP(b"")
    assert "empty secret" in caplog.text


class TestCheck:
    def test_round_trip(self):
        hotp = HOTP(b"A strong shared secret")
        for counter in (0, 1, 42, 2**40):
            assert hotp.check(hotp.make(counter=counter), counter=counter)

    def test_default_option(self, hotp):
        assert hotp.check("755224")
        assert hotp.check("755224", CheckOption())
        assert not hotp.check("287082")

    def test_round_trip_other_algorithm(self):
        hotp = HOTP(b"A strong shared secret")
        code = hotp.make(counter=5, algorithm=Algorithm.SHA512)
        assert hotp.check(code, counter=5, algorithm=Algorithm.SHA512)

    def test_window_accepts_edges(self, hotp):
        # codes for counters 3 and 9 with the window centred on 6
        assert hotp.check("969429", counter=6, breadth=3)
        assert hotp.check("520489", counter=6, breadth=3)

    def test_window_rejects_one_past_edge(self, hotp):
        assert not hotp.check("520489", counter=6, breadth=2)
        assert not hotp.check("755224", counter=5, breadth=4)

    def test_match_returns_counter(self, hotp):
        assert hotp.match("399871", counter=6, breadth=3) == 8
        assert hotp.match("520489", counter=6, breadth=2) is None

    def test_window_clamped_at_zero(self, hotp):
        assert hotp.check("755224", counter=1, breadth=5)
        assert hotp.match("755224", counter=0, breadth=2**64 - 1 - 10) == 0
        assert not hotp.check("520489", counter=2, breadth=5)

    def test_window_clamped_at_max_counter(self, hotp):
        top = 2**64 - 1
        code = hotp.make(counter=top)
        assert hotp.match(code, counter=top, breadth=3) == top

    def test_digits_inferred_from_candidate(self, hotp):
        assert hotp.check("94287082", counter=1)
        assert hotp.check("55224", counter=0)
        # a 7 digit code for counter 0 is 4755224
        assert not hotp.check("0755224", counter=0)

    @pytest.mark.parametrize("candidate", ["", "75522a", "12345678901", "７５５２２４", " 755224"])
    def test_malformed_candidates_do_not_match(self, hotp, candidate):
        assert not hotp.check(candidate, counter=0, breadth=1)

    def test_rejects_negative_breadth(self, hotp):
        with pytest.raises(ootp.InvalidBreadthError):
            hotp.check("755224", breadth=-1)

    def test_option_and_overrides(self, hotp):
        option = CheckOption(counter=6, breadth=2)
        assert not hotp.check("520489", option)
        assert hotp.check("520489", option, breadth=3)


def test_int_to_bytestring():
    assert OTP.int_to_bytestring(1024) == b"\x00\x00\x00\x00\x00\x00\x04\x00"
    assert OTP.int_to_bytestring(2**64 - 1) == b"\xff" * 8
    with pytest.raises(ootp.InvalidCounterError):
        OTP.int_to_bytestring(-1)


def test_truncate_rfc4226_example():
    # RFC 4226 section 5.4
    digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
    assert OTP.truncate(digest) == 0x50EF7F19


def test_function_interface():
    assert ootp.hotp.make(RFC_SECRET, 1) == "287082"
    assert ootp.hotp.make(RFC_SECRET, counter=9, digits=6, algorithm="SHA1") == "520489"
    assert ootp.hotp.check(RFC_SECRET, "520489", counter=7, breadth=2)
    assert not ootp.hotp.check(RFC_SECRET, "520489", counter=7, breadth=1)
