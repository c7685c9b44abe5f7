"""
Tests for nkey recognition, decoding and key-pair handles.
"""

import pytest

from nsc.keys import (
    KeyCategory, KeyKind, KeyPairHandle, looks_like_nkey, parse_nkey, prefix_char
)
from nsc.types import InvalidKeyEncoding, KeyCapabilityError


class TestLooksLikeNKey:
    """Test the shape heuristic."""

    def test_public_key(self, user_key):
        assert len(user_key.public_key) == 56
        assert looks_like_nkey(user_key.public_key, "U")
        assert looks_like_nkey(user_key.public_key, KeyCategory.USER)

    def test_seed(self, user_key):
        assert len(user_key.seed) == 58
        assert user_key.seed.startswith("SU")
        assert looks_like_nkey(user_key.seed, "U")

    def test_wrong_category(self, user_key, operator_key):
        assert not looks_like_nkey(user_key.public_key, "O")
        assert not looks_like_nkey(operator_key.seed, "U")
        assert looks_like_nkey(operator_key.seed, KeyCategory.OPERATOR)

    def test_synthetic_lengths(self):
        assert looks_like_nkey("U" + "A" * 55, "U")
        assert looks_like_nkey("SU" + "A" * 56, "U")
        assert looks_like_nkey("SU" + "A" * 107, "U")
        assert not looks_like_nkey("U" + "A" * 56, "U")
        assert not looks_like_nkey("SU" + "A" * 55, "U")
        assert not looks_like_nkey("", "U")

    def test_seed_length_needs_seed_prefix(self):
        assert not looks_like_nkey("U" + "A" * 57, "U")

    @pytest.mark.parametrize("s", [
        "U" + "A" * 27 + "/" + "A" * 27,
        "SU" + "A" * 55 + "/",
        "/" + "U" * 55,
    ])
    def test_path_separator_rejected(self, s):
        assert not looks_like_nkey(s, "U")

    def test_prefix_must_be_single_character(self):
        with pytest.raises(ValueError):
            prefix_char("UA")


class TestParseNKey:
    """Test decoding into handles."""

    def test_seed_handle(self, user_key):
        handle = parse_nkey(user_key.seed)
        assert isinstance(handle, KeyPairHandle)
        assert handle.kind is KeyKind.SEED
        assert handle.is_seed
        assert handle.category is KeyCategory.USER
        assert handle.public_key == user_key.public_key
        assert handle.seed == user_key.seed

    def test_public_handle(self, operator_key):
        handle = parse_nkey(operator_key.public_key)
        assert handle.kind is KeyKind.PUBLIC
        assert not handle.is_seed
        assert handle.category is KeyCategory.OPERATOR
        assert handle.public_key == operator_key.public_key

    def test_sign_and_verify(self, user_key):
        signer = parse_nkey(user_key.seed)
        verifier = parse_nkey(user_key.public_key)
        signature = signer.sign(b"hello")
        assert verifier.verify(b"hello", signature)
        assert signer.verify(b"hello", signature)
        assert not verifier.verify(b"goodbye", signature)
        assert not verifier.verify(b"hello", b"short")

    def test_public_handle_cannot_sign(self, user_key):
        handle = parse_nkey(user_key.public_key)
        with pytest.raises(KeyCapabilityError) as exc:
            handle.sign(b"data")
        assert exc.value.kind == "public"
        with pytest.raises(KeyCapabilityError):
            handle.seed

    def test_wipe(self, user_key):
        handle = parse_nkey(user_key.seed)
        handle.wipe()
        assert handle.wiped
        assert handle.public_key == user_key.public_key
        with pytest.raises(KeyCapabilityError) as exc:
            handle.sign(b"data")
        assert exc.value.kind == "wiped"
        handle.wipe()

    def test_context_manager_wipes(self, user_key):
        with parse_nkey(user_key.seed) as handle:
            assert handle.sign(b"x")
        assert handle.wiped

    def test_repr_hides_seed(self, user_key):
        assert user_key.seed not in repr(parse_nkey(user_key.seed))

    def test_empty(self):
        with pytest.raises(InvalidKeyEncoding):
            parse_nkey("")

    def test_corrupt_public_key(self, user_key):
        corrupt = user_key.public_key[:-1] + ("A" if user_key.public_key[-1] != "A" else "B")
        with pytest.raises(InvalidKeyEncoding) as exc:
            parse_nkey(corrupt)
        assert exc.value.value == corrupt
        assert exc.value.__cause__ is not None

    def test_garbage_public_key(self):
        with pytest.raises(InvalidKeyEncoding):
            parse_nkey("U" + "1" * 55)

    def test_garbage_seed(self):
        with pytest.raises(InvalidKeyEncoding) as exc:
            parse_nkey("SU" + "1" * 56)
        assert "value" not in exc.value.to_dict()['details']

    def test_curve_public_key(self, curve_public_key):
        public_key = curve_public_key
        assert public_key.startswith("X")
        assert looks_like_nkey(public_key, KeyCategory.CURVE)
        handle = parse_nkey(public_key)
        assert handle.kind is KeyKind.PUBLIC
        assert handle.category is KeyCategory.CURVE
