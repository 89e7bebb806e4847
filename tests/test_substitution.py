"""Tests for the homophonic substitution cipher and key files."""

import pytest

from scytale.core.exceptions import InvalidKeyError, KeyFileError
from scytale.services.engines.homophonic.substitution import SubstitutionCipher
from scytale.services.keys.loader import load_substitution_key


class TestSubstitutionCipher:
    """Test suite for substitution cipher."""

    @pytest.fixture
    def cipher(self):
        return SubstitutionCipher({"a": "12", "z": "3"})

    def test_encrypt(self, cipher):
        assert cipher.encrypt("aabz") == "12b3"

    def test_decrypt(self, cipher):
        assert cipher.decrypt("12b3") == "aabz"

    def test_alternatives_rotate(self):
        cipher = SubstitutionCipher({"a": "hey!", "b": "world"})
        assert cipher.encrypt("aaaa bbbbb") == "hey! world"
        assert cipher.decrypt("hey! world") == "aaaa bbbbb"

    def test_rotation_uses_text_position(self):
        """The alternative is picked by position in the whole text."""
        cipher = SubstitutionCipher({"a": "12"})
        assert cipher.encrypt("ba") == "b2"
        assert cipher.encrypt("bba") == "bb1"

    def test_unmapped_characters_pass_through(self, cipher):
        assert cipher.encrypt("Hello, World") == "Hello, World"
        assert cipher.decrypt("xyz!") == "xyz!"

    def test_empty_text(self, cipher):
        assert cipher.encrypt("") == ""
        assert cipher.decrypt("") == ""

    def test_collision_last_key_wins(self):
        """Shared alternatives decrypt to the highest key character."""
        assert SubstitutionCipher({"a": "x", "b": "x"}).decrypt("x") == "b"
        assert SubstitutionCipher({"b": "x", "a": "x"}).decrypt("x") == "b"

    def test_key_is_read_only(self, cipher):
        with pytest.raises(TypeError):
            cipher.key["a"] = "9"

    def test_key_copied_at_construction(self):
        key = {"a": "1"}
        cipher = SubstitutionCipher(key)
        key["a"] = "2"
        assert cipher.encrypt("a") == "1"

    def test_key_sorted(self):
        cipher = SubstitutionCipher({"z": "1", "a": "2", "m": "3"})
        assert list(cipher.key) == ["a", "m", "z"]

    def test_empty_alternatives_rejected(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            SubstitutionCipher({"a": "12", "b": ""})
        assert exc_info.value.details["key"] == "b"

    @pytest.mark.parametrize("key", [{"ab": "1"}, {"": "1"}, {1: "1"}, {"a": 1}])
    def test_malformed_entries_rejected(self, key):
        with pytest.raises(InvalidKeyError):
            SubstitutionCipher(key)

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidKeyError):
            SubstitutionCipher("abc")


class TestKeyFile:
    """Loading substitution keys from CSV files."""

    @pytest.fixture
    def key_file(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("key,values\na,12\nz,3\n", encoding="utf-8")
        return path

    def test_load(self, key_file):
        assert load_substitution_key(key_file) == {"a": "12", "z": "3"}

    def test_from_csv(self, key_file):
        cipher = SubstitutionCipher.from_csv(key_file)
        assert cipher.encrypt("aabz") == "12b3"
        assert cipher.decrypt("12b3") == "aabz"

    def test_from_key_uses_path(self, key_file):
        assert SubstitutionCipher.from_key(str(key_file)).encrypt("a") == "1"

    def test_from_key_requires_path(self):
        with pytest.raises(InvalidKeyError):
            SubstitutionCipher.from_key(None)

    def test_quoted_values(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text('key,values\na,"1,2"\n', encoding="utf-8")
        assert load_substitution_key(path) == {"a": "1,2"}

    def test_duplicate_keys_last_wins(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("key,values\na,12\na,34\n", encoding="utf-8")
        assert load_substitution_key(path) == {"a": "34"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(KeyFileError) as exc_info:
            load_substitution_key(tmp_path / "missing.csv")
        assert "missing.csv" in exc_info.value.details["path"]

    def test_missing_column(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("letter,values\na,12\n", encoding="utf-8")
        with pytest.raises(KeyFileError) as exc_info:
            load_substitution_key(path)
        assert exc_info.value.details["missing"] == ["key"]

    def test_empty_values(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("key,values\na,12\nb,\n", encoding="utf-8")
        with pytest.raises(KeyFileError) as exc_info:
            load_substitution_key(path)
        assert exc_info.value.details["row"] == 3

    def test_multi_character_key(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("key,values\nab,12\n", encoding="utf-8")
        with pytest.raises(KeyFileError):
            load_substitution_key(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "key.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(KeyFileError):
            load_substitution_key(path)
