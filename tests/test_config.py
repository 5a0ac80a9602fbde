"""
Tests for reader options.
"""

import pytest

from arffdoc.config import ReaderOptions, load_options, options_from_dict


class TestReaderOptions:

    def test_defaults(self):
        options = ReaderOptions()
        assert options.encoding == "utf-8"
        assert options.relational == "error"
        assert options.skip_blank_lines is True
        assert options.comment_prefix == "%"

    def test_unknown_relational_mode(self):
        with pytest.raises(ValueError, match="relational"):
            ReaderOptions(relational="skip")

    def test_comment_prefix_cannot_be_a_tag(self):
        with pytest.raises(ValueError):
            ReaderOptions(comment_prefix="@")

    def test_from_dict(self):
        options = options_from_dict({"relational": "placeholder", "encoding": "latin-1"})
        assert options == ReaderOptions(encoding="latin-1", relational="placeholder")

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown reader options"):
            options_from_dict({"strict": True})

    def test_unknown_encoding(self):
        with pytest.raises(ValueError, match="Unknown encoding"):
            ReaderOptions(encoding="bogus")

    def test_encoding_aliases_accepted(self):
        assert ReaderOptions(encoding="UTF-16").encoding == "UTF-16"
        assert ReaderOptions(encoding="latin1").encoding == "latin1"

    def test_unknown_encoding_from_dict(self):
        with pytest.raises(ValueError):
            options_from_dict({"encoding": "no-such-codec"})


class TestLoadOptions:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "arffdoc.yaml"
        path.write_text("relational: placeholder\nskip_blank_lines: false\n")
        options = load_options(str(path))
        assert options.relational == "placeholder"
        assert options.skip_blank_lines is False

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_options(str(path)) == ReaderOptions()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_options(str(path))
