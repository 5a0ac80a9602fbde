"""
Tests for the ARFF writer and the parse/write round-trip.
"""

import pytest

from arffdoc.backends import generate_arff, save_arff_file
from arffdoc.errors import UnsupportedFeatureError
from arffdoc.examples import WEATHER_ARFF, build_example_weather_document
from arffdoc.model import (
    DateAttribute,
    Document,
    IntegerAttribute,
    NominalAttribute,
    NumericAttribute,
    RealAttribute,
    RelationalAttribute,
    StringAttribute,
)
from arffdoc.reader import parse_arff_file, parse_arff_string


class TestGenerateArff:
    """Test ARFF text generation."""

    def test_weather_header(self):
        arff = generate_arff(build_example_weather_document())
        lines = arff.splitlines()
        assert lines[0] == "@RELATION weather"
        assert "@ATTRIBUTE outlook {sunny,overcast,rainy}" in lines
        assert "@ATTRIBUTE temperature NUMERIC" in lines
        assert "@DATA" in lines
        assert lines[-1] == "rainy,71,91,TRUE,no"
        assert arff.endswith("\n")

    def test_names_with_spaces_quoted(self):
        doc = Document(relation="my data", attributes=[RealAttribute("petal length")])
        arff = generate_arff(doc)
        assert "@RELATION 'my data'" in arff
        assert "@ATTRIBUTE 'petal length' REAL" in arff

    def test_name_with_single_quote(self):
        doc = Document(relation="it's", attributes=[])
        assert "@RELATION \"it's\"" in generate_arff(doc)

    def test_unquotable_name(self):
        doc = Document(relation="it's \"odd\"")
        with pytest.raises(ValueError):
            generate_arff(doc)

    def test_date_format(self):
        doc = Document(
            relation="r",
            attributes=[DateAttribute("d"), DateAttribute("e", date_format="yyyy-MM-dd'T'HH:mm")],
        )
        arff = generate_arff(doc)
        assert "@ATTRIBUTE d DATE\n" in arff
        assert "@ATTRIBUTE e DATE \"yyyy-MM-dd'T'HH:mm\"" in arff

    def test_data_value_with_comma(self):
        doc = Document(relation="r", attributes=[StringAttribute("s")], rows=[["a,b"]])
        with pytest.raises(ValueError, match="without escapes"):
            generate_arff(doc)

    def test_row_read_as_comment(self):
        doc = Document(relation="r", attributes=[StringAttribute("s")], rows=[["% not a comment"]])
        with pytest.raises(ValueError):
            generate_arff(doc)

    def test_single_value_nominal(self):
        doc = Document(relation="r", attributes=[NominalAttribute("n", values=("only",))])
        with pytest.raises(ValueError):
            generate_arff(doc)

    def test_relational_not_written(self):
        doc = Document(relation="r", attributes=[RelationalAttribute("bag")])
        with pytest.raises(UnsupportedFeatureError):
            generate_arff(doc)

    @pytest.mark.parametrize("name", ["a\nb", "a\rb", "trailing\r\n"])
    def test_line_break_in_name(self, name):
        """Quoting cannot keep a line break on one header line."""
        with pytest.raises(ValueError, match="line break"):
            generate_arff(Document(relation="r", attributes=[NumericAttribute(name)]))
        with pytest.raises(ValueError, match="line break"):
            generate_arff(Document(relation=name))

    def test_line_break_in_nominal_value(self):
        doc = Document(relation="r", attributes=[NominalAttribute("n", values=("x\ny", "z"))])
        with pytest.raises(ValueError, match="line break"):
            generate_arff(doc)

    def test_line_break_in_date_format(self):
        doc = Document(relation="r", attributes=[DateAttribute("d", date_format="yyyy\nMM")])
        with pytest.raises(ValueError, match="line break"):
            generate_arff(doc)


class TestRoundTrip:
    """Parsing written text reproduces the document."""

    def test_weather(self):
        original = parse_arff_string(WEATHER_ARFF)
        assert parse_arff_string(generate_arff(original)) == original

    def test_awkward_names_and_literals(self):
        doc = Document(
            relation="odd {relation}",
            attributes=[
                NumericAttribute("plain"),
                IntegerAttribute("with space"),
                StringAttribute("quote's"),
                NominalAttribute("choice", values=("a b", "c,d", "e}f", "it's", " padded ")),
                DateAttribute("when", date_format="dd MM yyyy"),
            ],
            rows=[
                ["1", "2", "'text'", "a b", "01 02 2003"],
                [" 4", "", "x", "it's", "04 05 2006"],
            ],
        )
        assert parse_arff_string(generate_arff(doc)) == doc

    def test_save_arff_file(self, tmp_path):
        doc = build_example_weather_document()
        path = tmp_path / "out.arff"
        save_arff_file(doc, str(path))
        assert parse_arff_file(str(path)) == doc
