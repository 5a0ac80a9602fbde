"""
Example documents.

The classic "weather" relation, both as ARFF text and as the Document
the reader is expected to build from it.
"""
from arffdoc.model import Document, NominalAttribute, NumericAttribute


WEATHER_ARFF = """% Weather data, used throughout the tests and the CLI help
@RELATION weather

@ATTRIBUTE outlook {sunny, overcast, rainy}
@ATTRIBUTE temperature NUMERIC
@ATTRIBUTE humidity NUMERIC
@ATTRIBUTE windy {TRUE, FALSE}
@ATTRIBUTE play {yes, no}

@DATA
sunny,85,85,FALSE,no
sunny,80,90,TRUE,no
overcast,83,86,FALSE,yes
rainy,70,96,FALSE,yes
rainy,68,80,FALSE,yes
rainy,65,70,TRUE,no
overcast,64,65,TRUE,yes
sunny,72,95,FALSE,no
sunny,69,70,FALSE,yes
rainy,75,80,FALSE,yes
sunny,75,70,TRUE,yes
overcast,72,90,TRUE,yes
overcast,81,75,FALSE,yes
rainy,71,91,TRUE,no
"""


def build_example_weather_document() -> Document:
    doc = Document(relation="weather")

    doc.attributes = [
        NominalAttribute(name="outlook", values=("sunny", "overcast", "rainy")),
        NumericAttribute(name="temperature"),
        NumericAttribute(name="humidity"),
        NominalAttribute(name="windy", values=("TRUE", "FALSE")),
        NominalAttribute(name="play", values=("yes", "no")),
    ]

    data_section = WEATHER_ARFF.split("@DATA\n", 1)[1]
    doc.rows = [line.split(",") for line in data_section.splitlines() if line]
    return doc
