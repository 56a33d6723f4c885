"""
Example token documents for proof-of-concept runs and tests.

One document per supported input shape, plus a builder for the model the
CSV example parses to.
"""
from tokenimport.model import CanonicalModel, DocumentFormat, RawDocument
from tokenimport.values import ColorValue, NumberValue, StringValue, BooleanValue


EXAMPLE_CSV = """collection,variable,value
Colors,primary-blue,#0066FF
Colors,secondary-red,#FF0000
Spacing,small,8px
Spacing,columns,12
Flags,dark-mode,true
"""

EXAMPLE_SIMPLE_JSON = """{
  "Colors": {"primary": "#0066FF", "danger": "#FF0000"},
  "Typography": {
    "heading": {"size": 32, "family": "Inter"},
    "body": {"size": 16, "family": "Inter"}
  },
  "flag": true
}
"""

EXAMPLE_DTCG_JSON = """{
  "$description": "Brand tokens",
  "Colors": {
    "$type": "color",
    "brand": {
      "primary": {"$value": "#0066FF", "$type": "color"},
      "overlay": {"$value": "#00000080", "$type": "color"}
    }
  },
  "Spacing": {
    "small": {"$value": "8px", "$type": "dimension"},
    "scale": {"$value": "1.5", "$type": "number"}
  }
}
"""


def example_documents():
    """Return the example documents as RawDocument objects."""
    return [
        RawDocument(text=EXAMPLE_CSV, format=DocumentFormat.CSV, name="tokens.csv"),
        RawDocument(text=EXAMPLE_SIMPLE_JSON, format=DocumentFormat.JSON, name="simple.json"),
        RawDocument(text=EXAMPLE_DTCG_JSON, format=DocumentFormat.JSON, name="dtcg.json"),
    ]


def build_example_csv_model() -> CanonicalModel:
    """The model EXAMPLE_CSV is expected to parse to."""
    model = CanonicalModel()
    model.add_token("Colors", "primary-blue", ColorValue(0.0, 0x66 / 255.0, 1.0, 1.0))
    model.add_token("Colors", "secondary-red", ColorValue(1.0, 0.0, 0.0, 1.0))
    model.add_token("Spacing", "small", StringValue("8px"))
    model.add_token("Spacing", "columns", NumberValue(12.0))
    model.add_token("Flags", "dark-mode", BooleanValue(True))
    return model
