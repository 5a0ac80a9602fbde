"""
Serialization helpers for arffdoc objects (Document, Attribute).

Documents go through a plain dict form, then to JSON or YAML; both directions are lossless.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from arffdoc.model import (
    Attribute,
    DateAttribute,
    Document,
    IntegerAttribute,
    NominalAttribute,
    NumericAttribute,
    RealAttribute,
    RelationalAttribute,
    StringAttribute,
)


_NAME_ONLY = {
    cls.type_name: cls
    for cls in (NumericAttribute, IntegerAttribute, RealAttribute, StringAttribute, RelationalAttribute)
}


def attribute_to_dict(attr: Attribute) -> Dict[str, Any]:
    if isinstance(attr, NominalAttribute):
        return {"type": attr.type_name, "name": attr.name, "values": list(attr.values)}
    if isinstance(attr, DateAttribute):
        return {"type": attr.type_name, "name": attr.name, "format": attr.date_format}
    if type(attr) in _NAME_ONLY.values():
        return {"type": attr.type_name, "name": attr.name}
    raise TypeError(f"Unsupported Attribute type: {type(attr)}")


def attribute_from_dict(d: Dict[str, Any]) -> Attribute:
    t = d.get("type")
    if t == NominalAttribute.type_name:
        return NominalAttribute(name=d["name"], values=tuple(d.get("values", [])))
    if t == DateAttribute.type_name:
        return DateAttribute(name=d["name"], date_format=d.get("format", ""))
    if t in _NAME_ONLY:
        return _NAME_ONLY[t](name=d["name"])
    raise TypeError(f"Unsupported attribute dict type: {t}")


def document_to_dict(doc: Document) -> Dict[str, Any]:
    return {
        "relation": doc.relation,
        "attributes": [attribute_to_dict(a) for a in doc.attributes],
        "rows": [list(row) for row in doc.rows],
    }


def document_from_dict(d: Dict[str, Any]) -> Document:
    doc = Document(relation=d.get("relation", ""))
    doc.attributes = [attribute_from_dict(a) for a in d.get("attributes", [])]
    doc.rows = [list(row) for row in d.get("rows", [])]
    return doc


def document_to_json(doc: Document) -> str:
    return json.dumps(document_to_dict(doc), sort_keys=True)


def document_from_json(s: str) -> Document:
    d = json.loads(s)
    return document_from_dict(d)


def document_to_yaml(doc: Document) -> str:
    return yaml.safe_dump(document_to_dict(doc))


def document_from_yaml(s: str) -> Document:
    d = yaml.safe_load(s)
    return document_from_dict(d)
