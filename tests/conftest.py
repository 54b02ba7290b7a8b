"""Wspólne fikstury: mały dokument zasad w pamięci i na dysku."""

from __future__ import annotations

import json

import pytest

from rulebook import Document, document_from_dict

SAMPLE = {
    "VERSION": "1.4",
    "ABOUT": "Comprehensive rules for testing.",
    "RULES": {
        "1": {
            "NAME": "Basics",
            "CONTENT": {
                "1.1": {"RULE": "Players may not concede."},
                "1.2": {
                    "NAME": "Turn",
                    "CONTENT": {
                        "1.2.a": {
                            "RULE": "Pay %1% %x% mana to play a card from your hand during the day.",
                            "EXAMPLE": "A %common% card costs %2%.",
                            "NOTE": "See %unknown%.",
                        },
                        "1.2.b": {"RULE": "Short rule with 25 chars."},
                    },
                },
            },
        },
        "2": {"NAME": "Empty"},
        "3": {
            "NAME": "Broken",
            "CONTENT": {
                "3.1": {"TEXT": "no rule field"},
                "3.2": {"RULE": "Fine.", "COUNT": 3},
            },
        },
    },
    "GLOSSARY": {
        "Exhaust": {
            "DESCRIPTION": "A card is exhausted when turned sideways.",
            "RELATED": ["1.1", "1.2.a", "9.9"],
        },
        "NoDescription": {"RELATED": []},
        "NoRelated": {"DESCRIPTION": "Has no related rules."},
    },
}


@pytest.fixture
def document() -> Document:
    return document_from_dict(SAMPLE)


@pytest.fixture
def document_path(tmp_path):
    path = tmp_path / "cr.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return path
