"""
Shared fixtures for matrix-reloaded tests.
"""

import json
import os

# Keep logfire quiet during tests; must be set before the settings are built
os.environ.setdefault("LOGFIRE_CONSOLE", "false")

import pytest

from matrix_reloaded.models.matrix import DecisionMatrix


PICK_DB = {
    "decision": {"statement": "Pick DB", "description": "ctx"},
    "options": [
        {"label": "A", "description": "a"},
        {"label": "B", "description": "b"},
    ],
    "criteria": [
        {
            "name": "Cost",
            "cells": {
                "A": {"text": "cheap", "color": "green"},
                "B": {"text": "pricey", "color": "red"},
            },
        }
    ],
}


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def pick_db_data():
    return json.loads(json.dumps(PICK_DB))


@pytest.fixture
def pick_db(pick_db_data):
    return DecisionMatrix.model_validate(pick_db_data)


@pytest.fixture
def matrix_file(tmp_path, pick_db_data):
    """A valid decision matrix file in a temporary directory."""
    return write_json(tmp_path / "pick-db.json", pick_db_data)


class FakeWebSocket:
    """Records what the server sends; optionally fails like a dropped connection."""

    def __init__(self, fail: bool = False, error: Exception = None):
        self.fail = fail
        self.error = error
        self.accepted = False
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, message):
        if self.fail:
            raise self.error or RuntimeError("Cannot call \"send\" once a close message has been sent.")
        self.sent.append(message)
