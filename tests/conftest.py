"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mochi_pitch.accent import load_dictionary


SAMPLE_ACCENTS = "\n".join([
    "箸\tはし\t1",
    "橋\tはし\t2",
    "端\tはし\t0",
    "あの方\tあのかた\t3,4",
    "時間\tじかん\t0",
    "一つ\tひとつ\t2",
    "ちょっと\t\t(副)1,(感)1",
    "日本\tにほん\t2",
    "日本\tにっぽん\t3",
])


@pytest.fixture
def sample_resource():
    """Small accent resource covering every accent type."""
    return SAMPLE_ACCENTS


@pytest.fixture
def accent_dictionary(sample_resource):
    """Dictionary built once per test from the sample resource."""
    return load_dictionary(sample_resource)


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses returning a JSON payload."""
    def _make(payload=None, ok=True, status_code=200, text=""):
        response = Mock(ok=ok, status_code=status_code, text=text)
        response.json.return_value = payload
        return response
    return _make


@pytest.fixture
def mock_session():
    """Mock requests session."""
    return Mock()
