# type: ignore
import pytest
from click.testing import CliRunner

import unit_utils


@pytest.fixture
def runner():
    yield CliRunner()


@pytest.fixture
def shouting_dialect():
    yield unit_utils.find_file('testdata/ascii.toml')
