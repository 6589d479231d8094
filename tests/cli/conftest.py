from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console


@pytest.fixture()
def recorded_console():
    console = Console(record=True, width=200, file=StringIO())
    with patch("pixcode.cli.pix_menu.console", console):
        yield console


@pytest.fixture()
def cli_settings():
    mock_settings = MagicMock()
    mock_settings.pix_key = ""
    mock_settings.pix_key_type = ""
    mock_settings.merchant_name = ""
    mock_settings.merchant_city = ""
    mock_settings.qr_box_size = 4
    mock_settings.qr_border = 1
    with patch("pixcode.cli.pix_menu.settings", mock_settings):
        yield mock_settings
