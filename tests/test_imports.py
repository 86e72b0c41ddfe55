"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""

import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestBookingImports:
    def test_import_booking_package(self):
        from parkpulse.booking import (
            RejectionReason, TimeSpan, calculate_cost, validate_booking_window,
        )
        assert RejectionReason.MALFORMED_TIME == "malformed_time"
        assert callable(validate_booking_window)

    def test_import_schemas(self):
        from parkpulse.schemas.booking_schema import Booking, BookingRequest
        from parkpulse.schemas.chat_schema import ChatMessage, ChatRole
        from parkpulse.schemas.listing_schema import Listing
        assert ChatRole.MODEL == "model"


class TestToolImports:
    def test_import_stores(self):
        from parkpulse.tools.bookings import approve_booking, request_booking
        from parkpulse.tools.listings import create_listing, update_listing
        assert callable(request_booking)

    def test_import_generation(self):
        from parkpulse.tools.emails import generate_booking_request_email
        from parkpulse.tools.search import find_parking_spots
        from parkpulse.tools.text_generation import OpenAITextGenerator
        assert callable(find_parking_spots)


class TestPromptImports:
    def test_import_system_prompts(self):
        from parkpulse.prompts.system_prompts import (
            NOTIFICATION_ROLE, SEARCH_ASSISTANT_ROLE, STRUCTURED_OUTPUT_SYSTEM_PROMPT,
        )
        assert "ParkPulse" in SEARCH_ASSISTANT_ROLE
        assert "HH:MM" in STRUCTURED_OUTPUT_SYSTEM_PROMPT


class TestConfigImport:
    def test_import_config(self):
        from parkpulse.config import settings
        assert settings.marketplace.name is not None
        assert settings.model.llm_model is not None
        assert settings.marketplace.max_query_length >= 1


class TestConsoleDemo:
    def test_console_session_imports(self):
        from console_demo import ConsoleSession
        session = ConsoleSession()
        assert session.dashboard.user.id == "owner-1"
        assert "listing-update" in session.SCENARIOS

    def test_scenarios_run_offline(self, capsys):
        from console_demo import ConsoleSession
        from parkpulse.tools import bookings, listings, notifications

        for scenario in ConsoleSession.SCENARIOS:
            listings.reset()
            bookings.reset()
            notifications.reset()
            ConsoleSession().run_scenario(scenario)
        out = capsys.readouterr().out
        assert "Scenario 'listing-update' complete." in out
        assert "overlaps a confirmed booking" in out


class TestFreshProcessImports:
    """Each entry module must import on its own, with nothing preloaded."""

    @pytest.mark.parametrize("module", [
        "parkpulse.flows",
        "parkpulse.schemas.booking_schema",
        "parkpulse.schemas.listing_schema",
        "parkpulse.booking",
        "parkpulse.tools.bookings",
        "parkpulse.tools.listings",
        "console_demo",
    ])
    def test_module_imports_first(self, module):
        result = subprocess.run(
            [sys.executable, "-c", f"import {module}"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
