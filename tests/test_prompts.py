"""
Tests for the TeamRAW assistant prompt and canned replies.
Verifies that the prompt keeps the assistant on-topic and the fallbacks point visitors somewhere useful.
"""
import sys
from pathlib import Path
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from prompts import (
    CONTACT_EMAIL, DEMO_RESPONSE, EMPTY_RESPONSE, ERROR_RESPONSE,
    OFF_TOPIC_REPLY, SYSTEM_PROMPT, UNAVAILABLE_RESPONSE
)


class TestTopicRules:
    """Tests for STRICT RULES prompt section."""

    def test_restricted_to_robotics(self):
        """Prompt limits answers to robotics and TeamRAW."""
        assert "ONLY answer questions about robotics" in SYSTEM_PROMPT

    def test_off_topic_redirect_included(self):
        """Prompt gives the exact redirect for off-topic questions."""
        assert OFF_TOPIC_REPLY in SYSTEM_PROMPT

    def test_concise_responses(self):
        """Prompt asks for short answers."""
        assert "2-4 sentences max" in SYSTEM_PROMPT


class TestTeamInfo:
    """Tests for the TeamRAW facts in the prompt."""

    def test_mentions_competitions(self):
        assert "ROBOCON" in SYSTEM_PROMPT

    def test_mentions_contact_email(self):
        assert CONTACT_EMAIL in SYSTEM_PROMPT

    def test_lists_site_pages(self):
        for page in ("Team", "Robots", "Competitions", "Gallery", "Contact"):
            assert page in SYSTEM_PROMPT


class TestCannedResponses:
    """Tests for fallback replies."""

    @pytest.mark.parametrize("reply", [DEMO_RESPONSE, UNAVAILABLE_RESPONSE, ERROR_RESPONSE])
    def test_fallbacks_point_to_contact(self, reply):
        """Every failure reply tells the visitor how to reach the team."""
        assert CONTACT_EMAIL in reply

    def test_demo_mode_explains_itself(self):
        assert "demo mode" in DEMO_RESPONSE
        assert "OPENROUTER_API_KEY" in DEMO_RESPONSE

    def test_replies_are_distinct(self):
        replies = {DEMO_RESPONSE, EMPTY_RESPONSE, UNAVAILABLE_RESPONSE, ERROR_RESPONSE}
        assert len(replies) == 4
