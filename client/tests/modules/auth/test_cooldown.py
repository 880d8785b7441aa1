"""Tests for modules/auth/cooldown.py."""

import asyncio

import pytest

from modules.auth.cooldown import OtpCooldown


class TestOtpCooldown:
    def test_inactive_before_start(self):
        """No window means no cooldown."""
        cooldown = OtpCooldown(window_seconds=30)
        assert cooldown.active is False
        assert cooldown.remaining == 0
        assert cooldown.window is None

    @pytest.mark.asyncio
    async def test_start_opens_window(self):
        """start resets the remaining time to the full window."""
        cooldown = OtpCooldown(window_seconds=30, tick_interval=10.0)

        window = cooldown.start("a@example.com")

        assert window.email == "a@example.com"
        assert window.cooldown_remaining == 30
        assert cooldown.active is True
        cooldown.cancel()

    @pytest.mark.asyncio
    async def test_counts_down_to_zero(self):
        """The countdown ticks once per interval and stops at zero."""
        seen = []
        cooldown = OtpCooldown(window_seconds=3, tick_interval=0.01, on_change=seen.append)

        cooldown.start("a@example.com")
        await asyncio.wait_for(cooldown.wait_expired(), timeout=1)

        assert seen == [3, 2, 1, 0]
        assert cooldown.active is False

    @pytest.mark.asyncio
    async def test_restart_resets_window(self):
        """A second start replaces the running countdown."""
        cooldown = OtpCooldown(window_seconds=3, tick_interval=0.01)
        cooldown.start("a@example.com")
        await asyncio.sleep(0.015)

        cooldown.start("a@example.com")

        assert cooldown.remaining == 3
        await asyncio.wait_for(cooldown.wait_expired(), timeout=1)
        assert cooldown.remaining == 0

    @pytest.mark.asyncio
    async def test_cancel_drops_window(self):
        """cancel stops the countdown and reports zero."""
        seen = []
        cooldown = OtpCooldown(window_seconds=30, tick_interval=10.0)
        cooldown.listen(seen.append)
        cooldown.start("a@example.com")

        cooldown.cancel()

        assert cooldown.active is False
        assert seen == [30, 0]
        await asyncio.wait_for(cooldown.wait_expired(), timeout=1)

    @pytest.mark.asyncio
    async def test_zero_window_is_never_active(self):
        """A zero-second window never blocks."""
        cooldown = OtpCooldown(window_seconds=0)
        cooldown.start("a@example.com")
        assert cooldown.active is False
