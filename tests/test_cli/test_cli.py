"""
Tests for the command-line interface.
"""

import pytest

import cli


class TestDemoCommand:
    """Running with no command runs the demo."""

    def test_no_arguments_runs_demo(self, capsys):
        """Test the default output."""
        cli.main([])

        assert capsys.readouterr().out.splitlines() == [
            "Sending Email: Dear John, Your order has been shipped!",
            "Logging: Notification sent to John",
            "Sending SMS: Dear Alice, Your appointment is confirmed!",
            "Logging: Notification sent to Alice",
        ]

    def test_demo_command(self, capsys):
        """Test the explicit demo command."""
        cli.main(["demo"])

        assert len(capsys.readouterr().out.splitlines()) == 4


class TestSendCommand:
    """Tests for the send command."""

    def test_send_sms(self, capsys):
        """Test sending one SMS notification."""
        cli.main(["send", "--channel", "sms", "Alice", "See you soon"])

        assert capsys.readouterr().out.splitlines() == [
            "Sending SMS: Dear Alice, See you soon",
            "Logging: Notification sent to Alice",
        ]

    def test_send_defaults_to_email(self, capsys):
        """Test that email is the default channel."""
        cli.main(["send", "John", "Hi"])

        assert capsys.readouterr().out.splitlines()[0] == "Sending Email: Dear John, Hi"

    def test_unknown_channel_exits(self, capsys):
        """Test that argparse rejects an unknown channel."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["send", "--channel", "pigeon", "John", "Hi"])

        assert exc_info.value.code == 2


class TestServeCommand:
    """Tests for the serve command."""

    def test_serve_builds_uvicorn_command(self, monkeypatch, capsys):
        """Test that serve launches uvicorn with the given options."""
        calls = []
        monkeypatch.setattr(cli.subprocess, "run", lambda cmd: calls.append(cmd))

        cli.main(["serve", "--port", "9000", "--reload"])

        assert calls == [[
            "uv", "run", "uvicorn", "api.main:app",
            "--host=127.0.0.1", "--port=9000", "--reload",
        ]]
        assert "http://127.0.0.1:9000" in capsys.readouterr().out
