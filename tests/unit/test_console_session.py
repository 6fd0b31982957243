"""Tests for the interactive console session ('paydesk run').

Input is fed line by line through CliRunner; end of input is simulated
by simply running out of lines.
"""

import io

import pytest
import yaml
from click.testing import CliRunner

from paydesk.cli.__main__ import cli
from paydesk.cli.session import ConsoleSession, InputExhaustedError, LineReader
from paydesk.sdk import LoginState


LOGIN_OK = "hgzy\n1234\n"


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("PAYDESK_CONFIG_PATH", str(config_dir))
    return {"config_dir": config_dir}


def run_session(input_text: str):
    runner = CliRunner()
    return runner.invoke(cli, ["run"], input=input_text)


class TestLineReader:

    def test_strips_line_terminator(self):
        reader = LineReader(io.StringIO("hgzy\r\n"))
        assert reader.read_line() == "hgzy"

    def test_empty_line_is_not_end_of_input(self):
        reader = LineReader(io.StringIO("\n"))
        assert reader.read_line() == ""

    def test_end_of_input_raises(self):
        reader = LineReader(io.StringIO(""))
        with pytest.raises(InputExhaustedError):
            reader.read_line()

    def test_last_line_without_newline(self):
        reader = LineReader(io.StringIO("0"))
        assert reader.read_line() == "0"
        with pytest.raises(InputExhaustedError):
            reader.read_line()

    def test_pause_ignores_end_of_input(self):
        LineReader(io.StringIO("")).pause()


class TestLogin:

    def test_success_then_exit(self, isolated_env):
        result = run_session(LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "Welcome, administrator hgzy" in result.output
        assert "Thank you for using Pay Desk!" in result.output

    def test_lockout_after_three_failures(self, isolated_env):
        result = run_session("abc\n1\nabc\n1\nabc\n1\n")

        assert result.exit_code == 1
        assert "Too many failed attempts" in result.output
        assert "Main Menu" not in result.output

    def test_mixed_failures_lock_out(self, isolated_env):
        # empty input, invalid format, wrong password
        result = run_session("\n\nhgzy1\n1234\nhgzy\n9999\n")

        assert result.exit_code == 1
        assert "must not be empty" in result.output
        assert "Invalid input" in result.output
        assert "Username kept, password has been cleared" in result.output

    def test_attempts_remaining_reported(self, isolated_env):
        result = run_session("other\n1234\n" + LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "Username and password have been cleared" in result.output
        assert "2 attempt(s) remaining" in result.output

    def test_success_on_third_attempt(self, isolated_env):
        result = run_session("a\n1\nb\n2\n" + LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "1 attempt(s) remaining" in result.output
        assert "Welcome" in result.output

    def test_empty_username_after_wrong_password_is_empty_input(self, isolated_env):
        result = run_session("hgzy\n9999\n\n1234\n" + LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "Username kept, password has been cleared" in result.output
        assert "must not be empty" in result.output
        assert "1 attempt(s) remaining" in result.output
        assert "Welcome, administrator hgzy" in result.output

    def test_empty_username_after_invalid_format_is_empty_input(self, isolated_env):
        result = run_session("hgzy1\n1234\n\n1234\n" + LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "Invalid input" in result.output
        assert "must not be empty" in result.output
        assert "1 attempt(s) remaining" in result.output

    def test_username_prompt_never_shows_previous_value(self, isolated_env):
        result = run_session("hgzy\n9999\n" + LOGIN_OK + "0\n")

        assert result.exit_code == 0
        assert "Username [hgzy]" not in result.output
        assert result.output.count("Username: ") == 2

    def test_end_of_input_during_login_fails(self, isolated_env):
        result = run_session("hgzy\n")

        assert result.exit_code == 1
        assert "Input ended before login completed." in result.output

    def test_no_input_at_all_fails(self, isolated_env):
        result = run_session("")

        assert result.exit_code == 1

    def test_profile_credentials(self, isolated_env):
        (isolated_env["config_dir"] / "profile.yaml").write_text(
            yaml.dump({"login": {"username": "admin", "password": "42"}})
        )

        result = run_session("hgzy\n1234\nadmin\n42\n0\n")

        assert result.exit_code == 0
        assert "Welcome, administrator admin" in result.output

    def test_invalid_profile_aborts(self, isolated_env):
        (isolated_env["config_dir"] / "profile.yaml").write_text("login: nope\n")

        result = run_session(LOGIN_OK)

        assert result.exit_code == 1
        assert "must be a mapping" in result.output


class TestMenu:

    def test_payroll_calculation(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n45\n10\n\n0\n")

        assert result.exit_code == 0
        assert "475.00" in result.output
        assert "Press Enter to return to the main menu" in result.output

    def test_payroll_reprompts_invalid_values(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n70\nabc\n55\n-3\n0\n10\n\n0\n")

        assert result.exit_code == 0
        assert "weekly hours must be between 0 and 60" in result.output
        assert "Input must be a number!" in result.output
        assert result.output.count("Hourly rate must be a positive number!") == 2
        assert "700.00" in result.output

    def test_payroll_runs_repeatedly(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n40\n10\n\n1\n30\n10\n\n0\n")

        assert result.exit_code == 0
        assert "400.00" in result.output
        assert "210.00" in result.output

    def test_end_of_input_during_payroll_exits(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n45\n")

        assert result.exit_code == 0
        assert "Input ended, calculation cancelled." in result.output
        assert "Thank you for using Pay Desk!" in result.output

    def test_end_of_input_at_pause_returns_to_menu(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n45\n10\n")

        assert result.exit_code == 0
        assert "475.00" in result.output

    def test_about(self, isolated_env):
        result = run_session(LOGIN_OK + "2\n\n0\n")

        assert result.exit_code == 0
        assert "Pay Desk v" in result.output

    def test_invalid_selection_reshows_menu(self, isolated_env):
        result = run_session(LOGIN_OK + "7\nx\n0\n")

        assert result.exit_code == 0
        assert "Choice out of range, please choose again" in result.output
        assert "Invalid input, please choose again" in result.output
        assert result.output.count("=== Main Menu ===") == 3

    def test_rate_too_large_reports_error_and_returns_to_menu(self, isolated_env):
        result = run_session(LOGIN_OK + "1\n60\n1e308\n\n0\n")

        assert result.exit_code == 0
        assert "too large to compute" in result.output
        assert "Thank you for using Pay Desk!" in result.output

    def test_end_of_input_at_menu_exits(self, isolated_env):
        result = run_session(LOGIN_OK)

        assert result.exit_code == 0
        assert "Thank you for using Pay Desk!" in result.output


class TestConsoleSessionDirect:
    """ConsoleSession driven without the CLI, reading from a StringIO."""

    def test_login_returns_authenticated_session(self, capsys):
        session = ConsoleSession(reader=LineReader(io.StringIO(LOGIN_OK)))

        login = session.login()

        assert login.state == LoginState.AUTHENTICATED
        assert login.attempts == 0
        assert "Welcome" in capsys.readouterr().out

    def test_run_returns_failure_status_on_lockout(self):
        reader = LineReader(io.StringIO("x\n1\n" * 3))
        assert ConsoleSession(reader=reader).run() == 1

    def test_run_returns_success_status_on_exit(self):
        reader = LineReader(io.StringIO(LOGIN_OK + "0\n"))
        assert ConsoleSession(reader=reader).run() == 0
