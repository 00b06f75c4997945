"""Unit tests for console reporting."""

import io

from rich.console import Console

from antisync.utils.console import Reporter


def make_reporter(**kwargs):
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=200, highlight=False)
    return Reporter(console=console, **kwargs), output


class TestReporter:
    """Test Reporter output."""

    def test_say_with_label(self):
        """Test that labels are printed literally, not as markup."""
        reporter, output = make_reporter()

        reporter.say("posts/a.txt", "NEW")

        assert output.getvalue() == "[NEW] posts/a.txt\n"

    def test_say_without_label(self):
        reporter, output = make_reporter()

        reporter.say("hello [bold]world[/bold]")

        assert output.getvalue() == "hello [bold]world[/bold]\n"

    def test_babble_quiet_by_default(self):
        """Test that babble is suppressed unless verbose."""
        reporter, output = make_reporter()

        reporter.babble("posts/a.txt", "SAME")

        assert output.getvalue() == ""

    def test_babble_verbose(self):
        reporter, output = make_reporter(verbose=True)

        reporter.babble("posts/a.txt", "SAME")

        assert output.getvalue() == "[SAME] posts/a.txt\n"

    def test_ok_and_error(self):
        reporter, output = make_reporter()

        reporter.ok("done")
        reporter.error("broken")

        assert output.getvalue() == "[OK] done\n[ERROR] broken\n"

    def test_headless(self):
        """Test that headless mode prints nothing."""
        reporter, output = make_reporter(verbose=True, headless=True)

        reporter.say("a", "NEW")
        reporter.babble("b")
        reporter.error("c")

        assert output.getvalue() == ""
