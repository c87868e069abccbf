from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()

SETTINGS_MODULE = "leagueboard.settings"
TEST_SETTINGS_MODULE = "leagueboard.test_settings"


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


def django_admin(c, command, settings=SETTINGS_MODULE):
    with c.cd(str(PROJECT_ROOT)):
        c.run(f"python -m django {command} --settings={settings}")


@task
def install(c):
    """Install the project in editable mode with its developer extras."""
    with c.cd(str(PROJECT_ROOT)):
        c.run("pip install -e .[dev]")


@task
def status(c):
    """Check git status of the repository."""
    c.run("git status")


@task
def st(c):
    """Alias for status - check git status of the repository."""
    status(c)


@task
def check(c):
    """Run Django system checks, including the scoring system settings."""
    django_admin(c, "check")


@task
def shell(c):
    """Start Django shell."""
    django_admin(c, "shell")


@task
def test(c, path=None, verbosity=1):
    """Run Django tests. Optionally specify a specific test path."""
    target = path or "leagueboard.standings_core.tests"
    django_admin(c, f"test {target} --verbosity={verbosity}", settings=TEST_SETTINGS_MODULE)


@task
def debug(c, path=None):
    """Run the tests with standings debug logging on the console."""
    with c.prefix("export LEAGUEBOARD_LOG_LEVEL=DEBUG"):
        target = path or "leagueboard.standings_core.tests"
        django_admin(c, f"test {target}", settings=SETTINGS_MODULE)
