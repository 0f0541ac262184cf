""" Invoke tasks. """
import os
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run("pip install -e .[test]")


@task
def test(c, verbose=False):
    """Run the test suite."""
    c.run("pytest -v" if verbose else "pytest -q", env={"PYTHONUTF8": "1"})


@task
def api(c):
    c.run("uvicorn main:app --reload --host 127.0.0.1 --port 8001")


@task
def clean(c):
    """
    Cross-platform clean task to remove all __pycache__ folders, .pyc files and run logs.
    """
    if os.name == 'nt':  # Windows
        c.run("for /R %f in (*.pyc) do del /F /Q \"%f\"", warn=True)
        c.run('for /d /r %d in (__pycache__) do @if exist "%d" rmdir /s /q "%d"', warn=True)
        c.run("del /F /Q scoring_run.log", warn=True)
    else:  # Unix/Linux/macOS
        c.run("find . -type f -name '*.pyc' -delete", warn=True)
        c.run("find . -type d -name '__pycache__' -exec rm -r {} +", warn=True)
        c.run("rm -f scoring_run.log", warn=True)
