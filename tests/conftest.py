import os
import pytest

from core.env.runner import ExecutionResult


@pytest.fixture(autouse=True)
def dotenvx_not_on_path(monkeypatch):
    """
    Keep the host PATH out of the tests; tests that need dotenvx patch ``which``.
    """
    monkeypatch.setattr("core.env.prober.shutil.which", lambda cmd, *args, **kwargs: None)


@pytest.fixture
def work_dir(tmp_path):
    """
    Run the test inside an empty temporary working directory.
    """
    old_dir = os.getcwd()
    os.chdir(tmp_path)
    yield tmp_path
    os.chdir(old_dir)


@pytest.fixture
def project_dir(work_dir):
    """
    Working directory with a key file and a couple of .env files.
    """
    (work_dir / ".env.keys").write_text("DOTENV_PRIVATE_KEY=abc\n")
    (work_dir / ".env").write_text("HELLO=world\n")
    (work_dir / ".env.local").write_text("HELLO=local\n")
    return work_dir


class FakeRunner:
    """
    Stands in for ``core.env.runner.run`` and records every invocation.
    """

    def __init__(self, exit_code=0, stdout="", stderr=""):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, executable, args=(), stdout=None, stderr=None, token=None):
        self.calls.append((executable, list(args)))
        return ExecutionResult(
            stdout=self.stdout,
            stderr=self.stderr,
            exit_code=self.exit_code,
            command=(executable, *args),
        )


@pytest.fixture
def runner_factory():
    return FakeRunner


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def failing_runner():
    return FakeRunner(exit_code=2, stderr="[MISSING_KEY] missing private key\n")
