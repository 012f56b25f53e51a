import pytest

from core.env.dispatcher import Action
from core.env.orchestrator import Orchestrator
from core.env.prober import Prerequisites
from core.errors import FileSystemError, SelectionCancelled, SpawnError
from core.utils.cancel import CancellationToken

READY = Prerequisites(dotenvx_available=True, keys_file_present=True)


def prerequisites(dotenvx=True, keys=True):
    return lambda config: Prerequisites(dotenvx_available=dotenvx, keys_file_present=keys)


def fail(*args, **kwargs):
    pytest.fail("should not be called")


def make(run, **overrides):
    options = dict(
        probe=prerequisites(),
        discover=lambda directory, config: [".env", ".env.local"],
        select_files=fail,
        select_action=fail,
        run=run,
    )
    options.update(overrides)
    return Orchestrator(**options)


def test_encrypt_explicit_files(fake_runner, capsys):
    code = make(fake_runner).run(Action.ENCRYPT, [".env"])

    assert code == 0
    assert fake_runner.calls == [("dotenvx", ["encrypt", "-f", ".env"])]
    assert "Files encrypted successfully" in capsys.readouterr().out


def test_decrypt_prompts_when_no_files_given(fake_runner):
    seen = {}

    def select_files(candidates, action, token=None):
        seen["candidates"] = candidates
        seen["action"] = action
        return [".env.local"]

    code = make(fake_runner, select_files=select_files).run(Action.DECRYPT)

    assert code == 0
    assert seen == {"candidates": [".env", ".env.local"], "action": "decrypt"}
    assert fake_runner.calls == [("dotenvx", ["decrypt", "-f", ".env.local"])]


def test_dotenvx_missing_blocks_before_discovery(fake_runner, capsys):
    orchestrator = make(fake_runner, probe=prerequisites(dotenvx=False), discover=fail)

    assert orchestrator.run(Action.ENCRYPT) == 1
    assert fake_runner.calls == []
    out = capsys.readouterr().out
    assert "dotenvx is not installed" in out
    assert "npm install -g @dotenvx/dotenvx" in out


@pytest.mark.parametrize("dotenvx", [True, False])
def test_keys_file_missing_blocks(dotenvx, fake_runner, capsys):
    orchestrator = make(fake_runner, probe=prerequisites(dotenvx=dotenvx, keys=False), discover=fail)

    assert orchestrator.run(Action.MENU) == 1
    assert fake_runner.calls == []
    assert "Please create one to proceed" in capsys.readouterr().out


def test_selection_cancelled_exits_cleanly(fake_runner, capsys):
    def cancelled(candidates, action, token=None):
        token.cancel()
        raise SelectionCancelled("File selection was cancelled.")

    code = make(fake_runner, select_files=cancelled).run(Action.ENCRYPT)

    assert code == 0
    assert fake_runner.calls == []
    assert "until next time" in capsys.readouterr().out


def test_command_failure_reports_stderr(failing_runner, capsys):
    code = make(failing_runner).run(Action.DECRYPT, [".env"])

    assert code == 1
    out = capsys.readouterr().out
    assert "Error decrypting files" in out
    assert "[MISSING_KEY] missing private key" in out


def test_precommit_failure_is_reported(failing_runner):
    assert make(failing_runner).run(Action.PRECOMMIT) == 1


def test_precommit_installs_hook(fake_runner, capsys):
    code = make(fake_runner, discover=fail).run(Action.PRECOMMIT)

    assert code == 0
    assert fake_runner.calls == [("dotenvx", ["ext", "precommit", "--install"])]
    assert "Precommit hook installed successfully" in capsys.readouterr().out


def test_no_env_files_is_not_an_error(fake_runner, capsys):
    code = make(fake_runner, discover=lambda directory, config: []).run(Action.ENCRYPT)

    assert code == 0
    assert fake_runner.calls == []
    assert "No .env files found" in capsys.readouterr().out


def test_empty_selection_is_not_an_error(fake_runner, capsys):
    code = make(fake_runner, select_files=lambda c, a, token=None: []).run(Action.ENCRYPT)

    assert code == 0
    assert fake_runner.calls == []
    assert "No files selected for encryption" in capsys.readouterr().out


def test_menu_dispatches_chosen_action(fake_runner):
    code = make(fake_runner, select_action=lambda token=None: Action.PRECOMMIT).run(Action.MENU)

    assert code == 0
    assert fake_runner.calls == [("dotenvx", ["ext", "precommit", "--install"])]


def test_menu_exit(fake_runner, capsys):
    code = make(fake_runner, select_action=lambda token=None: Action.EXIT).run(Action.MENU)

    assert code == 0
    assert fake_runner.calls == []
    assert "until next time" in capsys.readouterr().out


def test_spawn_error_is_fatal(capsys):
    def cannot_start(executable, args=(), token=None):
        raise SpawnError("Failed to start dotenvx: No such file or directory")

    assert make(cannot_start).run(Action.ENCRYPT, [".env"]) == 1
    assert "Failed to start dotenvx" in capsys.readouterr().out


def test_unreadable_directory_is_fatal(fake_runner):
    def unreadable(directory, config):
        raise FileSystemError("Cannot read directory .: Permission denied")

    assert make(fake_runner, discover=unreadable).run(Action.ENCRYPT) == 1
    assert fake_runner.calls == []


def test_cancelled_token_prevents_spawn(fake_runner):
    token = CancellationToken()
    token.cancel()

    code = make(fake_runner, token=token).run(Action.ENCRYPT, [".env"])

    assert code == 0
    assert fake_runner.calls == []


def test_unexpected_error_exits_with_failure(capsys):
    def broken(executable, args=(), token=None):
        raise RuntimeError("kaboom")

    assert make(broken).run(Action.ENCRYPT, [".env"]) == 1
    assert "An error occurred: kaboom" in capsys.readouterr().out


def test_real_discovery(project_dir, fake_runner):
    orchestrator = Orchestrator(
        probe=lambda config: READY,
        select_files=lambda candidates, action, token=None: list(candidates),
        run=fake_runner,
    )

    assert orchestrator.run(Action.ENCRYPT) == 0
    assert fake_runner.calls == [("dotenvx", ["encrypt", "-f", ".env", ".env.local"])]
